"""HS-001: enforce symbolic or numeric notation in ``have_http_status``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from statuslint.checks.styles import StyleChecker, checker_for
from statuslint.core.config import StatuslintConfig
from statuslint.core.diagnostic import Correction, Diagnostic
from statuslint.core.status_table import load_table
from statuslint.rules.http_status import HS_001

if TYPE_CHECKING:
    from statuslint.core.nodes import CallNode
    from statuslint.core.status_table import StatusCodeTable


class HttpStatusCheck:
    """Checks call nodes against the configured HTTP status notation.

    Example (``enforced_style = "symbolic"``)::

        # bad
        it { is_expected.to have_http_status 200 }

        # good
        it { is_expected.to have_http_status :ok }
        it { is_expected.to have_http_status :success }

    Each call is handled independently; the check holds no per-call state.
    """

    rule = HS_001

    def __init__(
        self,
        config: StatuslintConfig | None = None,
        table: StatusCodeTable | None = None,
    ) -> None:
        self.config = config or StatuslintConfig()
        self.table = table if table is not None else load_table()
        self.checker_class: type[StyleChecker] = checker_for(self.config.enforced_style)

    def supports_autocorrect(self) -> bool:
        return self.table.available

    def on_call(self, call: CallNode, *, path: str = "") -> Diagnostic | None:
        """Return a diagnostic for *call*, or ``None`` if it is acceptable."""
        checker = self.checker_class.from_call(call, self.table)
        if not checker.is_offensive():
            return None
        assert checker.node is not None
        return Diagnostic(
            rule_id=self.rule.id,
            severity=self.rule.severity,
            message=checker.message,
            node=checker.node,
            replacement=checker.replacement() if self.supports_autocorrect() else None,
            path=path,
        )

    def autocorrect(self, diagnostic: Diagnostic) -> Correction | None:
        """Return the correction replacing the offending argument, if any."""
        if not self.supports_autocorrect() or diagnostic.replacement is None:
            return None
        return Correction(diagnostic.span, diagnostic.replacement)
