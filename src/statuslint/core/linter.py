import logging

from statuslint.checks.http_status import HttpStatusCheck
from statuslint.core.config import StatuslintConfig
from statuslint.core.diagnostic import Correction, Diagnostic, StatusStyleError
from statuslint.core.source import apply_corrections, scan_calls
from statuslint.core.status_table import StatusCodeTable

logger = logging.getLogger("statuslint")


def check_source(
    text: str,
    *,
    config: StatuslintConfig | None = None,
    table: StatusCodeTable | None = None,
    path: str = "",
    strict: bool = False,
) -> list[Diagnostic]:
    """Check Ruby source text for ``have_http_status`` style offenses.

    Args:
        text: Source of one file.
        config: Enforced style and file filters. Defaults to ``StatuslintConfig()``.
        table: Status code table. Defaults to the process-wide :func:`load_table`.
        path: File name recorded on each diagnostic.
        strict: If True, raise :class:`StatusStyleError` on any offense.

    Returns:
        Diagnostics in source order.

    Example::

        from statuslint import check_source

        for d in check_source("it { is_expected.to have_http_status 200 }"):
            print(d.message)

    """
    check = HttpStatusCheck(config=config, table=table)
    diagnostics: list[Diagnostic] = []

    for call in scan_calls(text):
        try:
            diagnostic = check.on_call(call, path=path)
        except Exception:
            logger.exception("Check %s raised on line %d", check.rule.id, call.span.line)
            continue
        if diagnostic is None:
            continue
        logger.debug(
            "[%s] %s:%d:%d: %s",
            diagnostic.rule_id,
            path or "<source>",
            diagnostic.line,
            diagnostic.column,
            diagnostic.message,
        )
        diagnostics.append(diagnostic)

    if strict and diagnostics:
        raise StatusStyleError(diagnostics)
    return diagnostics


def fix_source(
    text: str,
    *,
    config: StatuslintConfig | None = None,
    table: StatusCodeTable | None = None,
    path: str = "",
) -> tuple[str, list[Diagnostic]]:
    """Apply every available correction to *text*.

    Returns the corrected text and the diagnostics found before correcting.
    The text is returned unchanged when the status table is unavailable.
    """
    check = HttpStatusCheck(config=config, table=table)
    diagnostics = check_source(text, config=check.config, table=check.table, path=path)
    if not check.supports_autocorrect():
        return text, diagnostics

    corrections: list[Correction] = []
    for diagnostic in diagnostics:
        correction = check.autocorrect(diagnostic)
        if correction is not None:
            corrections.append(correction)
    return apply_corrections(text, corrections), diagnostics
