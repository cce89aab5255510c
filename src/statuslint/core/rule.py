from dataclasses import dataclass

from statuslint.core._types import Severity


@dataclass(frozen=True, slots=True)
class Rule:
    """Metadata for a single style rule.

    Rule instances are pure data - they describe *what* a rule checks,
    not *how* to check it.  Checks reference Rule objects by import.

    Example::

        HS_001 = Rule(
            id="HS-001",
            severity=Severity.CONVENTION,
            summary="Inconsistent HTTP status notation in have_http_status",
            hint="Use the notation configured by enforced_style",
            layer="rspec.rails",
        )
    """

    id: str
    severity: Severity
    summary: str
    hint: str = ""
    layer: str = ""

    def __str__(self) -> str:
        return f"[{self.id}] {self.summary}"
