from dataclasses import dataclass

from statuslint.core._types import Severity
from statuslint.core.nodes import ArgumentNode, Span


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single offense reported against one call argument."""

    rule_id: str
    severity: Severity
    message: str
    node: ArgumentNode
    replacement: str | None = None
    path: str = ""

    @property
    def span(self) -> Span:
        return self.node.span

    @property
    def line(self) -> int:
        return self.node.span.line

    @property
    def column(self) -> int:
        return self.node.span.column

    @property
    def correctable(self) -> bool:
        return self.replacement is not None


@dataclass(frozen=True, slots=True)
class Correction:
    """Replacement text for one source span."""

    span: Span
    replacement: str


class StatusStyleError(Exception):
    """Raised in strict mode when HTTP status style offenses are detected."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        count = len(diagnostics)
        noun = "offense" if count == 1 else "offenses"
        super().__init__(f"HTTP status style: {count} {noun}")
