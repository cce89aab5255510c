from enum import StrEnum


class Style(StrEnum):
    """Notation enforced for ``have_http_status`` arguments."""

    SYMBOLIC = "symbolic"
    NUMERIC = "numeric"


class LiteralKind(StrEnum):
    """Literal kind of a single call argument."""

    INT = "int"
    SYMBOL = "symbol"
    STRING = "string"
    OTHER = "other"


class Severity(StrEnum):
    """Offense severity levels (ordered lowest → highest)."""

    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"

