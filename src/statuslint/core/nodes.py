from dataclasses import dataclass

from statuslint.core._types import LiteralKind


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` character range in a source text.

    ``line`` and ``column`` are 1-based and describe ``start``.
    """

    start: int
    end: int
    line: int = 1
    column: int = 1


@dataclass(frozen=True, slots=True)
class ArgumentNode:
    """One argument of a call expression, as written in the source."""

    source: str
    kind: LiteralKind
    value: int | str | None
    span: Span


@dataclass(frozen=True, slots=True)
class CallNode:
    """A call expression discovered by the host scanner."""

    method: str
    has_receiver: bool
    arguments: tuple[ArgumentNode, ...]
    span: Span
