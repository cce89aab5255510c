"""Style strategies for ``have_http_status`` arguments.

Each strategy inspects the single argument of a bare
``have_http_status(<literal>)`` call and decides whether it uses the wrong
notation.  Which strategy is active depends on the configured
:class:`~statuslint.core._types.Style`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Self

from statuslint.core._types import LiteralKind, Style
from statuslint.core.status_table import symbol_literal

if TYPE_CHECKING:
    from statuslint.core.nodes import ArgumentNode, CallNode
    from statuslint.core.status_table import StatusCodeTable

STATUS_METHOD = "have_http_status"

MSG = "Prefer `{prefer}` over `{current}` to describe HTTP status code."

# Group names matching a range of codes; they have no numeric equivalent.
WHITELIST_STATUS: frozenset[str] = frozenset({"error", "success", "missing", "redirect"})


def match_status_call(call: CallNode, kind: LiteralKind) -> ArgumentNode | None:
    """Return the argument of ``have_http_status(<kind literal>)``, or ``None``.

    Only bare calls (no explicit receiver) with exactly one argument of the
    requested literal kind match.
    """
    if call.method != STATUS_METHOD or call.has_receiver:
        return None
    if len(call.arguments) != 1:
        return None
    arg = call.arguments[0]
    if arg.kind != kind:
        return None
    return arg


class StyleChecker:
    """Base class for the style strategies.

    ``node`` is ``None`` when the call did not match the strategy's shape;
    such a checker is never offensive.
    """

    style: ClassVar[Style]
    literal_kind: ClassVar[LiteralKind]

    def __init__(self, node: ArgumentNode | None, table: StatusCodeTable) -> None:
        self.node = node
        self.table = table

    @classmethod
    def from_call(cls, call: CallNode, table: StatusCodeTable) -> Self:
        return cls(match_status_call(call, cls.literal_kind), table)

    def is_offensive(self) -> bool:
        return self.node is not None

    @property
    def message(self) -> str:
        return MSG.format(prefer=self.preferred_style, current=self.current_style)

    @property
    def preferred_style(self) -> str:
        """Text to recommend, or the generic style name when unresolvable."""
        return self.replacement() or str(self.style)

    @property
    def current_style(self) -> str:
        raise NotImplementedError

    def replacement(self) -> str | None:
        """Autocorrect text for the argument, ``None`` if it cannot be computed."""
        raise NotImplementedError


class SymbolicStyleChecker(StyleChecker):
    """Flags numeric arguments and recommends the symbolic name."""

    style = Style.SYMBOLIC
    literal_kind = LiteralKind.INT

    @property
    def current_style(self) -> str:
        if not self.table.available:
            return str(Style.NUMERIC)
        return str(self.number)

    def replacement(self) -> str | None:
        if not self.table.available:
            return None
        symbol = self.table.symbol_for(self.number)
        return symbol_literal(symbol) if symbol is not None else None

    @property
    def number(self) -> int:
        assert self.node is not None
        return int(self.node.value)  # type: ignore[arg-type]


class NumericStyleChecker(StyleChecker):
    """Flags symbolic arguments and recommends the numeric code.

    Group names in :data:`WHITELIST_STATUS` are always accepted.
    """

    style = Style.NUMERIC
    literal_kind = LiteralKind.SYMBOL

    def is_offensive(self) -> bool:
        return self.node is not None and self.symbol not in WHITELIST_STATUS

    @property
    def current_style(self) -> str:
        if not self.table.available:
            return str(Style.SYMBOLIC)
        return symbol_literal(self.symbol)

    def replacement(self) -> str | None:
        if not self.table.available:
            return None
        code = self.table.code_for(self.symbol)
        return str(code) if code is not None else None

    @property
    def symbol(self) -> str:
        assert self.node is not None
        return str(self.node.value)


_CHECKERS: dict[Style, type[StyleChecker]] = {
    Style.SYMBOLIC: SymbolicStyleChecker,
    Style.NUMERIC: NumericStyleChecker,
}


def checker_for(style: Style) -> type[StyleChecker]:
    """Return the strategy class enforcing *style*."""
    return _CHECKERS[Style(style)]
