"""Bidirectional mapping between HTTP status codes and symbolic names."""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterator, Mapping
from types import ModuleType

logger = logging.getLogger("statuslint")

_CONSTANT_RE = re.compile(r"^HTTP_(\d{3})_([A-Z0-9_]+)$")
_PLAIN_SYMBOL_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*[?!]?$")

# IANA primary names for codes whose registered name changed over time.
# Registries disagree on these depending on their age, so they are pinned.
PRIMARY_NAMES: dict[int, str] = {
    413: "content_too_large",
    414: "uri_too_long",
    416: "range_not_satisfiable",
    422: "unprocessable_content",
}

LEGACY_ALIASES: dict[str, int] = {
    "request_entity_too_large": 413,
    "payload_too_large": 413,
    "request_uri_too_long": 414,
    "requested_range_not_satisfiable": 416,
    "unprocessable_entity": 422,
}


class TableUnavailableError(LookupError):
    """Raised when a lookup is attempted on an unavailable table."""


def symbol_literal(name: str) -> str:
    """Return the symbolic-literal spelling of *name* (``ok`` → ``:ok``)."""
    if _PLAIN_SYMBOL_RE.match(name):
        return f":{name}"
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f':"{escaped}"'


class StatusCodeTable:
    """Read-only ``code ⇄ symbol`` table.

    Every code maps to exactly one canonical symbol.  Additional symbols
    (historical aliases) can be passed in *aliases*; they resolve through
    :meth:`code_for` but are never returned by :meth:`symbol_for`.

    A table built with ``names=None`` is *unavailable*: callers must branch
    on :attr:`available` before looking anything up.
    """

    __slots__ = ("_by_code", "_by_symbol")

    def __init__(
        self,
        names: Mapping[int, str] | None,
        aliases: Mapping[str, int] | None = None,
    ) -> None:
        if names is None:
            self._by_code: dict[int, str] | None = None
            self._by_symbol: dict[str, int] | None = None
            return

        by_code = dict(sorted(names.items()))
        by_symbol: dict[str, int] = {}
        for alias, code in (aliases or {}).items():
            if code in by_code:
                by_symbol[alias] = code
        for code, symbol in by_code.items():
            if symbol in by_symbol and by_symbol[symbol] != code:
                msg = f"Symbol {symbol!r} declared for both {by_symbol[symbol]} and {code}"
                raise ValueError(msg)
            by_symbol[symbol] = code
        self._by_code = by_code
        self._by_symbol = by_symbol

    @classmethod
    def unavailable(cls) -> StatusCodeTable:
        return cls(None)

    @classmethod
    def from_module(cls, module: ModuleType) -> StatusCodeTable:
        """Build a table from ``HTTP_<code>_<NAME> = <code>`` constants.

        This is the layout of ``starlette.status``.  When a module declares
        several names for one code, the name from :data:`PRIMARY_NAMES` wins,
        otherwise the first declared one.  The others become aliases.
        """
        declared: dict[int, list[str]] = {}
        for attr, value in vars(module).items():
            m = _CONSTANT_RE.match(attr)
            if m is None or not isinstance(value, int) or int(m.group(1)) != value:
                continue
            declared.setdefault(value, []).append(m.group(2).lower())

        names: dict[int, str] = {}
        aliases: dict[str, int] = dict(LEGACY_ALIASES)
        for code, symbols in declared.items():
            canonical = PRIMARY_NAMES.get(code, symbols[0])
            names[code] = canonical
            for symbol in symbols:
                if symbol != canonical:
                    aliases[symbol] = code
        return cls(names, aliases)

    @property
    def available(self) -> bool:
        return self._by_code is not None

    def symbol_for(self, code: int) -> str | None:
        """Return the canonical symbol for *code*, or ``None`` if unknown."""
        return self._lookup_codes().get(code)

    def code_for(self, symbol: str) -> int | None:
        """Return the code for *symbol* (canonical or alias), or ``None``."""
        return self._lookup_symbols().get(symbol)

    def items(self) -> Iterator[tuple[int, str]]:
        """Yield ``(code, symbol)`` pairs in ascending code order."""
        yield from self._lookup_codes().items()

    def __len__(self) -> int:
        return len(self._by_code) if self._by_code is not None else 0

    def __repr__(self) -> str:
        if not self.available:
            return "StatusCodeTable(unavailable)"
        return f"StatusCodeTable({len(self)} codes)"

    def _lookup_codes(self) -> dict[int, str]:
        if self._by_code is None:
            raise TableUnavailableError("HTTP status registry is not available")
        return self._by_code

    def _lookup_symbols(self) -> dict[str, int]:
        if self._by_symbol is None:
            raise TableUnavailableError("HTTP status registry is not available")
        return self._by_symbol


@functools.cache
def load_table() -> StatusCodeTable:
    """Load the process-wide table from ``starlette.status``.

    Returns an unavailable table when starlette is not installed.  The
    result is cached: availability is fixed for the process lifetime.
    """
    try:
        from starlette import status
    except ImportError:
        logger.warning(
            "starlette is not installed; HTTP status autocorrection is disabled "
            "(install statuslint[registry])"
        )
        return StatusCodeTable.unavailable()
    table = StatusCodeTable.from_module(status)
    logger.debug("Loaded %d HTTP status codes from starlette.status", len(table))
    return table
