"""Lexical discovery of call expressions in Ruby spec files.

This is not a Ruby parser.  It recognises enough of the surface syntax
(comments, quoted strings, bracket nesting, parenthesised and bare
argument lists) to hand ``have_http_status`` calls to the checks, and to
splice corrections back into the text.  Heredocs, ``%``-literals and
regexp literals are not recognised.
"""

from __future__ import annotations

import bisect
import re
from typing import TYPE_CHECKING

from statuslint.core._types import LiteralKind
from statuslint.core.nodes import ArgumentNode, CallNode, Span

if TYPE_CHECKING:
    from collections.abc import Iterable

    from statuslint.core.diagnostic import Correction

_CODE, _STRING, _COMMENT = 0, 1, 2

_OPENERS = "([{"
_CLOSERS = ")]}"

# Keywords ending a paren-less argument list.
_STOP_KEYWORDS = ("do", "if", "unless", "and", "or", "then", "while", "until", "rescue")
_STOP_KEYWORD_RE = re.compile(r"(?:" + "|".join(_STOP_KEYWORDS) + r")(?![\w?!])")
_DEF_RE = re.compile(r"(?<![\w.:])def")

_INT_RE = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO_]?[0-7_]+|0[dD][0-9_]+|[1-9][0-9_]*|0)"
)
_SYMBOL_RE = re.compile(r":([A-Za-z_]\w*[?!=]?)")
_QUOTED_SYMBOL_RE = re.compile(r':"((?:[^"\\#]|\\.)*)"')
_STRING_RE = re.compile(r'"((?:[^"\\]|\\.)*)"|\'((?:[^\'\\]|\\.)*)\'')
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _lex_mask(text: str) -> bytearray:
    """Classify every character as code, string or comment."""
    mask = bytearray(len(text))
    n = len(text)
    i = 0
    while i < n:
        c = text[i]
        if c == "#":
            end = text.find("\n", i)
            end = n if end == -1 else end
            mask[i:end] = bytes([_COMMENT]) * (end - i)
            i = end
        elif c in "\"'":
            j = i + 1
            while j < n and text[j] != c:
                if text[j] == "\\":
                    j += 1
                j += 1
            end = min(j + 1, n)
            mask[i:end] = bytes([_STRING]) * (end - i)
            i = end
        else:
            i += 1
    return mask


class _Source:
    """Source text plus the lexical mask and a line index."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.mask = _lex_mask(text)
        self._line_starts = [0] + [m.end() for m in re.finditer(r"\n", text)]

    def span(self, start: int, end: int) -> Span:
        line = bisect.bisect_right(self._line_starts, start)
        column = start - self._line_starts[line - 1] + 1
        return Span(start, end, line, column)

    def is_code(self, i: int) -> bool:
        return self.mask[i] == _CODE

    def prev_significant(self, i: int) -> int:
        """Index of the last non-blank, non-comment character before *i*, or -1."""
        j = i - 1
        while j >= 0 and (self.mask[j] == _COMMENT or self.text[j].isspace()):
            j -= 1
        return j


def _int_value(source: str) -> int:
    digits = source.replace("_", "").lower()
    sign = -1 if digits.startswith("-") else 1
    digits = digits.lstrip("+-")
    if digits.startswith("0d"):
        return sign * int(digits[2:])
    if len(digits) > 1 and digits[0] == "0" and digits[1].isdigit():
        return sign * int(digits, 8)
    return sign * int(digits, 0)


def classify(source: str) -> tuple[LiteralKind, int | str | None]:
    """Return the literal kind and parsed value of an argument's text.

    Integers follow Ruby's literal syntax: ``0x``, ``0b``, ``0o`` or a bare
    leading ``0`` (octal) and ``0d`` prefixes, with ``_`` separators.
    """
    if _INT_RE.fullmatch(source):
        return LiteralKind.INT, _int_value(source)
    if m := _SYMBOL_RE.fullmatch(source):
        return LiteralKind.SYMBOL, m.group(1)
    if m := _QUOTED_SYMBOL_RE.fullmatch(source):
        return LiteralKind.SYMBOL, _ESCAPE_RE.sub(r"\1", m.group(1))
    if m := _STRING_RE.fullmatch(source):
        inner = m.group(1) if m.group(1) is not None else m.group(2)
        return LiteralKind.STRING, _ESCAPE_RE.sub(r"\1", inner)
    return LiteralKind.OTHER, None


def scan_calls(text: str, method: str = "have_http_status") -> list[CallNode]:
    """Find every call of *method* in Ruby source *text*.

    Matches inside comments and string literals, ``:method`` symbols and
    ``def method`` definitions are ignored.  Calls preceded by ``.``,
    ``&.`` or ``::`` are reported with ``has_receiver=True``.
    """
    src = _Source(text)
    name_re = re.compile(r"(?<![\w$@])" + re.escape(method) + r"(?![\w?!])")
    calls: list[CallNode] = []

    for m in name_re.finditer(text):
        start, name_end = m.span()
        if not src.is_code(start):
            continue

        prev = src.prev_significant(start)
        has_receiver = False
        if prev >= 0 and src.is_code(prev):
            if text[prev] == ".":
                has_receiver = True
            elif text[prev] == ":":
                before = text[prev - 1] if prev > 0 else ""
                if before == ":":
                    has_receiver = True
                elif prev == start - 1 and not (before.isalnum() or before == "_"):
                    continue  # a symbol, not a call
            elif prev >= 2 and _DEF_RE.match(text, prev - 2):
                continue

        ranges, end = _parse_arguments(src, name_end)
        arguments = tuple(_make_argument(src, a, b) for a, b in ranges)
        calls.append(CallNode(method, has_receiver, arguments, src.span(start, end)))

    return calls


def _make_argument(src: _Source, start: int, end: int) -> ArgumentNode:
    source = src.text[start:end]
    kind, value = classify(source)
    return ArgumentNode(source, kind, value, src.span(start, end))


def _parse_arguments(src: _Source, pos: int) -> tuple[list[tuple[int, int]], int]:
    """Parse the argument list following a method name at *pos*.

    Returns the ``(start, end)`` range of each argument and the end offset
    of the whole call.
    """
    text = src.text
    n = len(text)
    if pos < n and text[pos] == "(" and src.is_code(pos):
        return _scan_list(src, pos + 1, parens=True)

    i = pos
    while i < n and text[i] in " \t":
        i += 1
    if i == pos or i >= n or src.mask[i] == _COMMENT:
        return [], pos
    if src.is_code(i) and (text[i] in "\n;,.=)]}{&|" or _STOP_KEYWORD_RE.match(text, i)):
        return [], pos
    return _scan_list(src, i, parens=False)


def _scan_list(src: _Source, pos: int, *, parens: bool) -> tuple[list[tuple[int, int]], int]:
    text = src.text
    n = len(text)
    ranges: list[tuple[int, int]] = []
    depth = 0
    start: int | None = None
    last = -1
    after_comma = False
    i = pos

    while i < n:
        c = text[i]
        kind = src.mask[i]
        if kind == _COMMENT:
            if not parens and not after_comma:
                break
            i += 1
            continue
        if kind == _CODE and depth == 0:
            if parens and c == ")":
                i += 1
                break
            if not parens and (
                (c == "\n" and not after_comma)
                or c == ";"
                or c in _CLOSERS
                or text.startswith(("&&", "||"), i)
                or (text[i - 1].isspace() and _STOP_KEYWORD_RE.match(text, i))
            ):
                break
            if c == ",":
                if start is not None:
                    ranges.append((start, last + 1))
                start = None
                after_comma = True
                i += 1
                continue
        if kind == _CODE:
            if c in _OPENERS:
                depth += 1
            elif c in _CLOSERS:
                depth -= 1
        if not c.isspace():
            if start is None:
                start = i
            last = i
            after_comma = False
        i += 1

    if start is not None:
        ranges.append((start, last + 1))
    end = i if parens else (last + 1 if last >= 0 else pos)
    return ranges, end


def apply_corrections(text: str, corrections: Iterable[Correction]) -> str:
    """Return *text* with every correction spliced in.

    Raises:
        ValueError: If two corrections overlap.

    """
    ordered = sorted(corrections, key=lambda c: (c.span.start, c.span.end))
    parts: list[str] = []
    cursor = 0
    for correction in ordered:
        if correction.span.start < cursor:
            msg = f"Overlapping corrections at offset {correction.span.start}"
            raise ValueError(msg)
        parts.append(text[cursor : correction.span.start])
        parts.append(correction.replacement)
        cursor = correction.span.end
    parts.append(text[cursor:])
    return "".join(parts)
