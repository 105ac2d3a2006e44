# sexprtree/reader.py
"""
Recursive-descent reader: UTF-8 text → node tree.

Design principles
-----------------
* **Single pass** over the input, one :class:`~sexprtree.cursor.Cursor`
  per parse.  The only backtracking is the numeric-to-symbol fallback in
  :meth:`Reader.read_atom`, which snapshots and restores the cursor offset.
* **All or nothing** – a failure anywhere releases every node built so far
  at that level and propagates; callers never see a partial tree.
* **Fail with location** – every :class:`~sexprtree.errors.ParseError`
  carries the byte offset where the reader stopped.

Grammar
-------
::

    document := ws* (list ws*)*
    list     := '(' ws* (value ws*)* ')'
    value    := list | string | number | symbol
    string   := '"' (codepoint-except-'"')* '"'
    number   := sign? digit+ ('.' digit+)?
    symbol   := symbol-constituent+
    ws       := newline | unicode-space-separator

Leniency
--------
By default an unterminated string or list at end of input is accepted as
if it had been closed.  ``ReaderOptions(strict=True)`` turns both cases
into ``UNEXPECTED_END_OF_INPUT``.

Two whitespace rules follow the grammar above and are deliberately more
permissive than the C reader this format comes from: whitespace right
after ``(`` is skipped (``( a)`` reads as ``(a)``, where the C reader
raised ``UNEXPECTED_TOKEN``), and whitespace after the last root form
ends the document.

Numbers
-------
Any Unicode ``Nd`` digit starts a number, but the value is converted like
C ``strtol``/``strtod``: only the leading ASCII decimal prefix counts, and
a token without one is ``0``.  ``(١٢)`` reads as ``Integer(0)`` and
``12٣`` as ``Integer(12)``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .charclass import (
    FULL_STOP,
    LPAR,
    QUOTATION,
    RPAR,
    is_digit,
    is_numeric_start,
    is_quotation,
    is_sign,
    is_symbol,
)
from .cursor import Buffer, Cursor, ReadMode
from .errors import ErrorKind, ParseError
from .nodes import INT64_MAX, INT64_MIN, Float, Integer, List, Node, String, Symbol
from .visitor import release

__all__ = ["ReaderOptions", "Reader", "parse"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReaderOptions:
    """Knobs for a single parse."""

    strict: bool = False


DEFAULT_OPTIONS = ReaderOptions()


# Decimal prefixes as C strtol/strtod read them: ASCII digits only.
_INT_PREFIX = re.compile(r"[+-]?[0-9]+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    value = int(match.group(), 10)
    # Clamp to the signed 64-bit range.
    return max(INT64_MIN, min(INT64_MAX, value))


def _to_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group())


class Reader:
    """Reads nodes from a cursor.  Not reusable across threads."""

    def __init__(self, cursor: Cursor, options: Optional[ReaderOptions] = None) -> None:
        self.cursor = cursor
        self.options = options or DEFAULT_OPTIONS

    def _fail(self, kind: ErrorKind) -> ParseError:
        return ParseError.for_kind(kind, self.cursor.offset)

    # ── Atoms ───────────────────────────────────────────────────

    def read_string(self) -> String:
        if not self.cursor.expect(QUOTATION):
            raise self._fail(ErrorKind.UNEXPECTED_TOKEN)
        text, closed = self.cursor.read_while(ReadMode.UNTIL, is_quotation)
        if not closed and self.options.strict:
            raise self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT)
        return String(text)

    def read_symbol(self) -> Symbol:
        text, _ = self.cursor.read_while(ReadMode.WHILE, is_symbol)
        return Symbol(text)

    def read_number(self) -> Node:
        cursor = self.cursor
        cp = cursor.peek()
        if cp is None:
            raise self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT)

        start = cursor.offset
        if is_sign(cp):
            cursor.advance()

        length = 0
        is_float = False
        while True:
            cp = cursor.peek()
            if cp is None or not (is_digit(cp) or cp == FULL_STOP):
                break
            cursor.advance()
            if cp == FULL_STOP:
                if is_float:
                    raise self._fail(ErrorKind.UNEXPECTED_TOKEN)
                is_float = True
            length += 1

        if length == 0:
            raise self._fail(ErrorKind.UNEXPECTED_TOKEN)

        text = cursor.data[start:cursor.offset].decode("utf-8", errors="replace")
        try:
            if is_float:
                return Float(_to_float(text))
            return Integer(_to_int(text))
        except MemoryError:
            raise self._fail(ErrorKind.OUT_OF_MEMORY) from None

    def read_atom(self) -> Node:
        cursor = self.cursor
        cp = cursor.peek()
        if cp is None:
            raise self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT)

        if is_quotation(cp):
            return self.read_string()
        if is_numeric_start(cp):
            mark = cursor.checkpoint()
            try:
                return self.read_number()
            except ParseError as exc:
                if exc.kind is ErrorKind.OUT_OF_MEMORY:
                    raise
                logger.debug("not a number (%s); re-reading byte %d as a symbol", exc, mark)
                cursor.restore(mark)
                return self.read_symbol()
        if is_symbol(cp):
            return self.read_symbol()
        raise self._fail(ErrorKind.UNEXPECTED_TOKEN)

    # ── Lists ───────────────────────────────────────────────────

    def read_list(self) -> List:
        cursor = self.cursor
        if not cursor.expect(LPAR):
            raise self._fail(ErrorKind.UNEXPECTED_TOKEN)

        children: list[Node] = []
        cursor.skip_whitespace()
        try:
            while True:
                cp = cursor.peek()
                if cp is None:
                    if self.options.strict:
                        raise self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT)
                    break
                if cp == RPAR:
                    cursor.advance()
                    break
                child = self.read_list() if cp == LPAR else self.read_atom()
                children.append(child)
                cursor.skip_whitespace()
        except ParseError:
            release(children)
            raise
        return List(children)

    # ── Documents ───────────────────────────────────────────────

    def read_document(self) -> list[List]:
        cursor = self.cursor
        roots: list[List] = []
        try:
            cursor.skip_whitespace()
            while cursor.has_more():
                roots.append(self.read_list())
                cursor.skip_whitespace()
        except ParseError as exc:
            logger.debug("parse failed: %s", exc)
            release(roots)
            raise
        return roots


def parse(data: Buffer, options: Optional[ReaderOptions] = None) -> list[List]:
    """Parse a whole document and return its root lists in source order.

    *data* is UTF-8 encoded ``bytes`` (read up to the first NUL byte, if
    any) or a ``str``, which is encoded first.  Raises
    :class:`~sexprtree.errors.ParseError` on the first failure; no partial
    result is ever returned.
    """
    cursor = Cursor(data)
    logger.debug("parsing %d bytes", cursor.size)
    roots = Reader(cursor, options).read_document()
    logger.debug("parsed %d root form(s)", len(roots))
    return roots
