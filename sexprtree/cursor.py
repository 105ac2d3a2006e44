# sexprtree/cursor.py
"""Codepoint cursor over a UTF-8 byte buffer.

Wraps a bytes object with an offset pointer and hands out one decoded
codepoint at a time.  Offsets are always byte offsets so errors can point
into the original buffer.
"""

from __future__ import annotations

import enum
from typing import Callable, Optional, Union

from .charclass import is_whitespace

__all__ = ["Cursor", "ReadMode", "Buffer"]

Buffer = Union[bytes, bytearray, memoryview, str]
Predicate = Callable[[str], bool]


class ReadMode(enum.Enum):
    """How :meth:`Cursor.read_while` treats its predicate."""

    UNTIL = "until"  # consume through the first match, return text before it
    WHILE = "while"  # consume matches, stop before the first non-match


class Cursor:
    __slots__ = ("data", "offset", "size")

    def __init__(self, data: Buffer, offset: int = 0):
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        elif not isinstance(data, bytes):
            raise TypeError(f"expected bytes or str, got {type(data).__name__}")
        self.data = data
        self.offset = offset
        # The readable size stops at a NUL terminator when there is one.
        end = data.find(b"\x00")
        self.size = len(data) if end < 0 else end

    def decode_size(self) -> int:
        """Byte length of the codepoint at the cursor, from its leading byte."""
        if self.offset >= self.size:
            return 1
        lead = self.data[self.offset]
        if lead & 0xF8 == 0xF0:
            return 4
        if lead & 0xF0 == 0xE0:
            return 3
        if lead & 0xE0 == 0xC0:
            return 2
        return 1

    def has_more(self) -> bool:
        return self.offset + self.decode_size() <= self.size

    def peek(self) -> Optional[str]:
        if not self.has_more():
            return None
        end = self.offset + self.decode_size()
        return self.data[self.offset:end].decode("utf-8", errors="replace")[0]

    def advance(self) -> None:
        if self.has_more():
            self.offset += self.decode_size()

    def checkpoint(self) -> int:
        return self.offset

    def restore(self, offset: int) -> None:
        self.offset = offset

    def skip_whitespace(self) -> None:
        while is_whitespace(self.peek()):
            self.advance()

    def expect(self, literal: str) -> bool:
        """Skip whitespace, then consume one codepoint and compare it.

        The codepoint is consumed whether or not it matches.
        """
        self.skip_whitespace()
        cp = self.peek()
        self.advance()
        return cp == literal

    def read_while(self, mode: ReadMode, predicate: Predicate) -> tuple[str, bool]:
        """Read codepoints according to *mode*.

        Returns the text read and whether the read stopped on the predicate
        rather than at end of input.
        """
        start = end = self.offset
        while True:
            cp = self.peek()
            if cp is None:
                return self.data[start:end].decode("utf-8", errors="replace"), False
            if mode is ReadMode.UNTIL:
                self.advance()
                if predicate(cp):
                    break
                end = self.offset
            else:
                if not predicate(cp):
                    break
                self.advance()
                end = self.offset
        return self.data[start:end].decode("utf-8", errors="replace"), True

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, size={self.size})"
