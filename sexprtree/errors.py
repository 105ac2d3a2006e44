# sexprtree/errors.py
"""
Error types shared by every stage of the reader.

A parse failure is described by two things only: what went wrong
(:class:`ErrorKind`) and the byte offset into the UTF-8 input where the
reader noticed it.  Human readable text is derived from those two fields
and is not part of the contract.

Hierarchy
---------
::

    ParseError (base, carries ``kind`` and ``byte_offset``)
    ├── UnexpectedTokenError       - grammar mismatch at a position
    ├── UnexpectedEndOfInputError  - input exhausted mid-construct
    └── OutOfMemoryError           - allocation failure for a numeric node

Example
-------
::

    from sexprtree import parse
    from sexprtree.errors import ErrorKind, ParseError

    try:
        parse(b"(a.b)")
    except ParseError as exc:
        assert exc.kind is ErrorKind.UNEXPECTED_TOKEN
        assert exc.byte_offset == 2
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, ClassVar, Dict, Type

__all__ = [
    "ErrorKind",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "OutOfMemoryError",
]


@unique
class ErrorKind(Enum):
    """What went wrong while reading."""

    UNEXPECTED_TOKEN = "unexpected-token"
    UNEXPECTED_END_OF_INPUT = "unexpected-end-of-input"
    OUT_OF_MEMORY = "out-of-memory"


class ParseError(Exception):
    """
    Base exception for all reader failures.

    Instances are normally created through :meth:`for_kind`, which picks
    the subclass matching the kind.
    """

    kind: ErrorKind
    _registry: ClassVar[Dict[ErrorKind, Type["ParseError"]]] = {}

    def __init__(self, kind: ErrorKind, byte_offset: int) -> None:
        super().__init__(kind, byte_offset)
        self.kind = kind
        self.byte_offset = byte_offset

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("default_kind")
        if kind is not None:
            ParseError._registry[kind] = cls

    @classmethod
    def for_kind(cls, kind: ErrorKind, byte_offset: int) -> "ParseError":
        """Build the exception subclass registered for *kind*."""
        return cls._registry.get(kind, ParseError)(kind, byte_offset)

    def to_json(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "kind": self.kind.value,
            "byte_offset": self.byte_offset,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.kind, self.byte_offset) == (other.kind, other.byte_offset)

    def __hash__(self) -> int:
        return hash((self.kind, self.byte_offset))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, byte_offset={self.byte_offset})"

    def __str__(self) -> str:
        return f"{self.kind.value} at byte {self.byte_offset}"


class UnexpectedTokenError(ParseError):
    """A codepoint did not fit the grammar at this position."""

    default_kind = ErrorKind.UNEXPECTED_TOKEN

    def __init__(self, kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN, byte_offset: int = 0) -> None:
        super().__init__(kind, byte_offset)


class UnexpectedEndOfInputError(ParseError):
    """The input ended while a construct still needed codepoints."""

    default_kind = ErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(
        self,
        kind: ErrorKind = ErrorKind.UNEXPECTED_END_OF_INPUT,
        byte_offset: int = 0,
    ) -> None:
        super().__init__(kind, byte_offset)


class OutOfMemoryError(ParseError):
    """Allocation failed while building a numeric node."""

    default_kind = ErrorKind.OUT_OF_MEMORY

    def __init__(self, kind: ErrorKind = ErrorKind.OUT_OF_MEMORY, byte_offset: int = 0) -> None:
        super().__init__(kind, byte_offset)
