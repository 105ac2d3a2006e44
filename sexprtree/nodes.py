# sexprtree/nodes.py
"""
Node types produced by the reader.

The node set is closed: a parsed value is exactly one of :class:`String`,
:class:`Symbol`, :class:`Integer`, :class:`Float` or :class:`List`.
Code that needs to branch on the kind either uses ``match``/``isinstance``
or implements :class:`sexprtree.visitor.NodeVisitor` and calls
:meth:`accept`.

Atoms are frozen value objects.  A :class:`List` owns its ``children``
list; the reader never places one node under two parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, Union

if TYPE_CHECKING:
    from .visitor import NodeVisitor

__all__ = [
    "String",
    "Symbol",
    "Integer",
    "Float",
    "List",
    "Node",
    "Atom",
    "INT64_MIN",
    "INT64_MAX",
]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ── Atoms ────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class String:
    """Quoted text, stored without the surrounding quotes."""

    text: str

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_string(self)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Symbol:
    """A run of symbol-constituent codepoints."""

    text: str

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_symbol(self)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Integer:
    """Signed 64-bit decimal integer."""

    value: int

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_integer(self)


@dataclass(frozen=True, slots=True)
class Float:
    value: float

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_float(self)


# ── Lists ────────────────────────────────────────────────────────

@dataclass(eq=True, slots=True)
class List:
    """
    An ordered group of child nodes written as ``( ... )``.

    Children keep source order.  Equality is structural; use ``is`` to
    test whether two references point at the same node in a tree.
    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_list(self)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Node:
        return self.children[index]


Atom = Union[String, Symbol, Integer, Float]
Node = Union[String, Symbol, Integer, Float, List]
