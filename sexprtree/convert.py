# sexprtree/convert.py
"""
Bridge between node trees and :mod:`sexpdata`.

``to_sexpdata`` turns a node into the plain Python structure that
``sexpdata.loads`` would produce for the same text (lists, ``str``,
``int``, ``float`` and :class:`sexpdata.Symbol`), and ``dumps`` renders
nodes back to text through ``sexpdata.dumps``.

Strings are written with ``sexpdata``'s escaping, which the reader does
not undo; text containing a backslash does not survive a round trip.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

try:
    import sexpdata
except ImportError:  # pragma: no cover
    raise ImportError(
        "The 'sexpdata' package is required for sexprtree.convert. "
        "Install it with:  pip install sexpdata"
    )

from .nodes import Float, Integer, List, Node, String, Symbol
from .visitor import NodeVisitor

__all__ = ["to_sexpdata", "dumps"]


class _SexpdataBuilder(NodeVisitor):

    def visit_string(self, node: String) -> str:
        return node.text

    def visit_symbol(self, node: Symbol) -> sexpdata.Symbol:
        return sexpdata.Symbol(node.text)

    def visit_integer(self, node: Integer) -> int:
        return node.value

    def visit_float(self, node: Float) -> float:
        return node.value

    def visit_list(self, node: List) -> list:
        return [self.visit(child) for child in node.children]


def to_sexpdata(node: Node) -> Any:
    """Convert *node* (recursively) to ``sexpdata`` objects."""
    return _SexpdataBuilder().visit(node)


def dumps(nodes: Union[Node, Iterable[Node]]) -> str:
    """Render a node, or a document of root nodes, as text.

    Root forms of a document are separated by a single space.
    """
    if isinstance(nodes, (String, Symbol, Integer, Float, List)):
        return sexpdata.dumps(to_sexpdata(nodes))
    return " ".join(sexpdata.dumps(to_sexpdata(node)) for node in nodes)
