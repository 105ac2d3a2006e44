# sexprtree/visitor.py
"""
Visitor infrastructure for node trees.

Provides:
- ``NodeVisitor`` — base class with one ``visit_X`` per node kind
- ``DepthFirstVisitor`` — walks every list, with ``enter``/``leave`` hooks
- ``release`` — deep, depth-first release of a tree or document
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from .nodes import Float, Integer, List, Node, String, Symbol

__all__ = [
    "NodeVisitor",
    "DepthFirstVisitor",
    "release",
]


class NodeVisitor:
    """Base class for node visitors.

    Each ``visit_X`` method corresponds to a node kind.  The default
    implementations call ``generic_visit``, which does nothing.  Subclasses
    override the methods they care about.
    """

    def visit(self, node: Node) -> Any:
        """Dispatch to the appropriate visit method."""
        return node.accept(self)

    def generic_visit(self, node: Node) -> Any:
        return None

    def visit_string(self, node: String) -> Any:
        return self.generic_visit(node)

    def visit_symbol(self, node: Symbol) -> Any:
        return self.generic_visit(node)

    def visit_integer(self, node: Integer) -> Any:
        return self.generic_visit(node)

    def visit_float(self, node: Float) -> Any:
        return self.generic_visit(node)

    def visit_list(self, node: List) -> Any:
        return self.generic_visit(node)


class DepthFirstVisitor(NodeVisitor):
    """Visitor that traverses all children in depth-first order.

    Override ``enter`` / ``leave`` for pre/post-order processing of lists;
    atoms go through their ``visit_X`` methods as usual.
    """

    def enter(self, node: List) -> None:
        """Called before visiting children."""

    def leave(self, node: List) -> None:
        """Called after visiting children."""

    def visit_list(self, node: List) -> Any:
        self.enter(node)
        for child in node.children:
            self.visit(child)
        self.leave(node)
        return None


class _Releaser(DepthFirstVisitor):
    # Children are dropped on the way back up, so every nested list is
    # emptied before its parent.
    def leave(self, node: List) -> None:
        node.children.clear()


def release(tree: Union[Node, Iterable[Node]]) -> None:
    """Release *tree* and everything under it.

    *tree* is either a single node or a document (a sequence of root
    nodes).  Every list reached is emptied depth-first, and a document
    given as a ``list`` is cleared as well.  Releasing an already released
    tree finds only empty lists and does nothing further.
    """
    releaser = _Releaser()
    if isinstance(tree, (String, Symbol, Integer, Float, List)):
        releaser.visit(tree)
        return
    roots = tree if isinstance(tree, list) else list(tree)
    for root in roots:
        releaser.visit(root)
    if isinstance(tree, list):
        tree.clear()
