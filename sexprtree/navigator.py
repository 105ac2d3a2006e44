# sexprtree/navigator.py
"""
Queries over an already parsed tree.

``find_by_path`` is an order-sensitive prefix scan interleaved with
descent, not a hierarchical lookup.  For a list and a dotted path
``c0.c1...cn`` the children are walked in order:

* With a single component, the list itself is the result as soon as one
  of its direct symbols starts with that component.  Nested lists are not
  entered.
* With several components there is a *current* component, ``c0`` at
  first.  Every nested list is searched with the components after the
  current one, whether or not anything matched yet.  A symbol starting
  with the current component moves it one step right, but never onto the
  last component: the last one is only ever matched by a descent.

Examples::

    (server (name "alpha") (port 8080))   "server.port"  ->  (port 8080)
    (r (a (b c)))                         "x.b.c"        ->  (b c)
    (a (b (c)))                           "a.b.c"        ->  None

The last case misses because matching ``a`` moves the current component
to ``b``, so ``(b (c))`` is searched for ``c`` alone, and ``c`` sits one
list deeper than a single-component search looks.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .nodes import List, Node, Symbol

__all__ = ["find_by_path", "nth_child", "PATH_SEPARATOR"]

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."


def _scan(node: List, components: Tuple[str, ...]) -> Optional[List]:
    if len(components) == 1:
        for child in node.children:
            if isinstance(child, Symbol) and child.text.startswith(components[0]):
                return node
        return None

    current = 0
    for child in node.children:
        if isinstance(child, List):
            found = _scan(child, components[current + 1:])
            if found is not None:
                return found
        elif isinstance(child, Symbol) and child.text.startswith(components[current]):
            if current + 2 < len(components):
                current += 1
    return None


def find_by_path(root: Node, path: str) -> Optional[List]:
    """Return the list matched by dotted *path* under *root*, or ``None``.

    The result is the node inside the tree, not a copy.
    """
    if not isinstance(root, List):
        return None
    found = _scan(root, tuple(path.split(PATH_SEPARATOR)))
    if found is None:
        logger.debug("no list matches path %r", path)
    return found


def nth_child(node: Node, index: int) -> Optional[Node]:
    """Return the *index*-th (0-based) direct child of a list, or ``None``."""
    if not isinstance(node, List):
        return None
    if index < 0 or index >= len(node.children):
        return None
    return node.children[index]
