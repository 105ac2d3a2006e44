"""sexprtree — a small reader for human-readable symbolic expressions.

Parses UTF-8 text such as ``(server (name "alpha") (port 8080))`` into a
tree of typed nodes and answers simple queries about it.

Submodules
----------
reader
    ``parse`` and the ``Reader`` behind it: atoms, lists, documents.
cursor / charclass
    Codepoint cursor over the byte buffer and the Unicode category
    predicates that drive the lexer.
nodes / visitor
    The five node kinds, visitor base classes and ``release``.
navigator
    ``find_by_path`` and ``nth_child``.
errors
    ``ParseError`` (kind + byte offset) and its subclasses.
convert
    Conversion to ``sexpdata`` objects and back to text.

Usage
-----
::

    from sexprtree import parse, find_by_path, nth_child

    doc = parse(b'(server (name "alpha") (port 8080))')
    port = find_by_path(doc[0], "server.port")
    assert nth_child(port, 1).value == 8080
"""

from __future__ import annotations

from .convert import dumps, to_sexpdata
from .errors import (
    ErrorKind,
    OutOfMemoryError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .navigator import find_by_path, nth_child
from .nodes import Atom, Float, Integer, List, Node, String, Symbol
from .reader import Reader, ReaderOptions, parse
from .visitor import DepthFirstVisitor, NodeVisitor, release

__version__: str = "0.1.0"
__all__: list[str] = [
    "__version__",
    "parse",
    "Reader",
    "ReaderOptions",
    "find_by_path",
    "nth_child",
    "release",
    "to_sexpdata",
    "dumps",
    "Node",
    "Atom",
    "String",
    "Symbol",
    "Integer",
    "Float",
    "List",
    "NodeVisitor",
    "DepthFirstVisitor",
    "ErrorKind",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "OutOfMemoryError",
]
