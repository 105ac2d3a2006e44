# sexprtree/charclass.py
"""Codepoint classification driven by Unicode general categories."""

from __future__ import annotations

import unicodedata
from typing import Final, FrozenSet, Optional

__all__ = [
    "QUOTATION",
    "FULL_STOP",
    "PLUS",
    "MINUS",
    "LPAR",
    "RPAR",
    "NEWLINE",
    "is_whitespace",
    "is_quotation",
    "is_sign",
    "is_digit",
    "is_numeric_start",
    "is_symbol",
]

QUOTATION: Final = '"'
FULL_STOP: Final = "."
PLUS: Final = "+"
MINUS: Final = "-"
LPAR: Final = "("
RPAR: Final = ")"
NEWLINE: Final = "\n"

# Letters (upper, lower, other), decimal and letter numbers, dash
# punctuation, math and other symbols.
SYMBOL_CATEGORIES: Final[FrozenSet[str]] = frozenset(
    {"Lu", "Ll", "Lo", "Nd", "Nl", "Pd", "Sm", "So"}
)


def _category(cp: Optional[str]) -> str:
    if not cp:
        return ""
    return unicodedata.category(cp)


def is_whitespace(cp: Optional[str]) -> bool:
    """Newline or a space separator (``Zs``); tabs are not whitespace."""
    return cp == NEWLINE or _category(cp) == "Zs"


def is_quotation(cp: Optional[str]) -> bool:
    return cp == QUOTATION


def is_sign(cp: Optional[str]) -> bool:
    return cp == PLUS or cp == MINUS


def is_digit(cp: Optional[str]) -> bool:
    """Any Unicode decimal digit (``Nd``), not only ASCII ``0-9``."""
    return _category(cp) == "Nd"


def is_numeric_start(cp: Optional[str]) -> bool:
    return is_digit(cp) or is_sign(cp)


def is_symbol(cp: Optional[str]) -> bool:
    """True for codepoints that may appear inside a symbol.

    The set is broad on purpose: ``+`` (``Sm``) and ``-`` (``Pd``) are
    constituents, so operator tokens that fail as numbers still read as
    symbols.
    """
    return _category(cp) in SYMBOL_CATEGORIES
