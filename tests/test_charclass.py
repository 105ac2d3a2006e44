# tests/test_charclass.py
"""
Tests for the Unicode-category driven codepoint predicates.
"""

import pytest

from sexprtree.charclass import (
    is_digit,
    is_numeric_start,
    is_quotation,
    is_sign,
    is_symbol,
    is_whitespace,
)


@pytest.mark.parametrize("cp", ["\n", " ", "\u00a0", "\u3000"])
def test_whitespace(cp):
    assert is_whitespace(cp)


@pytest.mark.parametrize("cp", ["\t", "\r", "a", None])
def test_not_whitespace(cp):
    assert not is_whitespace(cp)


@pytest.mark.parametrize("cp", ["0", "7", "٣"])
def test_digit(cp):
    assert is_digit(cp)
    assert is_numeric_start(cp)


@pytest.mark.parametrize("cp", ["a", ".", "Ⅻ", None])
def test_not_digit(cp):
    assert not is_digit(cp)


@pytest.mark.parametrize("cp", [
    "a", "Z", "ƒ", "ℵ",   # letters: Ll, Lu, Ll, Lo
    "5", "Ⅻ",              # Nd, Nl
    "-", "+", "<", "=",         # Pd, Sm
    "®",                        # So
])
def test_symbol_constituent(cp):
    assert is_symbol(cp)


@pytest.mark.parametrize("cp", [
    ".", "(", ")", '"', "*", "_", " ",
    "ǅ",                   # Lt
    "ʰ",                   # Lm
    None,
])
def test_not_symbol_constituent(cp):
    assert not is_symbol(cp)


def test_signs_and_quotation():
    assert is_sign("+") and is_sign("-")
    assert not is_sign("*")
    assert is_numeric_start("-")
    assert is_quotation('"')
    assert not is_quotation("'")
