# tests/test_convert.py
"""
Tests for the sexpdata bridge.
"""

import pytest
import sexpdata
from sexpdata import Symbol as SxSymbol

from sexprtree import Float, Integer, List, String, Symbol, dumps, parse, to_sexpdata


class TestToSexpdata:

    def test_atoms(self):
        assert to_sexpdata(String("s")) == "s"
        assert isinstance(to_sexpdata(Symbol("a")), SxSymbol)
        assert to_sexpdata(Integer(-3)) == -3
        assert to_sexpdata(Float(2.5)) == 2.5

    def test_nested(self):
        (root,) = parse('(a 1 2.5 "s" (b))')
        assert to_sexpdata(root) == [SxSymbol("a"), 1, 2.5, "s", [SxSymbol("b")]]

    @pytest.mark.parametrize("text", [
        "(a b c)",
        "(let (x 1) (- x 2))",
        '(server (name "alpha") (port 8080))',
        "(1.5 -2.25 (+ 1 2))",
    ])
    def test_agrees_with_sexpdata_loads(self, text):
        (root,) = parse(text)
        assert to_sexpdata(root) == sexpdata.loads(text)


class TestDumps:

    def test_single_node(self):
        (root,) = parse('(a "s" 2.5 -3)')
        assert dumps(root) == '(a "s" 2.5 -3)'

    def test_document(self):
        assert dumps(parse("(+ 1 2) (x)")) == "(+ 1 2) (x)"

    def test_empty_document(self):
        assert dumps([]) == ""

    def test_reparse(self):
        doc = parse('(config (name "alpha") (ratio 0.5))')
        assert parse(dumps(doc)) == doc
