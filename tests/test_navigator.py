# tests/test_navigator.py
"""
Tests for tree queries: dotted-path search and positional lookup.
"""

import pytest

from sexprtree import List, String, Symbol, find_by_path, nth_child, parse
from tests.conftest import SERVER_CONFIG


def _root(text):
    (root,) = parse(text)
    return root


class TestFindByPathSingleComponent:

    def test_direct_symbol(self):
        root = _root("(a b)")
        assert find_by_path(root, "a") is root
        assert find_by_path(root, "b") is root

    def test_missing_symbol(self):
        assert find_by_path(_root("(a b)"), "c") is None

    def test_prefix_match(self):
        root = _root("(server-name x)")
        assert find_by_path(root, "server") is root

    def test_component_longer_than_symbol(self):
        assert find_by_path(_root("(ser)"), "server") is None

    def test_strings_do_not_match(self):
        assert find_by_path(_root('("a")'), "a") is None

    def test_does_not_descend(self):
        assert find_by_path(_root("(x (port 1))"), "port") is None

    def test_empty_path_matches_any_symbol(self):
        root = _root("(a)")
        assert find_by_path(root, "") is root
        assert find_by_path(_root("(1 (a))"), "") is None


class TestFindByPathDotted:

    def test_nested_abc_misses(self):
        # "a" moves the current component to "b", so "(b (c))" is searched
        # for "c" alone, which only looks at its direct symbols.
        assert find_by_path(_root("(a (b (c)))"), "a.b.c") is None

    def test_server_port(self):
        root = _root(SERVER_CONFIG)
        found = find_by_path(root, "server.port")
        assert found is root.children[2]
        assert found == List([Symbol("port"), nth_child(found, 1)])

    def test_descends_without_match(self):
        root = _root("(q (b c))")
        assert find_by_path(root, "a.b") is root.children[1]

    def test_first_component_skipped_by_descent(self):
        root = _root("(r (a (b c)))")
        expected = root.children[1].children[1]
        assert find_by_path(root, "x.b.c") is expected

    def test_order_sensitive(self):
        root = _root("(a (y c))")
        assert find_by_path(root, "a.b.c") is root.children[1]
        # With the list before the symbol, it is searched for "b.c" and
        # misses; the later "a" has nothing left to descend into.
        assert find_by_path(_root("((y c) a)"), "a.b.c") is None

    def test_last_component_needs_descent(self):
        # Matching "a" then "b" at the same level never returns the list.
        assert find_by_path(_root("(a b)"), "a.b") is None

    def test_first_hit_wins(self):
        root = _root("(s (p 1) (p 2))")
        assert find_by_path(root, "s.p") is root.children[1]

    def test_non_list_root(self):
        assert find_by_path(Symbol("a"), "a") is None
        assert find_by_path(String("a"), "a") is None

    def test_empty_list(self):
        assert find_by_path(List([]), "a.b") is None


class TestNthChild:

    def test_in_range(self):
        root = _root('(a "b" 3)')
        assert nth_child(root, 0) is root.children[0]
        assert nth_child(root, 1) == String("b")
        assert nth_child(root, 2) is root.children[2]

    @pytest.mark.parametrize("index", [3, 100, -1])
    def test_out_of_range(self, index):
        assert nth_child(_root('(a "b" 3)'), index) is None

    def test_not_a_list(self):
        assert nth_child(Symbol("a"), 0) is None

    def test_empty_list(self):
        assert nth_child(List([]), 0) is None
