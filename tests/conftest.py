# tests/conftest.py
"""
Shared fixtures and sample documents for the sexprtree test-suite.
"""

import pytest

from sexprtree import parse


SAMPLE_DOCUMENT = (
    '(sym1 sym2 "str1 ∆ 🧱" (sym3 (ƒ 10 -5 (9.15 -.1)))) '
    '(® "yes") '
    '(+ 1 2 3 4 5)'
)

SERVER_CONFIG = '(server (name "alpha") (port 8080))'


@pytest.fixture
def sample_document():
    return parse(SAMPLE_DOCUMENT)


@pytest.fixture
def parse_one():
    """Parse text that holds exactly one root form and return it."""
    def _parse_one(text, **kwargs):
        roots = parse(text, **kwargs)
        assert len(roots) == 1
        return roots[0]
    return _parse_one
