from __future__ import annotations

"""
Unit tests for the Level Registry.

Verifies:
1. Ordinal order and canonical names.
2. Lenient resolution of ordinals and names (fallback to UNKNOWN).
3. Reverse lookup from ordinal to name.
"""

import pytest

from linelog.domain.levels import LEVEL_NAMES, Level, name_of, ordinal_of


def test_levels_are_ordered_most_severe_first():
    """UNKNOWN < FATAL < ERROR < WARN < INFO < DEBUG < TRACE."""
    assert [int(level) for level in Level] == list(range(7))
    assert LEVEL_NAMES == ("UNKNOWN", "FATAL", "ERROR", "WARN", "INFO", "DEBUG", "TRACE")


@pytest.mark.parametrize("ordinal", range(7))
def test_ordinal_of_returns_valid_ordinals_unchanged(ordinal):
    assert ordinal_of(ordinal) == ordinal


def test_ordinal_of_resolves_names():
    assert ordinal_of("FATAL") is Level.FATAL
    assert ordinal_of("TRACE") is Level.TRACE
    assert ordinal_of(Level.WARN) is Level.WARN


@pytest.mark.parametrize("spec", ["BOGUS", "info", "", 99, -1, 7, None, 3.5, True])
def test_ordinal_of_falls_back_to_unknown(spec):
    """Unrecognized values never raise, they resolve to UNKNOWN."""
    assert ordinal_of(spec) is Level.UNKNOWN


def test_name_of_returns_canonical_name():
    assert name_of(0) == "UNKNOWN"
    assert name_of(4) == "INFO"
    assert name_of(Level.DEBUG) == "DEBUG"
