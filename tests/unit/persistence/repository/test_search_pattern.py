"""Unit tests for literal substring search patterns."""

import pytest

from hive.persistence.repository._search import contains_pattern


@pytest.mark.parametrize(
    "term,expected",
    [
        ("alice", "%alice%"),
        ("", "%%"),
        ("100%", "%100\\%%"),
        ("first_name", "%first\\_name%"),
        ("back\\slash", "%back\\\\slash%"),
    ],
)
def test_contains_pattern_escapes_wildcards(term, expected):
    assert contains_pattern(term) == expected
