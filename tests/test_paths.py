"""Tests for path construction."""

import pytest

from inmemfs.paths import DELIMITER, combine


def test_delimiter():
    """Test the path delimiter."""
    assert DELIMITER == "/"


@pytest.mark.parametrize(
    "base,segments,expected",
    [
        ("/", (), "/"),
        ("/", ("a",), "/a"),
        ("/", ("a", "b"), "/a/b"),
        ("/a", ("1.txt",), "/a/1.txt"),
        ("/a/b", ("c", "d"), "/a/b/c/d"),
        # A base ending in the delimiter gets no second one
        ("/a/", ("b",), "/a/b"),
        # No normalization of special names
        ("/", ("..", "."), "/../."),
    ],
)
def test_combine(base, segments, expected):
    assert combine(base, *segments) == expected


def test_combine_does_not_double_delimiter():
    """Test that combining with a path ending in the delimiter adds none."""
    assert combine("/", "a") == "/a"
    assert "//" not in combine("/", "a", "b")
