"""Tests for lenient redaction index parsing."""

import pytest

from zkcat.utils.indices import parse_redaction_indices


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, []),
        ("", []),
        ("1", [1]),
        ("0,2,4", [0, 2, 4]),
        ("3,1,3", [3, 1, 3]),
        (" 1 , 2 ", [1, 2]),
        ("1,,2,", [1, 2]),
        ("1,abc,2", [1, 2]),
        ("-1,2", [2]),
        ("1.5,2", [2]),
        ("+4,5", [4, 5]),
        ("0x10,7", [7]),
        ("٣,8", [8]),
        (f"{2**64 - 1}", [2**64 - 1]),
        (f"{2**64},1", [1]),
        ("abc", []),
    ],
)
def test_parse_redaction_indices(raw, expected):
    assert parse_redaction_indices(raw) == expected
