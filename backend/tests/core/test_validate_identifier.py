"""Identifier Validation — only clean positive integers reach the store.

Tests:
    - Numeric strings and ints are accepted and returned as the parsed int
    - Absent, empty, non-numeric and partially numeric values are rejected
    - Zero, negatives, fractions and booleans are rejected
    - Rejection carries the fixed client message "Invalid ID"
"""

import pytest

from secureboard.core.errors import InvalidIdentifierError
from secureboard.core.validate_identifier import parse_identifier


@pytest.mark.parametrize("value, expected", [
    ("3", 3),
    (7, 7),
    ("42", 42),
    (" 12 ", 12),
    ("+5", 5),
    (9.0, 9),
    ("007", 7),
])
def test_accepts_numeric_identifiers(value, expected):
    assert parse_identifier(value) == expected


def test_returns_plain_int():
    parsed = parse_identifier("3")
    assert type(parsed) is int


@pytest.mark.parametrize("value", [
    None,
    "",
    "   ",
    "abc",
    "3abc",
    "1 OR 1=1",
    "1; DROP TABLE users",
    "12.5",
    "1e3",
    "0x10",
    "1_000",
    "\u0663",
    "9223372036854775808",
    "99999999999999999999",
    "9" * 5000,
    2 ** 63,
    1e300,
    "-4",
    "0",
    0,
    -1,
    2.5,
    True,
    False,
    [1],
    {"id": 1},
])
def test_rejects_invalid_identifiers(value):
    with pytest.raises(InvalidIdentifierError):
        parse_identifier(value)


def test_rejection_uses_client_message():
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_identifier("")
    err = exc_info.value
    assert err.message == "Invalid ID"
    assert err.code == "INVALID_ID"
    assert err.http_status == 400
    assert err.context.field_name == "id"


def test_accepts_largest_storable_identifier():
    assert parse_identifier("9223372036854775807") == 2 ** 63 - 1
    assert parse_identifier(2 ** 63 - 1) == 2 ** 63 - 1
