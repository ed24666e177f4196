"""Identifier Validation — gatekeeper for every user-id lookup.

Invariants:
    - parse_identifier is PURE: returns the parsed id or raises, nothing else
    - Only clean positive integers pass; partial numeric prefixes ("3abc") never do
    - Values above the signed 64-bit range are rejected, never handed to the driver
    - Rejection raises InvalidIdentifierError before any store access happens

Design Decisions:
    - Regex over int(): int() accepts "1_000", "٣" and other forms a store key should not
    - bool rejected explicitly: True is an int subclass but not an identifier
    - Digit runs capped at 32 characters: int() refuses very long strings outright
"""

import re

from secureboard.core.domain_types import UserId
from secureboard.core.errors import ErrorContext, InvalidIdentifierError

_DIGITS = re.compile(r"\+?[0-9]{1,32}")
# Largest value a SQLite INTEGER column can bind
_MAX_IDENTIFIER = 2 ** 63 - 1


def parse_identifier(value: object) -> UserId:
    """Parse a submitted id into a positive UserId or raise InvalidIdentifierError."""
    parsed = _coerce(value)
    if parsed is None or not 1 <= parsed <= _MAX_IDENTIFIER:
        raise InvalidIdentifierError(
            ErrorContext(field_name="id", debug_info={"type": type(value).__name__}),
        )
    return UserId(parsed)


def _coerce(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if _DIGITS.fullmatch(text):
            return int(text)
    return None
