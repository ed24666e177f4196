"""Comment Sanitization — neutralizes markup before comments are persisted.

Invariants:
    - "&" is always escaped FIRST, so entities produced afterwards are not re-escaped
    - Only &, <, >, " are rewritten; every other character passes through untouched
    - Empty, absent or non-text content raises EmptyContentError before any insert

Design Decisions:
    - Explicit ordered table over markupsafe.escape: the stored form must match the
      frontend's expectations exactly (markupsafe also rewrites single quotes)
    - No Unicode normalization or zero-width stripping: text is stored as typed
"""

from secureboard.core.errors import EmptyContentError, ErrorContext

# Order matters: "&" must come first.
ESCAPE_SEQUENCE: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def escape_markup(text: str) -> str:
    """Replace markup-significant characters with named entities."""
    for char, entity in ESCAPE_SEQUENCE:
        text = text.replace(char, entity)
    return text


def sanitize_comment(value: object) -> str:
    """Validate and escape submitted comment content."""
    if not isinstance(value, str) or len(value) == 0:
        raise EmptyContentError(
            ErrorContext(field_name="content", debug_info={"type": type(value).__name__}),
        )
    return escape_markup(value)
