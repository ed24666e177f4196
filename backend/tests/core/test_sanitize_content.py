"""Comment Sanitization — escaping order, injection payloads, empty-content rejection.

Tests:
    - <script> payload is fully neutralized
    - "&" escaped first: "&<" → "&amp;&lt;", never "&amp;lt;"
    - Text without markup characters passes through unchanged
    - Absent, empty and non-text content raise EmptyContentError
"""

import pytest

from secureboard.core.errors import EmptyContentError
from secureboard.core.sanitize_content import (
    ESCAPE_SEQUENCE, escape_markup, sanitize_comment,
)


def test_script_tag_is_neutralized():
    result = sanitize_comment('<script>alert("x")</script>')
    assert result == "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;"
    assert "<" not in result
    assert ">" not in result
    assert '"' not in result


def test_ampersand_escaped_before_other_characters():
    assert escape_markup("&<") == "&amp;&lt;"


def test_bold_tag_escaped():
    assert sanitize_comment("<b>hi</b>") == "&lt;b&gt;hi&lt;/b&gt;"


def test_each_character_maps_to_named_entity():
    assert escape_markup("&") == "&amp;"
    assert escape_markup("<") == "&lt;"
    assert escape_markup(">") == "&gt;"
    assert escape_markup('"') == "&quot;"


def test_escape_order_starts_with_ampersand():
    assert ESCAPE_SEQUENCE[0] == ("&", "&amp;")


@pytest.mark.parametrize("text", [
    "hello world",
    "it's fine",
    "café ☕ 日本語",
    "zero\u200bwidth",
    "   ",
])
def test_safe_text_is_unchanged(text):
    assert sanitize_comment(text) == text


def test_sanitizing_safe_output_again_is_noop():
    once = sanitize_comment("plain comment 123")
    assert sanitize_comment(once) == once


def test_existing_entities_are_escaped_literally():
    # Stored text is displayed as typed; "&amp;" typed by a user stays visible
    assert escape_markup("&amp;") == "&amp;amp;"


@pytest.mark.parametrize("value", [None, "", 0, 5, [], {"content": "x"}, b"bytes"])
def test_rejects_empty_or_non_text_content(value):
    with pytest.raises(EmptyContentError) as exc_info:
        sanitize_comment(value)
    assert exc_info.value.message == "Comment cannot be empty"
    assert exc_info.value.http_status == 400
