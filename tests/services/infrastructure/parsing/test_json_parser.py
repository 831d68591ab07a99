"""
Tests for storyreel.services.infrastructure.parsing.json_parser
"""

import pytest

from storyreel.core import EmptyResponseError, MalformedResponseError
from storyreel.services.infrastructure.parsing.json_parser import (
    looks_truncated_json,
    parse_json_object,
    strip_markdown_fences,
)


class TestStripMarkdownFences:
    def test_json_fence(self):
        assert strip_markdown_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_text_untouched(self):
        assert strip_markdown_fences('  {"a": 1}  ') == '{"a": 1}'


class TestParseJsonObject:
    def test_bare_object(self):
        assert parse_json_object('{"title": "แมว", "scenes": []}') == {"title": "แมว", "scenes": []}

    def test_fenced_object(self):
        assert parse_json_object('```json\n{"mood": "Calm"}\n```') == {"mood": "Calm"}

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_empty(self, text):
        with pytest.raises(EmptyResponseError, match="Failed to generate story script."):
            parse_json_object(text)

    def test_invalid_json(self):
        with pytest.raises(MalformedResponseError, match="not valid JSON"):
            parse_json_object("The story is about a cat.")

    def test_truncated_hint(self):
        with pytest.raises(MalformedResponseError, match="truncated"):
            parse_json_object('{"title": "แมว", "scenes": [{"sceneNumber": 1')

    def test_array_rejected(self):
        with pytest.raises(MalformedResponseError, match="JSON object"):
            parse_json_object("[1, 2, 3]")


class TestLooksTruncated:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ('{"a": 1}', False),
            ('{"a": [1, 2', True),
            ('{"a": "unterminated', True),
            ('{"a": "brace } inside string"}', False),
            ('{"a": "escaped \\" quote"}', False),
            ("", False),
        ],
    )
    def test_heuristic(self, text, expected):
        assert looks_truncated_json(text) is expected
