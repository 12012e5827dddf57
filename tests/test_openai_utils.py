"""Tests for JSON extraction from model output."""

from cvstudio.assistant.openai_utils import extract_json, strip_markdown_fences


class TestStripMarkdownFences:
    def test_json_fence(self):
        assert strip_markdown_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_markdown_fences("```\n[1]\n```") == "[1]"

    def test_no_fence(self):
        assert strip_markdown_fences('  {"a": 1} ') == '{"a": 1}'


class TestExtractJson:
    def test_pure_object(self):
        assert extract_json('{"score": 5}') == {"score": 5}

    def test_pure_array(self):
        assert extract_json('["a", "b"]') == ["a", "b"]

    def test_fenced(self):
        assert extract_json('```json\n{"skills": ["Go"]}\n```') == {"skills": ["Go"]}

    def test_commentary_around_object(self):
        assert extract_json('Here you go: {"summary": "x"} Hope it helps!') == {"summary": "x"}

    def test_commentary_around_array(self):
        assert extract_json('Skills: ["Go", "Rust"].') == ["Go", "Rust"]

    def test_garbage_returns_none(self):
        assert extract_json("no json here") is None
        assert extract_json("{broken") is None

    def test_non_string_returns_none(self):
        assert extract_json(None) is None
        assert extract_json(42) is None
