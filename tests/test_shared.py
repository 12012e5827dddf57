"""Tests for shared utilities."""

from unittest.mock import patch

from cvstudio.shared import (
    export_filename,
    format_prompt,
    load_prompt,
    sanitize_for_xml,
)


class TestSanitizeForXml:
    def test_invalid_xml_chars_are_removed(self):
        assert sanitize_for_xml("a\x00b\x0bc\x1fd") == "abcd"

    def test_whitespace_and_bullets_are_kept(self):
        text = "• one\n• two\tthree"
        assert sanitize_for_xml(text) == text

    def test_none_becomes_empty(self):
        assert sanitize_for_xml(None) == ""


class TestExportFilename:
    def test_whitespace_runs_become_single_underscore(self):
        assert export_filename("Jane  Doe", "docx") == "Jane_Doe_CV.docx"

    def test_suffix_dot_is_optional(self):
        assert export_filename("Jane Doe", ".html") == "Jane_Doe_CV.html"

    def test_empty_name(self):
        assert export_filename("", "html") == "_CV.html"


class TestPromptLoading:
    def test_all_assistant_prompts_are_packaged(self):
        for name in ("enhance_text", "generate_summary", "suggest_skills", "analyze_job_match", "tailor_cv"):
            assert load_prompt(name), name

    def test_missing_prompt_returns_none(self):
        assert load_prompt("does_not_exist") is None
        assert format_prompt("does_not_exist") is None

    def test_format_prompt_fills_variables(self):
        prompt = format_prompt("suggest_skills", job_title="Data Engineer")
        assert "Data Engineer" in prompt
        # Doubled braces in the template come out as literal JSON braces
        assert '{"skills":' in prompt

    def test_format_prompt_missing_variable_returns_none(self):
        assert format_prompt("suggest_skills") is None

    def test_bad_template_returns_none(self):
        with patch("cvstudio.shared.load_prompt", return_value="unbalanced {"):
            assert format_prompt("anything") is None
