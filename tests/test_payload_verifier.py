"""Tests for assistant payload verifiers."""

import pytest

from cvstudio.assistant.payload_verifier import (
    MatchAnalysisVerifier,
    SkillSuggestionVerifier,
    TailoringVerifier,
)


class TestSkillSuggestionVerifier:
    def test_string_list_passes(self):
        assert SkillSuggestionVerifier().verify(["Go", "Rust"]).ok

    def test_empty_list_passes(self):
        assert SkillSuggestionVerifier().verify([]).ok

    @pytest.mark.parametrize("payload", [{"skills": []}, "Go", [1], None])
    def test_other_shapes_fail(self, payload):
        assert not SkillSuggestionVerifier().verify(payload).ok


class TestMatchAnalysisVerifier:
    def test_valid_payload(self):
        result = MatchAnalysisVerifier().verify({"score": 80, "missingKeywords": ["K8s"], "improvements": []})
        assert result.ok
        assert result.errors == []

    def test_missing_fields_are_listed(self):
        result = MatchAnalysisVerifier().verify({"score": 80})
        assert not result.ok
        assert "missing required field: missingKeywords" in result.errors
        assert "missing required field: improvements" in result.errors

    @pytest.mark.parametrize("score", [-1, 101, "80", True, None])
    def test_bad_scores(self, score):
        result = MatchAnalysisVerifier().verify({"score": score, "missingKeywords": [], "improvements": []})
        assert not result.ok

    def test_float_score_in_range(self):
        assert MatchAnalysisVerifier().verify({"score": 99.5, "missingKeywords": [], "improvements": []}).ok

    def test_non_object(self):
        assert MatchAnalysisVerifier().verify([80]).errors == ["match analysis must be an object"]


class TestTailoringVerifier:
    def test_valid_payload(self):
        payload = {"summary": "S", "experience": [{"id": "1", "description": "D"}]}
        assert TailoringVerifier().verify(payload).ok

    def test_extra_fields_are_tolerated(self):
        payload = {"summary": "S", "experience": [{"id": "1", "description": "D", "role": "R"}], "notes": "x"}
        assert TailoringVerifier().verify(payload).ok

    def test_entry_errors_are_indexed(self):
        payload = {"summary": "S", "experience": [{"id": "1", "description": "D"}, {"id": 2}]}
        result = TailoringVerifier().verify(payload)
        assert result.errors == [
            "experience[1].id must be a string",
            "experience[1] missing required field: description",
        ]

    def test_missing_summary(self):
        assert "missing required field: summary" in TailoringVerifier().verify({"experience": []}).errors

    def test_experience_must_be_list(self):
        assert not TailoringVerifier().verify({"summary": "S", "experience": {}}).ok
