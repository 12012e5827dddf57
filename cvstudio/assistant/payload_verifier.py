"""
Shape checks for structured assistant responses.

Every structured payload is verified before any of it touches the
document model; a failed check rejects the whole response.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, List

from ..shared import VerificationResult


class PayloadVerifier(ABC):
    """Abstract base class for assistant payload verifiers."""

    @abstractmethod
    def verify(self, payload: Any) -> VerificationResult:
        """
        Check a decoded JSON payload.

        Returns:
            VerificationResult with ok=False and the problems found
        """
        ...


def _check_string_list(value: Any, label: str, errs: List[str]) -> None:
    if not isinstance(value, list):
        errs.append(f"{label} must be an array")
        return
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            errs.append(f"{label}[{idx}] must be a string")


class SkillSuggestionVerifier(PayloadVerifier):
    """Expects an array of skill names."""

    def verify(self, payload: Any) -> VerificationResult:
        errs: List[str] = []
        _check_string_list(payload, "skills", errs)
        return VerificationResult(ok=not errs, errors=errs, warnings=[])


class MatchAnalysisVerifier(PayloadVerifier):
    """Expects {score: 0-100, missingKeywords: [str], improvements: [str]}."""

    def verify(self, payload: Any) -> VerificationResult:
        errs: List[str] = []
        warns: List[str] = []
        if not isinstance(payload, dict):
            return VerificationResult(ok=False, errors=["match analysis must be an object"], warnings=[])

        for key in ("score", "missingKeywords", "improvements"):
            if key not in payload:
                errs.append(f"missing required field: {key}")

        score = payload.get("score")
        if "score" in payload:
            if isinstance(score, bool) or not isinstance(score, Real):
                errs.append("score must be a number")
            elif not 0 <= score <= 100:
                errs.append("score must be between 0 and 100")

        if "missingKeywords" in payload:
            _check_string_list(payload["missingKeywords"], "missingKeywords", errs)
        if "improvements" in payload:
            _check_string_list(payload["improvements"], "improvements", errs)

        return VerificationResult(ok=not errs, errors=errs, warnings=warns)


class TailoringVerifier(PayloadVerifier):
    """Expects {summary: str, experience: [{id: str, description: str}]}."""

    def verify(self, payload: Any) -> VerificationResult:
        errs: List[str] = []
        if not isinstance(payload, dict):
            return VerificationResult(ok=False, errors=["tailoring must be an object"], warnings=[])

        if "summary" not in payload:
            errs.append("missing required field: summary")
        elif not isinstance(payload["summary"], str):
            errs.append("summary must be a string")

        experience = payload.get("experience")
        if "experience" not in payload:
            errs.append("missing required field: experience")
        elif not isinstance(experience, list):
            errs.append("experience must be an array")
        else:
            for idx, entry in enumerate(experience):
                if not isinstance(entry, dict):
                    errs.append(f"experience[{idx}] must be an object")
                    continue
                for key in ("id", "description"):
                    if key not in entry:
                        errs.append(f"experience[{idx}] missing required field: {key}")
                    elif not isinstance(entry[key], str):
                        errs.append(f"experience[{idx}].{key} must be a string")

        return VerificationResult(ok=not errs, errors=errs, warnings=[])
