"""
Writing assistant: prompt building and response decoding for the five
assistant features (text enhancement, summary generation, skill
suggestions, job-match analysis and CV tailoring).

WritingAssistant only talks to the text service and returns decoded
results. AssistantActions applies those results to a DocumentSession; the
session is only touched after a response has been fully validated.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from ..errors import AssistantError, ModelIntegrityError, PayloadValidationError
from ..logging_utils import LOG, fmt_issues
from ..model import CVDocument
from ..session import DocumentSession
from ..shared import format_prompt
from .merge import (
    ExperienceRewrite,
    MatchAnalysis,
    Tailoring,
    apply_enhanced_description,
    apply_summary,
    apply_tailoring,
    cv_plain_text,
    experience_context,
    merge_suggested_skills,
)
from .openai_utils import extract_json
from .payload_verifier import (
    MatchAnalysisVerifier,
    PayloadVerifier,
    SkillSuggestionVerifier,
    TailoringVerifier,
)
from .text_service import OpenAITextService, TextService

# Character budgets for text sent to the service
MATCH_JOB_DESCRIPTION_LIMIT = 2000
MATCH_CV_TEXT_LIMIT = 2000
TAILOR_JOB_DESCRIPTION_LIMIT = 1500
EXPERIENCE_CONTEXT_LIMIT = 1000

ENHANCE_CONTEXT = "Resume Job Description. Make it result-oriented."


class WritingAssistant:
    """Builds prompts, calls the text service and validates its answers."""

    def __init__(self, service: Optional[TextService] = None):
        self._service = service or OpenAITextService()

    def _prompt(self, name: str, **kwargs: Any) -> str:
        prompt = format_prompt(name, **kwargs)
        if prompt is None:
            raise AssistantError(f"prompt template '{name}' is unavailable")
        return prompt

    def _structured(self, operation: str, prompt: str, verifier: PayloadVerifier) -> Any:
        raw = self._service.complete(prompt, json_output=True)
        payload = extract_json(raw)
        if payload is None:
            raise PayloadValidationError(operation)
        result = verifier.verify(payload)
        if not result.ok:
            LOG.warning("%s: rejected response (%s)", operation, fmt_issues(result.errors, result.warnings))
            raise PayloadValidationError(operation, result.errors)
        return payload

    def enhance_text(self, text: str, context: Optional[str] = None) -> str:
        """Rewrite `text` for impact. An empty answer returns `text` unchanged."""
        prompt = self._prompt(
            "enhance_text",
            text=text,
            context=f"Context: {context}" if context else "",
        )
        return self._service.complete(prompt) or text

    def generate_summary(self, job_title: str, skills: List[str], experience: str) -> str:
        prompt = self._prompt(
            "generate_summary",
            job_title=job_title,
            skills=", ".join(skills),
            experience=experience,
        )
        summary = self._service.complete(prompt)
        if not summary:
            raise AssistantError("generate summary: empty response")
        return summary

    def suggest_skills(self, job_title: str) -> List[str]:
        prompt = self._prompt("suggest_skills", job_title=job_title)
        raw = self._service.complete(prompt, json_output=True)
        payload = extract_json(raw)
        # JSON mode answers with an object; accept a bare array as well
        if isinstance(payload, dict) and "skills" in payload:
            payload = payload["skills"]
        if payload is None:
            raise PayloadValidationError("suggest skills")
        result = SkillSuggestionVerifier().verify(payload)
        if not result.ok:
            raise PayloadValidationError("suggest skills", result.errors)
        return list(payload)

    def analyze_job_match(self, cv_text: str, job_description: str) -> MatchAnalysis:
        prompt = self._prompt(
            "analyze_job_match",
            job_description=job_description[:MATCH_JOB_DESCRIPTION_LIMIT],
            cv_text=cv_text[:MATCH_CV_TEXT_LIMIT],
        )
        payload = self._structured("analyze job match", prompt, MatchAnalysisVerifier())
        return MatchAnalysis(
            score=payload["score"],
            missing_keywords=tuple(payload["missingKeywords"]),
            improvements=tuple(payload["improvements"]),
        )

    def tailor(self, doc: CVDocument, job_description: str) -> Tailoring:
        cv_data = {
            "summary": doc.personal_info.summary,
            "experience": [
                {"id": e.id, "role": e.role, "company": e.company, "description": e.description}
                for e in doc.experience
            ],
        }
        prompt = self._prompt(
            "tailor_cv",
            job_description=job_description[:TAILOR_JOB_DESCRIPTION_LIMIT],
            cv_data=json.dumps(cv_data, ensure_ascii=False),
        )
        payload = self._structured("tailor cv", prompt, TailoringVerifier())
        return Tailoring(
            summary=payload["summary"],
            experience=tuple(
                ExperienceRewrite(id=e["id"], description=e["description"]) for e in payload["experience"]
            ),
        )


class AssistantActions:
    """
    User-facing assistant actions bound to a session.

    Each action reads a snapshot of the current document, waits for the
    service, then applies the result to whatever document the session holds
    at that moment. If the call or the validation fails the session is
    left exactly as it was.
    """

    def __init__(self, session: DocumentSession, assistant: Optional[WritingAssistant] = None):
        self._session = session
        self._assistant = assistant or WritingAssistant()

    def generate_summary(self) -> CVDocument:
        doc = self._session.document
        summary = self._assistant.generate_summary(
            doc.personal_info.job_title,
            [s.name for s in doc.skills],
            experience_context(doc, EXPERIENCE_CONTEXT_LIMIT),
        )
        LOG.info("Summary generated for '%s'", doc.personal_info.job_title)
        return self._session.apply(apply_summary, summary)

    def enhance_description(self, experience_id: str) -> CVDocument:
        doc = self._session.document
        entry = next((e for e in doc.experience if e.id == experience_id), None)
        if entry is None:
            raise ModelIntegrityError(f"no experience entry with id '{experience_id}'")
        enhanced = self._assistant.enhance_text(entry.description, ENHANCE_CONTEXT)
        return self._session.apply(apply_enhanced_description, experience_id, enhanced)

    def suggest_skills(self) -> CVDocument:
        doc = self._session.document
        names = self._assistant.suggest_skills(doc.personal_info.job_title)
        before = len(self._session.document.skills)
        updated = self._session.apply(merge_suggested_skills, names)
        LOG.info("Added %d suggested skill(s)", len(updated.skills) - before)
        return updated

    def analyze_match(self, job_description: str) -> MatchAnalysis:
        """Score the CV against a job description; the document is not changed."""
        if not job_description:
            raise ModelIntegrityError("a job description is required")
        return self._assistant.analyze_job_match(cv_plain_text(self._session.document), job_description)

    def tailor(self, job_description: str) -> CVDocument:
        if not job_description:
            raise ModelIntegrityError("a job description is required")
        tailoring = self._assistant.tailor(self._session.document, job_description)
        LOG.info("CV tailored (%d experience rewrite(s))", len(tailoring.experience))
        return self._session.apply(apply_tailoring, tailoring)
