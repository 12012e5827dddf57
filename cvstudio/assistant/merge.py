"""
Apply assistant results to the document model.

All functions are pure: they take the current document and return a new
one. Nothing here talks to the text service.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from ..edits import new_id, update_item, update_personal_info
from ..model import CVDocument, SkillEntry, SkillLevel


@dataclass(frozen=True)
class ExperienceRewrite:
    id: str
    description: str


@dataclass(frozen=True)
class Tailoring:
    summary: str
    experience: Tuple[ExperienceRewrite, ...] = ()


@dataclass(frozen=True)
class MatchAnalysis:
    score: float
    missing_keywords: Tuple[str, ...] = ()
    improvements: Tuple[str, ...] = ()


def apply_summary(doc: CVDocument, summary: str) -> CVDocument:
    return update_personal_info(doc, summary=summary)


def apply_enhanced_description(doc: CVDocument, experience_id: str, description: str) -> CVDocument:
    return update_item(doc, "experience", experience_id, description=description)


def merge_suggested_skills(
    doc: CVDocument,
    names: Iterable[str],
    level: SkillLevel = SkillLevel.Expert,
) -> CVDocument:
    """
    Append suggested skills that are not already present.

    Names are compared case-insensitively against the existing skills and
    against earlier suggestions in the same batch. Existing skills (and
    their ids) are left as they are.
    """
    seen = {s.name.strip().lower() for s in doc.skills}
    added = []
    for name in names:
        name = name.strip()
        key = name.lower()
        if not name or key in seen:
            continue
        seen.add(key)
        added.append(SkillEntry(id=new_id(), name=name, level=level))
    if not added:
        return doc
    return replace(doc, skills=doc.skills + tuple(added))


def apply_tailoring(doc: CVDocument, tailoring: Tailoring) -> CVDocument:
    """
    Merge a tailoring result.

    An empty summary keeps the current one. Rewrites for experience ids
    that are not in the document are skipped.
    """
    rewrites = {r.id: r.description for r in tailoring.experience}
    experience = tuple(
        replace(exp, description=rewrites[exp.id]) if exp.id in rewrites else exp
        for exp in doc.experience
    )
    summary = tailoring.summary or doc.personal_info.summary
    return replace(
        doc,
        personal_info=replace(doc.personal_info, summary=summary),
        experience=experience,
    )


def experience_context(doc: CVDocument, limit: Optional[int] = None) -> str:
    """"role at company" pairs, comma-joined and optionally truncated."""
    text = ", ".join(f"{e.role} at {e.company}" for e in doc.experience)
    return text[:limit] if limit is not None else text


def cv_plain_text(doc: CVDocument) -> str:
    """Plain-text rendering of the CV used for job-match analysis."""
    info = doc.personal_info
    experience = "\n".join(f"{e.role} at {e.company}. {e.description}" for e in doc.experience)
    skills = ", ".join(s.name for s in doc.skills)
    education = ", ".join(f"{e.degree} from {e.school}" for e in doc.education)
    return (
        f"Role: {info.job_title}\n"
        f"Summary: {info.summary}\n"
        f"Experience: {experience}\n"
        f"Skills: {skills}\n"
        f"Education: {education}\n"
    )
