"""
CV document model.

All records are frozen dataclasses and every collection is a tuple, so a
CVDocument is an immutable value: edits build a new root (see edits.py)
and readers always observe a complete snapshot.

The persisted form is the camelCase JSON mapping produced by
document_to_dict(); document_from_dict() restores it on top of the seed
document so that saves written by older versions still load.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from .errors import ModelIntegrityError
from .logging_utils import LOG

DEFAULT_THEME_COLOR = "#2563eb"


class SkillLevel(str, Enum):
    Beginner = "Beginner"
    Intermediate = "Intermediate"
    Expert = "Expert"


class TemplateId(str, Enum):
    """Built-in layout discriminators."""
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    CREATIVE = "creative"


# ------------------------- Records -------------------------

@dataclass(frozen=True)
class PersonalInfo:
    full_name: str = ""
    job_title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    summary: str = ""
    photo: Optional[str] = None  # data URI, already base64-encoded


@dataclass(frozen=True)
class ExperienceEntry:
    """One role. `end_date` is ignored for display while `is_current` is set."""
    id: str
    company: str = ""
    role: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""


@dataclass(frozen=True)
class EducationEntry:
    id: str
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    location: str = ""


@dataclass(frozen=True)
class SkillEntry:
    id: str
    name: str = ""
    level: SkillLevel = SkillLevel.Expert


@dataclass(frozen=True)
class Project:
    """Stored and persisted, but not rendered by any layout or exporter."""
    id: str
    name: str = ""
    description: str = ""
    link: str = ""


@dataclass(frozen=True)
class CustomItem:
    id: str
    title: str = ""
    subtitle: str = ""
    description: str = ""


@dataclass(frozen=True)
class CustomSection:
    """User-titled section such as "Certifications" or "References"."""
    id: str
    title: str = ""
    items: Tuple[CustomItem, ...] = ()


@dataclass(frozen=True)
class CVDocument:
    """
    Root of the document model.

    `template_id` is kept as a plain string: values written by a newer
    version are preserved and the renderer falls back to the modern layout.
    """
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[SkillEntry, ...] = ()
    projects: Tuple[Project, ...] = ()
    custom_sections: Tuple[CustomSection, ...] = ()
    theme_color: str = DEFAULT_THEME_COLOR
    template_id: str = TemplateId.MODERN.value


SEED_DOCUMENT = CVDocument(
    personal_info=PersonalInfo(
        full_name="Alex Morgan",
        job_title="Senior Software Engineer",
        email="alex.morgan@example.com",
        phone="+1 (555) 123-4567",
        location="San Francisco, CA",
        website="alexmorgan.dev",
        linkedin="linkedin.com/in/alexmorgan",
        summary=(
            "Passionate Senior Software Engineer with over 6 years of experience in building "
            "scalable web applications. Expert in React, TypeScript, and Cloud Architecture. "
            "Proven track record of leading teams and delivering high-impact projects."
        ),
    ),
    experience=(
        ExperienceEntry(
            id="1",
            company="TechNova Solutions",
            role="Senior Frontend Developer",
            start_date="2021-03",
            end_date="",
            is_current=True,
            location="San Francisco, CA",
            description=(
                "• Led the migration of a legacy angular app to React 18, improving load times by 40%.\n"
                "• Mentored junior developers and established code quality standards.\n"
                "• Implemented a new design system using Tailwind CSS used across 5 different products."
            ),
        ),
        ExperienceEntry(
            id="2",
            company="WebFlow Inc.",
            role="Software Engineer",
            start_date="2018-06",
            end_date="2021-02",
            is_current=False,
            location="Austin, TX",
            description=(
                "• Developed and maintained customer-facing e-commerce platforms.\n"
                "• Integrated third-party payment gateways (Stripe, PayPal).\n"
                "• Collaborated with UX designers to implement responsive designs."
            ),
        ),
    ),
    education=(
        EducationEntry(
            id="1",
            school="University of Texas at Austin",
            degree="Bachelor of Science",
            field="Computer Science",
            start_date="2014-09",
            end_date="2018-05",
            is_current=False,
            location="Austin, TX",
        ),
    ),
    skills=(
        SkillEntry(id="1", name="React", level=SkillLevel.Expert),
        SkillEntry(id="2", name="TypeScript", level=SkillLevel.Expert),
        SkillEntry(id="3", name="Node.js", level=SkillLevel.Intermediate),
        SkillEntry(id="4", name="AWS", level=SkillLevel.Intermediate),
    ),
    projects=(),
    custom_sections=(),
    theme_color=DEFAULT_THEME_COLOR,
    template_id=TemplateId.MODERN.value,
)


# ------------------------- Persistence boundary -------------------------

def _str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _records(data: Dict[str, Any], key: str) -> Iterable[Dict[str, Any]]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ModelIntegrityError(f"{key} must be an array")
    for idx, item in enumerate(value):
        if not isinstance(item, dict):
            raise ModelIntegrityError(f"{key}[{idx}] must be an object")
        yield item


def _skill_level(value: Any) -> SkillLevel:
    try:
        return SkillLevel(value)
    except ValueError:
        LOG.debug("Unknown skill level %r; using Expert", value)
        return SkillLevel.Expert


def _personal_info_from_dict(data: Dict[str, Any]) -> PersonalInfo:
    photo = data.get("photo")
    return PersonalInfo(
        full_name=_str(data, "fullName"),
        job_title=_str(data, "jobTitle"),
        email=_str(data, "email"),
        phone=_str(data, "phone"),
        location=_str(data, "location"),
        website=_str(data, "website"),
        linkedin=_str(data, "linkedin"),
        summary=_str(data, "summary"),
        photo=photo if isinstance(photo, str) and photo else None,
    )


def document_from_dict(data: Dict[str, Any], base: CVDocument = SEED_DOCUMENT) -> CVDocument:
    """
    Build a CVDocument from its persisted camelCase mapping.

    Top-level keys missing from `data` are taken from `base`; fields missing
    inside a record default to empty values.

    Raises:
        ModelIntegrityError: If the mapping has the wrong shape
    """
    if not isinstance(data, dict):
        raise ModelIntegrityError("CV data must be an object")

    personal_info = base.personal_info
    if "personalInfo" in data:
        info = data["personalInfo"]
        if not isinstance(info, dict):
            raise ModelIntegrityError("personalInfo must be an object")
        personal_info = _personal_info_from_dict(info)

    experience = base.experience
    if "experience" in data:
        experience = tuple(
            ExperienceEntry(
                id=_str(e, "id"),
                company=_str(e, "company"),
                role=_str(e, "role"),
                location=_str(e, "location"),
                start_date=_str(e, "startDate"),
                end_date=_str(e, "endDate"),
                is_current=bool(e.get("isCurrent", False)),
                description=_str(e, "description"),
            )
            for e in _records(data, "experience")
        )

    education = base.education
    if "education" in data:
        education = tuple(
            EducationEntry(
                id=_str(e, "id"),
                school=_str(e, "school"),
                degree=_str(e, "degree"),
                field=_str(e, "field"),
                start_date=_str(e, "startDate"),
                end_date=_str(e, "endDate"),
                is_current=bool(e.get("isCurrent", False)),
                location=_str(e, "location"),
            )
            for e in _records(data, "education")
        )

    skills = base.skills
    if "skills" in data:
        skills = tuple(
            SkillEntry(id=_str(s, "id"), name=_str(s, "name"), level=_skill_level(s.get("level")))
            for s in _records(data, "skills")
        )

    projects = base.projects
    if "projects" in data:
        projects = tuple(
            Project(
                id=_str(p, "id"),
                name=_str(p, "name"),
                description=_str(p, "description"),
                link=_str(p, "link"),
            )
            for p in _records(data, "projects")
        )

    custom_sections = base.custom_sections
    if "customSections" in data:
        sections = []
        for s in _records(data, "customSections"):
            items = tuple(
                CustomItem(
                    id=_str(i, "id"),
                    title=_str(i, "title"),
                    subtitle=_str(i, "subtitle"),
                    description=_str(i, "description"),
                )
                for i in _records(s, "items")
            )
            sections.append(CustomSection(id=_str(s, "id"), title=_str(s, "title"), items=items))
        custom_sections = tuple(sections)

    return CVDocument(
        personal_info=personal_info,
        experience=experience,
        education=education,
        skills=skills,
        projects=projects,
        custom_sections=custom_sections,
        theme_color=_str(data, "themeColor") if "themeColor" in data else base.theme_color,
        template_id=_str(data, "templateId") if "templateId" in data else base.template_id,
    )


def document_to_dict(doc: CVDocument) -> Dict[str, Any]:
    """Inverse of document_from_dict()."""
    info = doc.personal_info
    personal: Dict[str, Any] = {
        "fullName": info.full_name,
        "jobTitle": info.job_title,
        "email": info.email,
        "phone": info.phone,
        "location": info.location,
        "website": info.website,
        "linkedin": info.linkedin,
        "summary": info.summary,
    }
    if info.photo:
        personal["photo"] = info.photo

    return {
        "personalInfo": personal,
        "experience": [
            {
                "id": e.id,
                "company": e.company,
                "role": e.role,
                "startDate": e.start_date,
                "endDate": e.end_date,
                "isCurrent": e.is_current,
                "description": e.description,
                "location": e.location,
            }
            for e in doc.experience
        ],
        "education": [
            {
                "id": e.id,
                "school": e.school,
                "degree": e.degree,
                "field": e.field,
                "startDate": e.start_date,
                "endDate": e.end_date,
                "isCurrent": e.is_current,
                "location": e.location,
            }
            for e in doc.education
        ],
        "skills": [{"id": s.id, "name": s.name, "level": s.level.value} for s in doc.skills],
        "projects": [
            {"id": p.id, "name": p.name, "description": p.description, "link": p.link}
            for p in doc.projects
        ],
        "customSections": [
            {
                "id": s.id,
                "title": s.title,
                "items": [
                    {"id": i.id, "title": i.title, "subtitle": i.subtitle, "description": i.description}
                    for i in s.items
                ],
            }
            for s in doc.custom_sections
        ],
        "themeColor": doc.theme_color,
        "templateId": doc.template_id,
    }


def load_document(path: Path) -> CVDocument:
    """
    Load a persisted CV JSON file.

    Raises:
        ModelIntegrityError: If the file is unreadable or malformed
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ModelIntegrityError(f"cannot load CV data from {path}: {e}") from e
    return document_from_dict(data)


def save_document(doc: CVDocument, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(document_to_dict(doc), f, ensure_ascii=False, indent=2)
    return path
