"""
Modern layout.

Single column: header, summary, experience, then education and skills side
by side, followed by one full-width block per custom section.
"""

from __future__ import annotations

from typing import List, Optional

from ..model import CVDocument, PersonalInfo
from .base import (
    CVLayout,
    VisualTree,
    custom_sections_with_items,
    date_range,
    external_href,
    icon,
    join_present,
    node,
    text_node,
)

_HEADING = "text-sm font-bold uppercase tracking-wider mb-4 text-slate-500"


def _contact_line(info: PersonalInfo) -> Optional[VisualTree]:
    entries = []
    for kind, value in (("mail", info.email), ("phone", info.phone), ("location", info.location)):
        if value:
            entries.append(node("div", icon(kind, "w-3.5 h-3.5"), node("span", value), cls="flex items-center gap-1.5"))
    # Links show a label instead of the raw handle
    for kind, value, label in (("linkedin", info.linkedin, "LinkedIn"), ("website", info.website, "Portfolio")):
        if value:
            link = node("a", label, href=external_href(value), target="_blank", rel="noreferrer", cls="hover:underline")
            entries.append(node("div", icon(kind, "w-3.5 h-3.5"), link, cls="flex items-center gap-1.5"))
    if not entries:
        return None
    return node("div", entries, cls="flex flex-wrap gap-4 text-sm text-slate-600")


class ModernLayout(CVLayout):
    """Single-column layout with accent-colored header and side-by-side education/skills."""

    def name(self) -> str:
        return "modern"

    def description(self) -> str:
        return "Single-column layout with accent-colored header and side-by-side education/skills"

    def render(self, doc: CVDocument) -> VisualTree:
        info = doc.personal_info
        accent = doc.theme_color

        header = node(
            "header",
            node(
                "div",
                text_node("h1", info.full_name, "text-4xl font-bold uppercase tracking-tight mb-2", f"color: {accent}"),
                text_node("p", info.job_title, "text-xl font-medium text-slate-600 mb-4"),
                _contact_line(info),
            ),
            cls="border-b-2 pb-6 flex items-start justify-between",
            style=f"border-color: {accent}",
        )

        return node(
            "div",
            header,
            self._summary(info),
            self._experience(doc),
            self._education_and_skills(doc),
            self._custom_sections(doc),
            cls="p-8 md:p-12 flex flex-col gap-6 print:p-0",
            data_layout=self.name(),
        )

    def _summary(self, info: PersonalInfo) -> Optional[VisualTree]:
        if not info.summary:
            return None
        return node(
            "section",
            node("h3", "Professional Summary", cls="text-sm font-bold uppercase tracking-wider mb-3 text-slate-500"),
            node("p", info.summary, cls="text-sm leading-relaxed text-slate-700"),
            data_section="summary",
        )

    def _experience(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.experience:
            return None
        entries = [
            node(
                "div",
                node(
                    "div",
                    text_node("h4", exp.role, "font-bold text-slate-800"),
                    text_node("span", date_range(exp.start_date, exp.end_date, exp.is_current), "text-xs font-medium text-slate-500"),
                    cls="flex justify-between items-baseline mb-1",
                ),
                node(
                    "div",
                    text_node("span", exp.company, "text-sm font-semibold text-slate-700"),
                    text_node("span", exp.location, "text-xs text-slate-500"),
                    cls="flex justify-between items-center mb-2",
                ),
                text_node("div", exp.description, "text-sm text-slate-600 leading-relaxed whitespace-pre-wrap"),
                cls="break-inside-avoid",
                data_id=exp.id,
            )
            for exp in doc.experience
        ]
        return node(
            "section",
            node("h3", "Experience", cls=_HEADING),
            node("div", entries, cls="space-y-6"),
            data_section="experience",
        )

    def _education_and_skills(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.education and not doc.skills:
            return None

        education = None
        if doc.education:
            entries = [
                node(
                    "div",
                    text_node("h4", edu.school, "font-bold text-slate-800"),
                    text_node("p", join_present((edu.degree, edu.field), ", "), "text-sm text-slate-700"),
                    text_node("p", date_range(edu.start_date, edu.end_date, edu.is_current), "text-xs text-slate-500 mt-0.5"),
                    data_id=edu.id,
                )
                for edu in doc.education
            ]
            education = node(
                "section",
                node("h3", "Education", cls=_HEADING),
                node("div", entries, cls="space-y-4"),
                cls="break-inside-avoid",
                data_section="education",
            )

        skills = None
        if doc.skills:
            chips = [
                node(
                    "span",
                    skill.name,
                    cls="px-2 py-1 bg-slate-100 text-slate-700 text-xs font-medium rounded print:border print:border-slate-200",
                    data_id=skill.id,
                )
                for skill in doc.skills
            ]
            skills = node(
                "section",
                node("h3", "Skills", cls=_HEADING),
                node("div", chips, cls="flex flex-wrap gap-2"),
                cls="break-inside-avoid",
                data_section="skills",
            )

        return node("div", education, skills, cls="grid grid-cols-1 md:grid-cols-2 gap-8 print:grid-cols-2")

    def _custom_sections(self, doc: CVDocument) -> List[VisualTree]:
        blocks = []
        for section in custom_sections_with_items(doc):
            items = []
            for item in section.items:
                title_row = None
                if item.title or item.subtitle:
                    title_row = node(
                        "div",
                        text_node("h4", item.title, "font-bold text-slate-800"),
                        text_node("span", item.subtitle, "text-xs font-medium text-slate-500"),
                        cls="flex justify-between items-baseline mb-1",
                    )
                items.append(
                    node(
                        "div",
                        title_row,
                        text_node("p", item.description, "text-sm text-slate-600 leading-relaxed whitespace-pre-wrap"),
                        data_id=item.id,
                    )
                )
            blocks.append(
                node(
                    "section",
                    text_node("h3", section.title, _HEADING),
                    node("div", items, cls="space-y-4"),
                    cls="break-inside-avoid",
                    data_section="custom",
                    data_id=section.id,
                )
            )
        return blocks
