"""
Classic layout.

Centered serif column with underlined section headings. Dates sit to the
right of each entry title and skills collapse into one bullet-joined line.
"""

from __future__ import annotations

from typing import List, Optional

from ..model import CVDocument, PersonalInfo
from .base import (
    CVLayout,
    VisualTree,
    custom_sections_with_items,
    date_range,
    join_present,
    node,
    text_node,
)

_HEADING = "font-bold border-b border-slate-800 mb-4 uppercase text-sm tracking-widest"
_TITLE_ROW = "flex justify-between font-bold text-sm"

SKILL_SEPARATOR = " • "


def _contact_line(info: PersonalInfo) -> Optional[VisualTree]:
    # Links are shown by label; each field is dropped individually when empty
    parts = [
        info.email,
        info.phone,
        info.location,
        "LinkedIn" if info.linkedin else "",
        "Portfolio" if info.website else "",
    ]
    text = join_present(parts, SKILL_SEPARATOR)
    return text_node("div", text, "flex flex-wrap justify-center gap-4 text-xs text-slate-600")


class ClassicLayout(CVLayout):
    """Centered serif layout with underlined headings and right-aligned dates."""

    def name(self) -> str:
        return "classic"

    def description(self) -> str:
        return "Centered serif layout with underlined headings and right-aligned dates"

    def render(self, doc: CVDocument) -> VisualTree:
        info = doc.personal_info
        header = node(
            "header",
            text_node("h1", info.full_name, "text-3xl font-bold mb-2 tracking-wide"),
            text_node("p", info.job_title, "text-lg italic text-slate-700 mb-3"),
            _contact_line(info),
            cls="text-center border-b border-slate-300 pb-6 mb-6",
        )
        return node(
            "div",
            header,
            self._summary(info),
            self._experience(doc),
            self._education(doc),
            self._skills(doc),
            self._custom_sections(doc),
            cls="p-10 md:p-14 font-serif text-slate-900 max-w-3xl mx-auto print:p-0",
            data_layout=self.name(),
        )

    def _summary(self, info: PersonalInfo) -> Optional[VisualTree]:
        if not info.summary:
            return None
        return node(
            "section",
            node("h3", "Summary", cls="font-bold border-b border-slate-800 mb-3 uppercase text-sm tracking-widest"),
            node("p", info.summary, cls="text-sm leading-relaxed text-justify"),
            cls="mb-6",
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
                    text_node("span", join_present((exp.company, exp.location), ", ")),
                    text_node("span", date_range(exp.start_date, exp.end_date, exp.is_current)),
                    cls=_TITLE_ROW,
                ),
                text_node("div", exp.role, "italic text-sm mb-1"),
                text_node("div", exp.description, "text-sm leading-relaxed whitespace-pre-wrap"),
                cls="break-inside-avoid",
                data_id=exp.id,
            )
            for exp in doc.experience
        ]
        return node(
            "section",
            node("h3", "Experience", cls=_HEADING),
            node("div", entries, cls="space-y-5"),
            cls="mb-6",
            data_section="experience",
        )

    def _education(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.education:
            return None
        entries = [
            node(
                "div",
                node(
                    "div",
                    text_node("span", join_present((edu.school, edu.location), ", ")),
                    text_node("span", date_range(edu.start_date, edu.end_date, edu.is_current)),
                    cls=_TITLE_ROW,
                ),
                text_node("div", join_present((edu.degree, edu.field), " in "), "text-sm"),
                data_id=edu.id,
            )
            for edu in doc.education
        ]
        return node(
            "section",
            node("h3", "Education", cls=_HEADING),
            node("div", entries, cls="space-y-3"),
            cls="mb-6 break-inside-avoid",
            data_section="education",
        )

    def _skills(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.skills:
            return None
        return node(
            "section",
            node("h3", "Skills", cls="font-bold border-b border-slate-800 mb-3 uppercase text-sm tracking-widest"),
            node("p", join_present((s.name for s in doc.skills), SKILL_SEPARATOR), cls="text-sm leading-relaxed"),
            cls="break-inside-avoid mb-6",
            data_section="skills",
        )

    def _custom_sections(self, doc: CVDocument) -> List[VisualTree]:
        blocks = []
        for section in custom_sections_with_items(doc):
            items = []
            for item in section.items:
                title_row = None
                if item.title or item.subtitle:
                    title_row = node(
                        "div",
                        text_node("span", item.title),
                        text_node("span", item.subtitle),
                        cls=_TITLE_ROW,
                    )
                items.append(
                    node(
                        "div",
                        title_row,
                        text_node("div", item.description, "text-sm leading-relaxed whitespace-pre-wrap mt-1"),
                        data_id=item.id,
                    )
                )
            blocks.append(
                node(
                    "section",
                    text_node("h3", section.title, _HEADING),
                    node("div", items, cls="space-y-4"),
                    cls="mb-6 break-inside-avoid",
                    data_section="custom",
                    data_id=section.id,
                )
            )
        return blocks
