"""
Minimal layout.

Two-column grid. The narrow left column carries About, Expertise (a plain
list of skill names) and Education; the wide right column is a vertically
ruled timeline of experience followed by the custom sections.
"""

from __future__ import annotations

from typing import List, Optional

from ..model import CVDocument, PersonalInfo
from .base import (
    CVLayout,
    VisualTree,
    custom_sections_with_items,
    date_range,
    node,
    text_node,
    year_range,
)

_HEADING = "text-xs font-bold uppercase text-slate-400 mb-3"
_TIMELINE_HEADING = "text-xs font-bold uppercase text-slate-400 mb-6"
_TIMELINE_DOT = "absolute -left-[30px] top-1.5 w-2 h-2 rounded-full bg-slate-300"


def _dot() -> VisualTree:
    return node("div", cls=_TIMELINE_DOT)


def _contact_block(info: PersonalInfo) -> Optional[VisualTree]:
    links = None
    if info.linkedin or info.website:
        links = node(
            "div",
            text_node("span", "LinkedIn" if info.linkedin else "", "underline decoration-slate-300"),
            text_node("span", "Portfolio" if info.website else "", "underline decoration-slate-300"),
            cls="flex gap-4 mt-1",
        )
    children = [
        text_node("span", info.email),
        text_node("span", info.phone),
        text_node("span", info.location),
        links,
    ]
    if not any(c is not None for c in children):
        return None
    return node("div", children, cls="text-xs text-slate-400 font-mono flex flex-col gap-1")


class MinimalLayout(CVLayout):
    """Two-column grid with a ruled experience timeline."""

    def name(self) -> str:
        return "minimal"

    def description(self) -> str:
        return "Two-column grid with a ruled experience timeline"

    def render(self, doc: CVDocument) -> VisualTree:
        info = doc.personal_info
        header = node(
            "header",
            text_node("h1", info.full_name, "text-5xl font-light mb-2"),
            text_node("p", info.job_title, "text-xl text-slate-500 font-light mb-4"),
            _contact_block(info),
            cls="mb-8",
        )

        left = node(
            "div",
            self._about(info),
            self._expertise(doc),
            self._education(doc),
            cls="space-y-8",
            data_column="left",
        )
        right = node(
            "div",
            self._experience(doc),
            self._custom_sections(doc),
            data_column="right",
        )

        return node(
            "div",
            header,
            node("div", left, right, cls="grid grid-cols-[1fr_2fr] gap-10"),
            cls="p-8 md:p-12 font-sans text-slate-800 max-w-4xl mx-auto print:p-0",
            data_layout=self.name(),
        )

    def _about(self, info: PersonalInfo) -> Optional[VisualTree]:
        if not info.summary:
            return None
        return node(
            "section",
            node("h3", "About", cls=_HEADING),
            node("p", info.summary, cls="text-sm leading-relaxed text-slate-600"),
            data_section="summary",
        )

    def _expertise(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.skills:
            return None
        return node(
            "section",
            node("h3", "Expertise", cls=_HEADING),
            node(
                "ul",
                [node("li", s.name, cls="text-sm font-medium text-slate-700", data_id=s.id) for s in doc.skills],
                cls="space-y-1",
            ),
            data_section="skills",
        )

    def _education(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.education:
            return None
        entries = [
            node(
                "div",
                text_node("div", edu.school, "text-sm font-bold"),
                text_node("div", edu.degree, "text-xs text-slate-600"),
                text_node("div", year_range(edu.start_date, edu.end_date, edu.is_current), "text-xs text-slate-400 mt-1"),
                data_id=edu.id,
            )
            for edu in doc.education
        ]
        return node(
            "section",
            node("h3", "Education", cls=_HEADING),
            node("div", entries, cls="space-y-4"),
            data_section="education",
        )

    def _experience(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.experience:
            return None
        entries = [
            node(
                "div",
                _dot(),
                node(
                    "div",
                    text_node("span", exp.role, "text-lg font-medium"),
                    text_node("span", exp.company, "text-sm text-slate-500"),
                    cls="flex flex-col mb-1",
                ),
                text_node("div", date_range(exp.start_date, exp.end_date, exp.is_current, " — "), "text-xs text-slate-400 mb-2 font-mono"),
                text_node("div", exp.description, "text-sm text-slate-600 leading-relaxed whitespace-pre-wrap"),
                cls="relative break-inside-avoid",
                data_id=exp.id,
            )
            for exp in doc.experience
        ]
        return node(
            "section",
            node("h3", "Experience", cls=_TIMELINE_HEADING),
            node("div", entries, cls="space-y-8 border-l border-slate-200 pl-6 relative"),
            data_section="experience",
        )

    def _custom_sections(self, doc: CVDocument) -> List[VisualTree]:
        blocks = []
        for section in custom_sections_with_items(doc):
            items = []
            for item in section.items:
                title_block = None
                if item.title or item.subtitle:
                    title_block = node(
                        "div",
                        text_node("span", item.title, "text-lg font-medium"),
                        text_node("span", item.subtitle, "text-sm text-slate-500"),
                        cls="flex flex-col mb-1",
                    )
                items.append(
                    node(
                        "div",
                        _dot(),
                        title_block,
                        text_node("div", item.description, "text-sm text-slate-600 leading-relaxed whitespace-pre-wrap"),
                        cls="relative break-inside-avoid",
                        data_id=item.id,
                    )
                )
            blocks.append(
                node(
                    "section",
                    text_node("h3", section.title, _TIMELINE_HEADING),
                    node("div", items, cls="space-y-6 border-l border-slate-200 pl-6 relative"),
                    cls="mt-8",
                    data_section="custom",
                    data_id=section.id,
                )
            )
        return blocks
