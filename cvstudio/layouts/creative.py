"""
Creative layout.

Fixed-width colored sidebar (avatar, contact, skills, education) next to a
main panel (header, profile, experience, custom sections).
"""

from __future__ import annotations

from typing import List, Optional

from ..model import DEFAULT_THEME_COLOR, CVDocument, PersonalInfo
from .base import (
    CVLayout,
    VisualTree,
    contact_items,
    custom_sections_with_items,
    date_range,
    icon,
    join_present,
    monogram,
    node,
    text_node,
)

# Sidebar fill used when the user kept the default accent color
SIDEBAR_FALLBACK_COLOR = "#1e293b"

_SIDEBAR_HEADING = "text-lg font-bold uppercase tracking-widest text-white/90 mb-4 border-b border-white/20 pb-2"
_MAIN_HEADING = "text-sm font-bold uppercase text-slate-400 mb-6 tracking-wider flex items-center gap-2"


def sidebar_color(theme_color: str) -> str:
    return SIDEBAR_FALLBACK_COLOR if theme_color == DEFAULT_THEME_COLOR else theme_color


def _avatar(info: PersonalInfo) -> VisualTree:
    if info.photo:
        return node(
            "div",
            node("img", src=info.photo, alt="Profile", cls="w-full h-full object-cover"),
            cls="w-32 h-32 mx-auto rounded-full border-4 border-white/20 overflow-hidden mb-4 shadow-lg",
            data_avatar="photo",
        )
    return node(
        "div",
        monogram(info.full_name),
        cls="w-32 h-32 mx-auto rounded-full bg-white/10 flex items-center justify-center mb-4 text-4xl font-bold text-white/50",
        data_avatar="monogram",
    )


def _main_heading(title: str) -> Optional[VisualTree]:
    if not title:
        return None
    return node("h3", node("span", cls="w-1 h-4 bg-slate-300 inline-block"), f" {title}", cls=_MAIN_HEADING)


class CreativeLayout(CVLayout):
    """Colored sidebar layout with photo or monogram avatar."""

    def name(self) -> str:
        return "creative"

    def description(self) -> str:
        return "Colored sidebar layout with photo or monogram avatar"

    def render(self, doc: CVDocument) -> VisualTree:
        color = sidebar_color(doc.theme_color)
        sidebar = node(
            "div",
            self._identity_block(doc.personal_info),
            self._skills(doc),
            self._education(doc),
            cls="w-[32%] text-white p-8 flex flex-col gap-8 shrink-0 print:h-auto print:min-h-screen",
            style=f"background-color: {color}",
            data_column="sidebar",
        )
        main = node(
            "div",
            self._header(doc.personal_info, color),
            self._profile(doc.personal_info),
            self._experience(doc),
            self._custom_sections(doc),
            cls="flex-1 p-10 bg-white print:p-8",
            data_column="main",
        )
        return node("div", sidebar, main, cls="flex h-full min-h-[297mm]", data_layout=self.name())

    def _identity_block(self, info: PersonalInfo) -> VisualTree:
        contact = None
        items = contact_items(info)
        if items:
            contact = [
                node("h2", "Contact", cls="text-lg font-bold uppercase tracking-widest text-white/90 mb-4"),
                node(
                    "div",
                    [
                        node("div", icon(kind), node("span", value, cls="break-all"), cls="flex items-center gap-2")
                        for kind, value in items
                    ],
                    cls="flex flex-col gap-3 text-xs text-white/80 text-left",
                ),
            ]
        return node("div", _avatar(info), contact, cls="text-center break-inside-avoid")

    def _skills(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.skills:
            return None
        return node(
            "div",
            node("h2", "Skills", cls=_SIDEBAR_HEADING),
            node(
                "div",
                [
                    node("span", s.name, cls="px-2 py-1 bg-white/10 rounded text-xs text-white/90", data_id=s.id)
                    for s in doc.skills
                ],
                cls="flex flex-wrap gap-2",
            ),
            cls="break-inside-avoid",
            data_section="skills",
        )

    def _education(self, doc: CVDocument) -> Optional[VisualTree]:
        if not doc.education:
            return None
        entries = [
            node(
                "div",
                text_node("div", edu.school, "text-sm font-bold text-white"),
                text_node("div", edu.degree, "text-xs mb-1"),
                text_node("div", date_range(edu.start_date, edu.end_date, edu.is_current, " - "), "text-[10px] opacity-70"),
                data_id=edu.id,
            )
            for edu in doc.education
        ]
        return node(
            "div",
            node("h2", "Education", cls=_SIDEBAR_HEADING),
            node("div", entries, cls="space-y-4 text-white/80"),
            cls="break-inside-avoid",
            data_section="education",
        )

    def _header(self, info: PersonalInfo, color: str) -> Optional[VisualTree]:
        if not info.full_name and not info.job_title:
            return None
        return node(
            "header",
            text_node("h1", info.full_name, "text-5xl font-bold uppercase text-slate-800 mb-2 leading-tight", f"color: {color}"),
            text_node("p", info.job_title, "text-2xl text-slate-500 font-light"),
            cls="mb-10 pt-4",
        )

    def _profile(self, info: PersonalInfo) -> Optional[VisualTree]:
        if not info.summary:
            return None
        return node(
            "section",
            _main_heading("Profile"),
            node("p", info.summary, cls="text-slate-600 leading-relaxed text-sm"),
            cls="mb-10",
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
                    text_node("h4", exp.role, "text-lg font-bold text-slate-800"),
                    text_node("span", date_range(exp.start_date, exp.end_date, exp.is_current, " - "), "text-xs font-mono text-slate-400"),
                    cls="flex justify-between items-baseline mb-1",
                ),
                text_node("div", join_present((exp.company, exp.location), " • "), "text-sm text-slate-600 font-medium mb-2"),
                text_node("p", exp.description, "text-sm text-slate-600 leading-relaxed whitespace-pre-wrap"),
                cls="break-inside-avoid",
                data_id=exp.id,
            )
            for exp in doc.experience
        ]
        return node(
            "section",
            _main_heading("Experience"),
            node("div", entries, cls="space-y-8"),
            data_section="experience",
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
                        text_node("h4", item.title, "text-md font-bold text-slate-800"),
                        text_node("span", item.subtitle, "text-xs font-mono text-slate-400"),
                        cls="flex justify-between items-baseline mb-1",
                    )
                items.append(
                    node(
                        "div",
                        title_row,
                        text_node("p", item.description, "text-sm text-slate-600 leading-relaxed whitespace-pre-wrap"),
                        cls="break-inside-avoid",
                        data_id=item.id,
                    )
                )
            blocks.append(
                node(
                    "section",
                    _main_heading(section.title),
                    node("div", items, cls="space-y-6"),
                    cls="mt-8",
                    data_section="custom",
                    data_id=section.id,
                )
            )
        return blocks
