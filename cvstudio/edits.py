"""
Pure edit operations on the document model.

Each function takes a CVDocument and returns a new one. Only the branch
being edited is rebuilt; every other record is shared with the input.
Operations addressing an id that does not exist return an equal document.
"""

from __future__ import annotations

import itertools
import time
from dataclasses import replace
from typing import Any, Optional

from .model import (
    CVDocument,
    CustomItem,
    CustomSection,
    EducationEntry,
    ExperienceEntry,
    Project,
    SkillEntry,
)

# Collections that hold simple id-keyed records
ITEM_COLLECTIONS = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "skills": SkillEntry,
    "projects": Project,
}

_ID_COUNTER = itertools.count()


def new_id() -> str:
    """Millisecond timestamp id with a counter suffix so bursts stay unique."""
    return f"{int(time.time() * 1000)}{next(_ID_COUNTER)}"


def _check_collection(key: str) -> None:
    if key not in ITEM_COLLECTIONS:
        raise KeyError(f"unknown collection: {key}")


def update_personal_info(doc: CVDocument, **changes: Any) -> CVDocument:
    return replace(doc, personal_info=replace(doc.personal_info, **changes))


def set_photo(doc: CVDocument, photo: Optional[str]) -> CVDocument:
    return update_personal_info(doc, photo=photo or None)


def remove_photo(doc: CVDocument) -> CVDocument:
    return set_photo(doc, None)


def set_template(doc: CVDocument, template_id: str) -> CVDocument:
    return replace(doc, template_id=template_id)


def set_theme_color(doc: CVDocument, theme_color: str) -> CVDocument:
    return replace(doc, theme_color=theme_color)


def add_item(doc: CVDocument, key: str, item: Any) -> CVDocument:
    """Append a record to one of the id-keyed collections."""
    _check_collection(key)
    expected = ITEM_COLLECTIONS[key]
    if not isinstance(item, expected):
        raise TypeError(f"{key} items must be {expected.__name__}, got {type(item).__name__}")
    return replace(doc, **{key: getattr(doc, key) + (item,)})


def remove_item(doc: CVDocument, key: str, item_id: str) -> CVDocument:
    _check_collection(key)
    items = getattr(doc, key)
    return replace(doc, **{key: tuple(i for i in items if i.id != item_id)})


def update_item(doc: CVDocument, key: str, item_id: str, **changes: Any) -> CVDocument:
    _check_collection(key)
    items = getattr(doc, key)
    return replace(
        doc,
        **{key: tuple(replace(i, **changes) if i.id == item_id else i for i in items)},
    )


# ------------------------- Custom sections -------------------------

def add_custom_section(doc: CVDocument, title: str = "New Section", section_id: Optional[str] = None) -> CVDocument:
    section = CustomSection(id=section_id or new_id(), title=title)
    return replace(doc, custom_sections=doc.custom_sections + (section,))


def remove_custom_section(doc: CVDocument, section_id: str) -> CVDocument:
    return replace(
        doc,
        custom_sections=tuple(s for s in doc.custom_sections if s.id != section_id),
    )


def rename_custom_section(doc: CVDocument, section_id: str, title: str) -> CVDocument:
    return replace(
        doc,
        custom_sections=tuple(
            replace(s, title=title) if s.id == section_id else s for s in doc.custom_sections
        ),
    )


def add_custom_item(doc: CVDocument, section_id: str, item: Optional[CustomItem] = None) -> CVDocument:
    item = item or CustomItem(id=new_id())
    return replace(
        doc,
        custom_sections=tuple(
            replace(s, items=s.items + (item,)) if s.id == section_id else s
            for s in doc.custom_sections
        ),
    )


def update_custom_item(doc: CVDocument, section_id: str, item_id: str, **changes: Any) -> CVDocument:
    def _update(section: CustomSection) -> CustomSection:
        return replace(
            section,
            items=tuple(replace(i, **changes) if i.id == item_id else i for i in section.items),
        )

    return replace(
        doc,
        custom_sections=tuple(
            _update(s) if s.id == section_id else s for s in doc.custom_sections
        ),
    )


def remove_custom_item(doc: CVDocument, section_id: str, item_id: str) -> CVDocument:
    return replace(
        doc,
        custom_sections=tuple(
            replace(s, items=tuple(i for i in s.items if i.id != item_id)) if s.id == section_id else s
            for s in doc.custom_sections
        ),
    )
