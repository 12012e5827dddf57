"""
Base interface and shared building blocks for CV layouts.

A layout is a pure function from a CVDocument to a visual tree: an lxml
HTML element that the host displays and the snapshot exporter serializes.
Helpers here return None for anything whose backing data is empty, and
`node()` drops None children, so no layout ever emits an empty label or
an empty section container.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple

from lxml import html
from lxml.builder import ElementMaker

from ..model import CVDocument, PersonalInfo
from ..shared import sanitize_for_xml

# Visual trees are plain lxml HTML elements
VisualTree = html.HtmlElement

E = ElementMaker(makeelement=html.html_parser.makeelement)

PRESENT = "Present"


class CVLayout(ABC):
    """
    Abstract base class for CV layouts.

    Implementations must be deterministic: rendering the same document
    twice yields structurally identical trees.
    """

    @abstractmethod
    def name(self) -> str:
        """Template id this layout is registered under (e.g. "modern")."""
        ...

    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the layout."""
        ...

    @abstractmethod
    def render(self, doc: CVDocument) -> VisualTree:
        """
        Render the document into a visual tree.

        Args:
            doc: The document snapshot to render

        Returns:
            Root element of the layout (mounted by the Renderer)
        """
        ...


# ------------------------- Tree helpers -------------------------

def _flatten(children: Iterable[Any]) -> List[Any]:
    out: List[Any] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            out.extend(_flatten(child))
        elif isinstance(child, str):
            if child:
                out.append(sanitize_for_xml(child))
        else:
            out.append(child)
    return out


def node(tag: str, *children: Any, cls: Optional[str] = None, style: Optional[str] = None, **attrs: str) -> VisualTree:
    """
    Build an element, skipping None/empty children.

    Keyword `cls` maps to the class attribute; other keyword attributes
    use underscores for dashes (data_icon -> data-icon). Attribute values
    are cleaned like text children.
    """
    attrib = {}
    if cls:
        attrib["class"] = cls
    if style:
        attrib["style"] = sanitize_for_xml(style)
    for key, value in attrs.items():
        if value is not None:
            attrib[key.replace("_", "-")] = sanitize_for_xml(value)
    return getattr(E, tag)(attrib, *_flatten(children))


def text_node(tag: str, text: str, cls: Optional[str] = None, style: Optional[str] = None) -> Optional[VisualTree]:
    """Element holding `text`, or None when the text is empty."""
    if not text:
        return None
    return node(tag, text, cls=cls, style=style)


def icon(name: str, cls: str = "w-3.5 h-3.5 shrink-0") -> VisualTree:
    return node("span", cls=f"icon icon-{name} {cls}", data_icon=name, aria_hidden="true")


# ------------------------- Text helpers -------------------------

def date_range(start: str, end: str, is_current: bool, sep: str = " – ") -> str:
    """
    Display form of a date span.

    A current entry always ends in "Present" whatever `end` holds. Empty
    endpoints are dropped together with the separator.
    """
    end_text = PRESENT if is_current else end
    parts = [p for p in (start, end_text) if p]
    return sep.join(parts)


def year_range(start: str, end: str, is_current: bool, sep: str = " - ") -> str:
    """Like date_range() but keeps only the first four characters (the year)."""
    return date_range(start[:4], end[:4], is_current, sep)


def join_present(parts: Iterable[str], sep: str) -> str:
    return sep.join(p for p in parts if p)


def external_href(value: str) -> str:
    return value if value.startswith("http") else f"https://{value}"


def contact_items(info: PersonalInfo) -> List[Tuple[str, str]]:
    """(kind, value) pairs for every non-empty contact field, in display order."""
    pairs = [
        ("mail", info.email),
        ("phone", info.phone),
        ("location", info.location),
        ("linkedin", info.linkedin),
        ("website", info.website),
    ]
    return [(kind, value) for kind, value in pairs if value]


def custom_sections_with_items(doc: CVDocument):
    """Custom sections that have at least one item, in model order."""
    return [s for s in doc.custom_sections if s.items]


def monogram(full_name: str) -> str:
    return full_name[:1]
