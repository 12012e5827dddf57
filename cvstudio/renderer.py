"""
Renderer: picks the active layout by template id and mounts its tree.

The renderer owns no state. Every call builds a fresh layout instance, so
switching templates never carries anything over from a previous render.
"""

from __future__ import annotations

from .layouts import CVLayout, VisualTree, get_layout
from .layouts.base import node
from .logging_utils import LOG
from .model import CVDocument, TemplateId

FALLBACK_TEMPLATE = TemplateId.MODERN.value

PREVIEW_ID = "cv-preview"


def select(template_id: str) -> CVLayout:
    """
    Return the layout registered for `template_id`.

    Unknown ids (e.g. written by a newer version) fall back to the modern
    layout instead of failing.
    """
    layout = get_layout(template_id)
    if layout is None:
        LOG.warning("Unknown template '%s'; falling back to '%s'", template_id, FALLBACK_TEMPLATE)
        layout = get_layout(FALLBACK_TEMPLATE)
    if layout is None:
        raise LookupError(f"fallback layout '{FALLBACK_TEMPLATE}' is not registered")
    return layout


def render(doc: CVDocument) -> VisualTree:
    """Render `doc` with its selected layout inside the A4 page container."""
    layout = select(doc.template_id)
    LOG.debug("Rendering with layout '%s'", layout.name())
    return node(
        "div",
        node(
            "div",
            layout.render(doc),
            cls="max-w-[210mm] mx-auto min-h-[297mm] text-slate-800 print:max-w-none print:min-h-0",
        ),
        id=PREVIEW_ID,
        cls="bg-white w-full h-full min-h-[1123px] shadow-2xl print:shadow-none print:w-full print:min-h-0 mx-auto print:border-none",
    )
