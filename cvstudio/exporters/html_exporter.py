"""
Standalone HTML snapshot of the rendered CV.

Wraps whatever tree is currently mounted in a complete HTML document with
the styling bootstrap (Tailwind CDN and web fonts). The document model is
not consulted: the snapshot is exactly what the preview shows.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Optional

from lxml import html

from ..errors import ExportError, NothingToExportError
from ..layouts.base import E, VisualTree
from ..logging_utils import LOG
from ..shared import export_filename, sanitize_for_xml

TAILWIND_CDN = "https://cdn.tailwindcss.com"
FONTS_STYLESHEET = (
    "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700"
    "&family=Merriweather:wght@300;400;700&display=swap"
)
TAILWIND_CONFIG = """
tailwind.config = {
  theme: {
    extend: {
      fontFamily: {
        sans: ['Inter', 'sans-serif'],
        serif: ['Merriweather', 'serif'],
      },
    }
  }
}
"""


class HtmlSnapshotExporter:
    """Serializes a mounted visual tree into a self-contained HTML file."""

    suffix = "html"

    def to_html(self, tree: Optional[VisualTree], full_name: str) -> str:
        """
        Build the snapshot document as a string.

        Raises:
            NothingToExportError: If no tree is mounted
        """
        if tree is None:
            raise NothingToExportError()

        page = E.html(
            E.head(
                E.meta(charset="utf-8"),
                E.title(sanitize_for_xml(f"{full_name} - CV")),
                E.script(src=TAILWIND_CDN),
                E.link(href=FONTS_STYLESHEET, rel="stylesheet"),
                E.script(TAILWIND_CONFIG),
            ),
            # The mounted tree stays owned by the caller
            E.body({"class": "bg-white text-slate-900"}, copy.deepcopy(tree)),
        )
        return html.tostring(page, doctype="<!DOCTYPE html>", encoding="unicode", method="html")

    def export(self, tree: Optional[VisualTree], full_name: str, target_dir: Path) -> Path:
        """
        Write the snapshot to `target_dir` as <Full_Name>_CV.html.

        Nothing is written when there is no mounted tree.
        """
        content = self.to_html(tree, full_name)
        output_path = target_dir / export_filename(full_name, self.suffix)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"failed to write {output_path}: {e}") from e
        LOG.info("HTML snapshot written to %s", output_path)
        return output_path
