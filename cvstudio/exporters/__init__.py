"""
CV exporters.

- HtmlSnapshotExporter serializes the currently rendered tree
- DocxExporter rebuilds a Word document from the document model
"""

from .docx_exporter import DocxExporter
from .html_exporter import HtmlSnapshotExporter

__all__ = [
    "DocxExporter",
    "HtmlSnapshotExporter",
]
