# cvstudio/__init__.py

from .model import CVDocument, SEED_DOCUMENT, document_from_dict, document_to_dict
from .renderer import render, select
from .session import DocumentSession
from .exporters import DocxExporter, HtmlSnapshotExporter

__all__ = [
    "CVDocument",
    "SEED_DOCUMENT",
    "document_from_dict",
    "document_to_dict",
    "render",
    "select",
    "DocumentSession",
    "DocxExporter",
    "HtmlSnapshotExporter",
]
