"""
Editing session: the single current document plus its mounted preview.

The session is the only place that holds a mutable reference. Readers get
the current CVDocument value and keep a consistent snapshot even if the
session moves on; replacing the document is one reference swap.
"""

from __future__ import annotations

import threading
from concurrent.futures import Executor, Future
from pathlib import Path
from typing import Any, Callable, Optional

from . import renderer
from .exporters import DocxExporter, HtmlSnapshotExporter
from .layouts import VisualTree
from .logging_utils import LOG
from .model import SEED_DOCUMENT, CVDocument, load_document, save_document


class DocumentSession:
    """Holds the current document and the tree rendered from it."""

    def __init__(self, document: CVDocument = SEED_DOCUMENT):
        self._lock = threading.Lock()
        self._document = document
        self._tree: Optional[VisualTree] = None

    @classmethod
    def from_file(cls, path: Optional[Path]) -> "DocumentSession":
        """Start from a persisted document, or the seed when `path` is None."""
        if path is None:
            return cls()
        return cls(load_document(path))

    @property
    def document(self) -> CVDocument:
        return self._document

    @property
    def mounted_tree(self) -> Optional[VisualTree]:
        return self._tree

    def replace(self, document: CVDocument) -> CVDocument:
        """
        Swap in a new document. A mounted preview is re-rendered so it never
        shows an older document than the session holds.
        """
        with self._lock:
            self._document = document
            if self._tree is not None:
                self._tree = renderer.render(document)
        return document

    def apply(self, edit: Callable[..., CVDocument], *args: Any, **kwargs: Any) -> CVDocument:
        """Apply a pure edit (see cvstudio.edits) to the current document."""
        return self.replace(edit(self._document, *args, **kwargs))

    def render(self) -> VisualTree:
        """Render the current document and mount the result."""
        with self._lock:
            self._tree = renderer.render(self._document)
            return self._tree

    def save(self, path: Path) -> Path:
        path = save_document(self._document, path)
        LOG.info("CV data saved to %s", path)
        return path

    # ------------------------- Exports -------------------------

    def export_html(self, target_dir: Path) -> Path:
        """Snapshot the mounted preview; fails if nothing was rendered yet."""
        tree = self._tree
        return HtmlSnapshotExporter().export(tree, self._document.personal_info.full_name, target_dir)

    def export_docx(self, target_dir: Path) -> Path:
        return DocxExporter().export(self._document, target_dir)

    def export_docx_async(self, target_dir: Path, executor: Optional[Executor] = None) -> "Future[Path]":
        return DocxExporter().export_async(self._document, target_dir, executor=executor)
