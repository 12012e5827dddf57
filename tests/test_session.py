"""Tests for the editing session."""

from pathlib import Path

import pytest

from cvstudio import edits
from cvstudio.errors import NothingToExportError
from cvstudio.model import SEED_DOCUMENT, save_document
from cvstudio.session import DocumentSession


class TestDocumentSession:
    def test_starts_from_seed(self):
        session = DocumentSession()
        assert session.document is SEED_DOCUMENT
        assert session.mounted_tree is None

    def test_from_file(self, jane_doc, tmp_path: Path):
        path = save_document(jane_doc, tmp_path / "cv.json")
        assert DocumentSession.from_file(path).document == jane_doc
        assert DocumentSession.from_file(None).document is SEED_DOCUMENT

    def test_apply_keeps_earlier_snapshots_intact(self, jane_doc):
        session = DocumentSession(jane_doc)
        before = session.document

        after = session.apply(edits.update_personal_info, job_title="Staff Engineer")

        assert session.document is after
        assert before.personal_info.job_title == "Data Engineer"

    def test_render_mounts_tree(self, jane_doc):
        session = DocumentSession(jane_doc)
        tree = session.render()
        assert session.mounted_tree is tree

    def test_edit_rerenders_mounted_tree(self, jane_doc):
        session = DocumentSession(jane_doc)
        session.render()

        session.apply(edits.set_template, "classic")

        assert session.mounted_tree.xpath(".//*[@data-layout]")[0].get("data-layout") == "classic"

    def test_edit_without_mounted_tree_does_not_render(self, jane_doc):
        session = DocumentSession(jane_doc)
        session.apply(edits.set_template, "classic")
        assert session.mounted_tree is None

    def test_save(self, jane_doc, tmp_path: Path):
        session = DocumentSession(jane_doc)
        path = session.save(tmp_path / "saved.json")
        assert DocumentSession.from_file(path).document == jane_doc


class TestSessionExports:
    def test_html_export_requires_render(self, jane_doc, tmp_path: Path):
        session = DocumentSession(jane_doc)
        with pytest.raises(NothingToExportError):
            session.export_html(tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_html_export_after_render(self, jane_doc, tmp_path: Path):
        session = DocumentSession(jane_doc)
        session.render()
        assert session.export_html(tmp_path).name == "Jane_Doe_CV.html"

    def test_docx_export_does_not_need_render(self, jane_doc, tmp_path: Path):
        session = DocumentSession(jane_doc)
        assert session.export_docx(tmp_path).name == "Jane_Doe_CV.docx"
        assert session.mounted_tree is None

    def test_async_docx_export_uses_snapshot(self, jane_doc, tmp_path: Path):
        session = DocumentSession(jane_doc)
        future = session.export_docx_async(tmp_path)
        session.apply(edits.update_personal_info, full_name="John Roe")

        path = future.result(timeout=30)
        assert path.name == "Jane_Doe_CV.docx"
