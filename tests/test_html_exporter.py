"""Tests for the HTML snapshot exporter."""

from pathlib import Path

import pytest
from lxml import html

from cvstudio import edits, renderer
from cvstudio.errors import ExportError, NothingToExportError
from cvstudio.exporters import HtmlSnapshotExporter
from cvstudio.exporters.html_exporter import TAILWIND_CDN


class TestToHtml:
    def test_requires_a_mounted_tree(self):
        with pytest.raises(NothingToExportError):
            HtmlSnapshotExporter().to_html(None, "Jane Doe")

    def test_wraps_tree_in_full_document(self, jane_doc):
        tree = renderer.render(jane_doc)
        content = HtmlSnapshotExporter().to_html(tree, "Jane Doe")

        assert content.startswith("<!DOCTYPE html>")
        page = html.fromstring(content)
        assert page.findtext(".//title") == "Jane Doe - CV"
        assert page.xpath(f'.//script[@src="{TAILWIND_CDN}"]')
        assert page.xpath('.//body//*[@id="cv-preview"]')

    def test_snapshot_matches_preview(self, jane_doc):
        tree = renderer.render(jane_doc)
        page = html.fromstring(HtmlSnapshotExporter().to_html(tree, "Jane Doe"))
        preview = page.xpath('.//*[@id="cv-preview"]')[0]

        assert preview.text_content() == tree.text_content()

    def test_mounted_tree_is_not_moved(self, jane_doc):
        tree = renderer.render(jane_doc)
        HtmlSnapshotExporter().to_html(tree, "Jane Doe")
        assert tree.getparent() is None

    def test_photo_data_uri_is_embedded(self, jane_doc):
        doc = edits.set_template(edits.set_photo(jane_doc, "data:image/png;base64,iVBORw0KGgo="), "creative")
        content = HtmlSnapshotExporter().to_html(renderer.render(doc), "Jane Doe")
        assert 'src="data:image/png;base64,iVBORw0KGgo="' in content

    def test_control_characters_are_dropped(self, jane_doc):
        doc = edits.update_personal_info(jane_doc, full_name="Jane\x0bDoe")
        doc = edits.update_item(doc, "skills", "s1", id="s\x01")
        content = HtmlSnapshotExporter().to_html(renderer.render(doc), doc.personal_info.full_name)

        page = html.fromstring(content)
        assert page.findtext(".//title") == "JaneDoe - CV"
        assert page.xpath('.//*[@data-id="s"]')
        assert "\x01" not in content and "\x0b" not in content


class TestExport:
    def test_writes_named_file(self, jane_doc, tmp_path: Path):
        path = HtmlSnapshotExporter().export(renderer.render(jane_doc), "Jane  Doe", tmp_path / "out")

        assert path == tmp_path / "out" / "Jane_Doe_CV.html"
        assert "Jane Doe" in path.read_text(encoding="utf-8")

    def test_nothing_written_without_tree(self, tmp_path: Path):
        with pytest.raises(NothingToExportError):
            HtmlSnapshotExporter().export(None, "Jane Doe", tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_target_raises_export_error(self, jane_doc, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(ExportError):
            HtmlSnapshotExporter().export(renderer.render(jane_doc), "Jane Doe", blocker)
