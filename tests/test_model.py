"""Tests for the document model and its JSON persistence."""

import json
from pathlib import Path

import pytest

from cvstudio.errors import ModelIntegrityError
from cvstudio.model import (
    DEFAULT_THEME_COLOR,
    SEED_DOCUMENT,
    CVDocument,
    SkillLevel,
    document_from_dict,
    document_to_dict,
    load_document,
    save_document,
)


class TestSeedDocument:
    def test_seed_has_current_role_and_modern_template(self):
        """The sample CV starts on the modern layout with one current role."""
        assert SEED_DOCUMENT.template_id == "modern"
        assert SEED_DOCUMENT.theme_color == DEFAULT_THEME_COLOR
        assert [e.is_current for e in SEED_DOCUMENT.experience] == [True, False]
        assert SEED_DOCUMENT.custom_sections == ()

    def test_records_are_frozen(self):
        with pytest.raises(AttributeError):
            SEED_DOCUMENT.personal_info.full_name = "Someone Else"


class TestDocumentFromDict:
    def test_missing_top_level_keys_come_from_seed(self):
        """Older saves without customSections still load."""
        doc = document_from_dict({"personalInfo": {"fullName": "Jane Doe"}})

        assert doc.personal_info.full_name == "Jane Doe"
        assert doc.personal_info.email == ""
        assert doc.experience == SEED_DOCUMENT.experience
        assert doc.custom_sections == ()

    def test_camel_case_fields_are_mapped(self):
        doc = document_from_dict({
            "experience": [{
                "id": "x",
                "company": "Acme",
                "role": "Engineer",
                "startDate": "2020-01",
                "endDate": "",
                "isCurrent": True,
                "description": "Line one\nLine two",
                "location": "Berlin",
            }],
            "customSections": [{
                "id": "c",
                "title": "Awards",
                "items": [{"id": "i", "title": "Eagle Scout", "subtitle": "", "description": ""}],
            }],
            "templateId": "creative",
            "themeColor": "#0f766e",
        })

        exp = doc.experience[0]
        assert exp.start_date == "2020-01"
        assert exp.is_current is True
        assert exp.description == "Line one\nLine two"
        assert doc.custom_sections[0].items[0].title == "Eagle Scout"
        assert doc.template_id == "creative"
        assert doc.theme_color == "#0f766e"

    def test_unknown_skill_level_defaults_to_expert(self):
        doc = document_from_dict({"skills": [{"id": "1", "name": "Go", "level": "Wizard"}]})
        assert doc.skills[0].level is SkillLevel.Expert

    def test_unknown_template_id_is_preserved(self):
        doc = document_from_dict({"templateId": "futuristic"})
        assert doc.template_id == "futuristic"

    def test_empty_photo_is_none(self):
        doc = document_from_dict({"personalInfo": {"fullName": "A", "photo": ""}})
        assert doc.personal_info.photo is None

    @pytest.mark.parametrize("data", [
        [],
        {"personalInfo": "Jane"},
        {"experience": {"id": "1"}},
        {"skills": ["Python"]},
        {"customSections": [{"id": "c", "items": "none"}]},
    ])
    def test_wrong_shapes_raise_model_integrity_error(self, data):
        with pytest.raises(ModelIntegrityError):
            document_from_dict(data)


class TestPersistence:
    def test_save_then_load_restores_document(self, jane_doc: CVDocument, tmp_path: Path):
        path = save_document(jane_doc, tmp_path / "nested" / "cv.json")

        assert load_document(path) == jane_doc

    def test_saved_json_uses_camel_case(self, jane_doc: CVDocument, tmp_path: Path):
        path = save_document(jane_doc, tmp_path / "cv.json")
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["personalInfo"]["fullName"] == "Jane Doe"
        assert data["experience"][0]["isCurrent"] is True
        assert data["skills"][1]["level"] == "Intermediate"
        assert "photo" not in data["personalInfo"]
        assert data["customSections"][0]["items"][0]["title"] == "Eagle Scout"

    def test_to_dict_includes_photo_when_set(self):
        from dataclasses import replace

        doc = replace(SEED_DOCUMENT, personal_info=replace(SEED_DOCUMENT.personal_info, photo="data:image/png;base64,AA=="))
        assert document_to_dict(doc)["personalInfo"]["photo"] == "data:image/png;base64,AA=="

    def test_load_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ModelIntegrityError, match="cannot load CV data"):
            load_document(path)

    def test_load_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ModelIntegrityError):
            load_document(tmp_path / "missing.json")
