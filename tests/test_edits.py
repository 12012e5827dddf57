"""Tests for pure edit operations on the document model."""

import pytest

from cvstudio import edits
from cvstudio.model import (
    SEED_DOCUMENT,
    CustomItem,
    EducationEntry,
    ExperienceEntry,
    SkillEntry,
)


class TestItemEdits:
    def test_update_item_rebuilds_only_the_edited_branch(self):
        doc = edits.update_item(SEED_DOCUMENT, "experience", "2", company="Webflow")

        assert doc.experience[1].company == "Webflow"
        assert SEED_DOCUMENT.experience[1].company == "WebFlow Inc."
        # Untouched records and collections are shared, not copied
        assert doc.experience[0] is SEED_DOCUMENT.experience[0]
        assert doc.education is SEED_DOCUMENT.education
        assert doc.skills is SEED_DOCUMENT.skills
        assert doc.personal_info is SEED_DOCUMENT.personal_info

    def test_add_and_remove_item(self):
        skill = SkillEntry(id="go", name="Go")
        doc = edits.add_item(SEED_DOCUMENT, "skills", skill)
        assert doc.skills[-1] is skill
        assert len(SEED_DOCUMENT.skills) == 4

        doc = edits.remove_item(doc, "skills", "go")
        assert doc.skills == SEED_DOCUMENT.skills

    def test_add_item_checks_record_type(self):
        with pytest.raises(TypeError):
            edits.add_item(SEED_DOCUMENT, "education", ExperienceEntry(id="x"))

    def test_unknown_collection_raises_key_error(self):
        with pytest.raises(KeyError):
            edits.remove_item(SEED_DOCUMENT, "hobbies", "1")

    def test_missing_id_leaves_document_equal(self):
        doc = edits.update_item(SEED_DOCUMENT, "education", "nope", school="MIT")
        assert doc == SEED_DOCUMENT

    def test_education_can_be_emptied(self):
        doc = edits.remove_item(SEED_DOCUMENT, "education", "1")
        assert doc.education == ()
        doc = edits.add_item(doc, "education", EducationEntry(id="2", school="MIT"))
        assert [e.school for e in doc.education] == ["MIT"]


class TestPersonalEdits:
    def test_update_personal_info(self):
        doc = edits.update_personal_info(SEED_DOCUMENT, job_title="CTO")
        assert doc.personal_info.job_title == "CTO"
        assert doc.personal_info.full_name == "Alex Morgan"
        assert SEED_DOCUMENT.personal_info.job_title == "Senior Software Engineer"

    def test_photo_set_and_remove(self):
        doc = edits.set_photo(SEED_DOCUMENT, "data:image/png;base64,AA==")
        assert doc.personal_info.photo == "data:image/png;base64,AA=="
        assert edits.remove_photo(doc).personal_info.photo is None

    def test_template_and_theme(self):
        doc = edits.set_template(edits.set_theme_color(SEED_DOCUMENT, "#0f766e"), "creative")
        assert (doc.template_id, doc.theme_color) == ("creative", "#0f766e")
        assert doc.experience is SEED_DOCUMENT.experience


class TestCustomSectionEdits:
    def test_add_section_defaults_title(self):
        doc = edits.add_custom_section(SEED_DOCUMENT, section_id="c1")
        assert doc.custom_sections[0].title == "New Section"
        assert doc.custom_sections[0].items == ()

    def test_item_lifecycle(self):
        doc = edits.add_custom_section(SEED_DOCUMENT, "Awards", section_id="c1")
        doc = edits.add_custom_item(doc, "c1", CustomItem(id="i1"))
        doc = edits.update_custom_item(doc, "c1", "i1", title="Eagle Scout", subtitle="2010")
        assert doc.custom_sections[0].items[0] == CustomItem(id="i1", title="Eagle Scout", subtitle="2010")

        doc = edits.rename_custom_section(doc, "c1", "Honors")
        assert doc.custom_sections[0].title == "Honors"

        doc = edits.remove_custom_item(doc, "c1", "i1")
        assert doc.custom_sections[0].items == ()

        doc = edits.remove_custom_section(doc, "c1")
        assert doc.custom_sections == ()

    def test_add_custom_item_generates_blank_item(self):
        doc = edits.add_custom_section(SEED_DOCUMENT, "Awards", section_id="c1")
        doc = edits.add_custom_item(doc, "c1")
        item = doc.custom_sections[0].items[0]
        assert item.id
        assert (item.title, item.subtitle, item.description) == ("", "", "")

    def test_other_sections_are_shared(self):
        doc = edits.add_custom_section(SEED_DOCUMENT, "A", section_id="a")
        doc = edits.add_custom_section(doc, "B", section_id="b")
        updated = edits.add_custom_item(doc, "b", CustomItem(id="i"))
        assert updated.custom_sections[0] is doc.custom_sections[0]

    def test_unknown_section_leaves_document_equal(self):
        doc = edits.add_custom_section(SEED_DOCUMENT, "A", section_id="a")
        assert edits.add_custom_item(doc, "zzz", CustomItem(id="i")) == doc


def test_new_id_is_unique_in_bursts():
    ids = {edits.new_id() for _ in range(200)}
    assert len(ids) == 200
