import io
import sys
from pathlib import Path
from typing import List, Optional

import pytest
from docx import Document

from cvstudio.assistant.text_service import TextService
from cvstudio.model import (
    CVDocument,
    CustomItem,
    CustomSection,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    SkillEntry,
    SkillLevel,
)


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEMPLATE_IDS = ["modern", "classic", "minimal", "creative"]


@pytest.fixture
def jane_doc() -> CVDocument:
    """A filled-in CV with one current and one past role."""
    return CVDocument(
        personal_info=PersonalInfo(
            full_name="Jane Doe",
            job_title="Data Engineer",
            email="jane@example.com",
            phone="+49 30 1234",
            location="Berlin",
            website="janedoe.dev",
            linkedin="linkedin.com/in/janedoe",
            summary="Builds reliable data platforms.",
        ),
        experience=(
            ExperienceEntry(
                id="e1",
                company="Acme",
                role="Lead Engineer",
                location="Berlin",
                start_date="2020-01",
                end_date="2023-12",
                is_current=True,
                description="• Built pipelines\n• Led a team of 4",
            ),
            ExperienceEntry(
                id="e2",
                company="Initech",
                role="Engineer",
                location="Hamburg",
                start_date="2016-05",
                end_date="2019-12",
                description="Maintained ETL jobs.",
            ),
        ),
        education=(
            EducationEntry(
                id="ed1",
                school="TU Berlin",
                degree="MSc",
                field="Computer Science",
                start_date="2014-10",
                end_date="2016-04",
                location="Berlin",
            ),
        ),
        skills=(
            SkillEntry(id="s1", name="Python", level=SkillLevel.Expert),
            SkillEntry(id="s2", name="SQL", level=SkillLevel.Intermediate),
        ),
        custom_sections=(
            CustomSection(
                id="c1",
                title="Awards",
                items=(CustomItem(id="i1", title="Eagle Scout"),),
            ),
        ),
    )


@pytest.fixture
def name_only_doc() -> CVDocument:
    """Only a name; every section is empty."""
    return CVDocument(personal_info=PersonalInfo(full_name="Jane Doe"))


@pytest.fixture
def read_docx():
    """Parse .docx bytes back into a python-docx Document."""

    def _read(data: bytes):
        return Document(io.BytesIO(data))

    return _read


class FakeTextService(TextService):
    """Replays canned responses and records every prompt it receives."""

    def __init__(self, responses: Optional[List[object]] = None):
        self.responses = list(responses or [])
        self.prompts: List[str] = []
        self.json_flags: List[bool] = []

    def complete(self, prompt: str, *, json_output: bool = False) -> str:
        self.prompts.append(prompt)
        self.json_flags.append(json_output)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_service():
    def _make(*responses) -> FakeTextService:
        return FakeTextService(list(responses))

    return _make
