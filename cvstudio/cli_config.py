"""
CLI configuration data structures.

Defines the stage configuration dataclasses and UserConfig produced by
argument parsing and consumed by execution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ExportFormat(Enum):
    HTML = "html"
    DOCX = "docx"
    BOTH = "both"

    @property
    def formats(self) -> List[str]:
        if self is ExportFormat.BOTH:
            return [ExportFormat.HTML.value, ExportFormat.DOCX.value]
        return [self.value]


class AssistAction(Enum):
    SUMMARY = "summary"
    SKILLS = "skills"
    ENHANCE = "enhance"
    MATCH = "match"
    TAILOR = "tailor"

    @property
    def needs_job_description(self) -> bool:
        return self in (AssistAction.MATCH, AssistAction.TAILOR)


@dataclass
class RenderStage:
    """Configuration for the render/export stage."""
    formats: List[str] = field(default_factory=lambda: ExportFormat.BOTH.formats)
    template: Optional[str] = None  # Overrides the document's templateId
    theme_color: Optional[str] = None  # Overrides the document's themeColor


@dataclass
class AssistStage:
    """Configuration for one writing-assistant action."""
    action: AssistAction
    job_description: Optional[str] = None
    experience_id: Optional[str] = None
    openai_model: Optional[str] = None


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    data: Optional[Path] = None  # CV JSON; the seed document when omitted
    target_dir: Optional[Path] = None
    save: Optional[Path] = None  # Where to write the (possibly updated) CV JSON

    render: Optional[RenderStage] = None
    assist: Optional[AssistStage] = None

    list_templates: bool = False
    debug: bool = False
    verbosity: int = 0
    log_file: Optional[str] = None
