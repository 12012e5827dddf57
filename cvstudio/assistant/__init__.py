"""
Writing assistant backed by an external text service.
"""

from .assistant import AssistantActions, WritingAssistant
from .merge import (
    ExperienceRewrite,
    MatchAnalysis,
    Tailoring,
    apply_tailoring,
    cv_plain_text,
    merge_suggested_skills,
)
from .text_service import OpenAITextService, TextService

__all__ = [
    "AssistantActions",
    "WritingAssistant",
    "TextService",
    "OpenAITextService",
    "ExperienceRewrite",
    "MatchAnalysis",
    "Tailoring",
    "apply_tailoring",
    "cv_plain_text",
    "merge_suggested_skills",
]
