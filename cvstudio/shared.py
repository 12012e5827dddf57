"""
Shared models and text utilities.

Defines common result structures, XML-safety helpers used by the
exporters, export file naming, and prompt loading for the assistant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .logging_utils import LOG


# ------------------------- Models -------------------------
@dataclass(frozen=True)
class VerificationResult:
    ok: bool
    errors: List[str]
    warnings: List[str]


# ------------------------- XML helpers -------------------------

_WS_RE = re.compile(r"\s+")


def _strip_invalid_xml_1_0_chars(s: str) -> str:
    """
    Remove characters invalid in XML 1.0.
    Valid:
      #x9 | #xA | #xD |
      [#x20-#xD7FF] |
      [#xE000-#xFFFD] |
      [#x10000-#x10FFFF]
    """
    out: List[str] = []
    for ch in s:
        cp = ord(ch)
        if (
            cp == 0x9
            or cp == 0xA
            or cp == 0xD
            or (0x20 <= cp <= 0xD7FF)
            or (0xE000 <= cp <= 0xFFFD)
            or (0x10000 <= cp <= 0x10FFFF)
        ):
            out.append(ch)
    return "".join(out)


def sanitize_for_xml(s: str) -> str:
    """
    Make user text safe for insertion into WordprocessingML or HTML.

    Only characters XML 1.0 cannot carry are dropped; whitespace, line
    breaks and bullet glyphs are preserved as typed.
    """
    return _strip_invalid_xml_1_0_chars(s or "")


def export_filename(full_name: str, suffix: str) -> str:
    """
    Deterministic export file name for a person.

    >>> export_filename("Jane  Doe", "docx")
    'Jane_Doe_CV.docx'
    """
    stem = _WS_RE.sub("_", full_name or "")
    return f"{stem}_CV.{suffix.lstrip('.')}"


# ---------------------- Prompt Loading ----------------------

_ASSISTANT_PROMPTS_DIR = Path(__file__).parent / "assistant" / "prompts"


def load_prompt(prompt_name: str) -> Optional[str]:
    """
    Load a prompt template from a Markdown file.

    Args:
        prompt_name: Name of the prompt file (without .md extension),
            looked up in cvstudio/assistant/prompts/

    Returns:
        The prompt text, or None if the file doesn't exist or can't be read
    """
    prompt_path = _ASSISTANT_PROMPTS_DIR / f"{prompt_name}.md"
    try:
        return prompt_path.read_text(encoding="utf-8")
    except OSError as e:
        LOG.error("Failed to read prompt %s: %s", prompt_path, e)
        return None


def format_prompt(prompt_name: str, **kwargs) -> Optional[str]:
    """
    Load a prompt template and format it with the provided variables.

    Returns:
        The formatted prompt text, or None if the file doesn't exist,
        can't be read, or references a variable that was not supplied
    """
    template = load_prompt(prompt_name)
    if template is None:
        return None

    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError) as e:
        LOG.error("Failed to format prompt %s: %s", prompt_name, e)
        return None
