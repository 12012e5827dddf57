"""
Helpers for reading JSON out of model output.
"""

from __future__ import annotations

import json
from typing import Any, Optional


def strip_markdown_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```json"):
        text = text[len("```json") :]
    elif text.startswith("```"):
        text = text[len("```") :]
    if text.endswith("```"):
        text = text[: -len("```")]
    return text.strip()


def extract_json(text: Any) -> Optional[Any]:
    """
    Robustly extract a JSON object or array from model output.

    Handles:
    - pure JSON
    - fenced code blocks
    - extra commentary around JSON

    Returns None when nothing parseable is found.
    """
    if not isinstance(text, str):
        return None

    cleaned = strip_markdown_fences(text)

    try:
        return json.loads(cleaned)
    except ValueError:
        pass

    # Fall back to the outermost {...} or [...] span
    for open_ch, close_ch in (("{", "}"), ("[", "]")):
        start = cleaned.find(open_ch)
        end = cleaned.rfind(close_ch)
        if start == -1 or end <= start:
            continue
        try:
            return json.loads(cleaned[start : end + 1])
        except ValueError:
            continue
    return None
