"""
External text service used by the writing assistant.

The service is a single-shot request/response collaborator: no retries and
no timeout policy are layered on top of the client. Any failure surfaces as
AssistantError so callers can report it and leave the document untouched.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Optional

from openai import OpenAI, OpenAIError

from ..errors import AssistantError
from ..logging_utils import LOG

DEFAULT_MODEL = "gpt-4o-mini"


class TextService(ABC):
    """Abstract text-generation backend."""

    @abstractmethod
    def complete(self, prompt: str, *, json_output: bool = False) -> str:
        """
        Send one instruction and return the raw response text.

        Args:
            prompt: Natural-language instruction including any CV fragments
            json_output: Ask the backend for a JSON-only answer

        Raises:
            AssistantError: If the service is unavailable or rejects the call
        """
        ...


class OpenAITextService(TextService):
    """Text service backed by the OpenAI chat completions API."""

    def __init__(
        self,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        temperature: float = 0.2,
        client: Optional[OpenAI] = None,
    ):
        self._model = model or os.environ.get("OPENAI_MODEL") or DEFAULT_MODEL
        self._api_key = api_key or os.environ.get("OPENAI_API_KEY")
        self._temperature = temperature
        self._client = client

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self._api_key:
                raise AssistantError("OPENAI_API_KEY is not set")
            self._client = OpenAI(api_key=self._api_key, max_retries=0)
        return self._client

    def complete(self, prompt: str, *, json_output: bool = False) -> str:
        client = self._get_client()
        request = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
        }
        if json_output:
            request["response_format"] = {"type": "json_object"}

        LOG.debug("Text service request (%s, json=%s, %d chars)", self._model, json_output, len(prompt))
        try:
            completion = client.chat.completions.create(**request)
        except OpenAIError as e:
            raise AssistantError(f"text service call failed: {type(e).__name__}: {e}") from e

        try:
            content = completion.choices[0].message.content if completion.choices else None
        except (AttributeError, IndexError):
            content = None
        return (content or "").strip()
