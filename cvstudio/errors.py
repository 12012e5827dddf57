"""
Exception taxonomy for cvstudio.

Every failure is scoped to the operation that raised it:
- ModelIntegrityError: a required field or a mounted tree is missing
- AssistantError: the external text service failed or answered garbage
- ExportError: the word-processor document could not be assembled
"""

from __future__ import annotations

from typing import List, Optional


class CVStudioError(Exception):
    """Base class for all cvstudio errors."""


class ModelIntegrityError(CVStudioError):
    """An operation found the document model (or its rendering) incomplete."""


class NothingToExportError(ModelIntegrityError):
    """Raised when a snapshot is requested before anything was rendered."""

    def __init__(self, message: str = "nothing to export: no rendered CV is mounted"):
        super().__init__(message)


class AssistantError(CVStudioError):
    """The writing assistant call was rejected or unusable."""


class PayloadValidationError(AssistantError):
    """A structured assistant payload did not match its expected shape."""

    def __init__(self, operation: str, errors: Optional[List[str]] = None):
        self.operation = operation
        self.errors = list(errors or [])
        detail = ", ".join(self.errors) if self.errors else "unparseable payload"
        super().__init__(f"{operation}: invalid response ({detail})")


class ExportError(CVStudioError):
    """The structured document could not be serialized or written."""
