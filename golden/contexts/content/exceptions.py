"""Custom exceptions for the content context."""

from pathlib import Path
from typing import Any, Optional


class ContentValidationError(ValueError):
    """
    Exception raised when a content record or match context is malformed.

    Attributes:
        message: Error description
        field_name: Name of the offending field (e.g., 'persona')
        value: The rejected value
        record_id: Identifier of the record being built, when known
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        value: Any = None,
        record_id: Optional[str] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.value = value
        self.record_id = record_id

        parts = [message]
        if record_id:
            parts.append(f"Record: {record_id}")
        if field_name:
            parts.append(f"Field: {field_name} = {value!r}")

        super().__init__("\n".join(parts))


class InvalidContentRecordError(ContentValidationError):
    """Raised when a stored content row cannot become a ContentRecord."""

    pass


class InvalidMatchContextError(ContentValidationError):
    """Raised when a MatchContext is built with out-of-vocabulary values."""

    pass


class ContentLibraryError(Exception):
    """
    Exception raised when a content library or program catalog cannot be loaded.

    Attributes:
        message: Error description
        path: File or directory that failed to load
        original_error: The underlying I/O or YAML error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]
        if path:
            parts.append(f"Path: {path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
