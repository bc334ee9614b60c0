"""
Structured error types for the directory service.

Every failure the service can report is a ``DirectoryError``. Errors carry a
category for routing and logging, a structured context (which sheet, which
source) and an optional chained cause. The dispatcher never lets these
escape: it wraps them in ``Err`` and the HTTP boundary turns them into a
JSON ``error`` field.

Manifesto:
    - **Two kinds only:** input validation errors and collaborator faults
    - **Message is the contract:** the ``message`` string is forwarded to
      callers verbatim, so keep it human-readable
    - **Rich context:** sheet and source names travel with the error for logs

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                     DirectoryError                        │
        │            (category, context, cause)                    │
        ├──────────────────────────────────────────────────────────┤
        │  ValidationError            SourceError                  │
        │  (VALIDATION)               (SOURCE)                     │
        │       │                          │                        │
        │  InvalidLetterError         SheetNotFoundError           │
        │  UnknownActionError         SourceUnavailableError       │
        │                             ParseError (PARSE)           │
        └──────────────────────────────────────────────────────────┘

Tags:
    errors, error-handling, validation, source-faults, expo-directory

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories used for classification and log routing.

    Attributes:
        VALIDATION: Bad caller input (letter parameter, POST action)
        SOURCE: Row source missing, unreadable or rejecting writes
        PARSE: Request body that cannot be decoded
        CONFIG: Invalid settings or schema
        INTERNAL: Bugs, unexpected state
    """

    VALIDATION = "VALIDATION"
    SOURCE = "SOURCE"
    PARSE = "PARSE"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        source_name: Name of the row source (e.g. ``"csv:./data"``)
        sheet: Sheet/table that was being read or written
        entity_type: Entity kind requested by the caller
        metadata: Additional key-value pairs
    """

    source_name: str | None = None
    sheet: str | None = None
    entity_type: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["source_name", "sheet", "entity_type"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class DirectoryError(Exception):
    """
    Base exception for all directory service errors.

    Subclasses set ``default_category``. The ``message`` attribute is what
    ends up in the JSON ``error`` field, so it must read well on its own.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DirectoryError:
        """
        Add context to this error (fluent API).

        Usage:
            raise SheetNotFoundError("Sheet not found: Team").with_context(
                sheet="Team",
                source_name="csv:./data",
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(DirectoryError):
    """Caller input rejected before any source access."""

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


class InvalidLetterError(ValidationError):
    """Letter filter that is not a single A-Z character."""

    MESSAGE = "Invalid letter parameter. Must be A-Z."

    def __init__(self, value: Any = None):
        super().__init__(self.MESSAGE, field="letter", value=value)


class UnknownActionError(ValidationError):
    """POST body with an ``action`` other than ``add``."""

    MESSAGE = "Invalid action"

    def __init__(self, value: Any = None):
        super().__init__(self.MESSAGE, field="action", value=value)


# =============================================================================
# SOURCE ERRORS
# =============================================================================


class SourceError(DirectoryError):
    """Error from the tabular row source."""

    default_category = ErrorCategory.SOURCE


class SheetNotFoundError(SourceError):
    """Named sheet is absent from the workbook."""

    pass


class SourceUnavailableError(SourceError):
    """Workbook could not be read or written."""

    pass


class ParseError(DirectoryError):
    """Request body could not be decoded."""

    default_category = ErrorCategory.PARSE


# =============================================================================
# CONFIG ERRORS
# =============================================================================


class ConfigError(DirectoryError):
    """Invalid configuration (unknown source kind, bad column map)."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "DirectoryError",
    "ValidationError",
    "InvalidLetterError",
    "UnknownActionError",
    "SourceError",
    "SheetNotFoundError",
    "SourceUnavailableError",
    "ParseError",
    "ConfigError",
]
