"""
Core primitives: errors, Result type and logging.

Nothing in this package knows about sheets, records or HTTP.
"""

from expo_directory.core.errors import (
    DirectoryError,
    ErrorCategory,
    ErrorContext,
    InvalidLetterError,
    ParseError,
    SheetNotFoundError,
    SourceError,
    SourceUnavailableError,
    UnknownActionError,
)
from expo_directory.core.result import Err, Ok, Result, try_result

__all__ = [
    "DirectoryError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidLetterError",
    "ParseError",
    "SheetNotFoundError",
    "SourceError",
    "SourceUnavailableError",
    "UnknownActionError",
    "Err",
    "Ok",
    "Result",
    "try_result",
]
