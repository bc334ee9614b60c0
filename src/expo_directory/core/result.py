"""
Result envelope for consistent success/failure handling.

Dispatcher operations return ``Ok[T]`` on success or ``Err[T]`` on failure
instead of raising. The HTTP boundary then renders either branch into a
JSON envelope, so every request yields a well-formed body.

Manifesto:
    - **Explicit over Implicit:** no hidden exceptions that callers might miss
    - **Errors are values:** an ``Err`` carries the exception, its message
      is what reaches the caller
    - **One exception bridge:** ``try_result`` converts raising code

Examples:
    >>> from expo_directory.core.result import Ok, Err, try_result
    >>> Ok(10).unwrap()
    10
    >>> try_result(lambda: 1 / 0).message
    'division by zero'

Tags:
    result-pattern, error-handling, expo-directory

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from expo_directory.core.errors import DirectoryError


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        """Call f with error for side effects (no-op for Ok)."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    Failed result containing an error.

    Prefer ``DirectoryError`` subclasses so the message and category survive
    into logs and envelopes.
    """

    error: Exception

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        """Call f with error for side effects, return self."""
        f(self.error)
        return self

    @property
    def message(self) -> str:
        """Human-readable message forwarded to callers."""
        if isinstance(self.error, DirectoryError):
            return self.error.message
        return str(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[T]


def try_result(f: Callable[[], T]) -> Result[T]:
    """
    Execute a function and wrap its outcome in a Result.

    Bridges exception-raising collaborators (row sources, JSON decoding)
    into Result-returning code.

    Args:
        f: Zero-argument callable that may raise

    Returns:
        Ok with the return value, or Err with the raised exception
    """
    try:
        return Ok(f())
    except Exception as e:
        return Err(e)


__all__ = ["Ok", "Err", "Result", "try_result"]
