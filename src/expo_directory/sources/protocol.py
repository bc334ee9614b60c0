"""
Row source protocol.

A row source is a workbook of named sheets. Each sheet is a header row
followed by data rows of loosely typed cells. The directory only ever:

- reads a whole sheet, header skipped (``read_rows``)
- appends one row to a sheet (``append_row``)
- lists the sheets it has (``sheet_names``)

Sources raise ``SourceError`` subclasses; the dispatcher turns them into
``Err`` results. Nothing is cached: every call goes to the backing store.

Usage:
    from expo_directory.sources import MemoryWorkbook

    source = MemoryWorkbook({"Team": [["Name"], ["Ada"]]})
    source.read_rows("Team")   # [["Ada"]]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from expo_directory.core.errors import SheetNotFoundError, SourceError, SourceUnavailableError
from expo_directory.domain.records import Cell

Row = list[Cell]


@dataclass(frozen=True, slots=True)
class SheetInfo:
    """Summary of one sheet, header excluded."""

    name: str
    row_count: int


@runtime_checkable
class RowSource(Protocol):
    """
    Protocol for tabular row sources.

    Implementations must provide:
    - name: Identifier used in logs and error context
    - sheet_names(): Sheets present in the workbook
    - read_rows(): Data rows of one sheet, header skipped
    - append_row(): Add one row at the end of a sheet
    """

    @property
    def name(self) -> str:
        """Source identifier."""
        ...

    def sheet_names(self) -> list[str]:
        ...

    def read_rows(self, sheet: str) -> list[Row]:
        """
        Read every data row of ``sheet``.

        Raises:
            SheetNotFoundError: if the sheet does not exist
            SourceUnavailableError: if the workbook cannot be read
        """
        ...

    def append_row(self, sheet: str, row: Sequence[Cell]) -> None:
        """
        Append ``row`` to ``sheet``.

        Raises:
            SheetNotFoundError: if the sheet does not exist
            SourceUnavailableError: if the workbook cannot be written
        """
        ...


class BaseRowSource(ABC):
    """
    Base class for row source implementations.

    Provides naming, error wrapping and ``describe()``.
    """

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def _missing_sheet(self, sheet: str) -> SheetNotFoundError:
        return SheetNotFoundError(f"Sheet not found: {sheet}").with_context(
            source_name=self._name, sheet=sheet
        )

    def _wrap_error(self, error: Exception, sheet: str, message: str | None = None) -> SourceError:
        """Wrap a foreign exception in SourceUnavailableError with context."""
        if isinstance(error, SourceError):
            return error
        return SourceUnavailableError(message or str(error), cause=error).with_context(
            source_name=self._name, sheet=sheet
        )

    def describe(self) -> list[SheetInfo]:
        """Row counts of every sheet."""
        return [
            SheetInfo(name=sheet, row_count=len(self.read_rows(sheet)))
            for sheet in self.sheet_names()
        ]

    @abstractmethod
    def sheet_names(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def read_rows(self, sheet: str) -> list[Row]:
        raise NotImplementedError

    @abstractmethod
    def append_row(self, sheet: str, row: Sequence[Cell]) -> None:
        raise NotImplementedError


__all__ = ["Row", "SheetInfo", "RowSource", "BaseRowSource"]
