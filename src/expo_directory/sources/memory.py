"""In-process workbook, used by tests, fixtures and the ``memory`` backend."""

from __future__ import annotations

from typing import Mapping, Sequence

from expo_directory.domain.records import Cell
from expo_directory.sources.protocol import BaseRowSource, Row


class MemoryWorkbook(BaseRowSource):
    """
    Sheets held as lists of rows. The first row of each sheet is the header.

    Example:
        book = MemoryWorkbook({"Exhibitors": [["Email", "Company", "Name"]]})
        book.append_row("Exhibitors", ["x@y.com", "Zed Inc", "Lee"])
        book.read_rows("Exhibitors")   # [["x@y.com", "Zed Inc", "Lee"]]
    """

    def __init__(
        self,
        sheets: Mapping[str, Sequence[Sequence[Cell]]] | None = None,
        *,
        name: str = "memory",
    ):
        super().__init__(name)
        self._sheets: dict[str, list[Row]] = {
            sheet: [list(row) for row in rows] for sheet, rows in (sheets or {}).items()
        }

    def sheet_names(self) -> list[str]:
        return list(self._sheets)

    def add_sheet(self, sheet: str, header: Sequence[Cell] = ()) -> None:
        """Create ``sheet`` with a header row, replacing any existing one."""
        self._sheets[sheet] = [list(header)]

    def read_rows(self, sheet: str) -> list[Row]:
        rows = self._sheets.get(sheet)
        if rows is None:
            raise self._missing_sheet(sheet)
        return [list(row) for row in rows[1:]]

    def append_row(self, sheet: str, row: Sequence[Cell]) -> None:
        rows = self._sheets.get(sheet)
        if rows is None:
            raise self._missing_sheet(sheet)
        if not rows:
            # Header-less sheet: keep the header slot so the row stays readable
            rows.append([])
        rows.append(list(row))


__all__ = ["MemoryWorkbook"]
