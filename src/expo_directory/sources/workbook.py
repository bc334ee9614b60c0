"""
CSV workbook: a directory holding one ``<sheet>.csv`` file per sheet.

This is the file-backed row source. A spreadsheet export (one CSV per tab)
dropped in the workbook directory is served as-is; appends write a single
CSV line at the end of the sheet file.

Usage:
    from expo_directory.sources.workbook import CsvWorkbook

    book = CsvWorkbook("./data")
    book.sheet_names()             # ["Exhibitors", "Partners", "Team"]
    book.read_rows("Exhibitors")   # header skipped
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Sequence

from expo_directory.domain.normalizer import cell_to_str
from expo_directory.domain.records import Cell
from expo_directory.sources.protocol import BaseRowSource, Row


class CsvWorkbook(BaseRowSource):
    """Row source over a directory of CSV files."""

    SUFFIX = ".csv"

    def __init__(
        self,
        directory: str | Path,
        *,
        encoding: str = "utf-8",
        delimiter: str = ",",
        name: str | None = None,
    ):
        self._directory = Path(directory)
        super().__init__(name or f"csv:{self._directory}")
        self._encoding = encoding
        self._delimiter = delimiter

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, sheet: str) -> Path:
        return self._directory / f"{sheet}{self.SUFFIX}"

    def sheet_names(self) -> list[str]:
        if not self._directory.is_dir():
            raise self._wrap_error(
                FileNotFoundError(self._directory),
                sheet="*",
                message=f"Workbook directory not found: {self._directory}",
            )
        return sorted(path.stem for path in self._directory.glob(f"*{self.SUFFIX}"))

    def read_rows(self, sheet: str) -> list[Row]:
        path = self._path(sheet)
        if not path.is_file():
            raise self._missing_sheet(sheet)
        try:
            # utf-8-sig drops the BOM spreadsheet exports tend to add
            encoding = "utf-8-sig" if self._encoding.lower() == "utf-8" else self._encoding
            with open(path, "r", encoding=encoding, newline="") as f:
                rows: list[Row] = [list(row) for row in csv.reader(f, delimiter=self._delimiter)]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise self._wrap_error(e, sheet, f"Failed to read sheet {sheet}: {e}") from e
        return rows[1:]

    def append_row(self, sheet: str, row: Sequence[Cell]) -> None:
        path = self._path(sheet)
        if not path.is_file():
            raise self._missing_sheet(sheet)
        try:
            # Empty file: reserve line 1 for the header so the row stays readable
            prefix = "\r\n" if self._needs_line_break(path) else ""
            with open(path, "a", encoding=self._encoding, newline="") as f:
                f.write(prefix)
                writer = csv.writer(f, delimiter=self._delimiter)
                writer.writerow([cell_to_str(cell) for cell in row])
        except OSError as e:
            raise self._wrap_error(e, sheet, f"Failed to append to sheet {sheet}: {e}") from e

    @staticmethod
    def _needs_line_break(path: Path) -> bool:
        """True for an empty file or one whose last line is unterminated."""
        with open(path, "rb") as f:
            f.seek(0, 2)
            if f.tell() == 0:
                return True
            f.seek(-1, 2)
            return f.read(1) not in (b"\n", b"\r")


__all__ = ["CsvWorkbook"]
