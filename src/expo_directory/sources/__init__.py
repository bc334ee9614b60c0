"""
Row sources package.

Provides the ``RowSource`` protocol and its implementations, plus
``create_source()`` which picks the backend named in settings.
"""

from __future__ import annotations

from expo_directory.config import DirectorySchema, DirectorySettings, SheetSchema
from expo_directory.core.errors import ConfigError
from expo_directory.sources.memory import MemoryWorkbook
from expo_directory.sources.protocol import BaseRowSource, Row, RowSource, SheetInfo
from expo_directory.sources.workbook import CsvWorkbook


def header_row(sheet: SheetSchema) -> list[str]:
    """Header labels for a sheet, field names laid out by column index."""
    header = [""] * sheet.width
    for field_name, index in sheet.columns.items():
        header[index] = field_name
    return header


def create_source(settings: DirectorySettings, schema: DirectorySchema | None = None) -> RowSource:
    """Build the row source configured in ``settings``."""
    match settings.source_kind:
        case "csv":
            return CsvWorkbook(settings.workbook_dir)
        case "memory":
            schema = schema or DirectorySchema.from_settings(settings)
            book = MemoryWorkbook()
            for sheet in (schema.exhibitors, schema.team, schema.partners):
                book.add_sheet(sheet.sheet, header_row(sheet))
            return book
        case _:
            raise ConfigError(f"Unknown source kind: {settings.source_kind}")


__all__ = [
    "BaseRowSource",
    "CsvWorkbook",
    "MemoryWorkbook",
    "Row",
    "RowSource",
    "SheetInfo",
    "create_source",
    "header_row",
]
