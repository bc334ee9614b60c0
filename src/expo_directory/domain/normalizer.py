"""
Row normalizer: one raw sheet row → one fixed-shape record.

Normalization never fails. Short rows, blank cells and odd cell types all
degrade to empty strings; deciding whether a record is worth returning is
left to ``normalize_rows`` (non-empty primary name), not to ``normalize``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Iterable, Sequence

from expo_directory.domain.records import (
    RECORD_TYPES,
    Cell,
    EntityKind,
    PartnerRecord,
    PartnerStatus,
    Record,
)

if TYPE_CHECKING:
    from expo_directory.config import SheetSchema


def cell_to_str(cell: Cell) -> str:
    """String form of a cell, trimmed. Blank cells become ``""``."""
    if cell is None:
        return ""
    if isinstance(cell, bool):
        return "true" if cell else "false"
    if isinstance(cell, float) and cell.is_integer():
        # Sheets hand back stall numbers as 12.0
        return str(int(cell))
    if isinstance(cell, (datetime, date)):
        return cell.isoformat()
    return str(cell).strip()


def cell_to_flag(cell: Cell) -> bool:
    """``True`` only for a cell reading ``yes`` in any case."""
    return cell_to_str(cell).lower() == "yes"


def normalize_status(cell: Cell) -> PartnerStatus:
    """``Closed`` for a case-insensitive ``closed``, else ``Available``."""
    if cell_to_str(cell).lower() == "closed":
        return PartnerStatus.CLOSED
    return PartnerStatus.AVAILABLE


def _cell_at(row: Sequence[Cell], index: int) -> Cell:
    return row[index] if index < len(row) else None


def normalize(kind: EntityKind, row: Sequence[Cell], schema: SheetSchema) -> Record:
    """
    Build the record of ``kind`` from one raw row.

    Args:
        kind: Entity kind of the row
        row: Raw cells in sheet column order
        schema: Column map for this kind

    Returns:
        A record with every declared field populated (``""`` when missing)
    """
    values: dict[str, object] = {}
    for field_name, index in schema.columns.items():
        cell = _cell_at(row, index)
        if field_name == "featured":
            values[field_name] = cell_to_flag(cell)
        elif kind is EntityKind.PARTNERS and field_name == "status":
            values[field_name] = normalize_status(cell)
        else:
            values[field_name] = cell_to_str(cell)
    return RECORD_TYPES[kind](**values)


def is_listed(record: Record) -> bool:
    """Whether a record belongs in a result set.

    Partners are keyed on their slot type since an available slot has no
    partner name yet.
    """
    if isinstance(record, PartnerRecord):
        return record.type != ""
    return record.primary_name != ""


def normalize_rows(
    kind: EntityKind,
    rows: Iterable[Sequence[Cell]],
    schema: SheetSchema,
) -> list[Record]:
    """Normalize every row and keep the listed records, in row order."""
    records = (normalize(kind, row, schema) for row in rows)
    return [record for record in records if is_listed(record)]


__all__ = [
    "cell_to_str",
    "cell_to_flag",
    "normalize_status",
    "normalize",
    "is_listed",
    "normalize_rows",
]
