"""
Locale-aware, stable sorting of records by primary name.

The collation key approximates a default Unicode collation in three levels:

1. base letters, case-folded and with accents stripped ("acme" == "Acme")
2. accents ("e" < "é")
3. case, lowercase first ("acme" < "Acme")

Python's ``sorted`` is stable, so records with identical names keep their
row order.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, TypeVar

from expo_directory.domain.records import Record

R = TypeVar("R", bound=Record)


def collation_key(value: str) -> tuple[str, str, str]:
    """Sort key: accent-stripped casefold, then accents, then lowercase first."""
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), decomposed.casefold(), value.swapcase())


def sort_by_name(records: Iterable[R]) -> list[R]:
    """Records ordered ascending by ``primary_name``, ties in input order."""
    return sorted(records, key=lambda record: collation_key(record.primary_name))


__all__ = ["collation_key", "sort_by_name"]
