"""
Letter filter and groupers.

- ``filter_by_letter``: records whose primary name starts with one letter
- ``group_by_letter``: all 26 A-Z buckets, always present, possibly empty
- ``group_by_status``: partners split into closed and available

Names that do not start with an ASCII letter (digits, symbols, accented
capitals) fall outside every bucket; grouped output silently drops them.
"""

from __future__ import annotations

import re
import string
from typing import Iterable, Sequence, TypeVar

from expo_directory.core.logging import get_logger
from expo_directory.domain.records import PartnerRecord, Record

log = get_logger(__name__)

LETTERS: tuple[str, ...] = tuple(string.ascii_uppercase)
LETTER_PATTERN = re.compile(r"^[A-Z]$")

R = TypeVar("R", bound=Record)


def initial_of(record: Record) -> str:
    """Uppercased first character of the primary name.

    ``""`` for a blank name or a non-ASCII first character, so names like
    ``"ıstanbul"`` never fold into an ASCII bucket.
    """
    first = record.primary_name[:1]
    return first.upper() if first.isascii() else ""


def is_valid_letter(letter: str) -> bool:
    return bool(LETTER_PATTERN.fullmatch(letter))


def filter_by_letter(records: Iterable[R], letter: str) -> list[R]:
    """Every record whose primary name starts with ``letter``.

    ``letter`` must already be a validated uppercase A-Z character.
    """
    return [record for record in records if initial_of(record) == letter]


def group_by_letter(records: Iterable[R]) -> dict[str, list[R]]:
    """Partition records into A-Z buckets keyed by initial letter."""
    buckets: dict[str, list[R]] = {letter: [] for letter in LETTERS}
    dropped = 0
    for record in records:
        bucket = buckets.get(initial_of(record))
        if bucket is None:
            dropped += 1
            continue
        bucket.append(record)
    if dropped:
        log.debug("non_letter_names_dropped", count=dropped)
    return buckets


def group_by_status(partners: Sequence[PartnerRecord]) -> dict[str, list[PartnerRecord]]:
    """Split partners with a slot type into ``closed`` and ``available``."""
    grouped: dict[str, list[PartnerRecord]] = {"closed": [], "available": []}
    for partner in partners:
        if not partner.type:
            continue
        grouped["closed" if partner.is_closed else "available"].append(partner)
    return grouped


__all__ = [
    "LETTERS",
    "initial_of",
    "is_valid_letter",
    "filter_by_letter",
    "group_by_letter",
    "group_by_status",
]
