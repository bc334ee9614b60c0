"""
Directory domain: records, normalization, grouping and sorting.

Everything here is pure and stateless. No I/O, no HTTP, no settings.
"""

from expo_directory.domain.grouping import (
    LETTERS,
    filter_by_letter,
    group_by_letter,
    group_by_status,
    is_valid_letter,
)
from expo_directory.domain.normalizer import normalize, normalize_rows
from expo_directory.domain.records import (
    Cell,
    EntityKind,
    ExhibitorRecord,
    PartnerRecord,
    PartnerStatus,
    Record,
    TeamMemberRecord,
)
from expo_directory.domain.sorting import collation_key, sort_by_name

__all__ = [
    "LETTERS",
    "Cell",
    "EntityKind",
    "ExhibitorRecord",
    "PartnerRecord",
    "PartnerStatus",
    "Record",
    "TeamMemberRecord",
    "collation_key",
    "filter_by_letter",
    "group_by_letter",
    "group_by_status",
    "is_valid_letter",
    "normalize",
    "normalize_rows",
    "sort_by_name",
]
