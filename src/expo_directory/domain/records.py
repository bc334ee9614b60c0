"""
Directory records.

A record is the fixed-shape, normalized form of one sheet row. There is one
record type per entity kind; all of them share the ``primary_name`` property
used for grouping and sorting, and serialize to camelCase JSON.

Cells coming out of a row source are loosely typed; ``Cell`` names the closed
set of values a source may yield.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Union

# A raw cell as yielded by a row source. ``None`` stands for a blank cell.
Cell = Union[str, int, float, bool, datetime, date, None]


class EntityKind(str, Enum):
    """Entity kinds served by the directory."""

    EXHIBITORS = "exhibitors"
    TEAM = "team"
    PARTNERS = "partners"

    @classmethod
    def resolve(cls, value: str | None) -> EntityKind | None:
        """Case-insensitive lookup; ``None`` for unknown values."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class PartnerStatus(str, Enum):
    """Normalized partner status."""

    CLOSED = "Closed"
    AVAILABLE = "Available"


@dataclass(frozen=True, slots=True)
class ExhibitorRecord:
    """One exhibiting company."""

    email: str = ""
    company: str = ""
    person_name: str = ""
    stall_number: str = ""
    category: str = ""
    logo_url: str = ""
    tagline: str = ""
    website_url: str = ""
    summary: str = ""

    @property
    def primary_name(self) -> str:
        return self.company

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "company": self.company,
            "personName": self.person_name,
            "stallNumber": self.stall_number,
            "category": self.category,
            "logoUrl": self.logo_url,
            "tagline": self.tagline,
            "websiteUrl": self.website_url,
            "summary": self.summary,
        }


@dataclass(frozen=True, slots=True)
class TeamMemberRecord:
    """One organizing team member."""

    name: str = ""
    profession: str = ""
    company: str = ""
    photo_url: str = ""
    website: str = ""
    email: str = ""
    featured: bool = False

    @property
    def primary_name(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "profession": self.profession,
            "company": self.company,
            "photoUrl": self.photo_url,
            "website": self.website,
            "email": self.email,
            "featured": self.featured,
        }


@dataclass(frozen=True, slots=True)
class PartnerRecord:
    """One partnership slot, closed (taken) or still available."""

    name: str = ""
    type: str = ""
    status: PartnerStatus = PartnerStatus.AVAILABLE
    company: str = ""
    logo_url: str = ""
    website: str = ""

    @property
    def primary_name(self) -> str:
        return self.name

    @property
    def is_closed(self) -> bool:
        return self.status is PartnerStatus.CLOSED

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "status": self.status.value,
            "company": self.company,
            "logoUrl": self.logo_url,
            "website": self.website,
        }


Record = Union[ExhibitorRecord, TeamMemberRecord, PartnerRecord]

RECORD_TYPES: dict[EntityKind, type] = {
    EntityKind.EXHIBITORS: ExhibitorRecord,
    EntityKind.TEAM: TeamMemberRecord,
    EntityKind.PARTNERS: PartnerRecord,
}


__all__ = [
    "Cell",
    "EntityKind",
    "PartnerStatus",
    "ExhibitorRecord",
    "TeamMemberRecord",
    "PartnerRecord",
    "Record",
    "RECORD_TYPES",
]
