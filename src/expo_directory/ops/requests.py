"""
Typed request objects for directory operations.

Each dataclass is the *input* contract of one dispatcher operation. Requests
carry transport-agnostic data only — no raw HTTP bodies, no Typer params.
"""

from __future__ import annotations

from dataclasses import dataclass

from expo_directory.domain.records import Cell


@dataclass(frozen=True, slots=True)
class DirectoryQuery:
    """Request for :meth:`DirectoryDispatcher.query`.

    Attributes:
        entity_type: ``exhibitors`` (default), ``team`` or ``partners``,
            any case. Unknown values fall back to ``exhibitors``.
        letter: Optional initial-letter filter, exhibitors only. ``None``
            means "not supplied"; an empty string is supplied and invalid.
    """

    entity_type: str | None = None
    letter: str | None = None


@dataclass(frozen=True, slots=True)
class AppendExhibitorRequest:
    """Request for :meth:`DirectoryDispatcher.append_exhibitor`."""

    email: Cell = ""
    company: Cell = ""
    person_name: Cell = ""


__all__ = ["DirectoryQuery", "AppendExhibitorRequest"]
