"""
Configuration: runtime settings and the immutable sheet schema.

Two layers live here:

- ``DirectorySettings`` — environment-driven settings (pydantic-settings),
  prefixed ``EXPO_``, with ``.env`` support.
- ``DirectorySchema`` — the frozen description of which sheet holds which
  entity kind and which column holds which field. It is built once (from
  settings or by hand in tests) and passed to the normalizer and the
  dispatcher, so alternate layouts never touch shared module state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Literal, Mapping

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from expo_directory.core.errors import ConfigError
from expo_directory.domain.records import RECORD_TYPES, EntityKind

# Zero-based column positions, header row excluded.
EXHIBITOR_COLUMNS: Mapping[str, int] = MappingProxyType({
    "email": 0,
    "company": 1,
    "person_name": 2,
    "stall_number": 3,
    "category": 4,
    "logo_url": 5,
    "tagline": 6,
    "website_url": 7,
    "summary": 8,
})

TEAM_COLUMNS: Mapping[str, int] = MappingProxyType({
    "name": 0,
    "profession": 1,
    "company": 2,
    "photo_url": 3,
    "website": 4,
    "email": 5,
    "featured": 6,
})

PARTNER_COLUMNS: Mapping[str, int] = MappingProxyType({
    "name": 0,
    "type": 1,
    "status": 2,
    "company": 3,
    "logo_url": 4,
    "website": 5,
})

# Order of the cells written by an exhibitor append.
APPEND_FIELDS: tuple[str, ...] = ("email", "company", "person_name")


@dataclass(frozen=True, slots=True)
class SheetSchema:
    """Where one entity kind lives: sheet name plus field → column map."""

    kind: EntityKind
    sheet: str
    columns: Mapping[str, int]

    def __post_init__(self) -> None:
        record_fields = {f.name for f in fields(RECORD_TYPES[self.kind])}
        unknown = sorted(set(self.columns) - record_fields)
        if unknown:
            raise ConfigError(
                f"Unknown {self.kind.value} fields in column map: {', '.join(unknown)}"
            ).with_context(sheet=self.sheet, entity_type=self.kind.value)
        if any(index < 0 for index in self.columns.values()):
            raise ConfigError(
                "Column indexes must be zero or positive"
            ).with_context(sheet=self.sheet, entity_type=self.kind.value)
        # Freeze caller-supplied dicts
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    @property
    def width(self) -> int:
        """Number of columns the schema spans."""
        return max(self.columns.values(), default=-1) + 1


@dataclass(frozen=True, slots=True)
class DirectorySchema:
    """The full workbook layout the directory reads from."""

    exhibitors: SheetSchema = field(
        default_factory=lambda: SheetSchema(EntityKind.EXHIBITORS, "Exhibitors", EXHIBITOR_COLUMNS)
    )
    team: SheetSchema = field(
        default_factory=lambda: SheetSchema(EntityKind.TEAM, "Team", TEAM_COLUMNS)
    )
    partners: SheetSchema = field(
        default_factory=lambda: SheetSchema(EntityKind.PARTNERS, "Partners", PARTNER_COLUMNS)
    )
    append_fields: tuple[str, ...] = APPEND_FIELDS

    def for_kind(self, kind: EntityKind) -> SheetSchema:
        match kind:
            case EntityKind.EXHIBITORS:
                return self.exhibitors
            case EntityKind.TEAM:
                return self.team
            case EntityKind.PARTNERS:
                return self.partners

    @classmethod
    def from_settings(cls, settings: DirectorySettings) -> DirectorySchema:
        """Default column layout with sheet names taken from settings."""
        return cls(
            exhibitors=SheetSchema(EntityKind.EXHIBITORS, settings.exhibitors_sheet, EXHIBITOR_COLUMNS),
            team=SheetSchema(EntityKind.TEAM, settings.team_sheet, TEAM_COLUMNS),
            partners=SheetSchema(EntityKind.PARTNERS, settings.partners_sheet, PARTNER_COLUMNS),
        )


class DirectorySettings(BaseSettings):
    """Settings for the directory service.

    Order of precedence (highest → lowest):
        1. Environment variables (``EXPO_WORKBOOK_DIR``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=12000, description="Bind port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api/v1", description="URL prefix for directory endpoints")
    api_title: str = Field(default="Expo Directory API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # ── Row source ───────────────────────────────────────────────────────
    source_kind: Literal["csv", "memory"] = Field(
        default="csv", description="Row source backend"
    )
    workbook_dir: Path = Field(
        default=Path("./data"), description="Directory holding one <sheet>.csv per sheet"
    )
    exhibitors_sheet: str = "Exhibitors"
    team_sheet: str = "Team"
    partners_sheet: str = "Partners"


@lru_cache(maxsize=1)
def get_settings() -> DirectorySettings:
    """Cached settings — loaded once per process."""
    return DirectorySettings()


__all__ = [
    "APPEND_FIELDS",
    "EXHIBITOR_COLUMNS",
    "TEAM_COLUMNS",
    "PARTNER_COLUMNS",
    "SheetSchema",
    "DirectorySchema",
    "DirectorySettings",
    "get_settings",
]
