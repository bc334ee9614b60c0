"""
Shared pytest fixtures for expo-directory tests.

This module provides:
- A populated in-memory workbook and the raw rows behind it
- A fixed clock so timestamps are deterministic
- A CSV workbook directory under ``tmp_path``
- A FastAPI ``TestClient`` wired to the in-memory workbook
"""

from __future__ import annotations

import csv
from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from expo_directory.api import create_app
from expo_directory.config import DirectorySchema, DirectorySettings
from expo_directory.ops.dispatcher import DirectoryDispatcher
from expo_directory.sources import MemoryWorkbook

FIXED_NOW = datetime(2025, 3, 1, 12, 30, 45, 123456, tzinfo=UTC)
FIXED_TIMESTAMP = "2025-03-01T12:30:45.123Z"

EXHIBITOR_HEADER = [
    "Email", "Company", "Name", "Stall", "Category", "Logo", "Tagline", "Website", "Summary",
]
TEAM_HEADER = ["Name", "Profession", "Company", "Photo", "Website", "Email", "Featured"]
PARTNER_HEADER = ["Name", "Type", "Status", "Company", "Logo", "Website"]

EXHIBITOR_ROWS = [
    ["a@x.com", "Acme Corp", "Jo", 12.0, "Tools", "https://x.com/a.png", "We build", "https://acme.test", "Anvils"],
    ["b@x.com", "acorn LLC", "Sam"],
    ["c@x.com", "  Beta Labs  ", "Kim", 7, None, "", "", "", ""],
    ["d@x.com", "", "Nobody"],
    ["e@x.com", "3D Prints", "Max"],
    ["f@x.com", "Zeta Works", "Zoe"],
]

TEAM_ROWS = [
    ["Grace Hopper", "Admiral", "Navy", "", "", "grace@x.com", "YES"],
    ["Ada Lovelace", "Engineer", "Analytical", "https://x.com/ada.jpg", "", "ada@x.com", "no"],
    ["", "Ghost"],
]

PARTNER_ROWS = [
    ["Acme Corp", "Gold", "CLOSED", "Acme", "", ""],
    ["", "Silver", "available", "", "", ""],
    ["Bright Co", "Bronze", "", "Bright", "", ""],
    ["No Type Inc", "", "closed", "", "", ""],
]


def _sheets() -> dict[str, list[list]]:
    return {
        "Exhibitors": [EXHIBITOR_HEADER, *EXHIBITOR_ROWS],
        "Team": [TEAM_HEADER, *TEAM_ROWS],
        "Partners": [PARTNER_HEADER, *PARTNER_ROWS],
    }


@pytest.fixture
def fixed_clock():
    """Clock callable returning ``FIXED_NOW``."""
    return lambda: FIXED_NOW


@pytest.fixture
def schema() -> DirectorySchema:
    return DirectorySchema()


@pytest.fixture
def workbook() -> MemoryWorkbook:
    """In-memory workbook with exhibitors, team and partners."""
    return MemoryWorkbook(_sheets())


@pytest.fixture
def empty_workbook() -> MemoryWorkbook:
    """Every sheet present, header only."""
    return MemoryWorkbook({
        "Exhibitors": [EXHIBITOR_HEADER],
        "Team": [TEAM_HEADER],
        "Partners": [PARTNER_HEADER],
    })


@pytest.fixture
def dispatcher(workbook, schema, fixed_clock) -> DirectoryDispatcher:
    return DirectoryDispatcher(workbook, schema, clock=fixed_clock)


def write_sheet(directory: Path, sheet: str, rows: list[list]) -> Path:
    path = directory / f"{sheet}.csv"
    with open(path, "w", encoding="utf-8", newline="") as f:
        csv.writer(f).writerows(["" if cell is None else cell for cell in row] for row in rows)
    return path


@pytest.fixture
def workbook_dir(tmp_path: Path) -> Path:
    """Directory of CSV sheets mirroring the in-memory workbook."""
    for sheet, rows in _sheets().items():
        write_sheet(tmp_path, sheet, rows)
    return tmp_path


@pytest.fixture
def settings(tmp_path: Path) -> DirectorySettings:
    return DirectorySettings(source_kind="memory", workbook_dir=tmp_path)


@pytest.fixture
def app(settings, workbook):
    return create_app(settings=settings, source=workbook)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
