"""
Tests for letter filtering and grouping.
"""

from __future__ import annotations

import string

import pytest

from expo_directory.domain.grouping import (
    LETTERS,
    filter_by_letter,
    group_by_letter,
    group_by_status,
    initial_of,
    is_valid_letter,
)
from expo_directory.domain.records import ExhibitorRecord, PartnerRecord, PartnerStatus
from expo_directory.domain.sorting import sort_by_name


def exhibitors(*names: str) -> list[ExhibitorRecord]:
    return [ExhibitorRecord(company=name) for name in names]


class TestInitialOf:
    def test_uppercases(self):
        assert initial_of(ExhibitorRecord(company="acme")) == "A"

    def test_blank(self):
        assert initial_of(ExhibitorRecord()) == ""

    @pytest.mark.parametrize("name", ["ıstanbul Tiles", "ſtudio", "Éclair"])
    def test_non_ascii_initial(self, name):
        assert initial_of(ExhibitorRecord(company=name)) == ""


class TestIsValidLetter:
    @pytest.mark.parametrize("letter", list(string.ascii_uppercase))
    def test_uppercase_letters(self, letter):
        assert is_valid_letter(letter)

    @pytest.mark.parametrize("letter", ["", "a", "AB", "1", "É", " ", "A\n"])
    def test_rejects(self, letter):
        assert not is_valid_letter(letter)


class TestFilterByLetter:
    def test_case_insensitive_initial(self):
        records = exhibitors("Acme", "beta", "acorn", "Apex")
        assert [r.company for r in filter_by_letter(records, "A")] == ["Acme", "acorn", "Apex"]

    def test_no_match(self):
        assert filter_by_letter(exhibitors("Acme"), "Q") == []

    def test_non_ascii_lookalikes_excluded(self):
        records = exhibitors("ſtudio", "Studio", "ıstanbul Tiles", "Ink")
        assert [r.company for r in filter_by_letter(records, "S")] == ["Studio"]
        assert [r.company for r in filter_by_letter(records, "I")] == ["Ink"]


class TestGroupByLetter:
    def test_always_26_keys(self):
        grouped = group_by_letter([])
        assert list(grouped) == list(LETTERS)
        assert len(grouped) == 26
        assert all(bucket == [] for bucket in grouped.values())

    def test_buckets_by_initial(self):
        grouped = group_by_letter(exhibitors("Acme", "beta", "Zed Inc"))
        assert [r.company for r in grouped["A"]] == ["Acme"]
        assert [r.company for r in grouped["B"]] == ["beta"]
        assert [r.company for r in grouped["Z"]] == ["Zed Inc"]

    def test_drops_non_letter_initials(self):
        grouped = group_by_letter(exhibitors("3D Prints", "#hash", "Éclair", "Acme"))
        assert sum(len(b) for b in grouped.values()) == 1

    def test_drops_initials_that_uppercase_to_ascii(self):
        grouped = group_by_letter(exhibitors("ıstanbul Tiles", "ſtudio"))
        assert grouped["I"] == []
        assert grouped["S"] == []

    def test_filter_matches_sorted_bucket(self):
        records = exhibitors("acorn", "Acme", "Beta", "apex", "Acme")
        assert sort_by_name(filter_by_letter(records, "A")) == sort_by_name(group_by_letter(records)["A"])


class TestGroupByStatus:
    def test_split(self):
        partners = [
            PartnerRecord(name="Acme", type="Gold", status=PartnerStatus.CLOSED),
            PartnerRecord(type="Silver"),
            PartnerRecord(name="Bright", type="Bronze", status=PartnerStatus.AVAILABLE),
        ]
        grouped = group_by_status(partners)
        assert [p.name for p in grouped["closed"]] == ["Acme"]
        assert [p.type for p in grouped["available"]] == ["Silver", "Bronze"]

    def test_skips_missing_type(self):
        grouped = group_by_status([PartnerRecord(name="Loose", status=PartnerStatus.CLOSED)])
        assert grouped == {"closed": [], "available": []}
