"""
Tests for response envelope builders.
"""

from __future__ import annotations

from expo_directory.core.errors import SourceUnavailableError
from expo_directory.core.result import Err, Ok
from expo_directory.domain.records import ExhibitorRecord, PartnerRecord, PartnerStatus
from expo_directory.ops.envelopes import (
    append_envelope,
    exhibitors_by_letter_envelope,
    partners_envelope,
    query_reply,
    submit_reply,
    team_envelope,
)


class TestBuilders:
    def test_by_letter_total(self):
        body = exhibitors_by_letter_envelope({
            "A": [ExhibitorRecord(company="Acme")],
            "B": [],
            "C": [ExhibitorRecord(company="Cobalt"), ExhibitorRecord(company="Cyan")],
        })
        assert body["totalCount"] == 3
        assert body["exhibitorsByLetter"]["B"] == []

    def test_team(self):
        assert team_envelope([], "ts") == {"count": 0, "team": [], "timestamp": "ts"}

    def test_partners(self):
        closed = [PartnerRecord(name="Acme", type="Gold", status=PartnerStatus.CLOSED)]
        body = partners_envelope({"closed": closed, "available": []}, "ts")
        assert body["closedCount"] == 1
        assert body["availableCount"] == 0
        assert body["totalCount"] == 1
        assert body["partners"]["closed"][0]["status"] == "Closed"

    def test_append(self):
        assert append_envelope("done") == {"success": True, "message": "done"}


class TestReplies:
    def test_query_ok_passthrough(self):
        assert query_reply(Ok({"count": 0})) == {"count": 0}

    def test_query_err(self):
        result = Err(SourceUnavailableError("Workbook offline"))
        assert query_reply(result) == {"error": "Workbook offline", "exhibitors": []}

    def test_submit_err(self):
        assert submit_reply(Err(ValueError("bad"))) == {"error": "bad"}
