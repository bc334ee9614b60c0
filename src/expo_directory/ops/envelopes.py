"""
Response envelopes.

Builders for every JSON shape the directory returns, and the two renderers
that turn a dispatcher ``Result`` into the body sent to the caller:

- ``query_reply``: Err → ``{"error": ..., "exhibitors": []}``
- ``submit_reply``: Err → ``{"error": ...}``
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from expo_directory.core.result import Err, Result
from expo_directory.domain.records import ExhibitorRecord, PartnerRecord, Record, TeamMemberRecord

Envelope = dict[str, Any]


def _dump(records: Sequence[Record]) -> list[dict[str, Any]]:
    return [record.to_dict() for record in records]


def exhibitors_by_letter_envelope(buckets: Mapping[str, Sequence[ExhibitorRecord]]) -> Envelope:
    return {
        "totalCount": sum(len(bucket) for bucket in buckets.values()),
        "exhibitorsByLetter": {letter: _dump(bucket) for letter, bucket in buckets.items()},
    }


def exhibitors_for_letter_envelope(
    letter: str,
    records: Sequence[ExhibitorRecord],
    timestamp: str,
) -> Envelope:
    return {
        "letter": letter,
        "count": len(records),
        "exhibitors": _dump(records),
        "timestamp": timestamp,
    }


def team_envelope(records: Sequence[TeamMemberRecord], timestamp: str) -> Envelope:
    return {
        "count": len(records),
        "team": _dump(records),
        "timestamp": timestamp,
    }


def partners_envelope(grouped: Mapping[str, Sequence[PartnerRecord]], timestamp: str) -> Envelope:
    closed = grouped.get("closed", [])
    available = grouped.get("available", [])
    return {
        "closedCount": len(closed),
        "availableCount": len(available),
        "totalCount": len(closed) + len(available),
        "partners": {"closed": _dump(closed), "available": _dump(available)},
        "timestamp": timestamp,
    }


def append_envelope(message: str) -> Envelope:
    return {"success": True, "message": message}


def query_error_envelope(message: str) -> Envelope:
    return {"error": message, "exhibitors": []}


def submit_error_envelope(message: str) -> Envelope:
    return {"error": message}


def query_reply(result: Result[Envelope]) -> Envelope:
    """Body for a GET: the envelope, or the error envelope."""
    if isinstance(result, Err):
        return query_error_envelope(result.message)
    return result.unwrap()


def submit_reply(result: Result[Envelope]) -> Envelope:
    """Body for a POST: the envelope, or a bare ``error``."""
    if isinstance(result, Err):
        return submit_error_envelope(result.message)
    return result.unwrap()


__all__ = [
    "Envelope",
    "exhibitors_by_letter_envelope",
    "exhibitors_for_letter_envelope",
    "team_envelope",
    "partners_envelope",
    "append_envelope",
    "query_error_envelope",
    "submit_error_envelope",
    "query_reply",
    "submit_reply",
]
