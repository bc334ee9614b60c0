"""
Request dispatcher.

Maps an inbound request to one directory operation and shapes its envelope.
Every operation returns a ``Result``: ``Ok(envelope)`` on success, or
``Err(error)`` for bad input and collaborator faults. Nothing raises past
this layer, so the transport can always reply 200 with a JSON body.

Decision table for ``query``:

    ┌──────────────────────┬──────────────────────────────────────────────┐
    │ type / letter        │ result                                       │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ team                 │ {count, team, timestamp}                     │
    │ partners             │ {closedCount, availableCount, totalCount,    │
    │                      │  partners: {closed, available}, timestamp}   │
    │ exhibitors, no letter│ {totalCount, exhibitorsByLetter: {A..Z}}     │
    │ exhibitors, A-Z      │ {letter, count, exhibitors, timestamp}       │
    │ exhibitors, other    │ Err(InvalidLetterError)                      │
    │ unknown type         │ treated as exhibitors                        │
    └──────────────────────┴──────────────────────────────────────────────┘

The row source is read in full on every call; there is no cache.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any, Callable, Mapping

from expo_directory.config import DirectorySchema
from expo_directory.core.errors import (
    DirectoryError,
    InvalidLetterError,
    ParseError,
    UnknownActionError,
)
from expo_directory.core.logging import get_logger
from expo_directory.core.result import Err, Ok, Result, try_result
from expo_directory.domain.grouping import (
    filter_by_letter,
    group_by_letter,
    group_by_status,
    is_valid_letter,
)
from expo_directory.domain.normalizer import normalize_rows
from expo_directory.domain.records import Cell, EntityKind, Record
from expo_directory.domain.sorting import sort_by_name
from expo_directory.ops import envelopes
from expo_directory.ops.envelopes import Envelope
from expo_directory.ops.requests import AppendExhibitorRequest, DirectoryQuery
from expo_directory.sources.protocol import RowSource

log = get_logger(__name__)

APPEND_ACTION = "add"
APPEND_MESSAGE = "Exhibitor added successfully"


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return moment.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


class DirectoryDispatcher:
    """
    Stateless entry point for every directory operation.

    Example:
        dispatcher = DirectoryDispatcher(MemoryWorkbook(...))
        result = dispatcher.query(DirectoryQuery(entity_type="team"))
        body = envelopes.query_reply(result)
    """

    def __init__(
        self,
        source: RowSource,
        schema: DirectorySchema | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._source = source
        self._schema = schema or DirectorySchema()
        self._clock = clock

    @property
    def source(self) -> RowSource:
        return self._source

    @property
    def schema(self) -> DirectorySchema:
        return self._schema

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def query(self, request: DirectoryQuery) -> Result[Envelope]:
        """Route a GET-style query by entity type."""
        kind = EntityKind.resolve(request.entity_type)
        if kind is None:
            if request.entity_type is not None:
                log.warning("unknown_entity_type", entity_type=request.entity_type)
            kind = EntityKind.EXHIBITORS

        match kind:
            case EntityKind.TEAM:
                return self.list_team()
            case EntityKind.PARTNERS:
                return self.list_partners()
            case _:
                return self.list_exhibitors(request.letter)

    def list_team(self) -> Result[Envelope]:
        def run() -> Envelope:
            team = self._load(EntityKind.TEAM)
            log.info("team_listed", count=len(team))
            return envelopes.team_envelope(team, self._timestamp())

        return self._guard(EntityKind.TEAM, run)

    def list_partners(self) -> Result[Envelope]:
        def run() -> Envelope:
            grouped = group_by_status(self._load(EntityKind.PARTNERS))
            log.info(
                "partners_listed",
                closed=len(grouped["closed"]),
                available=len(grouped["available"]),
            )
            return envelopes.partners_envelope(grouped, self._timestamp())

        return self._guard(EntityKind.PARTNERS, run)

    def list_exhibitors(self, letter: str | None = None) -> Result[Envelope]:
        """All exhibitors grouped A-Z, or those under one letter."""
        if letter is None:
            return self._guard(EntityKind.EXHIBITORS, self._exhibitors_by_letter)

        wanted = letter.upper()
        if not is_valid_letter(wanted):
            log.info("invalid_letter_rejected", letter=letter)
            return Err(InvalidLetterError(letter))

        def run() -> Envelope:
            matches = sort_by_name(filter_by_letter(self._load(EntityKind.EXHIBITORS), wanted))
            log.info("exhibitors_listed", letter=wanted, count=len(matches))
            return envelopes.exhibitors_for_letter_envelope(wanted, matches, self._timestamp())

        return self._guard(EntityKind.EXHIBITORS, run)

    def _exhibitors_by_letter(self) -> Envelope:
        buckets = group_by_letter(self._load(EntityKind.EXHIBITORS))
        buckets = {letter: sort_by_name(bucket) for letter, bucket in buckets.items()}
        envelope = envelopes.exhibitors_by_letter_envelope(buckets)
        log.info("exhibitors_grouped", count=envelope["totalCount"])
        return envelope

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def append_exhibitor(self, request: AppendExhibitorRequest) -> Result[Envelope]:
        """Append one exhibitor row. No duplicate or required-field checks."""
        sheet = self._schema.exhibitors.sheet
        row = [getattr(request, field_name) for field_name in self._schema.append_fields]

        def run() -> Envelope:
            self._source.append_row(sheet, row)
            log.info("exhibitor_appended", sheet=sheet, company=request.company)
            return envelopes.append_envelope(APPEND_MESSAGE)

        return self._guard(EntityKind.EXHIBITORS, run)

    def submit(self, body: str | bytes | Mapping[str, Any]) -> Result[Envelope]:
        """Handle a POST body: ``{"action": "add", email, company, personName}``."""
        parsed = parse_body(body)
        if isinstance(parsed, Err):
            log.warning("post_body_rejected", error=parsed.message)
            return parsed

        payload = parsed.unwrap()
        action = payload.get("action")
        if action != APPEND_ACTION:
            log.info("unknown_action_rejected", action=action)
            return Err(UnknownActionError(action))

        return self.append_exhibitor(
            AppendExhibitorRequest(
                email=_raw_cell(payload.get("email")),
                company=_raw_cell(payload.get("company")),
                person_name=_raw_cell(payload.get("personName")),
            )
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _load(self, kind: EntityKind) -> list[Record]:
        sheet = self._schema.for_kind(kind)
        rows = self._source.read_rows(sheet.sheet)
        return normalize_rows(kind, rows, sheet)

    def _timestamp(self) -> str:
        return format_timestamp(self._clock())

    def _guard(self, kind: EntityKind, run: Callable[[], Envelope]) -> Result[Envelope]:
        """Run an operation, turning any raised fault into ``Err``."""
        return try_result(run).inspect_err(lambda error: self._log_fault(kind, error))

    def _log_fault(self, kind: EntityKind, error: Exception) -> None:
        if isinstance(error, DirectoryError):
            error.with_context(entity_type=kind.value)
            log.warning("directory_fault", **error.to_dict())
        else:
            log.error(
                "directory_unexpected_fault",
                entity_type=kind.value,
                error=str(error),
                exc_info=error,
            )


def parse_body(body: str | bytes | Mapping[str, Any]) -> Result[Mapping[str, Any]]:
    """Decode a POST body into a JSON object."""
    if isinstance(body, Mapping):
        return Ok(body)
    try:
        payload = json.loads(body)
    except (ValueError, TypeError) as e:
        return Err(ParseError(f"Invalid JSON body: {e}", cause=e))
    if not isinstance(payload, dict):
        return Err(ParseError("Request body must be a JSON object"))
    return Ok(payload)


def _raw_cell(value: Any) -> Cell:
    if value is None:
        return ""
    if isinstance(value, (str, int, float, bool)):
        return value
    return json.dumps(value)


__all__ = [
    "APPEND_ACTION",
    "APPEND_MESSAGE",
    "DirectoryDispatcher",
    "format_timestamp",
    "parse_body",
    "utc_now",
]
