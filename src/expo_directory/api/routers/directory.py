"""
Directory endpoints.

- ``GET  /directory?type=&letter=`` — exhibitors (grouped or by letter),
  team, or partners
- ``POST /directory`` — ``{"action": "add", email, company, personName}``

Both always answer 200 with a JSON body; failures are reported in the
body's ``error`` field.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Request
from starlette.concurrency import run_in_threadpool

from expo_directory.api.deps import Dispatcher
from expo_directory.api.schemas import AppendExhibitorBody
from expo_directory.ops.envelopes import Envelope, query_reply, submit_reply
from expo_directory.ops.requests import DirectoryQuery

router = APIRouter(prefix="/directory")


@router.get(
    "",
    response_model=None,
    summary="Look up directory entries",
    description="Exhibitors grouped A-Z (no letter), exhibitors under one letter, "
                "the team list (type=team), or partners by status (type=partners).",
)
def get_directory(
    dispatcher: Dispatcher,
    type: str | None = Query(None, description="exhibitors (default), team or partners"),
    letter: str | None = Query(None, description="Single letter A-Z, exhibitors only"),
) -> Envelope:
    result = dispatcher.query(DirectoryQuery(entity_type=type, letter=letter))
    return query_reply(result)


@router.post(
    "",
    response_model=None,
    summary="Append an exhibitor",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": AppendExhibitorBody.model_json_schema(by_alias=True)}},
            "required": True,
        }
    },
)
async def post_directory(request: Request, dispatcher: Dispatcher) -> Envelope:
    body = await request.body()
    result = await run_in_threadpool(dispatcher.submit, body)
    return submit_reply(result)
