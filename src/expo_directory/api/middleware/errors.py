"""
Error handling — anything that escapes a route still answers 200 + JSON.

Directory clients only look at the body's ``error`` field, so the catch-all
mirrors the dispatcher's query error envelope instead of a 500 page.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from expo_directory.core.errors import DirectoryError
from expo_directory.core.logging import get_logger
from expo_directory.ops.envelopes import query_error_envelope

log = get_logger(__name__)

GENERIC_MESSAGE = "An unexpected error occurred."


def error_response(message: str) -> JSONResponse:
    """Build the ``{error, exhibitors: []}`` reply."""
    return JSONResponse(status_code=200, content=query_error_envelope(message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions."""
    log.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=exc)
    if isinstance(exc, DirectoryError) or request.app.state.settings.debug:
        return error_response(str(exc))
    return error_response(GENERIC_MESSAGE)
