"""
FastAPI dependency injection.

The settings, schema and row source are created once by ``create_app`` and
stashed on ``app.state``; a fresh ``DirectoryDispatcher`` is built per
request around them.

Usage in routers::

    from expo_directory.api.deps import Dispatcher

    @router.get("/directory")
    def directory(dispatcher: Dispatcher):
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from expo_directory.config import DirectorySchema, DirectorySettings
from expo_directory.ops.dispatcher import DirectoryDispatcher
from expo_directory.sources.protocol import RowSource


def get_app_settings(request: Request) -> DirectorySettings:
    return request.app.state.settings


def get_source(request: Request) -> RowSource:
    return request.app.state.source


def get_schema(request: Request) -> DirectorySchema:
    return request.app.state.schema


def get_dispatcher(
    source: Annotated[RowSource, Depends(get_source)],
    schema: Annotated[DirectorySchema, Depends(get_schema)],
) -> DirectoryDispatcher:
    """Per-request dispatcher over the shared row source."""
    return DirectoryDispatcher(source, schema)


# ── Convenience type aliases ─────────────────────────────────────────────

Settings = Annotated[DirectorySettings, Depends(get_app_settings)]
Source = Annotated[RowSource, Depends(get_source)]
Dispatcher = Annotated[DirectoryDispatcher, Depends(get_dispatcher)]
