"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers, and
lifespan events into a single ``FastAPI`` instance.

Manifesto:
    The app factory is the single composition root. Settings, the
    directory schema and the row source are built here once and parked
    on ``app.state``; routers only ever see them through ``deps``.

Tags:
    expo-directory, api, app-factory, composition-root, FastAPI
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expo_directory.api.middleware.errors import unhandled_exception_handler
from expo_directory.api.middleware.request_id import RequestIDMiddleware
from expo_directory.api.middleware.timing import TimingMiddleware
from expo_directory.config import DirectorySchema, DirectorySettings, get_settings
from expo_directory.core.logging import configure_logging, get_logger
from expo_directory.sources import create_source
from expo_directory.sources.protocol import RowSource


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — startup / shutdown hooks."""
    settings: DirectorySettings = app.state.settings
    configure_logging(level=settings.log_level, format=settings.log_format)

    log = get_logger("expo_directory.api")
    log.info(
        "expo-directory API starting",
        version=app.version,
        source=app.state.source.name,
        prefix=settings.api_prefix,
    )
    yield
    log.info("expo-directory API shutting down")


def create_app(
    *,
    settings: DirectorySettings | None = None,
    source: RowSource | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : DirectorySettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    source : RowSource | None
        Row source to serve from.  When ``None`` one is built from
        ``settings.source_kind``.
    """
    settings = settings or get_settings()
    schema = DirectorySchema.from_settings(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    app.state.settings = settings
    app.state.schema = schema
    app.state.source = source if source is not None else create_source(settings, schema)

    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (innermost → outermost) ────────────────────────────
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from expo_directory.api.routers import directory, health

    app.include_router(health.router, tags=["health"])
    app.include_router(directory.router, prefix=settings.api_prefix, tags=["directory"])

    return app
