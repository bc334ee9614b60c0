"""
Health endpoints, mounted at the root for container healthchecks.

``GET /health`` probes the row source by listing its sheets; a failing
source turns the overall status to ``error`` but still answers 200.
``GET /health/live`` always answers ``{"status": "alive"}``.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime

from fastapi import APIRouter

from expo_directory.api.deps import Settings, Source
from expo_directory.api.schemas import ComponentHealth, HealthResponse, HealthStatus
from expo_directory.core.logging import get_logger
from expo_directory.ops.dispatcher import format_timestamp
from expo_directory.sources.protocol import RowSource

log = get_logger(__name__)

router = APIRouter(prefix="/health")

SERVICE_NAME = "expo-directory"


def check_source(source: RowSource) -> ComponentHealth:
    """List the sheets of the row source and time it."""
    start = time.perf_counter()
    try:
        sheets = source.sheet_names()
    except Exception as e:  # noqa: BLE001
        log.warning("health_source_unreadable", source=source.name, error=str(e))
        return ComponentHealth(name="row_source", status=HealthStatus.ERROR, message=str(e)[:200])
    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
    return ComponentHealth(
        name="row_source",
        status=HealthStatus.OK,
        message=f"{source.name}: {len(sheets)} sheet(s)",
        latency_ms=elapsed_ms,
    )


@router.get("", response_model=HealthResponse)
def health(settings: Settings, source: Source) -> HealthResponse:
    checks = [check_source(source)]
    overall = (
        HealthStatus.OK
        if all(check.status == HealthStatus.OK for check in checks)
        else HealthStatus.ERROR
    )
    return HealthResponse(
        status=overall,
        service=SERVICE_NAME,
        version=settings.api_version,
        timestamp=format_timestamp(datetime.now(UTC)),
        checks=checks,
    )


@router.get("/live")
def liveness() -> dict[str, str]:
    return {"status": "alive"}
