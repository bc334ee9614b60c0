"""
API schemas (Pydantic — API boundary only).

Directory envelopes are built by ``expo_directory.ops.envelopes`` and sent
as-is; the models here document the POST body and shape the health check.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AppendExhibitorBody(BaseModel):
    """POST body for appending an exhibitor (documentation only).

    The body is decoded by the dispatcher so malformed input still yields a
    JSON ``error`` reply instead of a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    action: str = Field(default="add", description="Must be 'add'")
    email: str = Field(default="", description="Contact email")
    company: str = Field(default="", description="Exhibiting company")
    person_name: str = Field(default="", alias="personName", description="Contact person")


class HealthStatus(str, Enum):
    """Health check status values."""

    OK = "ok"
    ERROR = "error"


class ComponentHealth(BaseModel):
    """Health status of a single component."""

    name: str
    status: HealthStatus
    message: str
    latency_ms: float | None = None


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: HealthStatus
    service: str
    version: str
    timestamp: str
    checks: list[ComponentHealth] = []


__all__ = ["AppendExhibitorBody", "HealthStatus", "ComponentHealth", "HealthResponse"]
