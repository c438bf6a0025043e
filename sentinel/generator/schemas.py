"""
Service Node Schema — Pydantic Models

Display-facing model for the monitored services whose latency is
jittered by the engine. Status is never transitioned automatically.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ServiceStatus(str, Enum):
    """Service health states shown on the dashboard."""
    OPERATIONAL = "operational"
    DEGRADED = "degraded"


class ServiceNode(BaseModel):
    """
    One monitored service.

    The engine owns latency_ms only; status is display-only.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique service identifier")
    name: str = Field(..., min_length=1, description="Human-readable service name")
    latency_ms: int = Field(..., ge=0, description="Current latency in milliseconds")
    status: ServiceStatus = Field(default=ServiceStatus.OPERATIONAL)
