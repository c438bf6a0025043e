"""
Log Entry Schema — Pydantic Models

One line of the dashboard's live stream.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Log entry severity."""
    SUCCESS = "success"
    WARNING = "warning"


class LogEntry(BaseModel):
    """Immutable log event kept in the EventLog window."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Time-derived, strictly increasing identifier")
    timestamp: datetime = Field(..., description="Wall-clock time of the event")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}:\d{2}$", description="HH:MM:SS, 24-hour")
    message: str = Field(..., min_length=1)
    severity: Severity
