"""Shared API response models."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

# Re-export ToolError for convenience - this is the standard error format
from opday.models.errors import ErrorCode, ToolError

__all__ = [
    "ErrorCode",
    "HealthResponse",
    "ToolError",
]


class HealthResponse(BaseModel):
    """Service health status."""

    model_config = ConfigDict(strict=True)

    status: str = Field(default="ok", examples=["ok"])
    timestamp: dt.datetime
    service: str = Field(default="operational-day-api")
    version: str = Field(..., examples=["0.1.0"])
