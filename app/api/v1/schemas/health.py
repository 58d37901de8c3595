from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response model for the versioned health check."""

    status: Literal["OK"] = "OK"
    timestamp: datetime = Field(description="UTC time at which the request was handled")


class RootHealthStatus(BaseModel):
    """Response model for the bare liveness probe."""

    status: str = "ok"
