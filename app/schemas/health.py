"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus connection-pool reachability."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: Literal["dev", "prod"] = Field(description="Current app environment")
    database: Literal["connected", "disconnected"] = Field(
        description="Whether a pooled connection could run SELECT 1",
    )
