from typing import Literal

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check response for a single service."""

    service: str
    version: str
    status: Literal["ok", "degraded"]
    database: Literal["connected", "disconnected"]
    timestamp: str
