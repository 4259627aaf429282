from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model."""

    ok: bool
    service: str
    model: str
    mode: str
    time: datetime
