"""
Health check endpoints.
Simple endpoints for monitoring application liveness.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from chat_proxy.api.dependencies.providers import get_app_settings
from chat_proxy.api.models import HealthResponse
from chat_proxy.config.settings import Settings

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Plain-text liveness banner."""
    return "LunaBot Chat API server is running."


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic health check endpoint."""
    return HealthResponse(
        ok=True,
        service=settings.service_name,
        model=settings.openai_model,
        mode=settings.chat_mode.value,
        time=datetime.now(timezone.utc),
    )
