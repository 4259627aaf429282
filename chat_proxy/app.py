"""
LunaBot Chat API
FastAPI application forwarding chat messages to OpenAI.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from chat_proxy.api.routers import api_router
from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.middleware import (
    BodySizeLimitMiddleware,
    ErrorHandlingMiddleware,
    OriginAllowListMiddleware,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
)
from chat_proxy.middleware.error_handling import http_exception_handler
from chat_proxy.services.provider import ProviderClient
from chat_proxy.utils.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings: Settings = app.state.settings
    logger.info(
        f"Starting {settings.app_name} ({settings.chat_mode.value} mode, "
        f"model {settings.openai_model}, environment {settings.environment})"
    )
    yield
    logger.info("Shutting down...")
    await app.state.provider_client.close()


def create_app(
    settings: Optional[Settings] = None,
    provider_client: Optional[ProviderClient] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings; loaded from the environment if omitted
        provider_client: Provider client to use; built from settings if omitted

    Raises:
        ConfigurationError: If the OpenAI API key is missing
    """
    settings = settings or get_settings()
    settings.ensure_configured()

    app = FastAPI(
        title=settings.app_name,
        description="Chat proxy forwarding messages to OpenAI",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.provider_client = provider_client or ProviderClient(settings)
    app.state.rate_limiter = FixedWindowRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )

    # Middleware added last runs first:
    # logging -> body limit -> rate limit -> origin check -> CORS -> errors
    app.add_middleware(ErrorHandlingMiddleware, is_production=settings.is_production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origin_list,
        allow_origin_regex=settings.allowed_origin_regex,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginAllowListMiddleware, is_allowed=settings.is_origin_allowed)
    app.add_middleware(RateLimitMiddleware, limiter=app.state.rate_limiter)
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(api_router)

    return app
