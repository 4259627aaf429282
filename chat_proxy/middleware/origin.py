"""
Origin allow-list middleware.

Browsers only enforce CORS on the client side; this rejects cross-origin
calls from origins outside the allow-list before they reach any handler.
Requests without an Origin header (curl, server-to-server) pass through.
"""
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """Middleware enforcing the CORS origin allow-list."""

    def __init__(self, app, is_allowed: Callable[[str], bool]):
        super().__init__(app)
        self.is_allowed = is_allowed

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")
        if origin and not self.is_allowed(origin):
            logger.warning(f"CORS blocked for origin: {origin}")
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={"error": f"CORS blocked for origin: {origin}"},
            )
        return await call_next(request)
