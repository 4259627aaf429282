"""
Rate limiting middleware.
Applies a fixed-window request quota per connected peer.
"""
import logging
import math
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from chat_proxy.utils.rate_limiter import FixedWindowRateLimiter
from chat_proxy.utils.request_info import get_peer_ip

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware rejecting callers that exceed their request quota."""

    def __init__(self, app, limiter: FixedWindowRateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_ip = get_peer_ip(request)
        decision = self.limiter.hit(client_ip)

        headers = {
            "X-RateLimit-Limit": str(decision.limit),
            "X-RateLimit-Remaining": str(decision.remaining),
        }

        if not decision.allowed:
            logger.warning(
                f"Rate limit exceeded for {client_ip} on {request.url.path}"
            )
            headers["Retry-After"] = str(max(math.ceil(decision.reset_after), 1))
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": "Too many requests, please try again later."},
                headers=headers,
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response
