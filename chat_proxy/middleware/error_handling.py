"""
Error handling middleware.
Centralizes error handling and response formatting for the chat proxy.
"""
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from chat_proxy.errors import ChatProxyError

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    def __init__(self, app, is_production: bool = True):
        super().__init__(app)
        self.is_production = is_production

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except ChatProxyError as e:
            context = {
                "path": request.url.path,
                "method": request.method,
                "status_code": e.status_code,
                "error_type": type(e).__name__,
            }
            if e.status_code >= 500:
                logger.error(f"Chat request failed: {e.message}", extra=context)
            else:
                logger.warning(f"Chat request rejected: {e.message}", extra=context)

            return JSONResponse(
                status_code=e.status_code, content={"error": e.message}
            )

        except Exception as e:
            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )

            content = {"error": "Internal Server Error"}
            # Don't expose internal errors in production
            if not self.is_production:
                content["message"] = f"{type(e).__name__}: {str(e)}"

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=content,
            )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing errors (404, 405) in the same ``{"error": ...}`` envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
