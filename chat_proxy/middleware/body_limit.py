"""
Request size limiting middleware.
Rejects request bodies larger than the configured threshold with 413.
"""
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT", "PATCH", "DELETE")


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware enforcing a maximum request body size."""

    def __init__(self, app, max_body_bytes: int):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method not in BODY_METHODS:
            return await call_next(request)

        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                declared_size = int(declared)
            except ValueError:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"error": "Invalid Content-Length header"},
                )
            if declared_size > self.max_body_bytes:
                return self._too_large(request, declared_size)

        # Chunked bodies carry no Content-Length: count while reading and stop
        # at the first chunk past the limit.
        chunks = []
        received = 0
        async for chunk in request.stream():
            received += len(chunk)
            if received > self.max_body_bytes:
                return self._too_large(request, received)
            chunks.append(chunk)

        # Cache the body the way Request.body() does; downstream handlers get
        # it replayed instead of reading the drained stream.
        request._body = b"".join(chunks)

        return await call_next(request)

    def _too_large(self, request: Request, size: int) -> JSONResponse:
        logger.warning(
            f"Rejected {request.method} {request.url.path}: body of at least "
            f"{size} bytes exceeds limit of {self.max_body_bytes}"
        )
        return JSONResponse(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            content={"error": "Request body too large"},
        )
