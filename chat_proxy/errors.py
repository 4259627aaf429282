"""
Error taxonomy for the chat proxy.

Every error that can reach a client carries the HTTP status it maps to;
ErrorHandlingMiddleware turns it into an ``{"error": message}`` envelope.
"""
from typing import Optional

from fastapi import status


class ChatProxyError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientInputError(ChatProxyError):
    """Inbound request is missing required fields or is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(ChatProxyError):
    """Provider answered with a non-success status."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, status_code: int, body: str):
        super().__init__(
            body or "OpenAI API error",
            status_code=status_code or status.HTTP_502_BAD_GATEWAY,
        )
        self.body = body


class ExtractionError(ChatProxyError):
    """Provider response carried no recognizable text."""

    status_code = status.HTTP_502_BAD_GATEWAY


class TransportError(ChatProxyError):
    """Provider could not be reached (timeout, DNS, reset)."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Failed to reach the language model provider"):
        super().__init__(message)


class ConfigurationError(Exception):
    """Required configuration is missing; raised before the server starts."""
