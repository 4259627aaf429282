"""
OpenAI provider client.

Sends a single POST per chat request through the OpenAI SDK and hands back
the raw JSON body so the normalizer can work on any response generation.
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from chat_proxy.config.settings import Settings
from chat_proxy.errors import ExtractionError, TransportError, UpstreamError
from chat_proxy.services.provider.request_builder import (
    CHAT_COMPLETIONS,
    RESPONSES,
    ProviderRequest,
)

logger = logging.getLogger(__name__)

ENDPOINT_PATHS = {
    CHAT_COMPLETIONS: "/chat/completions",
    RESPONSES: "/responses",
}


class ProviderClient:
    """Thin async wrapper around ``AsyncOpenAI`` with proxy error mapping."""

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the provider client.

        Args:
            settings: Application settings (API key, base URL, timeout)
            http_client: Optional preconfigured httpx client, used by tests
                to plug in a mock transport
        """
        self.client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.provider_timeout_seconds,
            max_retries=0,
            http_client=http_client,
        )

    async def send(self, request: ProviderRequest) -> Dict[str, Any]:
        """
        Send a provider request and return the parsed JSON response.

        Raises:
            UpstreamError: Provider returned a non-success status
            TransportError: Provider could not be reached or timed out
            ExtractionError: Provider returned a body that is not JSON
        """
        path = ENDPOINT_PATHS[request.endpoint]

        try:
            response = await self.client.post(
                path, cast_to=httpx.Response, body=request.body
            )
        except APIStatusError as e:
            body = _read_error_body(e)
            logger.error(
                "OpenAI API error",
                extra={"status_code": e.status_code, "path": path, "body": body},
            )
            raise UpstreamError(e.status_code, body) from e
        except APIConnectionError as e:
            logger.error(f"Failed to reach OpenAI at {path}: {e}", exc_info=True)
            raise TransportError() from e

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"OpenAI returned non-JSON body for {path}")
            raise ExtractionError("Provider returned a non-JSON response") from e

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("OpenAI API response: %s", json.dumps(data, indent=2))
        return data

    async def close(self) -> None:
        await self.client.close()


def _read_error_body(error: APIStatusError) -> str:
    """Best-effort text of an error response; unreadable bodies become ''."""
    try:
        return error.response.text
    except Exception:
        return ""
