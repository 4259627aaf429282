"""
Chat controller.

Runs one chat request end to end: validate the inbound body for the
deployment's chat mode, build the OpenAI payload, call the provider and
reduce the answer to plain text.
"""
import logging
from typing import Any, Dict, Union

from pydantic import BaseModel, ValidationError

from chat_proxy.api.models.chat import (
    ChatRequest,
    MessageChatRequest,
    MessagesChatRequest,
    PromptChatRequest,
)
from chat_proxy.config.settings import ChatMode, Settings
from chat_proxy.errors import ClientInputError
from chat_proxy.services.provider import (
    BuilderOptions,
    ProviderClient,
    build_provider_request,
    normalize_response,
)

logger = logging.getLogger(__name__)


class ChatController:
    """Controller for chat forwarding."""

    def __init__(self, settings: Settings, provider: ProviderClient):
        self.settings = settings
        self.provider = provider
        self.builder_options = BuilderOptions(
            model=settings.openai_model,
            default_message=settings.default_message,
        )

    def validate_request(self, body: Any) -> ChatRequest:
        """
        Validate a raw JSON body against the configured chat mode.

        Args:
            body: Decoded JSON body (None for an empty body)

        Returns:
            Typed chat request for the deployment's mode

        Raises:
            ClientInputError: If required fields are missing or malformed
        """
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise ClientInputError("Request body must be a JSON object")

        mode = self.settings.chat_mode
        if mode == ChatMode.MESSAGE:
            if not body.get("message"):
                raise ClientInputError("Missing 'message'")
            return _parse(MessageChatRequest, body)

        if mode == ChatMode.MESSAGES:
            messages = body.get("messages")
            if not isinstance(messages, list):
                raise ClientInputError("Missing 'messages'")
            if not messages and not self.settings.allow_empty_messages:
                raise ClientInputError("'messages' cannot be empty")
            return _parse(MessagesChatRequest, {"messages": messages})

        prompt = body.get("prompt")
        source = prompt if isinstance(prompt, dict) else body
        if not source.get("id") or source.get("version") in (None, ""):
            raise ClientInputError("Missing prompt 'id' and 'version'")
        return _parse(
            PromptChatRequest, {"id": source["id"], "version": source["version"]}
        )

    async def chat(self, body: Any) -> Union[str, Dict[str, Any]]:
        """
        Forward a chat request and return the reply.

        Returns:
            Reply text, or the provider's JSON unchanged when the deployment
            returns raw responses
        """
        request = self.validate_request(body)
        provider_request = build_provider_request(request, self.builder_options)

        logger.info(
            f"Forwarding {self.settings.chat_mode.value} request "
            f"to {provider_request.endpoint} ({self.settings.openai_model})"
        )
        data = await self.provider.send(provider_request)

        if self.settings.return_raw_response:
            return data
        return normalize_response(data, model=self.settings.openai_model)


def _parse(model: type, payload: Dict[str, Any]) -> BaseModel:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ClientInputError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    """First validation problem as 'field.path: message'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid value")
    return f"Invalid '{location}': {message}" if location else message
