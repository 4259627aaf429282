"""
Maps validated chat requests onto OpenAI request payloads.

Pure transformation: no I/O, same input gives the same payload.
"""
from dataclasses import dataclass
from typing import Any, Dict

from chat_proxy.api.models.chat import (
    ChatRequest,
    MessageChatRequest,
    MessagesChatRequest,
    PromptChatRequest,
)

CHAT_COMPLETIONS = "chat.completions"
RESPONSES = "responses"


@dataclass(frozen=True)
class BuilderOptions:
    model: str
    default_message: str = "Hello!"


@dataclass(frozen=True)
class ProviderRequest:
    """Outbound call: which OpenAI endpoint to hit and the JSON body to send."""

    endpoint: str
    body: Dict[str, Any]


def build_provider_request(
    request: ChatRequest, options: BuilderOptions
) -> ProviderRequest:
    """
    Build the provider payload for a chat request.

    Args:
        request: Validated request for the deployment's chat mode
        options: Model and fallback message

    Returns:
        ProviderRequest targeting chat completions (``message`` mode) or
        the Responses API (``messages`` and ``prompt`` modes)
    """
    if isinstance(request, MessageChatRequest):
        return ProviderRequest(
            endpoint=CHAT_COMPLETIONS,
            body={
                "model": options.model,
                "messages": [{"role": "user", "content": request.message}],
            },
        )

    if isinstance(request, MessagesChatRequest):
        messages = [m.model_dump() for m in request.messages]
        if not messages:
            messages = [{"role": "user", "content": options.default_message}]
        return ProviderRequest(
            endpoint=RESPONSES,
            body={"model": options.model, "input": messages},
        )

    if isinstance(request, PromptChatRequest):
        return ProviderRequest(
            endpoint=RESPONSES,
            body={
                "model": options.model,
                "prompt": {"id": request.id, "version": request.version},
            },
        )

    raise TypeError(f"Unsupported chat request type: {type(request).__name__}")
