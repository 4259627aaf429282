from .chat import (
    ChatMessage,
    ChatRequest,
    MessageChatRequest,
    MessagesChatRequest,
    PromptChatRequest,
)
from .error import ErrorResponse
from .health import HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ChatMessage",
    "ChatRequest",
    "MessageChatRequest",
    "MessagesChatRequest",
    "PromptChatRequest",
]
