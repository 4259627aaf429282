"""
Request and response models for chat endpoints.
"""
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, field_validator


class ChatMessage(BaseModel):
    """Single role/content pair."""

    role: Literal["system", "developer", "user", "assistant"]
    content: Union[str, List[Dict[str, Any]]]


class MessageChatRequest(BaseModel):
    """Payload for ``message`` mode: one free-text user message."""

    message: str

    @field_validator("message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message cannot be empty")
        return value


class MessagesChatRequest(BaseModel):
    """Payload for ``messages`` mode.

    - messages: ordered list of {role: "user" | "assistant" | ..., content}
    """

    messages: List[ChatMessage]


class PromptChatRequest(BaseModel):
    """Payload for ``prompt`` mode: a stored prompt identifier and version."""

    id: str
    version: str

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("id", "version")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


ChatRequest = Union[MessageChatRequest, MessagesChatRequest, PromptChatRequest]
