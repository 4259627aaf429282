"""
Extracts reply text from OpenAI response JSON.

Providers answer in several shapes depending on the API generation. Each
shape is handled by a small pure strategy; strategies are tried in order and
the first non-empty result wins.
"""
from typing import Any, Callable, Dict, List, Optional, Sequence

from chat_proxy.errors import ExtractionError

Strategy = Callable[[Dict[str, Any]], Optional[str]]


def extract_output_text(data: Dict[str, Any]) -> Optional[str]:
    """Top-level ``output_text`` convenience field."""
    text = data.get("output_text")
    if isinstance(text, str) and text:
        return text
    return None


def _output_item_parts(item: Dict[str, Any]) -> List[str]:
    parts: List[str] = []
    item_type = item.get("type")

    # {"type": "output_text", "text": [{"content": "..."}]}
    if item_type == "output_text":
        text = item.get("text")
        if isinstance(text, str):
            parts.append(text)
        elif isinstance(text, list):
            for chunk in text:
                if isinstance(chunk, dict) and isinstance(chunk.get("content"), str):
                    parts.append(chunk["content"])

    # {"type": "message", "content": [{"type": "output_text", "text": "..."}]}
    elif item_type == "message" and isinstance(item.get("content"), list):
        for block in item["content"]:
            if (
                isinstance(block, dict)
                and block.get("type") == "output_text"
                and isinstance(block.get("text"), str)
            ):
                parts.append(block["text"])

    return parts


def extract_output_items(data: Dict[str, Any]) -> Optional[str]:
    """Concatenated text of the Responses API ``output`` array."""
    output = data.get("output")
    if not isinstance(output, list):
        return None

    parts: List[str] = []
    for item in output:
        if isinstance(item, dict):
            parts.extend(_output_item_parts(item))

    text = "".join(parts)
    return text or None


def extract_legacy_choices(data: Dict[str, Any]) -> Optional[str]:
    """Chat completions ``choices[0].message.content``."""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if isinstance(content, str) and content:
        return content
    return None


DEFAULT_STRATEGIES: Sequence[Strategy] = (
    extract_output_text,
    extract_output_items,
    extract_legacy_choices,
)


def normalize_response(
    data: Any,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    model: str = "the model",
) -> str:
    """
    Reduce a provider response to plain reply text.

    Raises:
        ExtractionError: If no strategy finds non-empty text
    """
    if isinstance(data, dict):
        for strategy in strategies:
            text = strategy(data)
            if text:
                return text

    raise ExtractionError(f"No text returned from {model}")
