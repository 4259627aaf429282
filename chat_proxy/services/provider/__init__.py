from .client import ProviderClient
from .normalizer import DEFAULT_STRATEGIES, normalize_response
from .request_builder import (
    CHAT_COMPLETIONS,
    RESPONSES,
    BuilderOptions,
    ProviderRequest,
    build_provider_request,
)

__all__ = [
    "CHAT_COMPLETIONS",
    "RESPONSES",
    "DEFAULT_STRATEGIES",
    "BuilderOptions",
    "ProviderClient",
    "ProviderRequest",
    "build_provider_request",
    "normalize_response",
]
