"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
import re
from enum import Enum
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chat_proxy.errors import ConfigurationError


class ChatMode(str, Enum):
    """Request shape accepted by a deployment."""

    MESSAGE = "message"
    MESSAGES = "messages"
    PROMPT = "prompt"


DEFAULT_ALLOWED_ORIGINS = (
    "https://chat.lunabotai.com,"
    "http://localhost:3000,"
    "http://127.0.0.1:3000"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "LunaBot Chat API"
    service_name: str = "lunabotai-backend"
    environment: str = Field(
        default="local", validation_alias="SYSTEM_ENVIRONMENT"
    )
    host: str = "0.0.0.0"
    port: int = 8080

    # OpenAI settings
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-5"
    provider_timeout_seconds: float = Field(default=30.0, gt=0)

    # Chat contract
    chat_mode: ChatMode = ChatMode.MESSAGES
    default_message: str = "Hello!"
    allow_empty_messages: bool = False
    reply_key: Optional[str] = None
    return_raw_response: bool = False

    # CORS settings
    allowed_origins: str = DEFAULT_ALLOWED_ORIGINS
    allowed_origin_regex: Optional[str] = None

    # Reverse proxy: let uvicorn rewrite the peer address from X-Forwarded-For
    trust_proxy_headers: bool = False
    forwarded_allow_ips: str = "127.0.0.1"

    # Abuse protection
    rate_limit_window_seconds: float = Field(default=60.0, gt=0)
    rate_limit_max_requests: int = Field(default=60, ge=1)
    max_body_bytes: int = Field(default=1024 * 1024, ge=1)

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def origin_list(self) -> List[str]:
        """Allowed CORS origins parsed from the comma separated setting."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def resolved_reply_key(self) -> str:
        if self.reply_key:
            return self.reply_key
        return "reply" if self.chat_mode == ChatMode.MESSAGE else "text"

    def is_origin_allowed(self, origin: str) -> bool:
        if origin in self.origin_list:
            return True
        if self.allowed_origin_regex:
            return re.fullmatch(self.allowed_origin_regex, origin) is not None
        return False

    def ensure_configured(self) -> None:
        """
        Verify settings required before accepting connections.

        Raises:
            ConfigurationError: If the provider API key is missing
        """
        if not self.openai_api_key.strip():
            raise ConfigurationError(
                "Missing OPENAI_API_KEY in environment variables."
            )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
