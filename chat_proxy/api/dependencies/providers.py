"""
Dependencies resolving per-application objects from ``app.state``.

Settings and the provider client are built once in ``create_app`` and shared
by every request.
"""
from fastapi import Request

from chat_proxy.config.settings import Settings
from chat_proxy.controllers.chat_controller import ChatController
from chat_proxy.services.provider import ProviderClient


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_provider_client(request: Request) -> ProviderClient:
    return request.app.state.provider_client


def get_chat_controller(request: Request) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(get_app_settings(request), get_provider_client(request))
