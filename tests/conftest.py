"""Shared fixtures for the chat proxy test-suite.

The OpenAI SDK is pointed at an ``httpx.MockTransport`` so no test ever
reaches the network.
"""
from __future__ import annotations

import json
from typing import Callable, Iterator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from chat_proxy.app import create_app
from chat_proxy.config.settings import Settings
from chat_proxy.services.provider import ProviderClient

Handler = Callable[[httpx.Request], httpx.Response]


def make_settings(**overrides) -> Settings:
    """Settings isolated from local .env files."""
    values = {"openai_api_key": "sk-test", "enable_request_logging": False}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeOpenAI:
    """Mock transport handler that records requests and replies with a canned answer."""

    def __init__(self, handler: Optional[Handler] = None):
        self.requests: List[httpx.Request] = []
        self.handler = handler or (
            lambda request: httpx.Response(200, json={"output_text": "Hi there!"})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def provider_client(self, settings: Settings) -> ProviderClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return ProviderClient(settings, http_client=http_client)


@pytest.fixture()
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture()
def make_client(fake_openai: FakeOpenAI) -> Iterator[Callable[..., TestClient]]:
    """Factory building a TestClient for an app configured with ``overrides``."""
    clients: List[TestClient] = []

    def _make(**overrides) -> TestClient:
        settings = make_settings(**overrides)
        app = create_app(settings, provider_client=fake_openai.provider_client(settings))
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture()
def client(make_client) -> TestClient:
    """Client for the default deployment (``messages`` mode)."""
    return make_client()
