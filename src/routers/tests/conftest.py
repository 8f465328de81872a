"""Fixtures for exercising the HTTP API through FastAPI's TestClient."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from src.config import Settings, get_settings
from src.dependencies import get_settings_client
from src.main import create_app
from src.services.settings_client import SettingsClient

SETTINGS_API_URL = "https://settings.test"


class FakeSettingsApi:
    """Stands in for the remote settings service behind an httpx MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.error: Exception | None = None
        self.reply: object = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.reply is not None:
            return httpx.Response(self.status_code, json=self.reply)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json={"error": "settings unavailable"})
        body = json.loads(request.content) if request.content else {}
        return httpx.Response(self.status_code, json={"accessibility": body})


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="development",
        settings_api_base_url=SETTINGS_API_URL,
        default_theme="light",
    )


@pytest.fixture
def settings_api() -> FakeSettingsApi:
    return FakeSettingsApi()


@pytest.fixture
def api_client(test_settings: Settings, settings_api: FakeSettingsApi) -> Iterator[TestClient]:
    app = create_app(test_settings)

    async def _settings_client() -> AsyncIterator[SettingsClient]:
        transport = httpx.MockTransport(settings_api.handler)
        async with httpx.AsyncClient(transport=transport) as http_client:
            yield SettingsClient(
                base_url=test_settings.settings_api_base_url,
                token_provider=lambda: "caller-token",
                http_client=http_client,
            )

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_settings_client] = _settings_client

    with TestClient(app) as client:
        yield client
