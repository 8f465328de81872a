"""Shared FastAPI dependencies injected into route handlers."""

from __future__ import annotations

from typing import Annotated, AsyncGenerator

import httpx
from fastapi import Depends, Request

from src.accessibility.theme_loader import ThemeCatalog, get_theme_catalog
from src.config import Settings, get_settings
from src.services.settings_client import SettingsClient


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return None


async def get_settings_client(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncGenerator[SettingsClient, None]:
    """Build a SettingsClient for one request and close its HTTP pool after.

    The caller's bearer token is forwarded; the configured service token is
    used only when the request carries none.
    """
    caller_token = _bearer_token(request)
    service_token = settings.settings_api_token or None

    async with httpx.AsyncClient() as http_client:
        yield SettingsClient(
            base_url=settings.settings_api_base_url,
            token_provider=lambda: caller_token or service_token,
            timeout=settings.settings_api_timeout_seconds,
            http_client=http_client,
        )


# Annotated shortcuts for route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Themes = Annotated[ThemeCatalog, Depends(get_theme_catalog)]
SettingsApi = Annotated[SettingsClient, Depends(get_settings_client)]
