"""REST client for the Companion user settings API.

One client is constructed per caller and handed to whatever needs it;
nothing is created at import time.  Base URL, token source and timeout are
passed in explicitly, or taken from :class:`~src.config.Settings` with
:meth:`SettingsClient.from_settings`.

Endpoints used:
    GET    /api/settings                 — Current user settings
    PUT    /api/settings                 — Replace user settings
    PUT    /api/settings/notifications   — Notification preferences
    PUT    /api/settings/privacy         — Privacy preferences
    PUT    /api/settings/accessibility   — Font size, theme, contrast prefs
    PUT    /api/settings/language        — UI language
    PUT    /api/settings/profile         — Profile fields
    PUT    /api/settings/password        — Change password
    GET    /api/settings/export          — Export user data
    DELETE /api/settings/account         — Delete account
    POST   /api/settings/backup          — Back up user data
    POST   /api/settings/restore         — Restore a backup
    POST   /api/settings/report-issue    — Submit a support issue
    POST   /api/settings/sync            — Force a server-side sync
    GET    /api/settings/system-info     — Server version and status
    GET    /api/settings/faq             — Help centre FAQ
    GET    /api/settings/privacy-policy  — Privacy policy document
    GET    /api/settings/terms-of-service — Terms of service document
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx

from src.config import Settings
from src.models.base import utc_now

logger = logging.getLogger("companion.services.settings")

_SETTINGS_PATH = "/api/settings"

TokenProvider = Callable[[], "str | None"]


class SettingsClientError(Exception):
    """Raised when the settings API returns a non-2xx response or a body that
    is not a JSON object."""

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        body: Any,
        reason: str | None = None,
    ) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        self.reason = reason or f"HTTP {status_code}"
        super().__init__(f"{method} {path} failed with {self.reason}: {body!r}")


class SettingsClient:
    """Async client for the user settings REST API."""

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the settings client.

        Args:
            base_url:       API origin, e.g. ``https://api.example.com``.
            token_provider: Callable returning the current bearer token, or
                            None for unauthenticated calls.
            timeout:        Per-request timeout in seconds.
            http_client:    Optional pre-configured httpx client (for testing).
        """
        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider
        self._timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> "SettingsClient":
        token = settings.settings_api_token
        return cls(
            base_url=settings.settings_api_base_url,
            token_provider=(lambda: token) if token else None,
            timeout=settings.settings_api_timeout_seconds,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    async def get_user_settings(self) -> dict:
        return await self._request("GET", _SETTINGS_PATH)

    async def update_user_settings(self, settings: dict) -> dict:
        return await self._request("PUT", _SETTINGS_PATH, json=settings)

    async def update_notification_settings(self, notification_settings: dict) -> dict:
        return await self._request("PUT", f"{_SETTINGS_PATH}/notifications", json=notification_settings)

    async def update_privacy_settings(self, privacy_settings: dict) -> dict:
        return await self._request("PUT", f"{_SETTINGS_PATH}/privacy", json=privacy_settings)

    async def update_accessibility_settings(self, accessibility_settings: dict) -> dict:
        return await self._request("PUT", f"{_SETTINGS_PATH}/accessibility", json=accessibility_settings)

    async def update_language(self, language: str) -> dict:
        return await self._request("PUT", f"{_SETTINGS_PATH}/language", json={"language": language})

    async def sync_settings(self) -> dict:
        return await self._request("POST", f"{_SETTINGS_PATH}/sync")

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def update_profile(self, profile_data: dict) -> dict:
        return await self._request("PUT", f"{_SETTINGS_PATH}/profile", json=profile_data)

    async def change_password(self, current_password: str, new_password: str) -> dict:
        return await self._request(
            "PUT",
            f"{_SETTINGS_PATH}/password",
            json={"currentPassword": current_password, "newPassword": new_password},
        )

    async def export_user_data(self, format: str = "json") -> dict:
        return await self._request("GET", f"{_SETTINGS_PATH}/export", params={"format": format})

    async def delete_account(self, password: str) -> dict:
        return await self._request("DELETE", f"{_SETTINGS_PATH}/account", json={"password": password})

    async def backup_data(self) -> dict:
        return await self._request("POST", f"{_SETTINGS_PATH}/backup")

    async def restore_data(self, backup: dict) -> dict:
        return await self._request("POST", f"{_SETTINGS_PATH}/restore", json=backup)

    async def report_issue(self, issue_data: dict) -> dict:
        """Submit a support issue, stamped with the time it was reported."""
        body = {**issue_data, "reportedAt": utc_now().isoformat()}
        return await self._request("POST", f"{_SETTINGS_PATH}/report-issue", json=body)

    # ------------------------------------------------------------------
    # Support and legal
    # ------------------------------------------------------------------

    async def get_system_info(self) -> dict:
        return await self._request("GET", f"{_SETTINGS_PATH}/system-info")

    async def get_faq(self) -> dict:
        return await self._request("GET", f"{_SETTINGS_PATH}/faq")

    async def get_privacy_policy(self) -> dict:
        return await self._request("GET", f"{_SETTINGS_PATH}/privacy-policy")

    async def get_terms_of_service(self) -> dict:
        return await self._request("GET", f"{_SETTINGS_PATH}/terms-of-service")

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _build_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self._token_provider() if self._token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict | None = None,
    ) -> dict:
        """Make a request to the settings API and return the decoded body.

        Raises:
            SettingsClientError: On non-2xx responses or non-object bodies.
            httpx.HTTPError:     On transport failures.
        """
        url = f"{self._base_url}{path}"
        kwargs: dict[str, Any] = {"headers": self._build_headers(), "timeout": self._timeout}
        if json is not None:
            kwargs["json"] = json
        if params:
            kwargs["params"] = params

        if self._http_client:
            response = await self._http_client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request(method, url, **kwargs)

        if response.is_error:
            try:
                body: Any = response.json()
            except ValueError:
                body = response.text
            logger.error("Settings API %s %s returned %s", method, path, response.status_code)
            raise SettingsClientError(method, path, response.status_code, body)

        if not response.content:
            return {}
        try:
            data: Any = response.json()
        except ValueError:
            data = response.text
        if not isinstance(data, dict):
            logger.error("Settings API %s %s returned a non-object body", method, path)
            raise SettingsClientError(
                method, path, response.status_code, data, reason="a body that is not a JSON object"
            )
        return data
