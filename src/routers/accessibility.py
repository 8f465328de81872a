"""Theme accessibility endpoints.

Endpoints:
    POST /accessibility/contrast               — Check one text/background pair
    GET  /accessibility/best-text-color        — Black or white text for a background
    GET  /accessibility/themes                 — List bundled themes
    GET  /accessibility/themes/{name}          — Validate a bundled theme
    GET  /accessibility/themes/{name}/report   — Text report for a bundled theme
    POST /accessibility/themes/validate        — Validate a client-supplied theme
    POST /accessibility/themes/report          — Text report for a client-supplied theme
    PUT  /accessibility/preferences            — Save theme / font size via the settings API
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import httpx
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from src.accessibility import (
    AccessibilityError,
    Color,
    Theme,
    best_text_color,
    check_accessibility,
    contrast_ratio,
    render_report,
    suggest_improvements,
    validate_theme,
)
from src.dependencies import AppSettings, SettingsApi, Themes
from src.models.accessibility import (
    AccessibilityPreferencesResponse,
    AccessibilityPreferencesUpdate,
    BestTextColorResponse,
    ContrastCheckRequest,
    ContrastCheckResponse,
    ThemeListResponse,
    ThemeValidationRequest,
    ThemeValidationResponse,
)
from src.services.settings_client import SettingsClientError

logger = logging.getLogger("companion.routers.accessibility")

router = APIRouter(prefix="/accessibility", tags=["accessibility"])


def _unprocessable(exc: AccessibilityError) -> NoReturn:
    detail: dict[str, Any] = {"error": type(exc).__name__, "message": str(exc)}
    path = getattr(exc, "path", None)
    if path:
        detail["path"] = path
    raise HTTPException(status_code=422, detail=detail) from exc


def _theme_from_body(body: ThemeValidationRequest) -> Theme:
    try:
        return Theme.from_mapping({"colors": body.colors}, name=body.name)
    except AccessibilityError as exc:
        _unprocessable(exc)


def _bundled_theme(themes: Themes, name: str) -> Theme:
    if name not in themes:
        raise HTTPException(status_code=404, detail=f"Theme not found: {name}")
    return themes.get(name)


def _validation_payload(theme: Theme) -> dict[str, Any]:
    validation = validate_theme(theme)
    return {
        "theme": theme.name,
        "validation": validation.to_dict(),
        "suggestions": [s.to_dict() for s in suggest_improvements(theme)],
    }


# ---------------------------------------------------------------------------
# Contrast
# ---------------------------------------------------------------------------


@router.post("/contrast", response_model=ContrastCheckResponse)
async def check_contrast(body: ContrastCheckRequest) -> Any:
    """Check a single text/background pair at the requested WCAG level."""
    try:
        result = check_accessibility(body.text, body.background, body.level, body.size)
    except AccessibilityError as exc:
        _unprocessable(exc)
    return result.to_dict()


@router.get("/best-text-color", response_model=BestTextColorResponse)
async def get_best_text_color(background: str = Query(..., examples=["#1A73E8"])) -> Any:
    """Pick black or white text for a background color."""
    try:
        bg = Color.parse(background)
    except AccessibilityError as exc:
        _unprocessable(exc)
    text = best_text_color(bg)
    return {
        "background": bg.hex,
        "text_color": text.hex,
        "contrast_ratio": round(contrast_ratio(text, bg), 2),
    }


# ---------------------------------------------------------------------------
# Bundled themes
# ---------------------------------------------------------------------------


@router.get("/themes", response_model=ThemeListResponse)
async def list_themes(themes: Themes, settings: AppSettings) -> Any:
    return {"default": settings.default_theme, "themes": themes.names()}


@router.get("/themes/{name}", response_model=ThemeValidationResponse)
async def validate_bundled_theme(name: str, themes: Themes) -> Any:
    """Validate one of the bundled app themes."""
    return _validation_payload(_bundled_theme(themes, name))


@router.get("/themes/{name}/report", response_class=PlainTextResponse)
async def bundled_theme_report(name: str, themes: Themes) -> str:
    return render_report(_bundled_theme(themes, name))


# ---------------------------------------------------------------------------
# Client-supplied themes
# ---------------------------------------------------------------------------


@router.post("/themes/validate", response_model=ThemeValidationResponse)
async def validate_custom_theme(body: ThemeValidationRequest) -> Any:
    """Validate a theme object sent by the client."""
    return _validation_payload(_theme_from_body(body))


@router.post("/themes/report", response_class=PlainTextResponse)
async def custom_theme_report(body: ThemeValidationRequest) -> str:
    return render_report(_theme_from_body(body))


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------


@router.put("/preferences", response_model=AccessibilityPreferencesResponse)
async def update_accessibility_preferences(
    body: AccessibilityPreferencesUpdate,
    themes: Themes,
    settings_api: SettingsApi,
) -> Any:
    """Save the user's theme and font size through the settings API.

    The theme must be a bundled one.  Themes that fail validation are still
    saved; the response carries the issues so the client can warn the user.
    """
    theme = _bundled_theme(themes, body.theme)
    validation = validate_theme(theme)
    if not validation.passes:
        logger.warning(
            "Saving theme %s with %d accessibility issue(s)",
            body.theme,
            len(validation.issues),
        )

    payload = {
        "theme": body.theme,
        "fontSize": body.font_size.value,
        "highContrast": body.high_contrast,
    }
    try:
        saved = await settings_api.update_accessibility_settings(payload)
    except SettingsClientError as exc:
        raise HTTPException(
            status_code=502,
            detail=f"Settings service returned {exc.reason}",
        ) from exc
    except httpx.HTTPError as exc:
        logger.error("Settings service unreachable: %s", exc)
        raise HTTPException(
            status_code=502,
            detail=f"Settings service unreachable ({type(exc).__name__})",
        ) from exc

    return {
        "theme": body.theme,
        "theme_passes": validation.passes,
        "issues": list(validation.issues),
        "saved": saved,
    }
