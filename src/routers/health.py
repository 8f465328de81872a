"""Health check endpoint — public, no auth required."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from src.accessibility.theme_loader import ThemeCatalogError, get_theme_catalog
from src.config import get_settings
from src.models.base import utc_now

router = APIRouter(tags=["system"])
logger = logging.getLogger("companion.health")


@router.get("/health")
async def health_check() -> dict:
    """Liveness probe. Returns 200 if the API process is up.

    Also reports whether the bundled theme catalogue loads.
    """
    settings = get_settings()
    themes_ok = False
    try:
        themes_ok = bool(get_theme_catalog().themes)
    except (ThemeCatalogError, FileNotFoundError) as exc:
        logger.warning("Health check theme catalogue probe failed: %s", exc)

    return {
        "status": "healthy" if themes_ok else "degraded",
        "version": settings.app_version,
        "environment": settings.environment,
        "themes": "loaded" if themes_ok else "unavailable",
        "timestamp": utc_now().isoformat(),
    }
