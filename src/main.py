"""Companion API — FastAPI application entry point.

Run locally:
    uvicorn src.main:app --reload --port 8000
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.accessibility.theme_loader import get_theme_catalog, reload_theme_catalog
from src.config import Settings, get_settings
from src.middleware.security import SecurityHeadersMiddleware
from src.routers import accessibility, health

# ---------- Logging ----------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger("companion")


# ---------- Lifespan ----------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup / shutdown hooks."""
    settings: Settings = app.state.settings
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(
        "Starting Companion API v%s [%s]",
        settings.app_version,
        settings.environment,
    )
    if settings.theme_catalog_path:
        catalog = reload_theme_catalog(Path(settings.theme_catalog_path))
    else:
        catalog = get_theme_catalog()
    if settings.default_theme not in catalog:
        logger.warning(
            "Default theme %r is not in the catalogue (%s)",
            settings.default_theme,
            ", ".join(catalog.names()),
        )
    yield
    logger.info("Companion API shut down")


# ---------- App factory ----------

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Companion API",
        description=(
            "Backend for the Companion mobile app — theme accessibility "
            "checks and user settings."
        ),
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ---------- Middleware (last added runs first) ----------

    # Security headers on every response
    app.add_middleware(SecurityHeadersMiddleware, settings=settings)

    # CORS wraps everything so preflight never reaches the routers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- Health check (unversioned, always at /health) ----------
    app.include_router(health.router)

    # ---------- API v1 routes ----------
    v1_prefix = "/api/v1"

    app.include_router(accessibility.router, prefix=v1_prefix)

    return app


app = create_app()
