"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is loaded from environment variables (or .env file)."""

    # --- App ---
    app_name: str = "Companion"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"  # development | staging | production

    # --- Settings API (consumed by SettingsClient) ---
    settings_api_base_url: str = "http://localhost:3000"
    settings_api_token: str = ""  # bearer token; empty = unauthenticated
    settings_api_timeout_seconds: float = 30.0

    # --- Themes ---
    default_theme: str = "light"
    theme_catalog_path: str | None = None  # override bundled themes.yaml

    # --- CORS ---
    cors_origins: list[str] = ["http://localhost:8081"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
