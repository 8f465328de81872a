"""Load and validate the bundled theme catalogue.

The catalogue lives in ``themes.yaml`` alongside this module.  It is loaded
once on first use and cached.  Call ``reload_theme_catalog()`` to re-read it
from disk after an update.

Usage::

    from src.accessibility.theme_loader import get_theme_catalog

    catalog = get_theme_catalog()
    light = catalog.get("light")
    catalog.names()                 # ["dark", "light"]
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.accessibility.base import AccessibilityError
from src.accessibility.theme import Theme

logger = logging.getLogger("companion.accessibility.themes")

# Path to the YAML file sitting next to this module
_CATALOG_PATH = Path(__file__).parent / "themes.yaml"


class ThemeCatalogError(ValueError):
    """Raised when themes.yaml fails validation."""


@dataclass
class ThemeCatalog:
    """All bundled themes, keyed by name."""

    version: str
    themes: dict[str, Theme] = field(default_factory=dict)

    def get(self, name: str) -> Theme:
        """Return the theme called ``name``.

        Raises:
            KeyError: No such theme.
        """
        if name not in self.themes:
            raise KeyError(f"Unknown theme: {name}. Available: {', '.join(self.names())}")
        return self.themes[name]

    def names(self) -> list[str]:
        return sorted(self.themes)

    def __contains__(self, name: object) -> bool:
        return name in self.themes


def _load_yaml(path: Path) -> Any:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ThemeCatalogError: If the file is unreadable or the YAML is malformed.
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Theme catalogue not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ThemeCatalogError(f"YAML parse error in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeCatalogError(f"Cannot read theme catalogue {path}: {exc}") from exc


def _validate_and_build(raw: Any) -> ThemeCatalog:
    """Validate the raw YAML dict and construct a ThemeCatalog.

    Every theme is checked; all problems are reported together.

    Raises:
        ThemeCatalogError: If any theme is missing colors or has bad values.
    """
    if not isinstance(raw, Mapping):
        raise ThemeCatalogError(
            f"themes.yaml must be a mapping at the top level, got {type(raw).__name__}"
        )

    errors: list[str] = []

    version = str(raw.get("version", "1.0"))
    themes_raw = raw.get("themes")
    if not isinstance(themes_raw, Mapping) or not themes_raw:
        errors.append("'themes' section is missing or empty")
        themes_raw = {}

    themes: dict[str, Theme] = {}
    for name, body in themes_raw.items():
        try:
            themes[str(name)] = Theme.from_mapping(body, name=str(name))
        except AccessibilityError as exc:
            errors.append(f"themes.{name}: {exc}")

    if errors:
        raise ThemeCatalogError(
            f"themes.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return ThemeCatalog(version=version, themes=themes)


def load_theme_catalog(path: Path | None = None) -> ThemeCatalog:
    """Load and validate the theme catalogue from disk.

    Args:
        path: Override path to YAML.  Uses the bundled themes.yaml by default.
    """
    target = path or _CATALOG_PATH
    catalog = _validate_and_build(_load_yaml(target))
    logger.info("Loaded %d themes (v%s) from %s", len(catalog.themes), catalog.version, target)
    return catalog


# ---------------------------------------------------------------------------
# Cached catalogue with reload support
# ---------------------------------------------------------------------------

_catalog: ThemeCatalog | None = None
_catalog_lock = threading.Lock()


def get_theme_catalog() -> ThemeCatalog:
    """Return the cached ThemeCatalog, loading it on first call.  Thread-safe."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = load_theme_catalog()
    return _catalog


def reload_theme_catalog(path: Path | None = None) -> ThemeCatalog:
    """Reload the catalogue and replace the cached one.

    The new file is validated first; on failure the old catalogue is kept
    and the error is re-raised.

    Raises:
        ThemeCatalogError: If the new catalogue is invalid.
        FileNotFoundError: If the file is missing.
    """
    global _catalog
    new_catalog = load_theme_catalog(path)
    with _catalog_lock:
        _catalog = new_catalog
    return new_catalog
