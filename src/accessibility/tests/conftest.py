"""Shared fixtures for the accessibility checker test suite.

Theme mappings mirror the shape of the mobile client's theme objects:
nested ``colors`` with ``text.primary`` / ``text.secondary`` and the
Material ``onPrimary`` / ``onSecondary`` keys.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from src.accessibility.theme import Theme
from src.accessibility.theme_loader import ThemeCatalog, load_theme_catalog


def make_theme_mapping(**overrides: str) -> dict[str, Any]:
    """A passing Material-style theme; keyword overrides replace colors.

    Keys are record field names (``text_primary``, ``on_secondary``, ...).
    """
    colors = {
        "text_primary": "#000000",
        "text_secondary": "#767676",
        "background": "#FFFFFF",
        "surface": "#FFFFFF",
        "primary": "#1A73E8",
        "on_primary": "#FFFFFF",
        "secondary": "#5F6368",
        "on_secondary": "#FFFFFF",
    }
    colors.update(overrides)
    return {
        "name": "material",
        "colors": {
            "text": {
                "primary": colors["text_primary"],
                "secondary": colors["text_secondary"],
            },
            "background": colors["background"],
            "surface": colors["surface"],
            "primary": colors["primary"],
            "onPrimary": colors["on_primary"],
            "secondary": colors["secondary"],
            "onSecondary": colors["on_secondary"],
            # Extra palette keys the checker ignores
            "error": "#D93025",
            "shadow": "rgba(0, 0, 0, 0.3)",
        },
    }


@pytest.fixture
def material_theme_mapping() -> dict[str, Any]:
    return make_theme_mapping()


@pytest.fixture
def material_theme(material_theme_mapping: dict[str, Any]) -> Theme:
    return Theme.from_mapping(material_theme_mapping)


@pytest.fixture
def low_contrast_theme() -> Theme:
    """Light-gray primary text on white: fails primary and surface checks."""
    return Theme.from_mapping(make_theme_mapping(text_primary="#AAAAAA"), name="washed-out")


@pytest.fixture
def theme_catalog() -> ThemeCatalog:
    """Load the real bundled themes.yaml."""
    return load_theme_catalog()


@pytest.fixture
def frozen_mapping(material_theme_mapping: dict[str, Any]) -> tuple[dict, dict]:
    """(mapping, deep copy) pair for asserting inputs are not mutated."""
    return material_theme_mapping, copy.deepcopy(material_theme_mapping)
