"""Typed theme record for accessibility checks.

Themes arrive as nested mappings (the same shape the mobile app's theme
objects have)::

    {
        "name": "light",
        "colors": {
            "text": {"primary": "#1E293B", "secondary": "#475569"},
            "background": "#F8FAFC",
            "surface": "#FFFFFF",
            "primary": "#60A5FA",
            "onPrimary": "#FFFFFF",
            "secondary": "#1E40AF",
            "onSecondary": "#FFFFFF",
        },
    }

``Theme.from_mapping`` checks the shape once, at the boundary, so the
validator never has to guess at missing keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.accessibility.base import Color, ColorLike, MissingThemeFieldError

# Record field → dotted path inside the theme mapping.  Order is the order
# in which missing paths are reported.
THEME_FIELD_PATHS: dict[str, str] = {
    "text_primary": "colors.text.primary",
    "text_secondary": "colors.text.secondary",
    "background": "colors.background",
    "surface": "colors.surface",
    "primary": "colors.primary",
    "on_primary": "colors.onPrimary",
    "secondary": "colors.secondary",
    "on_secondary": "colors.onSecondary",
}


def _lookup(mapping: Mapping[str, Any], path: str) -> Any:
    node: Any = mapping
    for key in path.split("."):
        if not isinstance(node, Mapping) or node.get(key) is None:
            raise MissingThemeFieldError(path)
        node = node[key]
    return node


@dataclass(frozen=True)
class Theme:
    """Every color the accessibility checks read from an app theme."""

    text_primary: Color
    text_secondary: Color
    background: Color
    surface: Color
    primary: Color
    on_primary: Color
    secondary: Color
    on_secondary: Color
    name: str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], name: str | None = None) -> "Theme":
        """Build a Theme from a nested ``colors`` mapping.

        Args:
            mapping: Theme object; keys other than the required colors are
                     ignored.
            name:    Label for the theme.  Defaults to ``mapping["name"]``.

        Raises:
            MissingThemeFieldError: A required path is absent or null.
            InvalidColorError:      A present value is not ``#RRGGBB``.
        """
        if not isinstance(mapping, Mapping):
            raise MissingThemeFieldError("colors")

        values: dict[str, Color] = {}
        for field_name, path in THEME_FIELD_PATHS.items():
            values[field_name] = Color.parse(_lookup(mapping, path), path)

        label = name if name is not None else mapping.get("name")
        return cls(**values, name=str(label) if label is not None else None)

    @classmethod
    def from_colors(cls, name: str | None = None, **colors: ColorLike) -> "Theme":
        """Build a Theme from keyword colors, e.g. ``text_primary="#000000"``."""
        values: dict[str, Color] = {}
        for field_name, path in THEME_FIELD_PATHS.items():
            if field_name not in colors:
                raise MissingThemeFieldError(path)
            values[field_name] = Color.coerce(colors[field_name], path)
        return cls(**values, name=name)

    def to_mapping(self) -> dict[str, Any]:
        """Nested form accepted by ``from_mapping``."""
        result: dict[str, Any] = {"colors": {"text": {}}}
        if self.name is not None:
            result["name"] = self.name
        for field_name, path in THEME_FIELD_PATHS.items():
            keys = path.split(".")[1:]
            node = result["colors"]
            for key in keys[:-1]:
                node = node.setdefault(key, {})
            node[keys[-1]] = getattr(self, field_name).hex
        return result
