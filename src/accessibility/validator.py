"""Theme-level accessibility validation and color suggestions."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Union

from src.accessibility.base import (
    ColorPair,
    ConformanceLevel,
    Suggestion,
    TextSize,
    ValidationReport,
)
from src.accessibility.contrast import best_text_color, check_accessibility, contrast_ratio
from src.accessibility.theme import Theme

logger = logging.getLogger("companion.accessibility.validator")

ThemeLike = Union[Theme, Mapping[str, Any]]

PRIMARY_TEXT_ON_BACKGROUND = "Primary text on background"
SECONDARY_TEXT_ON_BACKGROUND = "Secondary text on background"
TEXT_ON_SURFACE = "Text on surface"
TEXT_ON_PRIMARY_BUTTON = "Text on primary button"
TEXT_ON_SECONDARY_BUTTON = "Text on secondary button"


def coerce_theme(theme: ThemeLike) -> Theme:
    if isinstance(theme, Theme):
        return theme
    return Theme.from_mapping(theme)


def theme_color_pairs(theme: ThemeLike) -> list[ColorPair]:
    """The semantic color pairs checked for a theme, in report order."""
    t = coerce_theme(theme)
    return [
        ColorPair(PRIMARY_TEXT_ON_BACKGROUND, t.text_primary, t.background),
        ColorPair(SECONDARY_TEXT_ON_BACKGROUND, t.text_secondary, t.background),
        ColorPair(TEXT_ON_SURFACE, t.text_primary, t.surface),
        ColorPair(TEXT_ON_PRIMARY_BUTTON, t.on_primary, t.primary),
        ColorPair(TEXT_ON_SECONDARY_BUTTON, t.on_secondary, t.secondary),
    ]


def validate_theme(theme: ThemeLike) -> ValidationReport:
    """Check every semantic pair of a theme at WCAG AA, normal text.

    Args:
        theme: A :class:`Theme` or a nested theme mapping.

    Returns:
        ValidationReport whose ``checks`` follow :func:`theme_color_pairs`
        order and whose ``issues`` list the failing pair names.

    Raises:
        MissingThemeFieldError: A required color path is absent.
        InvalidColorError:      A theme color is malformed.
    """
    t = coerce_theme(theme)
    checks = []
    issues = []
    for pair in theme_color_pairs(t):
        result = check_accessibility(pair.text, pair.background, ConformanceLevel.AA, TextSize.NORMAL)
        result = dataclasses.replace(result, name=pair.name)
        checks.append(result)
        if not result.passes:
            issues.append(pair.name)

    report = ValidationReport(
        passes=not issues,
        issues=tuple(issues),
        checks=tuple(checks),
    )
    logger.info(
        "Validated theme %s: %d/%d checks passed",
        t.name or "<unnamed>",
        len(checks) - len(issues),
        len(checks),
    )
    return report


def suggest_improvements(theme: ThemeLike) -> tuple[Suggestion, ...]:
    """Suggest a replacement primary text color when it fails on the background.

    Only the primary-text-on-background pair is inspected; other failing
    pairs get no suggestion.
    """
    t = coerce_theme(theme)
    current = check_accessibility(t.text_primary, t.background)
    if current.passes:
        return ()

    better = best_text_color(t.background)
    new_ratio = contrast_ratio(better, t.background)
    logger.debug("Suggesting %s over %s for theme %s", better, t.text_primary, t.name)
    return (
        Suggestion(
            issue=f"{PRIMARY_TEXT_ON_BACKGROUND} has poor contrast",
            current=t.text_primary,
            suggested=better,
            improvement=(
                f"Contrast ratio would improve from {current.contrast_ratio:.2f}:1 "
                f"to {new_ratio:.2f}:1"
            ),
        ),
    )
