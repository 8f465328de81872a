"""Companion theme accessibility checker — public API.

Usage::

    from src.accessibility import check_accessibility, render_report, validate_theme

    result = check_accessibility("#767676", "#FFFFFF")
    print(result.contrast_ratio, result.passes)     # 4.54 True

    report = validate_theme(theme)                  # Theme or nested mapping
    for issue in report.issues:
        print(issue)

    print(render_report(theme))

All functions are pure: they never mutate the theme and keep no state
between calls.
"""

from __future__ import annotations

from src.accessibility.base import (
    AccessibilityError,
    Color,
    ColorPair,
    ConformanceLevel,
    ContrastResult,
    InvalidColorError,
    InvalidParameterError,
    MissingThemeFieldError,
    Suggestion,
    TextSize,
    ValidationReport,
)
from src.accessibility.contrast import (
    best_text_color,
    check_accessibility,
    contrast_ratio,
    relative_luminance,
    required_ratio,
)
from src.accessibility.report import format_report, format_report_json, render_report, report_document
from src.accessibility.theme import Theme
from src.accessibility.validator import suggest_improvements, theme_color_pairs, validate_theme

__all__ = [
    "AccessibilityError",
    "Color",
    "ColorPair",
    "ConformanceLevel",
    "ContrastResult",
    "InvalidColorError",
    "InvalidParameterError",
    "MissingThemeFieldError",
    "Suggestion",
    "TextSize",
    "Theme",
    "ValidationReport",
    "best_text_color",
    "check_accessibility",
    "contrast_ratio",
    "format_report",
    "format_report_json",
    "report_document",
    "relative_luminance",
    "render_report",
    "required_ratio",
    "suggest_improvements",
    "theme_color_pairs",
    "validate_theme",
]
