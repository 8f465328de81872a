"""Request / response schemas for the accessibility endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from src.accessibility import ConformanceLevel, TextSize
from src.models.base import CompanionBase


class FontSizePreference(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


# ---------- Contrast ----------

class ContrastCheckRequest(CompanionBase):
    text: str = Field(..., examples=["#767676"])
    background: str = Field(..., examples=["#FFFFFF"])
    # Plain strings so unknown values reach the checker and get its error
    level: str = ConformanceLevel.AA.value
    size: str = TextSize.NORMAL.value


class ContrastCheckResponse(CompanionBase):
    name: str | None = None
    contrast_ratio: float
    required: float
    passes: bool
    level: ConformanceLevel
    size: TextSize
    recommendation: str


class BestTextColorResponse(CompanionBase):
    background: str
    text_color: str
    contrast_ratio: float


# ---------- Theme validation ----------

class ThemeValidationRequest(CompanionBase):
    """A theme object as the mobile client holds it.

    Only ``colors`` is read; it must contain ``text.primary``,
    ``text.secondary``, ``background``, ``surface``, ``primary``,
    ``onPrimary``, ``secondary`` and ``onSecondary``.
    """

    name: str | None = None
    colors: dict[str, Any] = Field(default_factory=dict)


class ValidationSummary(CompanionBase):
    passes: bool
    issues: list[str]
    checks: list[ContrastCheckResponse]


class SuggestionResponse(CompanionBase):
    issue: str
    current: str
    suggested: str
    improvement: str


class ThemeValidationResponse(CompanionBase):
    theme: str | None = None
    validation: ValidationSummary
    suggestions: list[SuggestionResponse]


class ThemeListResponse(CompanionBase):
    default: str
    themes: list[str]


# ---------- Accessibility preferences ----------

class AccessibilityPreferencesUpdate(CompanionBase):
    """Body for saving a user's theme / font size choice."""

    theme: str
    font_size: FontSizePreference = FontSizePreference.MEDIUM
    high_contrast: bool = True


class AccessibilityPreferencesResponse(CompanionBase):
    theme: str
    theme_passes: bool
    issues: list[str]
    saved: dict[str, Any]
