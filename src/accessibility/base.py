"""Base types and errors for the Companion theme accessibility checker.

Every operation in this package consumes ``Color`` values and returns the
frozen result types defined here.  These types are the single source of
truth consumed by the FastAPI layer and the settings screens.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class AccessibilityError(ValueError):
    """Base class for input errors raised by the accessibility checker."""


class InvalidColorError(AccessibilityError):
    """Raised when a color is not a 24-bit ``#RRGGBB`` hex string."""

    def __init__(self, value: Any, path: str | None = None) -> None:
        self.value = value
        self.path = path
        where = f" at '{path}'" if path else ""
        super().__init__(f"Invalid color{where}: {value!r} (expected #RRGGBB)")


class InvalidParameterError(AccessibilityError):
    """Raised for an unknown conformance level or text size."""


class MissingThemeFieldError(AccessibilityError):
    """Raised when a theme mapping lacks a required color path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Theme is missing required color '{path}'")


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidColorError((self.r, self.g, self.b))

    @classmethod
    def parse(cls, value: Any, path: str | None = None) -> "Color":
        """Parse ``#RRGGBB`` / ``RRGGBB`` (any case) into a Color.

        Raises:
            InvalidColorError: wrong length, non-hex digits, or not a string.
        """
        if not isinstance(value, str):
            raise InvalidColorError(value, path)
        m = _HEX_RE.match(value.strip())
        if not m:
            raise InvalidColorError(value, path)
        digits = m.group(1)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def coerce(cls, value: "ColorLike", path: str | None = None) -> "Color":
        if isinstance(value, Color):
            return value
        return cls.parse(value, path)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.hex


ColorLike = Union[Color, str]

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


# ---------------------------------------------------------------------------
# Conformance levels
# ---------------------------------------------------------------------------


class ConformanceLevel(str, Enum):
    """WCAG conformance level."""

    AA = "AA"
    AAA = "AAA"


class TextSize(str, Enum):
    """WCAG text size class.  Large is >= 18pt, or >= 14pt bold."""

    NORMAL = "normal"
    LARGE = "large"


# Minimum contrast ratios (WCAG 2.x, success criteria 1.4.3 and 1.4.6)
REQUIRED_RATIOS: dict[tuple[ConformanceLevel, TextSize], float] = {
    (ConformanceLevel.AA, TextSize.NORMAL): 4.5,
    (ConformanceLevel.AA, TextSize.LARGE): 3.0,
    (ConformanceLevel.AAA, TextSize.NORMAL): 7.0,
    (ConformanceLevel.AAA, TextSize.LARGE): 4.5,
}

_missing = [(lv, sz) for lv in ConformanceLevel for sz in TextSize if (lv, sz) not in REQUIRED_RATIOS]
if _missing:
    raise RuntimeError(f"REQUIRED_RATIOS has no entry for {_missing}")
del _missing


def coerce_level(level: ConformanceLevel | str) -> ConformanceLevel:
    try:
        return ConformanceLevel(level)
    except ValueError:
        raise InvalidParameterError(
            f"Unknown conformance level {level!r}; expected one of "
            f"{[lv.value for lv in ConformanceLevel]}"
        ) from None


def coerce_size(size: TextSize | str) -> TextSize:
    try:
        return TextSize(size)
    except ValueError:
        raise InvalidParameterError(
            f"Unknown text size {size!r}; expected one of {[sz.value for sz in TextSize]}"
        ) from None


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of checking one text/background pair against a threshold.

    Attributes:
        contrast_ratio: Achieved ratio, rounded to 2 decimal places.
        required:       Minimum ratio for ``level`` / ``size``.
        passes:         Decided on the unrounded ratio (inclusive).
        level:          Conformance level checked.
        size:           Text size class checked.
        recommendation: Human-readable advice.
        name:           Semantic label of the pair, when checked as part of
                        a theme.
    """

    contrast_ratio: float
    required: float
    passes: bool
    level: ConformanceLevel
    size: TextSize
    recommendation: str
    name: str | None = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "contrast_ratio": self.contrast_ratio,
            "required": self.required,
            "passes": self.passes,
            "level": self.level.value,
            "size": self.size.value,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class ColorPair:
    """A named text/background combination taken from a theme."""

    name: str
    text: Color
    background: Color


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate of every pair check for one theme."""

    passes: bool
    issues: tuple[str, ...]
    checks: tuple[ContrastResult, ...]

    def to_dict(self) -> dict:
        return {
            "passes": self.passes,
            "issues": list(self.issues),
            "checks": [c.to_dict() for c in self.checks],
        }


@dataclass(frozen=True)
class Suggestion:
    """A proposed replacement color for a failing pair."""

    issue: str
    current: Color
    suggested: Color
    improvement: str

    def to_dict(self) -> dict:
        return {
            "issue": self.issue,
            "current": self.current.hex,
            "suggested": self.suggested.hex,
            "improvement": self.improvement,
        }
