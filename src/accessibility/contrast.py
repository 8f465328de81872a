"""WCAG 2.x relative luminance and contrast ratio.

    L = 0.2126 R + 0.7152 G + 0.0722 B        (linearised sRGB channels)
    ratio = (L_lighter + 0.05) / (L_darker + 0.05)

The ratio ranges from 1 (identical colors) to 21 (black on white).
"""

from __future__ import annotations

from src.accessibility.base import (
    BLACK,
    REQUIRED_RATIOS,
    WHITE,
    Color,
    ColorLike,
    ConformanceLevel,
    ContrastResult,
    TextSize,
    coerce_level,
    coerce_size,
)

# sRGB transfer function breakpoint, as written in WCAG 2.x
_LINEAR_THRESHOLD = 0.03928

PASS_RECOMMENDATION = "Color combination meets accessibility standards"


def format_ratio(value: float) -> str:
    """Render a ratio without trailing zeros, e.g. ``21``, ``4.5``, ``4.54``."""
    return f"{value:g}"


def _linearise(channel: int) -> float:
    c = channel / 255.0
    if c <= _LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """Return the relative luminance (0.0–1.0) of a color.

    Raises:
        InvalidColorError: If ``color`` is not a valid ``#RRGGBB`` string.
    """
    c = Color.coerce(color)
    return 0.2126 * _linearise(c.r) + 0.7152 * _linearise(c.g) + 0.0722 * _linearise(c.b)


def contrast_ratio(color_a: ColorLike, color_b: ColorLike) -> float:
    """Contrast ratio between two colors.  Symmetric in its arguments."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    return (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)


def required_ratio(
    level: ConformanceLevel | str = ConformanceLevel.AA,
    size: TextSize | str = TextSize.NORMAL,
) -> float:
    """Minimum contrast ratio for a conformance level and text size.

    Raises:
        InvalidParameterError: Unknown level or size.
    """
    return REQUIRED_RATIOS[(coerce_level(level), coerce_size(size))]


def check_accessibility(
    text_color: ColorLike,
    background_color: ColorLike,
    level: ConformanceLevel | str = ConformanceLevel.AA,
    size: TextSize | str = TextSize.NORMAL,
) -> ContrastResult:
    """Check a text/background pair against the WCAG threshold.

    The pass/fail decision uses the unrounded ratio so that e.g. 4.496:1
    does not pass an AA check by displaying as 4.5:1.

    Args:
        text_color:       Foreground color.
        background_color: Background color.
        level:            ``"AA"`` or ``"AAA"``.
        size:             ``"normal"`` or ``"large"``.

    Returns:
        ContrastResult with the ratio rounded to 2 decimal places.

    Raises:
        InvalidColorError:     Either color is malformed.
        InvalidParameterError: Unknown level or size.
    """
    lv = coerce_level(level)
    sz = coerce_size(size)
    required = REQUIRED_RATIOS[(lv, sz)]

    ratio = contrast_ratio(text_color, background_color)
    passes = ratio >= required
    rounded = round(ratio, 2)

    if passes:
        recommendation = PASS_RECOMMENDATION
    else:
        recommendation = f"Increase contrast. Need {format_ratio(required)}:1, got {format_ratio(rounded)}:1"

    return ContrastResult(
        contrast_ratio=rounded,
        required=required,
        passes=passes,
        level=lv,
        size=sz,
        recommendation=recommendation,
    )


def best_text_color(background_color: ColorLike) -> Color:
    """Pick white or black text, whichever contrasts more with the background.

    White wins only when strictly better; equal ratios give black.
    """
    white_contrast = contrast_ratio(WHITE, background_color)
    black_contrast = contrast_ratio(BLACK, background_color)
    return WHITE if white_contrast > black_contrast else BLACK
