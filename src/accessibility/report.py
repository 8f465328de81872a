"""Text and JSON accessibility reports for a theme."""

from __future__ import annotations

import json
from collections.abc import Sequence

from src.accessibility.base import Suggestion, ValidationReport
from src.accessibility.contrast import format_ratio
from src.accessibility.validator import ThemeLike, coerce_theme, suggest_improvements, validate_theme

REPORT_TITLE = "Theme Accessibility Report"
PASS_MARK = "✅"
FAIL_MARK = "❌"
BULLET = "•"


def format_report(validation: ValidationReport, suggestions: Sequence[Suggestion] = ()) -> str:
    """Render a validation report and its suggestions as plain text."""
    lines = [REPORT_TITLE, "=" * len(REPORT_TITLE), ""]

    if validation.passes:
        lines.append(f"{PASS_MARK} All color combinations meet WCAG AA standards!")
        lines.append("")
    else:
        lines.append(f"{FAIL_MARK} {len(validation.issues)} accessibility issues found:")
        for issue in validation.issues:
            lines.append(f"  {BULLET} {issue}")
        lines.append("")

    lines.append("Detailed Checks:")
    for check in validation.checks:
        mark = PASS_MARK if check.passes else FAIL_MARK
        lines.append(
            f"{mark} {check.name}: {format_ratio(check.contrast_ratio)}:1 "
            f"(required: {format_ratio(check.required)}:1)"
        )

    if suggestions:
        lines.append("")
        lines.append("Suggested Improvements:")
        for s in suggestions:
            lines.append(f"{BULLET} {s.issue}")
            lines.append(f"  Current: {s.current.hex}")
            lines.append(f"  Suggested: {s.suggested.hex}")
            lines.append(f"  {s.improvement}")
            lines.append("")

    return "\n".join(lines) + "\n"


def report_document(validation: ValidationReport, suggestions: Sequence[Suggestion] = ()) -> dict:
    """JSON-ready dict with the same content as :func:`format_report`."""
    return {
        "validation": validation.to_dict(),
        "suggestions": [s.to_dict() for s in suggestions],
    }


def format_report_json(validation: ValidationReport, suggestions: Sequence[Suggestion] = ()) -> str:
    return json.dumps(report_document(validation, suggestions), indent=2, ensure_ascii=False)


def render_report(theme: ThemeLike) -> str:
    """Validate a theme and return the human-readable report."""
    t = coerce_theme(theme)
    return format_report(validate_theme(t), suggest_improvements(t))
