"""Tests for theme validation and the suggestion engine."""

from __future__ import annotations

import pytest

from src.accessibility.base import (
    BLACK,
    WHITE,
    Color,
    ConformanceLevel,
    InvalidColorError,
    MissingThemeFieldError,
    TextSize,
)
from src.accessibility.contrast import contrast_ratio
from src.accessibility.tests.conftest import make_theme_mapping
from src.accessibility.theme import Theme
from src.accessibility.validator import (
    PRIMARY_TEXT_ON_BACKGROUND,
    SECONDARY_TEXT_ON_BACKGROUND,
    TEXT_ON_PRIMARY_BUTTON,
    TEXT_ON_SECONDARY_BUTTON,
    TEXT_ON_SURFACE,
    suggest_improvements,
    theme_color_pairs,
    validate_theme,
)

PAIR_ORDER = [
    PRIMARY_TEXT_ON_BACKGROUND,
    SECONDARY_TEXT_ON_BACKGROUND,
    TEXT_ON_SURFACE,
    TEXT_ON_PRIMARY_BUTTON,
    TEXT_ON_SECONDARY_BUTTON,
]


# ---------------------------------------------------------------------------
# Pair enumeration
# ---------------------------------------------------------------------------


class TestThemeColorPairs:
    def test_fixed_order(self, material_theme):
        assert [p.name for p in theme_color_pairs(material_theme)] == PAIR_ORDER

    def test_pair_colors(self, material_theme):
        pairs = {p.name: p for p in theme_color_pairs(material_theme)}
        assert pairs[TEXT_ON_SURFACE].text == material_theme.text_primary
        assert pairs[TEXT_ON_SURFACE].background == material_theme.surface
        assert pairs[TEXT_ON_PRIMARY_BUTTON].text == material_theme.on_primary
        assert pairs[TEXT_ON_PRIMARY_BUTTON].background == material_theme.primary
        assert pairs[TEXT_ON_SECONDARY_BUTTON].text == material_theme.on_secondary
        assert pairs[TEXT_ON_SECONDARY_BUTTON].background == material_theme.secondary


# ---------------------------------------------------------------------------
# validate_theme
# ---------------------------------------------------------------------------


class TestValidateTheme:
    def test_material_scenario(self, material_theme_mapping):
        """Black/gray text on white with Google blue and gray buttons."""
        report = validate_theme(material_theme_mapping)

        assert [c.name for c in report.checks] == PAIR_ORDER
        by_name = {c.name: c for c in report.checks}

        assert by_name[PRIMARY_TEXT_ON_BACKGROUND].contrast_ratio == pytest.approx(21.0, abs=0.01)
        assert by_name[PRIMARY_TEXT_ON_BACKGROUND].passes is True
        assert by_name[SECONDARY_TEXT_ON_BACKGROUND].contrast_ratio == pytest.approx(4.54, abs=0.01)
        assert by_name[SECONDARY_TEXT_ON_BACKGROUND].passes is True
        assert by_name[TEXT_ON_SURFACE].contrast_ratio == pytest.approx(21.0, abs=0.01)
        assert by_name[TEXT_ON_PRIMARY_BUTTON].contrast_ratio == pytest.approx(4.5, abs=0.02)
        assert by_name[TEXT_ON_PRIMARY_BUTTON].passes is True
        assert by_name[TEXT_ON_SECONDARY_BUTTON].contrast_ratio == pytest.approx(6.05, abs=0.05)
        assert by_name[TEXT_ON_SECONDARY_BUTTON].passes is True

        assert report.passes is True
        assert report.issues == ()

    def test_every_check_is_aa_normal(self, material_theme):
        for check in validate_theme(material_theme).checks:
            assert check.level is ConformanceLevel.AA
            assert check.size is TextSize.NORMAL
            assert check.required == 4.5

    def test_accepts_theme_or_mapping(self, material_theme, material_theme_mapping):
        assert validate_theme(material_theme) == validate_theme(material_theme_mapping)

    def test_low_contrast_issues_in_check_order(self, low_contrast_theme):
        report = validate_theme(low_contrast_theme)
        assert report.passes is False
        assert report.issues == (PRIMARY_TEXT_ON_BACKGROUND, TEXT_ON_SURFACE)

    def test_issues_match_failing_checks(self):
        theme = Theme.from_mapping(
            make_theme_mapping(
                text_secondary="#BBBBBB",
                primary="#60A5FA",
                secondary="#93C5FD",
            )
        )
        report = validate_theme(theme)
        failing = [c.name for c in report.checks if not c.passes]
        assert list(report.issues) == failing
        assert failing == [SECONDARY_TEXT_ON_BACKGROUND, TEXT_ON_PRIMARY_BUTTON, TEXT_ON_SECONDARY_BUTTON]
        assert report.passes is False

    def test_passes_is_conjunction(self, material_theme, low_contrast_theme):
        for theme in (material_theme, low_contrast_theme):
            report = validate_theme(theme)
            assert report.passes == all(c.passes for c in report.checks)

    def test_does_not_mutate_mapping(self, frozen_mapping):
        mapping, snapshot = frozen_mapping
        validate_theme(mapping)
        assert mapping == snapshot

    def test_missing_field(self, material_theme_mapping):
        del material_theme_mapping["colors"]["onPrimary"]
        with pytest.raises(MissingThemeFieldError) as exc_info:
            validate_theme(material_theme_mapping)
        assert exc_info.value.path == "colors.onPrimary"

    def test_invalid_color(self):
        with pytest.raises(InvalidColorError):
            validate_theme(make_theme_mapping(background="#FFFFF"))

    def test_to_dict(self, low_contrast_theme):
        d = validate_theme(low_contrast_theme).to_dict()
        assert d["passes"] is False
        assert d["issues"] == [PRIMARY_TEXT_ON_BACKGROUND, TEXT_ON_SURFACE]
        assert [c["name"] for c in d["checks"]] == PAIR_ORDER

    def test_deterministic(self, material_theme):
        assert validate_theme(material_theme) == validate_theme(material_theme)


# ---------------------------------------------------------------------------
# suggest_improvements
# ---------------------------------------------------------------------------


class TestSuggestImprovements:
    def test_no_suggestion_when_primary_text_passes(self, material_theme):
        assert suggest_improvements(material_theme) == ()

    def test_light_gray_on_white_suggests_black(self, low_contrast_theme):
        suggestions = suggest_improvements(low_contrast_theme)
        assert len(suggestions) == 1
        s = suggestions[0]
        assert s.issue == "Primary text on background has poor contrast"
        assert s.current == Color.parse("#AAAAAA")
        assert s.suggested == BLACK
        assert s.improvement == "Contrast ratio would improve from 2.32:1 to 21.00:1"

    def test_dark_gray_on_black_suggests_white(self):
        theme = Theme.from_mapping(make_theme_mapping(text_primary="#222222", background="#000000"))
        (s,) = suggest_improvements(theme)
        assert s.suggested == WHITE
        assert s.improvement.endswith(f"to {contrast_ratio(WHITE, BLACK):.2f}:1")

    def test_only_primary_pair_inspected(self):
        # Failing buttons and secondary text, passing primary text
        theme = Theme.from_mapping(
            make_theme_mapping(text_secondary="#EEEEEE", primary="#FFFF00", secondary="#F0F0F0")
        )
        assert validate_theme(theme).passes is False
        assert suggest_improvements(theme) == ()

    def test_accepts_mapping(self):
        mapping = make_theme_mapping(text_primary="#AAAAAA")
        assert len(suggest_improvements(mapping)) == 1

    def test_to_dict_uses_hex(self, low_contrast_theme):
        d = suggest_improvements(low_contrast_theme)[0].to_dict()
        assert d["current"] == "#AAAAAA"
        assert d["suggested"] == "#000000"
