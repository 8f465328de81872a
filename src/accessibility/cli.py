"""Command-line contrast report for bundled or custom themes.

Usage::

    companion-contrast                      # every bundled theme
    companion-contrast light dark           # named bundled themes
    companion-contrast --file my_theme.yaml # themes from another catalogue
    companion-contrast light dark --json    # one JSON object keyed by theme name
    companion-contrast --pair "#767676" "#FFFFFF" --level AAA --size large

Exits 1 when any checked theme (or pair) fails, so it can gate CI.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from src.accessibility.base import AccessibilityError
from src.accessibility.contrast import check_accessibility, format_ratio
from src.accessibility.report import format_report, report_document
from src.accessibility.theme_loader import ThemeCatalogError, get_theme_catalog, load_theme_catalog
from src.accessibility.validator import suggest_improvements, validate_theme


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="companion-contrast",
        description="WCAG contrast report for Companion app themes.",
    )
    parser.add_argument("themes", nargs="*", help="Theme names (default: all)")
    parser.add_argument("-f", "--file", help="Theme catalogue YAML (default: bundled themes.yaml)")
    parser.add_argument("-j", "--json", action="store_true", help="Output one JSON object keyed by theme name")
    parser.add_argument(
        "-p",
        "--pair",
        nargs=2,
        metavar=("TEXT", "BACKGROUND"),
        help="Check a single color pair instead of themes",
    )
    parser.add_argument("-l", "--level", default="AA", help="AA or AAA (with --pair)")
    parser.add_argument("-s", "--size", default="normal", help="normal or large (with --pair)")
    return parser


def _check_pair(args: argparse.Namespace) -> int:
    text, background = args.pair
    result = check_accessibility(text, background, args.level, args.size)
    mark = "PASS" if result.passes else "FAIL"
    print(
        f"{text} on {background}: {format_ratio(result.contrast_ratio)}:1  "
        f"{result.level.value}-{result.size.value} (>= {format_ratio(result.required)}:1)  {mark}"
    )
    if not result.passes:
        print(f"  {result.recommendation}")
    return 0 if result.passes else 1


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        if args.pair:
            return _check_pair(args)

        catalog = load_theme_catalog(Path(args.file)) if args.file else get_theme_catalog()
        names = args.themes or catalog.names()
        failed = False
        documents: dict[str, dict] = {}
        for i, name in enumerate(names):
            theme = catalog.get(name)
            validation = validate_theme(theme)
            suggestions = suggest_improvements(theme)
            failed = failed or not validation.passes
            if args.json:
                documents[name] = report_document(validation, suggestions)
                continue
            if i:
                print()
            print(f"[{name}]")
            print(format_report(validation, suggestions), end="")
        if args.json:
            print(json.dumps(documents, indent=2, ensure_ascii=False))
    except (AccessibilityError, ThemeCatalogError, FileNotFoundError, KeyError) as exc:
        print(f"companion-contrast: {exc}", file=sys.stderr)
        return 2

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
