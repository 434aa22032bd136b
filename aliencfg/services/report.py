"""
Fixed-width text reports.

The column layout is the contract tests and users rely on:

    feature name (25) | key code (10) | key name (20) | type or source

Key names depend on the scheme, so every report states which scheme
translated it.
"""

from dataclasses import dataclass
from typing import List, Sequence

from ..config.constants import (
    REPORT_COL_CODE_WIDTH,
    REPORT_COL_FEATURE_WIDTH,
    REPORT_COL_KEY_NAME_WIDTH,
    REPORT_TOTAL_WIDTH,
)
from ..keymap import KeyScheme, is_untranslated, key_name
from ..models.keybind import FeatureKeybind
from .comparison_service import ComparisonEntry, ComparisonResult
from .extractor import active_keybinds


@dataclass
class TextReport:
    lines: List[str]
    untranslated_count: int = 0

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


def format_row(feature: str, code: object, name: str, last: str) -> str:
    return (
        f"{feature:<{REPORT_COL_FEATURE_WIDTH}} | "
        f"{str(code):<{REPORT_COL_CODE_WIDTH}} | "
        f"{name:<{REPORT_COL_KEY_NAME_WIDTH}} | {last}"
    )


def _rule(char: str) -> str:
    return char * REPORT_TOTAL_WIDTH


def render_active_report(keybinds: Sequence[FeatureKeybind], scheme: KeyScheme) -> TextReport:
    """Table of active keybinds (key code != -1), sorted by feature name."""
    active = active_keybinds(list(keybinds))

    lines = [
        _rule("="),
        f"  Active features (Key != -1) - count: {len(active)}  ",
        f"  Key scheme: {scheme.label}  ",
        _rule("="),
        format_row("Feature", "Key code", "Key name", "Type"),
        _rule("-"),
    ]

    untranslated = 0
    for keybind in active:
        name = key_name(keybind.key_code, scheme)
        if is_untranslated(name):
            untranslated += 1
        lines.append(format_row(keybind.feature_name, keybind.key_code, name, keybind.key_type))

    lines.append(_rule("="))
    return TextReport(lines=lines, untranslated_count=untranslated)


def _comparison_section(
    title: str, entries: Sequence[ComparisonEntry], scheme: KeyScheme
) -> TextReport:
    lines = [f"  {title} - count: {len(entries)}  ", _rule("-")]
    untranslated = 0
    if not entries:
        lines.append("  (none)")
    for entry in entries:
        name = key_name(entry.keybind.key_code, scheme)
        if is_untranslated(name):
            untranslated += 1
        lines.append(
            format_row(entry.keybind.feature_name, entry.keybind.key_code, name, entry.source_label)
        )
    return TextReport(lines=lines, untranslated_count=untranslated)


def render_comparison_report(result: ComparisonResult, scheme: KeyScheme) -> TextReport:
    """Two-section table of bindings active on only one side."""
    section_a = _comparison_section(f"Only in {result.label_a}", result.unique_to_a, scheme)
    section_b = _comparison_section(f"Only in {result.label_b}", result.unique_to_b, scheme)

    lines = [
        _rule("="),
        f"  Active binding comparison: {result.label_a} vs {result.label_b}  ",
        f"  Key scheme: {scheme.label}  ",
        _rule("="),
        format_row("Feature", "Key code", "Key name", "Source"),
        _rule("="),
        *section_a.lines,
        _rule("="),
        *section_b.lines,
        _rule("="),
    ]
    return TextReport(
        lines=lines,
        untranslated_count=section_a.untranslated_count + section_b.untranslated_count,
    )
