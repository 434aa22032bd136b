"""Tests for fixed-width text reports."""

from aliencfg.keymap import KeyScheme
from aliencfg.models.config_store import ConfigStore
from aliencfg.models.keybind import FeatureKeybind
from aliencfg.services.comparison_service import compare
from aliencfg.services.extractor import extract_keybinds
from aliencfg.services.report import format_row, render_active_report, render_comparison_report


class TestFormatRow:
    def test_column_widths(self):
        row = format_row("Jump", 32, "SPACE", "Toggle")
        assert row == f"{'Jump':<25} | {'32':<10} | {'SPACE':<20} | Toggle"
        assert row.index("|") == 26

    def test_long_values_are_not_truncated(self):
        name = "A" * 30
        assert format_row(name, 1, "X", "Hold").startswith(name + " | ")


class TestActiveReport:
    def test_lists_active_bindings_sorted(self, sample_store):
        report = render_active_report(extract_keybinds(sample_store), KeyScheme.GLFW)

        assert "  Active features (Key != -1) - count: 3  " in report.lines
        assert "  Key scheme: GLFW  " in report.lines
        assert format_row("Jump", 32, "SPACE", "Toggle") in report.lines
        assert format_row("Sprint", 340, "LEFT SHIFT", "Hold") in report.lines
        assert format_row("Zoom", -3, "MOUSE RIGHT", "Hold") in report.lines
        assert "Fly" not in report.text
        assert report.untranslated_count == 0

    def test_rows_follow_feature_order(self):
        keybinds = [FeatureKeybind("b", 66), FeatureKeybind("A", 65), FeatureKeybind("c", 67)]
        report = render_active_report(keybinds, KeyScheme.VK)

        rows = [line for line in report.lines if line.split(" | ")[0].strip() in ("A", "b", "c")]
        assert [row.split(" | ")[0].strip() for row in rows] == ["A", "b", "c"]

    def test_counts_untranslated_codes(self):
        keybinds = [FeatureKeybind("Odd", 9999), FeatureKeybind("Jump", 32)]
        report = render_active_report(keybinds, KeyScheme.GLFW)

        assert report.untranslated_count == 1
        assert format_row("Odd", 9999, "[Code:9999]", "Toggle") in report.lines

    def test_scheme_changes_names(self):
        keybinds = [FeatureKeybind("Sprint", 16)]
        glfw = render_active_report(keybinds, KeyScheme.GLFW)
        vk = render_active_report(keybinds, KeyScheme.VK)

        assert glfw.untranslated_count == 1
        assert vk.untranslated_count == 0
        assert "SHIFT (Any)" in vk.text
        assert "  Key scheme: ASCII_VK  " in vk.lines

    def test_text_ends_with_newline(self, sample_store):
        report = render_active_report(extract_keybinds(sample_store), KeyScheme.GLFW)
        assert report.text.endswith("\n")
        assert report.text.count("\n") == len(report.lines)


class TestComparisonReport:
    def test_sections_use_labels(self):
        result = compare(
            ConfigStore.load("Jump_Key:32\n"),
            ConfigStore.load("Jump_Key:32\nSprint_Key:340\n"),
            "old.cfg",
            "new.cfg",
        )
        report = render_comparison_report(result, KeyScheme.GLFW)

        assert "  Only in old.cfg - count: 0  " in report.lines
        assert "  Only in new.cfg - count: 1  " in report.lines
        assert "  (none)" in report.lines
        assert format_row("Sprint", 340, "LEFT SHIFT", "new.cfg") in report.lines

    def test_untranslated_counts_both_sections(self):
        result = compare(ConfigStore.load("A_Key:5000\n"), ConfigStore.load("B_Key:6000\n"))
        report = render_comparison_report(result, KeyScheme.GLFW)
        assert report.untranslated_count == 2
