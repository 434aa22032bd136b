"""Tests for comparing active bindings of two stores."""

from aliencfg.models.config_store import ConfigStore
from aliencfg.services.comparison_service import compare


def _names(entries):
    return [entry.keybind.feature_name for entry in entries]


def _entries(entries):
    return [
        (e.keybind.feature_name, e.keybind.key_code, e.keybind.is_hold, e.source_label)
        for e in entries
    ]


class TestCompare:
    """ComparisonEngine behaviour."""

    def test_jump_sprint_scenario(self):
        store_a = ConfigStore.load("Jump_Key:32\n")
        store_b = ConfigStore.load("Jump_Key:32\nSprint_Key:340\n")

        result = compare(store_a, store_b)

        assert result.unique_to_a == []
        assert _names(result.unique_to_b) == ["Sprint"]
        assert result.unique_to_b[0].source_label == "B"

    def test_is_symmetric(self):
        store_a = ConfigStore.load("Jump_Key:32\nCrouch_Key:67\nCrouch_Key_hold:true\n")
        store_b = ConfigStore.load("Jump_Key:32\nSprint_Key:340\nAim_Key:-3\n")

        forward = compare(store_a, store_b, "a.cfg", "b.cfg")
        backward = compare(store_b, store_a, "b.cfg", "a.cfg")

        assert _entries(forward.unique_to_a) == _entries(backward.unique_to_b) == [
            ("Crouch", 67, True, "a.cfg"),
        ]
        assert _entries(forward.unique_to_b) == _entries(backward.unique_to_a) == [
            ("Aim", -3, False, "b.cfg"),
            ("Sprint", 340, False, "b.cfg"),
        ]

    def test_ignores_code_and_hold_differences(self):
        store_a = ConfigStore.load("Jump_Key:32\nJump_Key_hold:true\n")
        store_b = ConfigStore.load("JUMP_key:70\nJump_Key_hold:false\n")

        result = compare(store_a, store_b)

        assert result.is_identical

    def test_unbound_features_count_as_absent(self):
        store_a = ConfigStore.load("Jump_Key:32\nFly_Key:70\n")
        store_b = ConfigStore.load("Jump_Key:32\nFly_Key:-1\n")

        result = compare(store_a, store_b, "mine.cfg", "theirs.cfg")

        assert _names(result.unique_to_a) == ["Fly"]
        assert result.unique_to_a[0].source_label == "mine.cfg"
        assert result.unique_to_b == []

    def test_results_sorted_by_feature_name(self):
        store_a = ConfigStore.load("zeta_Key:1\nAlpha_Key:2\nmid_Key:3\n")

        result = compare(store_a, ConfigStore())

        assert _names(result.unique_to_a) == ["Alpha", "mid", "zeta"]

    def test_is_idempotent(self, sample_store):
        other = ConfigStore.load("Jump_Key:32\n")
        first = compare(sample_store, other)
        second = compare(sample_store, other)
        assert _entries(first.unique_to_a) == _entries(second.unique_to_a)
