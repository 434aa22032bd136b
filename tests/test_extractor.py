"""Tests for keybind extraction."""

from aliencfg.models.config_store import ConfigStore
from aliencfg.services.extractor import (
    active_keybinds,
    extract_keybinds,
    parse_bool,
    parse_int32,
)


def _fields(keybinds):
    return [(kb.feature_name, kb.key_code, kb.is_hold) for kb in keybinds]


class TestExtractKeybinds:
    """Deriving FeatureKeybind records from a store."""

    def test_jump_run_scenario(self):
        store = ConfigStore.load("Jump_Key:32\nJump_Key_hold:false\nRun_Key:-1\n")

        keybinds = extract_keybinds(store)

        assert _fields(keybinds) == [("Jump", 32, False), ("Run", -1, False)]
        assert [kb.feature_name for kb in active_keybinds(keybinds)] == ["Jump"]

    def test_pairs_suffixes_case_insensitively(self):
        store = ConfigStore.load("Dash_KEY:70\ndash_key_HOLD:TRUE\n")
        assert _fields(extract_keybinds(store)) == [("Dash", 70, True)]

    def test_hold_only_feature_defaults_key_code_to_zero(self):
        store = ConfigStore.load("Glide_Key_hold:true\n")
        assert _fields(extract_keybinds(store)) == [("Glide", 0, True)]

    def test_unparseable_values_are_ignored(self):
        store = ConfigStore.load("Jump_Key:space\nJump_Key_hold:yes\nRun_Key:5.0\n")
        assert extract_keybinds(store) == []

    def test_unrelated_keys_are_ignored(self, sample_store):
        names = [kb.feature_name for kb in extract_keybinds(sample_store)]
        assert names == ["Jump", "Sprint", "Fly", "Zoom"]

    def test_extraction_does_not_mutate_store(self, sample_store):
        before = sample_store.serialize()
        extract_keybinds(sample_store)
        assert sample_store.serialize() == before

    def test_extraction_is_idempotent(self, sample_store):
        assert _fields(extract_keybinds(sample_store)) == _fields(extract_keybinds(sample_store))

    def test_non_ascii_feature_names(self):
        store = ConfigStore.load("自动跳跃_Key:74\n自动跳跃_Key_hold:false\n")
        assert _fields(extract_keybinds(store)) == [("自动跳跃", 74, False)]


class TestActiveKeybinds:
    def test_filters_unbound_and_sorts_by_name(self, sample_store):
        active = active_keybinds(extract_keybinds(sample_store))
        assert [kb.feature_name for kb in active] == ["Jump", "Sprint", "Zoom"]


class TestValueParsing:
    def test_parse_int32(self):
        assert parse_int32("32") == 32
        assert parse_int32("-1") == -1
        assert parse_int32("+7") == 7
        assert parse_int32("1_000") is None
        assert parse_int32("2147483648") is None
        assert parse_int32("") is None

    def test_parse_bool(self):
        assert parse_bool("true") is True
        assert parse_bool("False") is False
        assert parse_bool("1") is None
