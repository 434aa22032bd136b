"""Tests for merging keybinds into a store."""

from aliencfg.models.config_store import ConfigStore
from aliencfg.models.history import ModificationHistory
from aliencfg.models.keybind import FeatureKeybind
from aliencfg.services.merge_service import overwrite


class TestOverwrite:
    """MergeEngine behaviour."""

    def test_overwrites_key_and_hold(self, sample_store):
        result = overwrite(sample_store, [FeatureKeybind("Jump", 70, True)])

        assert result.applied_count == 2
        assert result.store.get("Jump_Key") == "70"
        assert result.store.get("Jump_Key_hold") == "true"
        assert result.not_applied == []

    def test_does_not_touch_input_store(self, sample_store):
        before = sample_store.serialize()
        overwrite(sample_store, [FeatureKeybind("Jump", 70, True)])
        assert sample_store.serialize() == before

    def test_unknown_feature_is_ignored(self, sample_store):
        ghost = FeatureKeybind("Ghost", 5)

        result = overwrite(sample_store, [ghost])

        assert result.applied_count == 0
        assert result.store == sample_store
        assert "Ghost_Key" not in result.store
        assert len(result.history) == 0
        assert result.not_applied == [ghost]

    def test_feature_names_match_case_insensitively(self, sample_store):
        result = overwrite(sample_store, [FeatureKeybind("jump", 71, False)])
        assert result.store.get("Jump_Key") == "71"
        assert "Jump_Key:71" in result.store.serialize()

    def test_history_records_old_and_new_codes(self, sample_store):
        result = overwrite(
            sample_store, [FeatureKeybind("Jump", 70), FeatureKeybind("Fly", 290)]
        )

        records = result.history.all()
        assert [(r.feature_name, r.old_key_code, r.new_key_code) for r in records] == [
            ("Jump", 32, 70),
            ("Fly", -1, 290),
        ]

    def test_unparseable_old_code_is_recorded_as_unbound(self):
        store = ConfigStore.load("Jump_Key:garbage\n")

        result = overwrite(store, [FeatureKeybind("Jump", 32)])

        assert result.history.all()[0].old_key_code == -1
        assert result.store.get("Jump_Key") == "32"
        assert result.applied_count == 1

    def test_hold_only_feature_has_no_history_entry(self):
        store = ConfigStore.load("Glide_Key_hold:false\n")

        result = overwrite(store, [FeatureKeybind("Glide", 5, True)])

        assert result.applied_count == 1
        assert result.store.get("Glide_Key_hold") == "true"
        assert "Glide_Key" not in result.store
        assert len(result.history) == 0

    def test_appends_to_given_history_in_input_order(self, sample_store):
        history = ModificationHistory()
        overwrite(sample_store, [FeatureKeybind("Zoom", 1)], history)
        overwrite(sample_store, [FeatureKeybind("Zoom", 2), FeatureKeybind("Zoom", 3)], history)

        assert [r.new_key_code for r in history.all()] == [1, 2, 3]

    def test_never_adds_keys(self, sample_store):
        result = overwrite(sample_store, [FeatureKeybind("Sprint", 1), FeatureKeybind("New", 2)])
        assert result.store.keys() == sample_store.keys()
