"""Data models for aliencfg."""

from .config_store import ConfigStore
from .history import ModificationHistory, ModificationRecord
from .keybind import FeatureKeybind

__all__ = ["ConfigStore", "FeatureKeybind", "ModificationHistory", "ModificationRecord"]
