"""TypedDict definitions for the models layer."""

from __future__ import annotations

from typing import TypedDict


class FeatureKeybindDict(TypedDict):
    FeatureName: str
    KeyCode: int
    IsHold: bool


class ModificationRecordDict(TypedDict):
    feature_name: str
    old_key_code: int
    new_key_code: int
    timestamp: str
