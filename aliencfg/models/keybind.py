"""Feature keybind model and its JSON exchange form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..config.constants import PREVIEW_COL_CODE_WIDTH, REPORT_COL_FEATURE_WIDTH, UNBOUND_KEY_CODE
from .types import FeatureKeybindDict


@dataclass(eq=False)
class FeatureKeybind:
    """Key binding of one feature, derived from its ``_Key``/``_Key_hold`` entries."""

    feature_name: str
    key_code: int = 0
    is_hold: bool = False

    @property
    def key_type(self) -> str:
        return "Hold" if self.is_hold else "Toggle"

    @property
    def is_active(self) -> bool:
        return self.key_code != UNBOUND_KEY_CODE

    @property
    def name_key(self) -> str:
        """Case-insensitive identity of the feature."""
        return self.feature_name.casefold()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FeatureKeybind):
            return NotImplemented
        return self.name_key == other.name_key

    def __hash__(self) -> int:
        return hash(self.name_key)

    def __str__(self) -> str:
        return (
            f"{self.feature_name:<{REPORT_COL_FEATURE_WIDTH}} | "
            f"KeyCode: {self.key_code:<{PREVIEW_COL_CODE_WIDTH}} | Type: {self.key_type}"
        )

    def to_dict(self) -> FeatureKeybindDict:
        """Convert to the exchange-format dictionary."""
        return {
            "FeatureName": self.feature_name,
            "KeyCode": self.key_code,
            "IsHold": self.is_hold,
        }
