"""
Keybind extraction.

A feature ``F`` is stored as two config entries: ``F_Key`` holding an integer
key code and ``F_Key_hold`` holding ``true``/``false``. Extraction groups
those entries back into FeatureKeybind records without touching the store.
"""

import logging
import re
from typing import Dict, List, Optional

from ..config.constants import HOLD_SUFFIX, INT32_MAX, INT32_MIN, KEY_SUFFIX
from ..models.config_store import ConfigStore
from ..models.keybind import FeatureKeybind

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")

_KEY_SUFFIX_FOLDED = KEY_SUFFIX.casefold()
_HOLD_SUFFIX_FOLDED = HOLD_SUFFIX.casefold()


def parse_int32(value: str) -> Optional[int]:
    """Parse a decimal 32-bit integer; None if ``value`` is not one."""
    if not _INT_RE.match(value):
        return None
    number = int(value)
    if INT32_MIN <= number <= INT32_MAX:
        return number
    return None


def parse_bool(value: str) -> Optional[bool]:
    """Parse ``true``/``false`` in any case; None otherwise."""
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def extract_keybinds(store: ConfigStore) -> List[FeatureKeybind]:
    """
    Derive one FeatureKeybind per feature found in ``store``.

    Entries whose value does not parse are ignored. A feature that only has
    one of its two entries keeps the other field at its default
    (key_code 0, is_hold False).

    Returns:
        Keybinds in the order their features first appear in the store
    """
    keybinds: Dict[str, FeatureKeybind] = {}

    for full_key, value in store.items():
        folded = full_key.casefold()

        if folded.endswith(_KEY_SUFFIX_FOLDED):
            code = parse_int32(value)
            if code is None:
                continue
            feature_name = full_key[: -len(KEY_SUFFIX)]
            _get_or_add(keybinds, feature_name).key_code = code

        elif folded.endswith(_HOLD_SUFFIX_FOLDED):
            is_hold = parse_bool(value)
            if is_hold is None:
                continue
            feature_name = full_key[: -len(HOLD_SUFFIX)]
            _get_or_add(keybinds, feature_name).is_hold = is_hold

    logger.info("Extracted %d feature keybinds from %d config entries", len(keybinds), len(store))
    return list(keybinds.values())


def _get_or_add(keybinds: Dict[str, FeatureKeybind], feature_name: str) -> FeatureKeybind:
    folded = feature_name.casefold()
    if folded not in keybinds:
        keybinds[folded] = FeatureKeybind(feature_name=feature_name)
    return keybinds[folded]


def active_keybinds(keybinds: List[FeatureKeybind]) -> List[FeatureKeybind]:
    """Keybinds whose key code is not the unbound sentinel, sorted by name."""
    return sort_by_feature_name([kb for kb in keybinds if kb.is_active])


def sort_by_feature_name(keybinds: List[FeatureKeybind]) -> List[FeatureKeybind]:
    return sorted(keybinds, key=lambda kb: (kb.name_key, kb.feature_name))
