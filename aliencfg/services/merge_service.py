"""
Merge edited keybinds back into a config.

Merging never adds keys: a binding only lands if its ``_Key`` or
``_Key_hold`` entry already exists in the target store. Work happens on a
copy, so the caller's store is untouched until it chooses to keep the
result.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..config.constants import HOLD_SUFFIX, KEY_SUFFIX, UNBOUND_KEY_CODE
from ..models.config_store import ConfigStore
from ..models.history import ModificationHistory, ModificationRecord
from ..models.keybind import FeatureKeybind
from .extractor import format_bool, parse_int32

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Outcome of an overwrite."""

    store: ConfigStore
    applied_count: int  # Field overwrites; key and hold count separately
    history: ModificationHistory
    not_applied: List[FeatureKeybind] = field(default_factory=list)


def overwrite(
    store: ConfigStore,
    new_bindings: Iterable[FeatureKeybind],
    history: Optional[ModificationHistory] = None,
) -> MergeResult:
    """
    Overwrite key codes and hold flags in a copy of ``store``.

    Args:
        store: Config to merge into; not modified
        new_bindings: Bindings to apply, in order
        history: Ledger to append to; a new one is created when omitted

    Returns:
        MergeResult with the updated copy, the overwrite count, the history
        and the bindings that matched no key
    """
    merged = store.copy()
    if history is None:
        history = ModificationHistory()

    applied_count = 0
    not_applied: List[FeatureKeybind] = []

    for binding in new_bindings:
        key_key = binding.feature_name + KEY_SUFFIX
        hold_key = binding.feature_name + HOLD_SUFFIX
        touched = False

        old_value = merged.get(key_key)
        if old_value is not None:
            old_code = parse_int32(old_value)
            history.append(
                ModificationRecord(
                    feature_name=binding.feature_name,
                    old_key_code=UNBOUND_KEY_CODE if old_code is None else old_code,
                    new_key_code=binding.key_code,
                )
            )
            merged.set(key_key, str(binding.key_code))
            applied_count += 1
            touched = True

        if hold_key in merged:
            merged.set(hold_key, format_bool(binding.is_hold))
            applied_count += 1
            touched = True

        if not touched:
            logger.debug("No config entries for feature %r, skipping", binding.feature_name)
            not_applied.append(binding)

    logger.info(
        "Merge applied %d field overwrites, %d bindings not applied",
        applied_count,
        len(not_applied),
    )
    return MergeResult(
        store=merged,
        applied_count=applied_count,
        history=history,
        not_applied=not_applied,
    )
