"""
Compare the active bindings of two configs.

Only presence matters: a feature active on both sides is never reported,
even when its key code or hold mode differs.
"""

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple

from ..models.config_store import ConfigStore
from ..models.keybind import FeatureKeybind
from .extractor import active_keybinds, extract_keybinds

logger = logging.getLogger(__name__)


class ComparisonEntry(NamedTuple):
    keybind: FeatureKeybind
    source_label: str


@dataclass
class ComparisonResult:
    """Active bindings found on only one side."""

    label_a: str
    label_b: str
    unique_to_a: List[ComparisonEntry] = field(default_factory=list)
    unique_to_b: List[ComparisonEntry] = field(default_factory=list)

    @property
    def is_identical(self) -> bool:
        return not self.unique_to_a and not self.unique_to_b


def compare(
    store_a: ConfigStore,
    store_b: ConfigStore,
    label_a: str = "A",
    label_b: str = "B",
) -> ComparisonResult:
    """Symmetric difference of active feature names between two stores."""
    active_a = active_keybinds(extract_keybinds(store_a))
    active_b = active_keybinds(extract_keybinds(store_b))

    names_a = {kb.name_key for kb in active_a}
    names_b = {kb.name_key for kb in active_b}

    result = ComparisonResult(
        label_a=label_a,
        label_b=label_b,
        unique_to_a=[ComparisonEntry(kb, label_a) for kb in active_a if kb.name_key not in names_b],
        unique_to_b=[ComparisonEntry(kb, label_b) for kb in active_b if kb.name_key not in names_a],
    )

    logger.info(
        "Compared %s (%d active) with %s (%d active): %d unique to %s, %d unique to %s",
        label_a,
        len(active_a),
        label_b,
        len(active_b),
        len(result.unique_to_a),
        label_a,
        len(result.unique_to_b),
        label_b,
    )
    return result
