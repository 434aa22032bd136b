"""
Interactive fine-tune session as an explicit state machine.

    SELECTING_FEATURE -> AWAITING_KEY_CAPTURE -> CONFIRMING_CAPTURE
        -> APPLIED | SKIPPED | CANCELLED

APPLIED and SKIPPED lead back to feature selection; CANCELLED is final.
A capture that cannot be mapped leaves the session waiting for another
capture, however many times that happens.

The session owns a working copy of the store. Accepted captures go through
``merge_service.overwrite`` so each one lands in the session history.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from ..exceptions import InvalidTransitionError
from ..keymap.capture import CaptureOutcome, CaptureResult, CaptureSignal
from ..models.config_store import ConfigStore
from ..models.history import ModificationHistory
from ..models.keybind import FeatureKeybind
from .extractor import extract_keybinds
from .merge_service import overwrite

logger = logging.getLogger(__name__)


class TuneState(Enum):
    SELECTING_FEATURE = "selecting_feature"
    AWAITING_KEY_CAPTURE = "awaiting_key_capture"
    CONFIRMING_CAPTURE = "confirming_capture"
    APPLIED = "applied"
    SKIPPED = "skipped"
    CANCELLED = "cancelled"


_TRANSITIONS: Dict[TuneState, FrozenSet[TuneState]] = {
    TuneState.SELECTING_FEATURE: frozenset(
        {TuneState.AWAITING_KEY_CAPTURE, TuneState.CANCELLED}
    ),
    TuneState.AWAITING_KEY_CAPTURE: frozenset(
        {
            TuneState.AWAITING_KEY_CAPTURE,
            TuneState.CONFIRMING_CAPTURE,
            TuneState.SKIPPED,
            TuneState.CANCELLED,
        }
    ),
    TuneState.CONFIRMING_CAPTURE: frozenset(
        {
            TuneState.APPLIED,
            TuneState.AWAITING_KEY_CAPTURE,
            TuneState.SKIPPED,
            TuneState.CANCELLED,
        }
    ),
    TuneState.APPLIED: frozenset({TuneState.SELECTING_FEATURE, TuneState.CANCELLED}),
    TuneState.SKIPPED: frozenset({TuneState.SELECTING_FEATURE, TuneState.CANCELLED}),
    TuneState.CANCELLED: frozenset(),
}


class FineTuneSession:
    """Drive single-feature key reassignment over a copy of a store."""

    def __init__(self, store: ConfigStore, history: Optional[ModificationHistory] = None):
        self._store = store.copy()
        self.history = history if history is not None else ModificationHistory()
        self.state = TuneState.SELECTING_FEATURE
        self.current: Optional[FeatureKeybind] = None
        self.pending: Optional[CaptureResult] = None
        self.failed_captures = 0
        self.applied_count = 0

    @property
    def store(self) -> ConfigStore:
        """The working copy, including every applied change."""
        return self._store

    @property
    def is_finished(self) -> bool:
        return self.state is TuneState.CANCELLED

    def features(self) -> List[FeatureKeybind]:
        return extract_keybinds(self._store)

    def _transition(self, target: TuneState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidTransitionError(state=self.state.value, target=target.value)
        logger.debug("Fine-tune %s -> %s", self.state.value, target.value)
        self.state = target

    def select_feature(self, feature_name: str) -> bool:
        """
        Pick the feature to rebind.

        Returns:
            False if no such feature exists (the session stays in selection)
        """
        if self.state in (TuneState.APPLIED, TuneState.SKIPPED):
            self._transition(TuneState.SELECTING_FEATURE)
        if self.state is not TuneState.SELECTING_FEATURE:
            raise InvalidTransitionError(
                state=self.state.value, target=TuneState.AWAITING_KEY_CAPTURE.value
            )

        wanted = feature_name.strip().casefold()
        match = next((kb for kb in self.features() if kb.name_key == wanted), None)
        if match is None:
            return False

        self.current = match
        self.pending = None
        self.failed_captures = 0
        self._transition(TuneState.AWAITING_KEY_CAPTURE)
        return True

    def submit_capture(self, outcome: CaptureOutcome) -> TuneState:
        """Feed the result of one capture attempt."""
        if self.state is not TuneState.AWAITING_KEY_CAPTURE:
            raise InvalidTransitionError(
                state=self.state.value, target=TuneState.CONFIRMING_CAPTURE.value
            )

        if outcome is CaptureSignal.CANCELLED:
            return self.cancel()
        if outcome is CaptureSignal.SKIPPED:
            return self.skip()

        if outcome is None:
            self.failed_captures += 1
            self._transition(TuneState.AWAITING_KEY_CAPTURE)
            return self.state

        self.pending = outcome
        self._transition(TuneState.CONFIRMING_CAPTURE)
        return self.state

    def confirm(self, accept: bool, is_hold: Optional[bool] = None) -> TuneState:
        """
        Accept or reject the pending capture.

        Rejecting goes back to waiting for a new capture. ``is_hold``
        changes the hold mode along with the key; None keeps the current one.
        """
        if self.state is not TuneState.CONFIRMING_CAPTURE:
            raise InvalidTransitionError(state=self.state.value, target=TuneState.APPLIED.value)
        assert self.current is not None and self.pending is not None

        if not accept:
            self.pending = None
            self._transition(TuneState.AWAITING_KEY_CAPTURE)
            return self.state

        binding = FeatureKeybind(
            feature_name=self.current.feature_name,
            key_code=self.pending.code,
            is_hold=self.current.is_hold if is_hold is None else is_hold,
        )
        result = overwrite(self._store, [binding], self.history)
        self._store = result.store
        self.applied_count += result.applied_count
        logger.info(
            "Rebound %s: %d -> %d (%s)",
            binding.feature_name,
            self.current.key_code,
            binding.key_code,
            self.pending.display_name,
        )

        self._transition(TuneState.APPLIED)
        return self.state

    def skip(self) -> TuneState:
        self.pending = None
        self._transition(TuneState.SKIPPED)
        return self.state

    def cancel(self) -> TuneState:
        self.pending = None
        self._transition(TuneState.CANCELLED)
        return self.state
