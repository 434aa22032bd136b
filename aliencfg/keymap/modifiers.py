"""Modifier-key polling capability.

Terminal keystroke reads never report a bare Shift/Ctrl/Alt press, so the
keystroke capture asks a poller whether a modifier is physically held. Only
Windows exposes that state (GetAsyncKeyState); every other platform gets the
null poller, which always answers False.
"""

from __future__ import annotations

import ctypes
import logging
import sys
from typing import Protocol

logger = logging.getLogger(__name__)

_KEY_DOWN_MASK = 0x8000


class ModifierPoller(Protocol):
    """Capability: is the key with this native virtual-key code held down?"""

    def is_pressed(self, native_code: int) -> bool: ...


class NullModifierPoller:
    """Poller for platforms without key-state polling."""

    def is_pressed(self, native_code: int) -> bool:
        return False


class Win32ModifierPoller:
    """Poller backed by user32.GetAsyncKeyState."""

    def __init__(self) -> None:
        self._user32 = ctypes.windll.user32  # type: ignore[attr-defined]

    def is_pressed(self, native_code: int) -> bool:
        return bool(self._user32.GetAsyncKeyState(native_code) & _KEY_DOWN_MASK)


def get_modifier_poller() -> ModifierPoller:
    """Return the best poller available on this platform."""
    if sys.platform == "win32":
        try:
            return Win32ModifierPoller()
        except (AttributeError, OSError) as e:
            logger.warning("Modifier polling unavailable: %s", e)
    return NullModifierPoller()
