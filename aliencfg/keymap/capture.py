"""
Key capture at the operator boundary.

Two collaborators turn operator input into ``CaptureResult`` values for the
fine-tune session: ``parse_key_input`` reads a typed line (a key name or a
raw code) and ``KeystrokeCapture`` reads a single keystroke from the
terminal. Both return ``None`` when the input cannot be mapped, which the
session treats as "ask again".
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Tuple, Union

import click

from .modifiers import ModifierPoller, NullModifierPoller
from .translator import KeyScheme, key_code, key_name, modifier_poll_codes

logger = logging.getLogger(__name__)


class CaptureResult(NamedTuple):
    """A captured key: its code in the active scheme plus display name."""

    code: int
    display_name: str


class CaptureSignal(Enum):
    """Non-key outcomes of a capture prompt."""

    CANCELLED = "cancelled"
    SKIPPED = "skipped"


CaptureOutcome = Union[CaptureResult, CaptureSignal, None]

CANCEL_WORDS = frozenset({"cancel", "exit", "quit"})
SKIP_WORDS = frozenset({"skip"})


def parse_key_input(text: str, scheme: KeyScheme) -> CaptureOutcome:
    """Interpret a typed line as a key.

    Accepts a display name ("F", "left shift", "mouse right"), a raw integer
    code, or one of the cancel/skip words. Returns None when nothing maps.
    """
    stripped = text.strip()
    lowered = stripped.lower()
    if lowered in CANCEL_WORDS:
        return CaptureSignal.CANCELLED
    if lowered in SKIP_WORDS:
        return CaptureSignal.SKIPPED

    code = key_code(stripped, scheme)
    if code is None:
        logger.debug("Unmapped key input %r for %s", stripped, scheme.label)
        return None
    return CaptureResult(code, key_name(code, scheme))


# Characters whose code differs between schemes: char -> (GLFW, VK)
_SYMBOL_CODES: Dict[str, Tuple[int, int]] = {
    "'": (39, 222),
    '"': (39, 222),
    ",": (44, 188),
    "<": (44, 188),
    "-": (45, 189),
    "_": (45, 189),
    ".": (46, 190),
    ">": (46, 190),
    "/": (47, 191),
    "?": (47, 191),
    ";": (59, 186),
    ":": (59, 186),
    "=": (61, 187),
    "+": (61, 187),
    "[": (91, 219),
    "{": (91, 219),
    "\\": (92, 220),
    "|": (92, 220),
    "]": (93, 221),
    "}": (93, 221),
    "`": (96, 192),
    "~": (96, 192),
}

_SHIFTED_DIGITS = {c: str(i) for i, c in enumerate(")!@#$%^&*(")}

# Terminal input -> display name shared by both tables
_SPECIAL_INPUT_NAMES: Dict[str, str] = {
    " ": "SPACE",
    "\r": "ENTER",
    "\n": "ENTER",
    "\t": "TAB",
    "\x7f": "BACKSPACE",
    "\x08": "BACKSPACE",
    # ANSI escape sequences (POSIX terminals)
    "\x1b[A": "UP ARROW",
    "\x1b[B": "DOWN ARROW",
    "\x1b[C": "RIGHT ARROW",
    "\x1b[D": "LEFT ARROW",
    "\x1b[H": "HOME",
    "\x1b[F": "END",
    "\x1b[2~": "INSERT",
    "\x1b[3~": "DELETE",
    "\x1b[5~": "PAGE UP",
    "\x1b[6~": "PAGE DOWN",
    "\x1bOP": "F1",
    "\x1bOQ": "F2",
    "\x1bOR": "F3",
    "\x1bOS": "F4",
    "\x1b[15~": "F5",
    "\x1b[17~": "F6",
    "\x1b[18~": "F7",
    "\x1b[19~": "F8",
    "\x1b[20~": "F9",
    "\x1b[21~": "F10",
    "\x1b[23~": "F11",
    "\x1b[24~": "F12",
    # Windows console prefixes
    "\xe0H": "UP ARROW",
    "\xe0P": "DOWN ARROW",
    "\xe0M": "RIGHT ARROW",
    "\xe0K": "LEFT ARROW",
    "\xe0G": "HOME",
    "\xe0O": "END",
    "\xe0R": "INSERT",
    "\xe0S": "DELETE",
    "\xe0I": "PAGE UP",
    "\xe0Q": "PAGE DOWN",
    "\xe0\x85": "F11",
    "\xe0\x86": "F12",
}
_SPECIAL_INPUT_NAMES.update({"\x00" + chr(0x3B + i): f"F{i + 1}" for i in range(10)})

ESCAPE_INPUT = "\x1b"


def keystroke_to_code(keystroke: str, scheme: KeyScheme) -> Optional[int]:
    """Map raw terminal input for one key press to a code in ``scheme``."""
    if keystroke in _SPECIAL_INPUT_NAMES:
        return key_code(_SPECIAL_INPUT_NAMES[keystroke], scheme)

    if len(keystroke) != 1:
        return None

    char = keystroke
    if char.isascii() and char.isalpha():
        return ord(char.upper())
    if char.isascii() and char.isdigit():
        return ord(char)
    if char in _SHIFTED_DIGITS:
        return ord(_SHIFTED_DIGITS[char])
    if char in _SYMBOL_CODES:
        glfw_code, vk_code = _SYMBOL_CODES[char]
        return glfw_code if scheme is KeyScheme.GLFW else vk_code
    return None


class KeystrokeCapture:
    """Capture one key press from the terminal.

    Escape cancels. Key combinations are not bindable: when the poller
    reports a modifier held during the press, the modifier itself is
    captured.
    """

    def __init__(
        self,
        scheme: KeyScheme,
        poller: Optional[ModifierPoller] = None,
        read_key: Callable[[], str] = click.getchar,
    ) -> None:
        self.scheme = scheme
        self.poller = poller or NullModifierPoller()
        self._read_key = read_key

    def held_modifier(self) -> Optional[int]:
        """Scheme code of the first modifier currently held, if any."""
        for code, native_code in modifier_poll_codes(self.scheme).items():
            if self.poller.is_pressed(native_code):
                return code
        return None

    def capture(self) -> CaptureOutcome:
        keystroke = self._read_key()
        if keystroke == ESCAPE_INPUT:
            return CaptureSignal.CANCELLED

        code = self.held_modifier()
        if code is None:
            code = keystroke_to_code(keystroke, self.scheme)
        if code is None:
            logger.debug("Unmapped keystroke %r", keystroke)
            return None
        return CaptureResult(code, key_name(code, self.scheme))
