"""
Key-code translation between integer codes and display names.

Positive codes mean different physical keys in each scheme, so every lookup
names the scheme it resolves against. Negative codes are shared: -1 is
unbound and anything lower is a mouse button.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..config.constants import (
    INT32_MAX,
    INT32_MIN,
    UNBOUND_KEY_CODE,
    UNBOUND_KEY_NAME,
    UNTRANSLATED_PREFIX,
)
from .tables import (
    GLFW_KEY_NAMES,
    GLFW_MODIFIER_POLL_CODES,
    VK_KEY_NAMES,
    VK_MODIFIER_POLL_CODES,
)


class KeyScheme(str, Enum):
    """Key-code numbering schemes."""

    GLFW = "glfw"  # Modern windowing-library codes
    VK = "vk"  # Legacy ASCII / Windows virtual-key codes

    @property
    def label(self) -> str:
        return "GLFW" if self is KeyScheme.GLFW else "ASCII_VK"

    def toggled(self) -> "KeyScheme":
        """The other scheme."""
        return KeyScheme.VK if self is KeyScheme.GLFW else KeyScheme.GLFW

    @classmethod
    def parse(cls, value: str) -> "KeyScheme":
        """Parse a scheme name such as "glfw", "VK" or "ASCII_VK"."""
        normalized = value.strip().lower()
        if normalized in ("vk", "ascii_vk", "ascii"):
            return cls.VK
        if normalized == "glfw":
            return cls.GLFW
        raise ValueError(f"Unknown key scheme '{value}'")


_TABLES: Mapping[KeyScheme, Mapping[int, str]] = MappingProxyType(
    {KeyScheme.GLFW: GLFW_KEY_NAMES, KeyScheme.VK: VK_KEY_NAMES}
)

_MODIFIER_POLL_CODES: Mapping[KeyScheme, Mapping[int, int]] = MappingProxyType(
    {KeyScheme.GLFW: GLFW_MODIFIER_POLL_CODES, KeyScheme.VK: VK_MODIFIER_POLL_CODES}
)

_POINTER_NAMES: Mapping[int, str] = MappingProxyType(
    {-2: "MOUSE LEFT", -3: "MOUSE RIGHT", -4: "MOUSE MIDDLE"}
)

_POINTER_NAME_RE = re.compile(r"^MOUSE (\d+)$")
_INT_LITERAL_RE = re.compile(r"^[+-]?[0-9]+$")


def _normalize_name(name: str) -> str:
    return " ".join(name.split()).upper()


def _build_reverse(table: Mapping[int, str]) -> Mapping[str, int]:
    reverse: Dict[str, int] = {}
    for code, name in table.items():
        reverse.setdefault(_normalize_name(name), code)
    return MappingProxyType(reverse)


_REVERSE_TABLES: Mapping[KeyScheme, Mapping[str, int]] = MappingProxyType(
    {scheme: _build_reverse(table) for scheme, table in _TABLES.items()}
)


def key_name(code: int, scheme: KeyScheme) -> str:
    """Resolve a key code to its display name under the given scheme.

    Codes without a table entry come back as ``[Code:<n>]`` rather than
    raising, so callers can count untranslated codes.
    """
    if code == UNBOUND_KEY_CODE:
        return UNBOUND_KEY_NAME

    if code < UNBOUND_KEY_CODE:
        if code in _POINTER_NAMES:
            return _POINTER_NAMES[code]
        return f"MOUSE {abs(code) - 4}"

    name = _TABLES[scheme].get(code)
    if name is not None:
        return name

    return f"{UNTRANSLATED_PREFIX}{code}]"


def is_untranslated(name: str) -> bool:
    """True if ``name`` is the fallback produced for an unknown code."""
    return name.startswith(UNTRANSLATED_PREFIX)


def key_code(name: str, scheme: KeyScheme) -> Optional[int]:
    """Reverse lookup from display name (or integer literal) to key code.

    Matching ignores case and repeated whitespace. A single digit is the
    digit key; other integers are taken as raw codes. Returns None when the
    name is not known to the scheme.
    """
    text = name.strip()
    if not text:
        return None

    normalized = _normalize_name(text)
    # Table names win over integer literals so "5" is the 5 key, not code 5
    code = _REVERSE_TABLES[scheme].get(normalized)
    if code is not None:
        return code

    if _INT_LITERAL_RE.match(text):
        value = int(text)
        if INT32_MIN <= value <= INT32_MAX:
            return value
        return None

    if normalized == UNBOUND_KEY_NAME:
        return UNBOUND_KEY_CODE

    for pointer_code, pointer_name in _POINTER_NAMES.items():
        if normalized == pointer_name:
            return pointer_code

    match = _POINTER_NAME_RE.match(normalized)
    if match:
        # "MOUSE 0" would collide with the named buttons above
        number = int(match.group(1))
        if number >= 1:
            return -(number + 4)

    return None


def key_table(scheme: KeyScheme) -> Mapping[int, str]:
    """Read-only code -> name table for a scheme."""
    return _TABLES[scheme]


def modifier_poll_codes(scheme: KeyScheme) -> Mapping[int, int]:
    """Modifier key codes of a scheme mapped to native virtual-key codes."""
    return _MODIFIER_POLL_CODES[scheme]
