"""
Key-code translation for aliencfg.

Usage:
    from aliencfg.keymap import KeyScheme, key_name

    key_name(32, KeyScheme.GLFW)   # "SPACE"
    key_name(-3, KeyScheme.VK)     # "MOUSE RIGHT"
    key_name(999, KeyScheme.VK)    # "[Code:999]"
"""

from .translator import (
    KeyScheme,
    is_untranslated,
    key_code,
    key_name,
    key_table,
    modifier_poll_codes,
)

__all__ = [
    "KeyScheme",
    "key_name",
    "key_code",
    "is_untranslated",
    "key_table",
    "modifier_poll_codes",
]
