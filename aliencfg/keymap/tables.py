"""
Static key-code tables for the two numbering schemes.

GLFW codes are what current game builds write for positive key codes.
The VK table covers the legacy ASCII / Windows virtual-key numbering that
older configs still contain. Both tables are frozen at import time.
"""

from types import MappingProxyType
from typing import Dict, Mapping


def _letters_and_digits() -> Dict[int, str]:
    # Shared by both schemes: A-Z at 65-90, 0-9 at 48-57
    table = {65 + i: chr(65 + i) for i in range(26)}
    table.update({48 + i: str(i) for i in range(10)})
    return table


def _build_glfw_table() -> Mapping[int, str]:
    table = _letters_and_digits()

    table.update(
        {
            32: "SPACE",
            256: "ESCAPE",
            257: "ENTER",
            258: "TAB",
            259: "BACKSPACE",
            260: "INSERT",
            261: "DELETE",
            262: "RIGHT ARROW",
            263: "LEFT ARROW",
            264: "DOWN ARROW",
            265: "UP ARROW",
            266: "PAGE UP",
            267: "PAGE DOWN",
            268: "HOME",
            269: "END",
            280: "CAPS LOCK",
            281: "SCROLL LOCK",
            282: "NUM LOCK",
            283: "PRINT SCREEN",
            284: "PAUSE",
        }
    )

    # F1-F25
    table.update({290 + i: f"F{i + 1}" for i in range(25)})

    # Numpad
    table.update({320 + i: f"NUMPAD {i}" for i in range(10)})
    table.update(
        {
            330: "NUMPAD DECIMAL",
            331: "NUMPAD DIVIDE",
            332: "NUMPAD MULTIPLY",
            333: "NUMPAD SUBTRACT",
            334: "NUMPAD ADD",
            335: "NUMPAD ENTER",
            336: "NUMPAD EQUAL",
        }
    )

    # Modifiers
    table.update(
        {
            340: "LEFT SHIFT",
            341: "LEFT CONTROL",
            342: "LEFT ALT",
            343: "LEFT SUPER (WIN)",
            344: "RIGHT SHIFT",
            345: "RIGHT CONTROL",
            346: "RIGHT ALT",
            347: "RIGHT SUPER (WIN)",
            348: "MENU",
        }
    )

    # Symbols
    table.update(
        {
            39: "APOSTROPHE (' \")",
            44: "COMMA (, <)",
            45: "MINUS (- _)",
            46: "PERIOD (. >)",
            47: "SLASH (/ ?)",
            59: "SEMICOLON (; :)",
            61: "EQUAL (= +)",
            91: "LEFT BRACKET ([ {)",
            92: "BACKSLASH (\\ |)",
            93: "RIGHT BRACKET (] })",
            96: "GRAVE ACCENT (` ~)",
        }
    )

    return MappingProxyType(table)


def _build_vk_table() -> Mapping[int, str]:
    table = _letters_and_digits()

    # Mouse buttons
    table.update(
        {
            1: "MOUSE1 (L)",
            2: "MOUSE2 (R)",
            4: "MOUSE3 (M)",
            5: "MOUSE4 (X1)",
            6: "MOUSE5 (X2)",
        }
    )

    # Control, modifiers and navigation
    table.update(
        {
            8: "BACKSPACE",
            9: "TAB",
            13: "ENTER",
            16: "SHIFT (Any)",
            17: "CONTROL (Any)",
            18: "ALT (Any)",
            19: "PAUSE",
            20: "CAPS LOCK",
            27: "ESCAPE",
            32: "SPACE",
            33: "PAGE UP",
            34: "PAGE DOWN",
            35: "END",
            36: "HOME",
            37: "LEFT ARROW",
            38: "UP ARROW",
            39: "RIGHT ARROW",
            40: "DOWN ARROW",
            44: "PRINT SCREEN",
            45: "INSERT",
            46: "DELETE",
            91: "LEFT WIN",
            92: "RIGHT WIN",
            93: "APPLICATIONS",
        }
    )

    # Numpad
    table.update({96 + i: f"NUMPAD {i}" for i in range(10)})
    table.update(
        {
            106: "MULTIPLY (*)",
            107: "ADD (+)",
            108: "SEPARATOR",
            109: "SUBTRACT (-)",
            110: "DECIMAL (.)",
            111: "DIVIDE (/)",
        }
    )

    # F1-F24
    table.update({112 + i: f"F{i + 1}" for i in range(24)})

    table.update(
        {
            144: "NUM LOCK",
            145: "SCROLL LOCK",
            186: "; / :",
            187: "= / +",
            188: ", / <",
            189: "- / _",
            190: ". / >",
            191: "/ / ?",
            192: "` / ~",
            219: "[ / {",
            220: "\\ / |",
            221: "] / }",
            222: "' / \"",
        }
    )

    return MappingProxyType(table)


GLFW_KEY_NAMES: Mapping[int, str] = _build_glfw_table()
VK_KEY_NAMES: Mapping[int, str] = _build_vk_table()

# Modifier codes the keystroke capture polls for, mapped to the native
# Windows virtual-key code that GetAsyncKeyState understands
GLFW_MODIFIER_POLL_CODES: Mapping[int, int] = MappingProxyType(
    {340: 0xA0, 341: 0xA2, 342: 0xA4, 344: 0xA1, 345: 0xA3, 346: 0xA5}
)
VK_MODIFIER_POLL_CODES: Mapping[int, int] = MappingProxyType({16: 16, 17: 17, 18: 18})
