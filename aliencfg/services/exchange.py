"""
JSON exchange format for keybinds.

The file is an array of ``{"FeatureName": str, "KeyCode": int,
"IsHold": bool}`` objects, indented for hand editing, with non-ASCII feature
names written as-is. Imports are all-or-nothing: any malformed item rejects
the whole file.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from ..config.constants import INT32_MAX, INT32_MIN, JSON_INDENT
from ..exceptions import ConfigNotFoundError, KeybindImportError
from ..models.keybind import FeatureKeybind
from ..utils.file_io import read_text_file, write_text_file

logger = logging.getLogger(__name__)


def keybinds_to_json(keybinds: Sequence[FeatureKeybind]) -> str:
    """Serialize keybinds to exchange-format JSON text."""
    return json.dumps([kb.to_dict() for kb in keybinds], indent=JSON_INDENT, ensure_ascii=False)


def keybinds_from_json(text: str) -> List[FeatureKeybind]:
    """
    Parse exchange-format JSON text.

    Missing fields take their defaults (empty name, code 0, toggle).

    Raises:
        KeybindImportError: On malformed JSON, a non-array top level, or an
            item that is not an object or has a wrongly typed field
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise KeybindImportError(f"Malformed JSON: {e.msg}", line=e.lineno, column=e.colno) from e

    if not isinstance(data, list):
        raise KeybindImportError("Keybind data must be a JSON array", found=type(data).__name__)

    return [_keybind_from_item(item, index) for index, item in enumerate(data)]


def _keybind_from_item(item: Any, index: int) -> FeatureKeybind:
    if not isinstance(item, dict):
        raise KeybindImportError("Keybind entry must be a JSON object", index=index)

    name = item.get("FeatureName", "")
    code = item.get("KeyCode", 0)
    is_hold = item.get("IsHold", False)

    if name is None:
        name = ""
    if not isinstance(name, str):
        raise KeybindImportError("FeatureName must be a string", index=index)
    # bool is an int subclass; reject it explicitly
    if isinstance(code, bool) or not isinstance(code, int):
        raise KeybindImportError("KeyCode must be an integer", index=index, feature=name)
    if not INT32_MIN <= code <= INT32_MAX:
        raise KeybindImportError("KeyCode out of range", index=index, feature=name)
    if not isinstance(is_hold, bool):
        raise KeybindImportError("IsHold must be true or false", index=index, feature=name)

    return FeatureKeybind(feature_name=name, key_code=code, is_hold=is_hold)


def export_keybinds(keybinds: Sequence[FeatureKeybind], path: Path) -> None:
    """Write keybinds to an exchange JSON file."""
    write_text_file(path, keybinds_to_json(keybinds))
    logger.info("Exported %d keybinds to %s", len(keybinds), path)


def import_keybinds(path: Path) -> List[FeatureKeybind]:
    """
    Read keybinds from an exchange JSON file.

    Raises:
        ConfigNotFoundError: If ``path`` does not exist
        KeybindImportError: If the content is not valid exchange data
    """
    if not path.exists():
        raise ConfigNotFoundError("Import file not found", path=str(path))

    try:
        keybinds = keybinds_from_json(read_text_file(path))
    except KeybindImportError as e:
        raise KeybindImportError(e.message, path=str(path), **e.context) from e
    except UnicodeDecodeError as e:
        raise KeybindImportError("Import file is not valid UTF-8", path=str(path)) from e

    logger.info("Imported %d keybinds from %s", len(keybinds), path)
    return keybinds
