"""
aliencfg user settings.

Persisted preferences such as the default key scheme and report file name.
Settings are stored in <config dir>/settings.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypedDict

from ..exceptions import SettingsError
from .constants import DEFAULT_ACTIVE_REPORT_FILE, DEFAULT_PREVIEW_COUNT, KEY_SCHEME_VALUES

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "settings.json"


class UserSettings(TypedDict):
    default_scheme: str
    active_report_file: str
    preview_count: int


DEFAULT_SETTINGS: UserSettings = {
    "default_scheme": "glfw",
    "active_report_file": DEFAULT_ACTIVE_REPORT_FILE,
    "preview_count": DEFAULT_PREVIEW_COUNT,
}


def get_settings_path(config_dir: Path) -> Path:
    """Path to settings.json inside the config directory."""
    return config_dir / SETTINGS_FILE_NAME


def _valid_value(key: str, value: Any) -> bool:
    if key == "preview_count":
        # bool is an int subclass; reject it explicitly
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    return isinstance(value, str) and bool(value.strip())


def load_user_settings(config_dir: Path) -> dict[str, Any]:
    """
    Load user settings from file.

    Returns:
        Settings dict merged over the defaults; defaults alone if the file
        is missing or unreadable. A known setting with a value of the wrong
        type falls back to its default with a warning.
    """
    path = get_settings_path(config_dir)
    if not path.exists():
        return dict(DEFAULT_SETTINGS)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("settings: failed to load %s: %s", path, e)
        return dict(DEFAULT_SETTINGS)

    if not isinstance(data, dict):
        logger.warning("settings: %s must hold a JSON object, ignoring", path)
        return dict(DEFAULT_SETTINGS)

    settings: dict[str, Any] = {**DEFAULT_SETTINGS, **data}
    for key, default in DEFAULT_SETTINGS.items():
        if not _valid_value(key, settings[key]):
            logger.warning(
                "settings: invalid %s=%r in %s, using %r", key, settings[key], path, default
            )
            settings[key] = default
    return settings


def save_user_settings(config_dir: Path, settings: dict[str, Any]) -> None:
    """
    Save user settings to file.

    Args:
        config_dir: Directory that holds settings.json
        settings: Settings dict to save
    """
    config_dir.mkdir(parents=True, exist_ok=True)
    path = get_settings_path(config_dir)
    path.write_text(json.dumps(settings, indent=2) + "\n", encoding="utf-8")


def set_user_setting(config_dir: Path, key: str, raw_value: str) -> Any:
    """
    Parse ``raw_value`` for ``key`` and store it in settings.json.

    Returns:
        The stored value

    Raises:
        SettingsError: If ``key`` is unknown or the value does not fit it
    """
    if key not in DEFAULT_SETTINGS:
        raise SettingsError(
            f"Unknown setting, expected one of: {', '.join(DEFAULT_SETTINGS)}", setting=key
        )

    value: Any = raw_value.strip()
    if key == "preview_count":
        try:
            value = int(value)
        except ValueError:
            raise SettingsError("Expected a whole number", setting=key, value=raw_value) from None
    elif key == "default_scheme":
        value = value.lower()
        if value not in KEY_SCHEME_VALUES:
            raise SettingsError(
                f"Expected one of: {', '.join(KEY_SCHEME_VALUES)}", setting=key, value=raw_value
            )

    if not _valid_value(key, value):
        raise SettingsError("Invalid value", setting=key, value=raw_value)

    settings = load_user_settings(config_dir)
    settings[key] = value
    save_user_settings(config_dir, settings)
    return value
