"""Configuration utilities for aliencfg."""

import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .constants import ALIENCFG_CONFIG_DIR, ENV_VAR_DEFINITIONS
from .user_settings import load_user_settings
from ..exceptions import SettingsError


def get_config_dir() -> Path:
    """Get the aliencfg config directory, respecting ALIENCFG_CONFIG_DIR.

    Tests point ALIENCFG_CONFIG_DIR at a temp directory so they never touch
    the real ~/.config/aliencfg.
    """
    override = os.environ.get("ALIENCFG_CONFIG_DIR")
    if override:
        return Path(override)
    return ALIENCFG_CONFIG_DIR


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")

    if value is None or valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all ALIENCFG environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        SettingsError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise SettingsError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_default_scheme() -> str:
    """Resolve the default key scheme name.

    Precedence is ALIENCFG_KEY_SCHEME > settings.json > "glfw".
    """
    value = get_env_var("ALIENCFG_KEY_SCHEME")
    if value:
        return value.lower()

    configured = str(load_user_settings(get_config_dir()).get("default_scheme", "glfw"))
    is_valid, error = validate_env_var("ALIENCFG_KEY_SCHEME", configured)
    if not is_valid:
        raise SettingsError(error, setting="default_scheme")
    return configured.lower()


def get_env_info() -> Dict[str, Dict]:
    """Get information about all ALIENCFG environment variables."""
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)
        info[name] = {
            "description": definition.get("description", ""),
            "value": value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
        }
    return info
