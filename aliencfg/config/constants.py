"""
Centralized constants for aliencfg.

Naming-convention suffixes, key-code sentinels, report layout widths and the
environment variables the tool understands all live here.
"""

from pathlib import Path

# =============================================================================
# NAMING CONVENTION
# =============================================================================

KEY_SUFFIX = "_Key"  # <Feature>_Key -> integer key code
HOLD_SUFFIX = "_Key_hold"  # <Feature>_Key_hold -> true/false

# =============================================================================
# KEY CODE SENTINELS
# =============================================================================

UNBOUND_KEY_CODE = -1
UNBOUND_KEY_NAME = "NONE"
UNTRANSLATED_PREFIX = "[Code:"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# =============================================================================
# REPORT LAYOUT
# =============================================================================

REPORT_TOTAL_WIDTH = 84
REPORT_COL_FEATURE_WIDTH = 25
REPORT_COL_CODE_WIDTH = 10
REPORT_COL_KEY_NAME_WIDTH = 20
PREVIEW_COL_CODE_WIDTH = 5

DEFAULT_PREVIEW_COUNT = 5  # Records shown after extraction
DEFAULT_ACTIVE_REPORT_FILE = "activitymodule.txt"

# =============================================================================
# FILE TYPES
# =============================================================================

CONFIG_EXTENSIONS = (".cfg", ".txt")
EXCHANGE_EXTENSIONS = (".json",)
REPORT_EXTENSIONS = (".txt",)
JSON_INDENT = 2

# =============================================================================
# PATHS & ENVIRONMENT
# =============================================================================

ALIENCFG_CONFIG_DIR = Path.home() / ".config" / "aliencfg"

KEY_SCHEME_VALUES = ["glfw", "vk"]
LOG_LEVEL_VALUES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_VAR_DEFINITIONS = {
    "ALIENCFG_CONFIG_DIR": {
        "description": "Directory holding settings.json and aliencfg.log",
        "default": None,
        "valid_values": None,
    },
    "ALIENCFG_KEY_SCHEME": {
        "description": "Default key-code scheme for reports (glfw or vk)",
        "default": None,
        "valid_values": KEY_SCHEME_VALUES,
    },
    "ALIENCFG_LOG_LEVEL": {
        "description": "Log level for the aliencfg log file",
        "default": "INFO",
        "valid_values": LOG_LEVEL_VALUES,
    },
}
