"""Custom exception hierarchy for aliencfg.

Exception Hierarchy:
    AliencfgError (base)
    ├── ConfigError - CFG file handling
    │   ├── ConfigNotFoundError
    │   └── ConfigParseError
    ├── KeybindImportError - malformed exchange JSON
    ├── FileWriteError - writing CFG/JSON/report files
    ├── InvalidTransitionError - fine-tune session misuse
    └── SettingsError - invalid environment or settings.json values

Lookup misses and merges that touch no keys are not errors: they degrade to
the ``[Code:n]`` fallback name and to ``MergeResult.not_applied``.

Usage:
    from aliencfg.exceptions import ConfigNotFoundError

    if not path.exists():
        raise ConfigNotFoundError(path=str(path))
"""

from typing import Any, Optional


class AliencfgError(Exception):
    """Base exception for all aliencfg errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, features)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Config File Errors
# =============================================================================


class ConfigError(AliencfgError):
    """Base exception for CFG file handling."""

    pass


class ConfigNotFoundError(ConfigError):
    """A referenced CFG or exchange file does not exist."""

    def __init__(
        self,
        message: str = "File not found",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class ConfigParseError(ConfigError):
    """CFG content could not be decoded."""

    def __init__(self, message: str = "Failed to parse config", **context: Any) -> None:
        super().__init__(message, **context)


# =============================================================================
# Exchange / File Errors
# =============================================================================


class KeybindImportError(AliencfgError):
    """Exchange JSON was malformed; the whole import is rejected."""

    def __init__(
        self,
        message: str = "Invalid keybind data",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class FileWriteError(AliencfgError):
    """Failed to write an output file."""

    def __init__(
        self,
        message: str = "Failed to write file",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Session / Settings Errors
# =============================================================================


class InvalidTransitionError(AliencfgError):
    """A fine-tune session was driven through a transition it does not allow."""

    def __init__(
        self,
        message: str = "Invalid state transition",
        *,
        state: Optional[str] = None,
        target: Optional[str] = None,
        **context: Any,
    ) -> None:
        if state:
            context["state"] = state
        if target:
            context["target"] = target
        super().__init__(message, **context)


class SettingsError(AliencfgError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Settings error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
