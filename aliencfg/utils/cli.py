"""CLI utilities for error handling."""

import functools
import logging
from typing import Callable, TypeVar

import typer

from ..exceptions import AliencfgError
from .output import err_console

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def handle_cli_errors(action: str) -> Callable[[F], F]:
    """Decorator that turns aliencfg errors into a red message and exit code 1.

    Args:
        action: Description of the action being performed (e.g., "merging keybinds")

    Example:
        @handle_cli_errors("loading config")
        def load(path: Path):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except AliencfgError as e:
                logger.error("Error %s: %s", action, e)
                err_console.print(f"[red]Error {action}: {e}[/red]")
                raise typer.Exit(1) from e

        return wrapper  # type: ignore[return-value]

    return decorator
