"""Shared console output utilities."""

from rich.console import Console

# Shared console instance for all CLI output
console = Console(highlight=False)

# Errors go to stderr so report output can be piped
err_console = Console(stderr=True, highlight=False)
