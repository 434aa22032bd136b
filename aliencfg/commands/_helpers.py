"""Shared helpers for aliencfg commands."""

from pathlib import Path
from typing import Optional, Sequence

import typer
from rich.markup import escape
from rich.table import Table

from ..config.constants import CONFIG_EXTENSIONS, EXCHANGE_EXTENSIONS, REPORT_EXTENSIONS
from ..config.settings import get_default_scheme
from ..keymap import KeyScheme, is_untranslated, key_name
from ..models.history import ModificationHistory
from ..models.keybind import FeatureKeybind
from ..utils.file_io import clean_path_argument, has_extension
from ..utils.output import console


def _checked_path(value: Path, extensions: Sequence[str]) -> Path:
    path = Path(clean_path_argument(str(value)))
    if not path.name:
        raise typer.BadParameter("file name must not be empty")
    if not has_extension(path, extensions):
        raise typer.BadParameter(f"file extension must be {' or '.join(extensions)}")
    return path


def config_path_callback(value: Optional[Path]) -> Optional[Path]:
    """Typer callback: clean a CFG path and check its extension."""
    if value is None:
        return None
    return _checked_path(value, CONFIG_EXTENSIONS)


def exchange_path_callback(value: Optional[Path]) -> Optional[Path]:
    """Typer callback: clean a JSON exchange path and check its extension."""
    if value is None:
        return None
    return _checked_path(value, EXCHANGE_EXTENSIONS)


def report_path_callback(value: Optional[Path]) -> Optional[Path]:
    """Typer callback: clean a text report path and check its extension."""
    if value is None:
        return None
    return _checked_path(value, REPORT_EXTENSIONS)


def resolve_scheme(scheme: Optional[KeyScheme]) -> KeyScheme:
    """Explicit --scheme, otherwise the configured default."""
    if scheme is not None:
        return scheme
    return KeyScheme.parse(get_default_scheme())


def keybind_table(
    keybinds: Sequence[FeatureKeybind],
    scheme: KeyScheme,
    title: Optional[str] = None,
    last_column: str = "Type",
    last_values: Optional[Sequence[str]] = None,
) -> Table:
    """Rich table of keybinds; untranslated key names are shown in red."""
    table = Table(title=title)
    table.add_column("Feature", style="cyan")
    table.add_column("Key code", justify="right")
    table.add_column("Key name")
    table.add_column(last_column, style="dim")

    for index, keybind in enumerate(keybinds):
        name = key_name(keybind.key_code, scheme)
        style = "red" if is_untranslated(name) else "yellow"
        name_cell = f"[{style}]{escape(name)}[/{style}]"
        last = last_values[index] if last_values is not None else keybind.key_type
        table.add_row(escape(keybind.feature_name), str(keybind.key_code), name_cell, escape(last))

    return table


def print_history(history: ModificationHistory) -> None:
    """Show the modification ledger."""
    if not len(history):
        console.print("[dim]No key codes changed[/dim]")
        return

    table = Table(title="Modification history")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Feature", style="cyan")
    table.add_column("Old", justify="right")
    table.add_column("New", justify="right")
    table.add_column("Time", style="dim")

    for index, record in enumerate(history, start=1):
        changed = record.old_key_code != record.new_key_code
        new_cell = f"[green]{record.new_key_code}[/green]" if changed else str(record.new_key_code)
        table.add_row(
            str(index),
            escape(record.feature_name),
            str(record.old_key_code),
            new_cell,
            record.timestamp.strftime("%H:%M:%S"),
        )

    console.print(table)
