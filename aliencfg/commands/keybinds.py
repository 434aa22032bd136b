"""Keybind commands: extract, merge, active, compare, keyname."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..config.settings import get_config_dir
from ..config.user_settings import load_user_settings
from ..keymap import KeyScheme, is_untranslated, key_name
from ..services.comparison_service import compare as compare_stores
from ..services.exchange import export_keybinds, import_keybinds
from ..services.extractor import active_keybinds, extract_keybinds
from ..services.merge_service import overwrite
from ..services.report import render_active_report, render_comparison_report
from ..utils.cli import handle_cli_errors
from ..utils.file_io import load_config_file, save_config_file, write_lines, write_text_file
from ..utils.output import console
from ._helpers import (
    config_path_callback,
    exchange_path_callback,
    keybind_table,
    print_history,
    report_path_callback,
    resolve_scheme,
)

logger = logging.getLogger(__name__)

SCHEME_HELP = "Key-code scheme used to name keys (glfw or vk)"


@handle_cli_errors("extracting keybinds")
def extract(
    config: Path = typer.Argument(..., help="CFG file to read (.cfg/.txt)", callback=config_path_callback),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="JSON file to write (default: <config>.json)",
        callback=exchange_path_callback,
    ),
) -> None:
    """Extract feature keybinds from a config and export them as JSON.

    Examples:
        aliencfg extract game.cfg
        aliencfg extract game.cfg -o binds.json
    """
    store = load_config_file(config)
    console.print(f"[green]Loaded {len(store)} config entries[/green]")

    keybinds = extract_keybinds(store)
    if not keybinds:
        console.print("[red]No keybinds found, nothing exported[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Extracted {len(keybinds)} feature keybinds[/green]")

    preview_count = load_user_settings(get_config_dir())["preview_count"]
    console.print(f"\n[bold]Preview (first {preview_count}):[/bold]")
    for keybind in keybinds[:preview_count]:
        console.print(str(keybind), markup=False)
    if len(keybinds) > preview_count:
        console.print("...")

    target = output or config.with_suffix(".json")
    export_keybinds(keybinds, target)
    console.print(f"\n[green]Exported keybinds to {target.resolve()}[/green]")


@handle_cli_errors("merging keybinds")
def merge(
    config: Path = typer.Argument(..., help="CFG file to update (.cfg/.txt)", callback=config_path_callback),
    keybinds_file: Path = typer.Argument(..., help="Edited keybind JSON", callback=exchange_path_callback),
    output: Path = typer.Option(
        ..., "--output", "-o", help="CFG file to write (.cfg/.txt)", callback=config_path_callback
    ),
    history_file: Optional[Path] = typer.Option(
        None, "--history-file", help="Also write the modification history as JSON",
        callback=exchange_path_callback,
    ),
) -> None:
    """Overwrite key codes in a config from a JSON keybind file.

    Only features that already exist in the config are touched; new
    features are never added.

    Examples:
        aliencfg merge game.cfg binds.json -o game_new.cfg
    """
    store = load_config_file(config)
    new_keybinds = import_keybinds(keybinds_file)
    if not new_keybinds:
        console.print("[red]Keybind file holds no entries, nothing merged[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Imported {len(new_keybinds)} keybinds[/green]")

    result = overwrite(store, new_keybinds)
    save_config_file(result.store, output)

    print_history(result.history)
    console.print(f"[green]Overwrote {result.applied_count} config entries[/green]")
    if result.not_applied:
        names = escape(", ".join(kb.feature_name for kb in result.not_applied))
        console.print(
            f"[yellow]{len(result.not_applied)} keybinds not in config, ignored: {names}[/yellow]"
        )

    if history_file is not None:
        write_text_file(history_file, json.dumps(result.history.to_dicts(), indent=2) + "\n")
        console.print(f"History written to {history_file}")

    console.print(f"[green]Wrote {output.resolve()}[/green]")


@handle_cli_errors("listing active keybinds")
def active(
    config: Path = typer.Argument(..., help="CFG file to read (.cfg/.txt)", callback=config_path_callback),
    scheme: Optional[KeyScheme] = typer.Option(None, "--scheme", "-s", help=SCHEME_HELP, case_sensitive=False),
    write: bool = typer.Option(False, "--write", "-w", help="Write the report to a text file"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Report file (implies --write)", callback=report_path_callback
    ),
) -> None:
    """List features whose key is bound (key code != -1).

    Examples:
        aliencfg active game.cfg
        aliencfg active game.cfg --scheme vk --write
    """
    key_scheme = resolve_scheme(scheme)
    keybinds = extract_keybinds(load_config_file(config))
    bound = active_keybinds(keybinds)

    if not bound:
        console.print("[red]No active keybinds found (every key code is -1)[/red]")
        raise typer.Exit(1)

    console.print(
        keybind_table(bound, key_scheme, title=f"{config.name} - active keybinds ({key_scheme.label})")
    )

    report = render_active_report(keybinds, key_scheme)
    if report.untranslated_count:
        console.print(
            f"[red]{report.untranslated_count} key codes have no {key_scheme.label} name; "
            f"try --scheme {key_scheme.toggled().value}[/red]"
        )

    if write or output is not None:
        target = output or Path(load_user_settings(get_config_dir())["active_report_file"])
        write_lines(target, report.lines)
        console.print(f"[green]Report written to {target.resolve()}[/green]")


@handle_cli_errors("comparing configs")
def compare(
    config_a: Path = typer.Argument(..., help="First CFG file", callback=config_path_callback),
    config_b: Path = typer.Argument(..., help="Second CFG file", callback=config_path_callback),
    scheme: Optional[KeyScheme] = typer.Option(None, "--scheme", "-s", help=SCHEME_HELP, case_sensitive=False),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the report to a text file", callback=report_path_callback
    ),
) -> None:
    """Show active keybinds that exist in only one of two configs.

    Features bound on both sides are not listed, even with different keys.

    Examples:
        aliencfg compare mine.cfg friend.cfg
    """
    key_scheme = resolve_scheme(scheme)
    label_a, label_b = config_a.name, config_b.name
    if label_a.casefold() == label_b.casefold():
        label_a, label_b = str(config_a), str(config_b)

    result = compare_stores(load_config_file(config_a), load_config_file(config_b), label_a, label_b)

    if result.is_identical:
        console.print("[green]Both configs have the same active features[/green]")
    for title, entries in ((f"Only in {label_a}", result.unique_to_a), (f"Only in {label_b}", result.unique_to_b)):
        if entries:
            console.print(
                keybind_table(
                    [entry.keybind for entry in entries],
                    key_scheme,
                    title=f"{title} ({key_scheme.label})",
                    last_column="Source",
                    last_values=[entry.source_label for entry in entries],
                )
            )

    if output is not None:
        report = render_comparison_report(result, key_scheme)
        write_lines(output, report.lines)
        console.print(f"[green]Report written to {output.resolve()}[/green]")


def keyname(
    code: int = typer.Argument(..., help="Key code to translate"),
    scheme: Optional[KeyScheme] = typer.Option(None, "--scheme", "-s", help=SCHEME_HELP, case_sensitive=False),
) -> None:
    """Translate a key code to its key name.

    Use -- before negative codes:
        aliencfg keyname -- -3
    """
    key_scheme = resolve_scheme(scheme)
    name = key_name(code, key_scheme)
    style = "red" if is_untranslated(name) else "yellow"
    console.print(f"{code} = [{style}]{escape(name)}[/{style}] ({key_scheme.label})")
