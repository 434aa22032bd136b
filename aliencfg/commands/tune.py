"""Interactive fine-tune command."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..keymap import KeyScheme
from ..keymap.capture import CANCEL_WORDS, CaptureOutcome, KeystrokeCapture, parse_key_input
from ..keymap.modifiers import get_modifier_poller
from ..services.extractor import sort_by_feature_name
from ..services.tune_session import FineTuneSession, TuneState
from ..utils.cli import handle_cli_errors
from ..utils.file_io import load_config_file, save_config_file
from ..utils.output import console
from ._helpers import config_path_callback, keybind_table, print_history, resolve_scheme

logger = logging.getLogger(__name__)


def _read_capture(
    session: FineTuneSession,
    scheme: KeyScheme,
    keystroke: Optional[KeystrokeCapture],
) -> CaptureOutcome:
    assert session.current is not None
    if keystroke is not None:
        console.print(
            f"Press the new key for [cyan]{escape(session.current.feature_name)}[/cyan] "
            "(Esc cancels)"
        )
        return keystroke.capture()

    text = typer.prompt(
        f"New key for {session.current.feature_name} (name or code, 'skip', 'cancel')"
    )
    return parse_key_input(text, scheme)


@handle_cli_errors("fine-tuning keybinds")
def tune(
    config: Path = typer.Argument(..., help="CFG file to edit (.cfg/.txt)", callback=config_path_callback),
    output: Path = typer.Option(
        ..., "--output", "-o", help="CFG file to write (.cfg/.txt)", callback=config_path_callback
    ),
    scheme: Optional[KeyScheme] = typer.Option(
        None, "--scheme", "-s", help="Key-code scheme for names and captures", case_sensitive=False
    ),
    keystroke: bool = typer.Option(
        False, "--keystroke", "-k", help="Capture keys by pressing them instead of typing names"
    ),
) -> None:
    """Rebind features one at a time.

    Pick a feature, give it a new key, confirm. Leave the feature prompt
    blank to save and finish; type 'cancel' to quit without writing.

    Examples:
        aliencfg tune game.cfg -o game_tuned.cfg
        aliencfg tune game.cfg -o game_tuned.cfg --keystroke
    """
    key_scheme = resolve_scheme(scheme)
    session = FineTuneSession(load_config_file(config))
    capture = KeystrokeCapture(key_scheme, get_modifier_poller()) if keystroke else None

    if not session.features():
        console.print("[red]No keybinds found in config[/red]")
        raise typer.Exit(1)

    while not session.is_finished:
        console.print(
            keybind_table(
                sort_by_feature_name(session.features()),
                key_scheme,
                title=f"{config.name} ({key_scheme.label})",
            )
        )
        choice = typer.prompt(
            "Feature to rebind (blank to save and finish)", default="", show_default=False
        ).strip()

        if not choice:
            break
        if choice.lower() in CANCEL_WORDS:
            session.cancel()
            break
        if not session.select_feature(choice):
            console.print(f"[red]Unknown feature '{escape(choice)}'[/red]")
            continue

        while session.state in (TuneState.AWAITING_KEY_CAPTURE, TuneState.CONFIRMING_CAPTURE):
            if session.state is TuneState.AWAITING_KEY_CAPTURE:
                state = session.submit_capture(_read_capture(session, key_scheme, capture))
                if state is TuneState.AWAITING_KEY_CAPTURE:
                    console.print("[red]Key not recognized, try again[/red]")
                continue

            assert session.current is not None and session.pending is not None
            accept = typer.confirm(
                f"Bind {session.current.feature_name} to "
                f"{session.pending.display_name} ({session.pending.code})?",
                default=True,
            )
            session.confirm(accept)

        if session.state is TuneState.SKIPPED:
            console.print("[dim]Skipped[/dim]")

    if session.is_finished:
        console.print("[yellow]Fine-tune cancelled, nothing written[/yellow]")
        return

    print_history(session.history)
    if not session.applied_count:
        return

    save_config_file(session.store, output)
    console.print(f"[green]Wrote {output.resolve()}[/green]")
