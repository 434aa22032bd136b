#!/usr/bin/env python3
"""
Main CLI entry point for aliencfg
"""

import logging

import typer

from aliencfg import __version__
from aliencfg.commands.keybinds import active, compare, extract, keyname, merge
from aliencfg.commands.settings import app as config_app
from aliencfg.commands.tune import tune
from aliencfg.config.settings import get_config_dir, get_env_var, validate_all_env_vars
from aliencfg.utils.logging_utils import level_from_str, setup_logging
from aliencfg.utils.output import console, err_console


def version():
    """Show aliencfg version"""
    typer.echo(f"aliencfg version {__version__}")


def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    aliencfg - keybind manager for mod CFG files

    Extract feature keybinds to JSON, edit them, merge them back, and
    compare the active bindings of two configs.

    [bold]Examples:[/bold]

    Export keybinds:
        [cyan]aliencfg extract game.cfg -o binds.json[/cyan]

    Merge edited keybinds:
        [cyan]aliencfg merge game.cfg binds.json -o game_new.cfg[/cyan]

    Compare two configs:
        [cyan]aliencfg compare mine.cfg theirs.cfg --scheme vk[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    for error in validate_all_env_vars():
        err_console.print(f"[yellow]Warning: {error}[/yellow]")

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = level_from_str(get_env_var("ALIENCFG_LOG_LEVEL", validate=False))

    setup_logging(get_config_dir(), level=level, console=verbose)
    console.quiet = quiet


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(rich_markup_mode="rich", no_args_is_help=True)

    app.command()(extract)
    app.command()(merge)
    app.command()(active)
    app.command()(compare)
    app.command()(tune)
    app.command(context_settings={"ignore_unknown_options": True})(keyname)
    app.command()(version)
    app.add_typer(config_app, name="config")

    app.callback()(main)
    return app


# Create the app instance
app = create_app()


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
