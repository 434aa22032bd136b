"""Settings commands: show and change aliencfg preferences."""

import typer
from rich.markup import escape
from rich.table import Table

from ..config.settings import get_config_dir, get_env_info
from ..config.user_settings import get_settings_path, load_user_settings, set_user_setting
from ..utils.cli import handle_cli_errors
from ..utils.output import console

app = typer.Typer(help="Show or change aliencfg settings")


@app.command("show")
def show() -> None:
    """Show settings.json values and ALIENCFG_* environment variables."""
    config_dir = get_config_dir()

    table = Table(title=f"Settings ({escape(str(get_settings_path(config_dir)))})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in load_user_settings(config_dir).items():
        table.add_row(escape(str(key)), escape(str(value)))
    console.print(table)

    env_table = Table(title="Environment")
    env_table.add_column("Variable", style="cyan")
    env_table.add_column("Value")
    env_table.add_column("Description", style="dim")
    for name, info in get_env_info().items():
        if not info["is_set"]:
            value = f"[dim]unset (default: {escape(str(info['default']))})[/dim]"
        elif info["valid"]:
            value = escape(str(info["value"]))
        else:
            value = f"[red]{escape(str(info['value']))} (invalid)[/red]"
        env_table.add_row(name, value, info["description"])
    console.print(env_table)


@app.command("set")
@handle_cli_errors("saving settings")
def set_value(
    key: str = typer.Argument(..., help="default_scheme, active_report_file or preview_count"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Store a setting in settings.json.

    Examples:
        aliencfg config set default_scheme vk
        aliencfg config set preview_count 10
    """
    stored = set_user_setting(get_config_dir(), key, value)
    console.print(f"[green]{escape(key)} = {escape(str(stored))}[/green]")
