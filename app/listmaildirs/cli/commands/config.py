"""Config file commands.

Provides commands to create, inspect and locate the config file that
supplies default options to list-maildirs.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from listmaildirs.cli.types import split_mailbox_values
from listmaildirs.configs.settings import (
    MaildirSettings,
    SettingsError,
    load_settings,
    save_settings,
)
from listmaildirs.core.paths import get_config_path
from listmaildirs.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Manage the list-maildirs config file.",
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    """Get the config path chosen on the command line, or the default."""
    obj = ctx.obj or {}
    return obj.get("config_path") or get_config_path()


@app.command()
def init(
    ctx: typer.Context,
    base: Annotated[
        str,
        typer.Option("--base", "-b", metavar="MAILDIR", help="Base directory of the Maildir."),
    ] = "~/Mail",
    initial: Annotated[
        list[str] | None,
        typer.Option(
            "--initial", "-i", help="Maildir to be sorted first (repeat or comma-separate)."
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-e", help="Maildir to exclude (repeat or comma-separate)."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a new config file."""
    path = _config_path(ctx)

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        settings = MaildirSettings(
            base=base,
            initial=split_mailbox_values(initial),
            exclude=split_mailbox_values(exclude),
        )
    except ValueError as e:
        print_error(f"Invalid settings: {e}")
        raise typer.Exit(code=2) from e

    try:
        saved = save_settings(settings, path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the settings from the config file."""
    path = _config_path(ctx)

    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    table = Table(title=str(path), show_header=True, header_style="bold")
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")
    table.add_row("base", settings.base or "[muted]-[/muted]")
    table.add_row("initial", ", ".join(settings.initial) or "[muted]-[/muted]")
    table.add_row("exclude", ", ".join(settings.exclude) or "[muted]-[/muted]")
    console.print(table)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the config file location."""
    typer.echo(str(_config_path(ctx)))
