"""Main CLI application entry point.

Defines the Typer application, its global options and the default
listing action that runs when no subcommand is given.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from listmaildirs import __version__
from listmaildirs.cli.commands import config
from listmaildirs.cli.types import split_mailbox_values
from listmaildirs.configs.settings import load_settings_or_default, merge_settings
from listmaildirs.core.errors import MaildirConfigError, MaildirInvariantError
from listmaildirs.maildir.listing import list_maildirs
from listmaildirs.maildir.models import MaildirListing
from listmaildirs.utils.formatting import (
    console,
    format_json,
    format_mailboxes,
    format_plain,
    print_error,
)
from listmaildirs.utils.logs import setup_logging

logger = logging.getLogger(__name__)

# Create main Typer app
app = typer.Typer(
    name="list-maildirs",
    help="List Maildir mailboxes for mutt, initial mailboxes first.",
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class OutputFormat(str, Enum):
    """Output format options for the mailbox listing."""

    MUTT = "mutt"
    PLAIN = "plain"
    JSON = "json"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"list-maildirs version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    base: Annotated[
        str | None,
        typer.Option(
            "--base",
            "-b",
            metavar="MAILDIR",
            help="Base directory of the Maildir to sort.",
        ),
    ] = None,
    initial: Annotated[
        list[str] | None,
        typer.Option(
            "--initial",
            "-i",
            metavar="INITIAL",
            help="Maildir to be sorted first. Repeat the flag or use commas.",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            metavar="EXCLUDE",
            help="Maildir to exclude from the list. Repeat the flag or use commas.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.MUTT,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/list-maildirs/config.toml).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Set verbose mode.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """list-maildirs - Print Maildir mailboxes in mutt's mailboxes syntax.

    Mailboxes given with --initial come first in the order given; all
    other mailboxes follow in sorted order.
    """
    setup_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = merge_settings(
            load_settings_or_default(config_path),
            base=base,
            initial=split_mailbox_values(initial),
            exclude=split_mailbox_values(exclude),
        )
        if settings.base is None:
            msg = "No Maildir base given. Use --base or set 'base' in the config file."
            raise MaildirConfigError(msg)

        listing = list_maildirs(settings.base, settings.initial, settings.exclude)
    except MaildirConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e
    except MaildirInvariantError as e:
        logger.debug("Traversal invariant violated", exc_info=True)
        print_error(f"Internal error: {e}")
        raise typer.Exit(code=1) from e

    _print_listing(listing, output_format)


def _print_listing(listing: MaildirListing, output_format: OutputFormat) -> None:
    """Write a listing to stdout in the requested format."""
    if output_format == OutputFormat.JSON:
        console.print_json(format_json(listing))
        return

    if output_format == OutputFormat.PLAIN:
        if not listing.is_empty:
            typer.echo(format_plain(listing.maildirs))
        return

    # mutt reads exactly one line, even when it is empty
    typer.echo(format_mailboxes(listing.maildirs))


# Register commands
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
