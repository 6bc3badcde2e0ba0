"""CLI package for list-maildirs.

This package contains the Typer application and all subcommands.
"""

from listmaildirs.cli.main import app

__all__ = ["app"]
