"""CLI commands for list-maildirs.

This package contains all subcommand implementations.
"""

from listmaildirs.cli.commands import config

__all__ = ["config"]
