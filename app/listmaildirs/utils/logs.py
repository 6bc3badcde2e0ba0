"""Logging setup for the command line."""

import logging

from rich.logging import RichHandler

from listmaildirs.utils.formatting import err_console


def setup_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    stdout carries the mailbox line only, so logging never writes there.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
