"""Utility modules for list-maildirs.

This module exports commonly used utility functions.
"""

from listmaildirs.utils.formatting import (
    console,
    err_console,
    format_json,
    format_mailboxes,
    format_plain,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from listmaildirs.utils.logs import setup_logging

__all__ = [
    "console",
    "err_console",
    "format_json",
    "format_mailboxes",
    "format_plain",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "setup_logging",
]
