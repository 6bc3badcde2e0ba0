"""Output formatting for list-maildirs.

Renders mailbox listings for mutt and other consumers, and provides the
shared Rich consoles used for user-facing messages.
"""

import json
import sys
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.theme import Theme

from listmaildirs.maildir.models import MaildirListing

_THEME = Theme(
    {
        "info": "#0ec1c8",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "muted": "#b2bec3",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=_THEME, color_system=_detect_color_system())
err_console = Console(theme=_THEME, stderr=True, color_system=_detect_color_system())


def mailbox_name(maildir: Path) -> str:
    """Render a relative mailbox path as text.

    The base directory itself (``Path(".")``) renders as an empty string,
    which mutt reads as the folder itself.
    """
    if maildir == Path("."):
        return ""
    return maildir.as_posix()


def format_mailboxes(maildirs: Iterable[Path]) -> str:
    """Format mailboxes for mutt's ``mailboxes`` command.

    Each mailbox is written as ``+'<path>'`` and entries are separated by
    a single space.

    Args:
        maildirs: Mailbox paths relative to the Maildir base.

    Returns:
        The formatted line, empty if there are no mailboxes.
    """
    return " ".join(f"+'{mailbox_name(m)}'" for m in maildirs)


def format_plain(maildirs: Iterable[Path]) -> str:
    """Format mailboxes one per line."""
    return "\n".join(mailbox_name(m) for m in maildirs)


def format_json(listing: MaildirListing) -> str:
    """Format a listing as a JSON document.

    Args:
        listing: The listing to serialize.

    Returns:
        JSON string with ``base`` and ``maildirs`` keys.
    """
    data = {
        "base": str(listing.base),
        "maildirs": [mailbox_name(m) for m in listing.maildirs],
    }
    return json.dumps(data)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
