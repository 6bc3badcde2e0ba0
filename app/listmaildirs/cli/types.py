"""Shared helpers for CLI commands.

This module provides option parsing helpers used by more than one
command module.
"""


def split_mailbox_values(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma-separated mailbox options.

    ``-i INBOX -i Sent`` and ``-i INBOX,Sent`` both give
    ``["INBOX", "Sent"]``. Blank items are dropped.

    Args:
        values: Raw option values, or None if the option was not given.

    Returns:
        Mailbox names in the order given.
    """
    names: list[str] = []
    for value in values or []:
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names
