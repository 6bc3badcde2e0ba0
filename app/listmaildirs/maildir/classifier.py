"""Predicates used while walking a Maildir hierarchy."""

from pathlib import Path

# A directory containing "cur" is a mailbox
MARKER_NAME = "cur"


def is_directory(entry: Path) -> bool:
    """Check whether an entry is a directory.

    Symlinks are followed, so a link to a directory counts as one and a
    broken link does not.

    Args:
        entry: Filesystem entry to classify.

    Returns:
        True if the entry is (or points to) a directory.
    """
    try:
        return entry.is_dir()
    except OSError:
        return False


def is_mailbox_marker(entry: Path) -> bool:
    """Check whether an entry is the ``cur`` marker of a mailbox."""
    return entry.name == MARKER_NAME
