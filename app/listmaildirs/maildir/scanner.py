"""Maildir scanner for mailbox discovery.

Walks a Maildir base directory and yields every mailbox found below it.
A mailbox is any directory that contains a ``cur`` subdirectory; mailboxes
may be nested inside other mailboxes to any depth.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from listmaildirs.core.errors import MaildirInvariantError
from listmaildirs.maildir.classifier import is_directory, is_mailbox_marker

logger = logging.getLogger(__name__)


def maildir_path(base: Path, marker: Path) -> Path:
    """Derive a mailbox path relative to the base from its marker.

    Args:
        base: Base directory the walk started from.
        marker: Full path of a discovered ``cur`` directory.

    Returns:
        Path of the mailbox (the marker's parent) relative to ``base``.

    Raises:
        MaildirInvariantError: If the marker has no parent, or its parent
            does not lie under ``base``.
    """
    parent = marker.parent
    if parent == marker:
        msg = f"No parent directory for {marker}"
        raise MaildirInvariantError(msg)

    try:
        return parent.relative_to(base)
    except ValueError as e:
        raise MaildirInvariantError(str(e)) from e


class MaildirScanner:
    """Scans a Maildir hierarchy for mailboxes.

    The walk is read-only and never follows symlinked directories, though
    a symlink named ``cur`` pointing at a directory still marks a mailbox.
    Directories that cannot be read are skipped with a warning.

    Args:
        base: Absolute base directory to walk.
    """

    def __init__(self, base: Path) -> None:
        self._base = base

    @property
    def base(self) -> Path:
        """Base directory of the walk."""
        return self._base

    def scan(self) -> Iterator[Path]:
        """Walk the base directory and yield mailbox paths.

        Only entries below the base are classified; the base itself is
        never a marker, even when it is named ``cur``. A missing base
        directory yields nothing.

        Yields:
            Mailbox paths relative to the base directory.
        """
        if not is_directory(self._base):
            logger.warning("Maildir base is not a directory: %s", self._base)
            return

        for marker in self._walk(self._base):
            maildir = maildir_path(self._base, marker)
            logger.debug("Found mailbox: %s", maildir)
            yield maildir

    def _walk(self, top: Path) -> Iterator[Path]:
        """Yield marker directories below ``top``, depth first.

        Uses an explicit stack so the depth of the tree is not bounded by
        the interpreter's recursion limit. Siblings are visited in sorted
        order.

        Args:
            top: Directory to start from.

        Yields:
            Full paths of ``cur`` directories.
        """
        stack = [top]
        while stack:
            directory = stack.pop()
            try:
                entries = sorted(directory.iterdir())
            except PermissionError:
                logger.warning("Permission denied scanning directory: %s", directory)
                continue
            except OSError as e:
                logger.warning("Cannot scan directory %s: %s", directory, e)
                continue

            subdirs: list[Path] = []
            for entry in entries:
                if not is_directory(entry):
                    continue

                if is_mailbox_marker(entry):
                    yield entry

                # Mailboxes can hold other mailboxes, keep descending
                if not entry.is_symlink():
                    subdirs.append(entry)

            stack.extend(reversed(subdirs))
