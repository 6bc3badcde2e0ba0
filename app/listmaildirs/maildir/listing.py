"""Maildir listing pipeline.

Resolves the base directory, walks it, applies exclusions and puts the
result into its final order.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from listmaildirs.core.paths import HomeProvider, expand_path
from listmaildirs.maildir.models import MaildirListing
from listmaildirs.maildir.ordering import exclude_maildirs, order_maildirs
from listmaildirs.maildir.scanner import MaildirScanner

logger = logging.getLogger(__name__)


def list_maildirs(
    base: str,
    initial: Iterable[str | Path] = (),
    excluded: Iterable[str | Path] = (),
    *,
    home: HomeProvider = Path.home,
) -> MaildirListing:
    """List the mailboxes below a Maildir base directory.

    Args:
        base: Base directory, optionally starting with ``~`` or ``~/``.
        initial: Mailboxes to list first, in the order given.
        excluded: Mailboxes to leave out.
        home: Provider for the home directory used by ``~`` expansion.

    Returns:
        MaildirListing with the resolved base and ordered mailboxes.

    Raises:
        HomeDirectoryError: If ``~`` must be expanded but no home is known.
        MaildirInvariantError: If a discovered path is not under the base.
    """
    base_path = expand_path(base, home=home)
    initial_paths = [Path(p) for p in initial]
    excluded_paths = [Path(p) for p in excluded]

    logger.debug("Scanning Maildir base %s", base_path)
    discovered = list(MaildirScanner(base_path).scan())
    logger.debug("Discovered %d mailbox(es)", len(discovered))

    remaining = exclude_maildirs(discovered, excluded_paths)
    ordered = order_maildirs(remaining, initial_paths)

    return MaildirListing(base=base_path, maildirs=tuple(ordered))
