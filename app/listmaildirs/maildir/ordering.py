"""Exclusion and ordering of discovered mailboxes.

Mailbox paths are compared as ``Path`` objects, so ``Sent`` and ``Sent/``
are the same mailbox while ``Sent`` and ``Sent/Old`` are not.
"""

from collections.abc import Iterable
from pathlib import Path


def exclude_maildirs(maildirs: Iterable[Path], excluded: Iterable[Path]) -> list[Path]:
    """Drop every mailbox that equals an excluded path.

    Matching is exact: excluding ``Lists`` keeps ``Lists/python``.

    Args:
        maildirs: Discovered mailbox paths.
        excluded: Paths to remove.

    Returns:
        Remaining mailbox paths, in their original order.
    """
    excluded_set = set(excluded)
    return [m for m in maildirs if m not in excluded_set]


def order_maildirs(maildirs: Iterable[Path], initial: Iterable[Path]) -> list[Path]:
    """Put the initial mailboxes first, then everything else sorted.

    Initial mailboxes keep the order in which they were requested. Initial
    entries that were not discovered are dropped, and an entry requested
    more than once is emitted only once.

    Args:
        maildirs: Mailbox paths to order.
        initial: Mailboxes to list first, in the order given.

    Returns:
        Ordered mailbox paths.
    """
    initial = list(initial)
    initial_set = set(initial)

    matched: set[Path] = set()
    remainder: list[Path] = []
    for maildir in maildirs:
        if maildir in initial_set:
            matched.add(maildir)
        else:
            remainder.append(maildir)

    ordered: list[Path] = []
    emitted: set[Path] = set()
    for maildir in initial:
        if maildir in matched and maildir not in emitted:
            ordered.append(maildir)
            emitted.add(maildir)

    remainder.sort()
    return ordered + remainder
