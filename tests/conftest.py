"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

MakeMaildir = Callable[..., Path]


@pytest.fixture
def make_maildir(tmp_path: Path) -> MakeMaildir:
    """Factory building a Maildir tree under a fresh base directory.

    Each mailbox name gets ``cur``, ``new`` and ``tmp`` subdirectories.
    """
    base = tmp_path / "Mail"
    base.mkdir()

    def _make(*mailboxes: str) -> Path:
        for mailbox in mailboxes:
            for sub in ("cur", "new", "tmp"):
                (base / mailbox / sub).mkdir(parents=True, exist_ok=True)
        return base

    return _make


@pytest.fixture
def sample_maildir(make_maildir: MakeMaildir) -> Path:
    """A small Maildir with top-level and nested mailboxes."""
    return make_maildir("INBOX", "Sent", "Archive", "Lists", "Lists/python", "Trash")
