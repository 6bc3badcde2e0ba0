"""Maildir listing models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class MaildirListing:
    """Result of one listing run.

    Attributes:
        base: Resolved base directory that was walked.
        maildirs: Mailbox paths relative to ``base``, in output order.
    """

    base: Path
    maildirs: tuple[Path, ...]

    def __post_init__(self) -> None:
        """Validate listing data after initialization."""
        for maildir in self.maildirs:
            if maildir.is_absolute():
                msg = f"Mailbox path must be relative to the base, got {maildir}"
                raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.maildirs)

    @property
    def is_empty(self) -> bool:
        """Check if no mailboxes were listed."""
        return not self.maildirs
