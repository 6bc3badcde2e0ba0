"""Unit tests for output formatting."""

import json
from pathlib import Path

from listmaildirs.maildir.models import MaildirListing
from listmaildirs.utils.formatting import (
    format_json,
    format_mailboxes,
    format_plain,
    mailbox_name,
)


class TestFormatMailboxes:
    """Tests for the mutt mailboxes line."""

    def test_format(self) -> None:
        """Each mailbox is wrapped as +'path' and joined by one space."""
        result = format_mailboxes([Path("Sent"), Path("Archive"), Path("INBOX")])
        assert result == "+'Sent' +'Archive' +'INBOX'"

    def test_nested(self) -> None:
        """Nested mailboxes use forward slashes."""
        assert format_mailboxes([Path("Lists/python")]) == "+'Lists/python'"

    def test_spaces_kept(self) -> None:
        """Names with spaces are kept inside the quotes."""
        assert format_mailboxes([Path("Sent Items")]) == "+'Sent Items'"

    def test_empty(self) -> None:
        """No mailboxes gives an empty string."""
        assert format_mailboxes([]) == ""

    def test_base_mailbox(self) -> None:
        """The base itself renders as an empty name."""
        assert format_mailboxes([Path("."), Path("INBOX")]) == "+'' +'INBOX'"


class TestMailboxName:
    """Tests for mailbox_name function."""

    def test_relative(self) -> None:
        """Relative paths render in POSIX form."""
        assert mailbox_name(Path("a") / "b") == "a/b"

    def test_base(self) -> None:
        """The base renders empty."""
        assert mailbox_name(Path(".")) == ""


class TestFormatPlain:
    """Tests for one-per-line output."""

    def test_lines(self) -> None:
        """One mailbox per line, in order."""
        assert format_plain([Path("B"), Path("A")]) == "B\nA"

    def test_empty(self) -> None:
        """No mailboxes gives an empty string."""
        assert format_plain([]) == ""


class TestFormatJson:
    """Tests for JSON output."""

    def test_document(self) -> None:
        """JSON carries the base and the ordered mailboxes."""
        listing = MaildirListing(
            base=Path("/home/alice/Mail"), maildirs=(Path("INBOX"), Path("A/B"))
        )

        data = json.loads(format_json(listing))

        assert data == {"base": "/home/alice/Mail", "maildirs": ["INBOX", "A/B"]}
