"""Tests for Maildir entry predicates."""

import os
from pathlib import Path

import pytest
from listmaildirs.maildir.classifier import MARKER_NAME, is_directory, is_mailbox_marker


class TestIsDirectory:
    """Tests for is_directory predicate."""

    def test_directory(self, tmp_path: Path) -> None:
        """A real directory is a directory."""
        assert is_directory(tmp_path) is True

    def test_file(self, tmp_path: Path) -> None:
        """A regular file is not a directory."""
        f = tmp_path / "message"
        f.write_text("Subject: hi\n\nbody")
        assert is_directory(f) is False

    def test_missing(self, tmp_path: Path) -> None:
        """A nonexistent path is not a directory."""
        assert is_directory(tmp_path / "nope") is False

    def test_symlink_to_directory(self, tmp_path: Path) -> None:
        """A symlink to a directory is classified as a directory."""
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)
        assert is_directory(link) is True

    def test_broken_symlink(self, tmp_path: Path) -> None:
        """A dangling symlink is not a directory."""
        link = tmp_path / "dangling"
        link.symlink_to(tmp_path / "gone")
        assert is_directory(link) is False


class TestIsMailboxMarker:
    """Tests for is_mailbox_marker predicate."""

    def test_marker_name(self) -> None:
        """The marker is the conventional Maildir 'cur' directory."""
        assert MARKER_NAME == "cur"

    @pytest.mark.parametrize("path", ["Mail/INBOX/cur", "cur", "/abs/Sent/cur"])
    def test_cur_is_marker(self, path: str) -> None:
        """Entries named 'cur' are markers."""
        assert is_mailbox_marker(Path(path)) is True

    @pytest.mark.parametrize(
        "path", ["Mail/INBOX/new", "Mail/INBOX/tmp", "Mail/cursor", "Mail/CUR"]
    )
    def test_other_names_are_not_markers(self, path: str) -> None:
        """Only the exact name 'cur' counts."""
        assert is_mailbox_marker(Path(path)) is False

    def test_marker_in_parent_does_not_count(self) -> None:
        """A 'cur' component higher up does not make the entry a marker."""
        assert is_mailbox_marker(Path("Mail") / "cur" / "file") is False

    def test_uses_base_name_only(self) -> None:
        """A trailing separator does not change the base name."""
        assert is_mailbox_marker(Path("INBOX" + os.sep + "cur" + os.sep)) is True
