"""Maildir discovery and ordering.

This module provides mailbox discovery below a Maildir base directory,
exclusion filtering and initial-first ordering.
"""

from listmaildirs.maildir.classifier import MARKER_NAME, is_directory, is_mailbox_marker
from listmaildirs.maildir.listing import list_maildirs
from listmaildirs.maildir.models import MaildirListing
from listmaildirs.maildir.ordering import exclude_maildirs, order_maildirs
from listmaildirs.maildir.scanner import MaildirScanner, maildir_path

__all__ = [
    "MARKER_NAME",
    "MaildirListing",
    "MaildirScanner",
    "exclude_maildirs",
    "is_directory",
    "is_mailbox_marker",
    "list_maildirs",
    "maildir_path",
    "order_maildirs",
]
