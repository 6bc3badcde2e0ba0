"""list-maildirs - Ordered Maildir mailbox lists for mutt.

Walks a Maildir hierarchy and prints the mailboxes it finds in the
format expected by mutt's ``mailboxes`` command.
"""

__version__ = "0.3.0"
