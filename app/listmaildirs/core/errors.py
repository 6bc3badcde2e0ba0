"""Exception hierarchy for list-maildirs.

Library code raises these; only the CLI turns them into exit codes.
"""


class MaildirError(Exception):
    """Base exception for all list-maildirs errors."""


class MaildirConfigError(MaildirError):
    """Raised when the listing cannot start because of bad configuration.

    Examples are a missing base directory or an unreadable config file.
    """


class HomeDirectoryError(MaildirConfigError):
    """Raised when ``~`` must be expanded but no home directory is known."""


class MaildirInvariantError(MaildirError):
    """Raised when a discovered path violates the traversal root invariant.

    A marker directory without a parent, or a mailbox that does not lie
    under the base directory, can only come from a broken environment or
    a programming error.
    """
