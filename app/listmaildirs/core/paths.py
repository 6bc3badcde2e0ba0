"""Path handling for list-maildirs.

This module resolves the user-supplied Maildir base (with ``~`` shorthand)
and provides XDG-compliant locations for the configuration file.

XDG defaults:
- Config: ~/.config/list-maildirs/config.toml
"""

import os
from collections.abc import Callable
from pathlib import Path

from listmaildirs.core.errors import HomeDirectoryError

# Application identifier for directory naming
APP_NAME = "list-maildirs"

TILDE = "~"
TILDE_SLASH = "~/"

HomeProvider = Callable[[], Path]


def _resolve_home(home: HomeProvider) -> Path:
    """Ask the home provider for the home directory.

    Args:
        home: Zero-argument callable returning the home directory.

    Returns:
        The home directory.

    Raises:
        HomeDirectoryError: If the provider fails or returns nothing.
    """
    try:
        resolved = home()
    except (RuntimeError, KeyError, OSError) as e:
        msg = f"Could not get your home dir: {e}"
        raise HomeDirectoryError(msg) from e

    if not resolved or not str(resolved):
        msg = "Could not get your home dir."
        raise HomeDirectoryError(msg)
    return Path(resolved)


def expand_path(path: str, home: HomeProvider = Path.home) -> Path:
    """Expand a leading ``~`` or ``~/`` into the home directory.

    ``~/Mail`` and ``~Mail`` both become ``<home>/Mail``. Paths without
    the shorthand are returned unchanged and the home provider is not
    consulted at all.

    Args:
        path: Path string as given by the user.
        home: Provider for the home directory. Defaults to ``Path.home``.

    Returns:
        The expanded path.

    Raises:
        HomeDirectoryError: If expansion is needed but the home directory
            cannot be determined.
    """
    if path.startswith(TILDE_SLASH):
        cut_len = len(TILDE_SLASH)
    elif path.startswith(TILDE):
        cut_len = len(TILDE)
    else:
        return Path(path)

    return _resolve_home(home) / path[cut_len:]


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/list-maildirs/ (or XDG_CONFIG_HOME/list-maildirs/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/list-maildirs/config.toml.
    """
    return get_config_dir() / "config.toml"
