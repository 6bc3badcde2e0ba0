"""Listing settings and their TOML file.

Settings provide defaults for the command line so a muttrc can call
``list-maildirs`` without repeating the base, initial and exclude lists.

Configuration is stored in ~/.config/list-maildirs/config.toml::

    base = "~/Mail"
    initial = ["INBOX", "Sent"]
    exclude = ["Trash"]
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from listmaildirs.core.errors import MaildirConfigError
from listmaildirs.core.paths import get_config_path

logger = logging.getLogger(__name__)


class MaildirSettings(BaseModel):
    """Defaults for a listing run.

    Attributes:
        base: Maildir base directory, may start with ``~``.
        initial: Mailboxes to list first, in order.
        exclude: Mailboxes to leave out.
    """

    model_config = ConfigDict(extra="forbid")

    base: Annotated[
        str | None,
        Field(description="Maildir base directory"),
    ] = None
    initial: Annotated[
        list[str],
        Field(description="Mailboxes listed first, in order"),
    ] = []
    exclude: Annotated[
        list[str],
        Field(description="Mailboxes left out of the listing"),
    ] = []

    @field_validator("initial", "exclude")
    @classmethod
    def validate_mailbox_names(cls, v: list[str]) -> list[str]:
        """Reject blank mailbox entries."""
        for name in v:
            if not name.strip():
                msg = "mailbox entries cannot be empty"
                raise ValueError(msg)
        return v

    @field_validator("base")
    @classmethod
    def validate_base(cls, v: str | None) -> str | None:
        """Reject a blank base directory."""
        if v is not None and not v.strip():
            msg = "base cannot be empty"
            raise ValueError(msg)
        return v


class SettingsError(MaildirConfigError):
    """Base exception for settings file errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> MaildirSettings:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated MaildirSettings object.

    Raises:
        SettingsNotFoundError: If the config file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise SettingsNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read config {config_path}: {e}") from e

    try:
        settings = MaildirSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded settings from %s", config_path)
    return settings


def load_settings_or_default(path: Path | None = None) -> MaildirSettings:
    """Load settings, falling back to defaults if the file is missing.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded settings, or default MaildirSettings if no file exists.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or validated.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        logger.debug("No config file, using defaults")
        return MaildirSettings()


def save_settings(settings: MaildirSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The settings to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write config: {e}") from e

    return config_path


def _settings_to_dict(settings: MaildirSettings) -> dict[str, object]:
    """Convert settings to a dictionary for TOML serialization.

    TOML has no null, so an unset base is left out.
    """
    result: dict[str, object] = {}

    if settings.base is not None:
        result["base"] = settings.base

    result["initial"] = list(settings.initial)
    result["exclude"] = list(settings.exclude)
    return result


def merge_settings(
    settings: MaildirSettings,
    *,
    base: str | None = None,
    initial: list[str] | None = None,
    exclude: list[str] | None = None,
) -> MaildirSettings:
    """Apply command line values on top of file settings.

    A given base overrides the file's base. Given initial or exclude
    lists replace the file's lists rather than extending them.

    Args:
        settings: Settings loaded from the config file.
        base: Base directory from the command line.
        initial: Initial mailboxes from the command line.
        exclude: Excluded mailboxes from the command line.

    Returns:
        New MaildirSettings with the overrides applied.
    """
    updates: dict[str, object] = {}
    if base is not None:
        updates["base"] = base
    if initial:
        updates["initial"] = list(initial)
    if exclude:
        updates["exclude"] = list(exclude)
    return settings.model_copy(update=updates)
