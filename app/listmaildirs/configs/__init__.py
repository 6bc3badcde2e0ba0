"""Configuration file support.

This module provides the settings model and the TOML file I/O used to
supply defaults to the command line.
"""

from listmaildirs.configs.settings import (
    MaildirSettings,
    SettingsError,
    SettingsNotFoundError,
    SettingsParseError,
    load_settings,
    load_settings_or_default,
    merge_settings,
    save_settings,
)

__all__ = [
    "MaildirSettings",
    "SettingsError",
    "SettingsNotFoundError",
    "SettingsParseError",
    "load_settings",
    "load_settings_or_default",
    "merge_settings",
    "save_settings",
]
