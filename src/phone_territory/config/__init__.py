"""Config – environment-driven settings and loaders."""

from phone_territory.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from phone_territory.config.loaders import (
    EnvSettingsLoader,
    SettingsLoader,
    load_data_settings,
    load_settings,
)
from phone_territory.config.settings import DataSettings, PhoneTerritorySettings, Settings

__all__ = [
    "ConfigError",
    "DataSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PhoneTerritorySettings",
    "Settings",
    "SettingsLoader",
    "load_data_settings",
    "load_settings",
]
