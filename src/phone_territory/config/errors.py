"""Configuration errors."""
from phone_territory.errors import PhoneTerritoryError


class ConfigError(PhoneTerritoryError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable backing a field without default is unset."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(
            f"Environment variable '{env_key}' is required",
            detail={"env_key": env_key},
        )
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is unusable."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' = {value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
