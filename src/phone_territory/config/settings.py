"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
import logging
import os
from typing import ClassVar

from phone_territory.config.errors import InvalidSettingValueError

_LOG_LEVELS: frozenset[str] = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for environment-driven settings.

    Subclasses set ``_prefix``; each field is read from ``<PREFIX>_<FIELD>``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass(frozen=True)
class DataSettings(Settings):
    """Where the reference tables come from.

    ``data_dir`` points at a directory holding replacement
    ``calling_codes.json`` / ``prefixes.json`` files; empty selects the data
    shipped with the package. It is read once, when the tables first load.
    """

    _prefix: ClassVar[str] = "PHONE_TERRITORY"

    data_dir: str = ""

    def _validate(self) -> None:
        if self.data_dir and not os.path.isdir(self.data_dir):
            raise InvalidSettingValueError("data_dir", self.data_dir, "not a directory")


@dataclasses.dataclass(frozen=True)
class PhoneTerritorySettings(DataSettings):
    """All ``PHONE_TERRITORY_*`` variables, logging included."""

    log_level: str = "WARNING"
    log_json: bool = True

    def _validate(self) -> None:
        super()._validate()
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["DataSettings", "PhoneTerritorySettings", "Settings"]
