"""Config – errors raised while building logger settings."""
from __future__ import annotations

from tokenlog.kernel.errors import ApplicationError


class SettingsError(ApplicationError):
    """Logger settings could not be built."""

    default_code = "settings_error"


class InvalidSettingError(SettingsError):
    """A logger setting holds a value the logger cannot work with.

    *source* is where the value came from: the field name for constructor
    arguments, the variable name when it was read from the environment.
    """

    default_code = "invalid_setting"

    def __init__(self, setting: str, value: object, reason: str, *, source: str | None = None) -> None:
        self.setting = setting
        self.value = value
        self.reason = reason
        self.source = source or setting
        super().__init__(
            f"Logger setting {self.source}={value!r} rejected: {reason}",
            detail={"setting": setting, "source": self.source},
        )


__all__ = ["InvalidSettingError", "SettingsError"]
