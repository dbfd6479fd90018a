"""Config – caller supplied logger settings."""
from tokenlog.config.errors import InvalidSettingError, SettingsError
from tokenlog.config.settings import DEFAULT_FORMAT, ENV_PREFIX, LoggerSettings

__all__ = ["DEFAULT_FORMAT", "ENV_PREFIX", "InvalidSettingError", "LoggerSettings", "SettingsError"]
