"""Core – LogLevel."""
from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a record; the integer value is its rank."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def label(self) -> str:
        """Upper-case display name used by the ``$L`` token."""
        return self.name

    @classmethod
    def parse(cls, value: LogLevel | str | int) -> LogLevel:
        """Coerce a level, a case-insensitive name or a rank into a :class:`LogLevel`."""
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[value.strip().upper()]
        except KeyError:
            names = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"unknown log level {value!r} (expected one of: {names})") from None

    def __str__(self) -> str:
        return self.name.lower()


__all__ = ["LogLevel"]
