"""Formatting – template tokens.

A token is the ``$`` prefix followed by one identifier character::

    $Z%H:%M:%S$z $U [$L] <$T> $N.$F:$l [$C ($S)] - $M

``$D…$d`` and ``$Z…$z`` wrap an ``strftime`` pattern rendered in local
time and UTC respectively.
"""
from __future__ import annotations

from enum import Enum

TOKEN_PREFIX = "$"


class FormatToken(str, Enum):
    """The closed set of template tokens, keyed by identifier character."""

    LEVEL = "L"
    MESSAGE = "M"
    SUBSYSTEM = "S"
    CATEGORY = "C"
    THREAD = "T"
    FILE_NAME_NO_EXT = "N"
    FILE_NAME_FULL = "n"
    FUNCTION = "F"
    LINE = "l"
    UPTIME = "U"
    DATE_LOCAL_OPEN = "D"
    DATE_LOCAL_CLOSE = "d"
    DATE_UTC_OPEN = "Z"
    DATE_UTC_CLOSE = "z"
    # Emits nothing itself; prefixed to every template before splitting.
    ESCAPE = "I"

    @property
    def marker(self) -> str:
        """The token as written in a template, e.g. ``$L``."""
        return TOKEN_PREFIX + self.value

    @classmethod
    def lookup(cls, identifier: str) -> FormatToken | None:
        """Return the token for *identifier*, or ``None`` if it is not one."""
        if len(identifier) != 1:
            return None
        try:
            return cls(identifier)
        except ValueError:
            return None


__all__ = ["TOKEN_PREFIX", "FormatToken"]
