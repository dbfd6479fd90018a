"""Formatting – redaction of sensitive message values.

A :class:`Redacted` value renders as ``<redacted>`` unless the build-mode
flag says otherwise. The flag is passed in, so both modes are testable in
the same process::

    logger.info(f"login for {Redacted(email)}", "com.example.app", "Auth")

    policy = RedactionPolicy.from_settings(settings)
    logger.info(policy.wrap(token), "com.example.app", "Auth")
"""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

from tokenlog.config.settings import LoggerSettings

T = TypeVar("T")

REDACTED_PLACEHOLDER = "<redacted>"


def redact(value: Any, debug_build: bool) -> str:
    """Return the text of *value*, or the placeholder outside debug builds.

    ``None`` renders as ``"None"`` in both modes.
    """
    if value is None:
        return "None"
    if isinstance(value, Redacted):
        value = value.value
    return str(value) if debug_build else REDACTED_PLACEHOLDER


@dataclasses.dataclass(frozen=True, repr=False)
class Redacted(Generic[T]):
    """Wrapper whose text form hides *value* unless ``debug_build`` is set."""

    value: T
    debug_build: bool = dataclasses.field(default=False, kw_only=True)

    def __str__(self) -> str:
        return redact(self.value, self.debug_build)

    def __repr__(self) -> str:
        if self.value is None or self.debug_build:
            return repr(self.value)
        return REDACTED_PLACEHOLDER

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


@dataclasses.dataclass(frozen=True)
class RedactionPolicy:
    """Binds the build-mode flag once for every value it wraps."""

    debug_build: bool = False

    @classmethod
    def from_settings(cls, settings: LoggerSettings) -> RedactionPolicy:
        return cls(debug_build=settings.debug_build)

    def wrap(self, value: T) -> Redacted[T]:
        return Redacted(value, debug_build=self.debug_build)

    def render(self, value: Any) -> str:
        return redact(value, self.debug_build)


__all__ = ["REDACTED_PLACEHOLDER", "Redacted", "RedactionPolicy", "redact"]
