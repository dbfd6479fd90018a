"""Config – LoggerSettings.

Settings are plain constructor arguments. :meth:`LoggerSettings.from_env`
is the one place that reads ``TOKENLOG_*`` variables, optionally after
loading them from a ``.env`` file.
"""
from __future__ import annotations

import dataclasses
import os

from dotenv import load_dotenv

from tokenlog.config.errors import InvalidSettingError

DEFAULT_FORMAT = "$U [$L] $M"
ENV_PREFIX = "TOKENLOG_"

_FLAG_VALUES = {
    "1": True, "true": True, "yes": True, "on": True,
    "0": False, "false": False, "no": False, "off": False,
}


@dataclasses.dataclass
class LoggerSettings:
    """Settings consumed by :class:`~tokenlog.core.Logger`.

    Attributes
    ----------
    level:
        Initial minimum level name (``debug``, ``info``, ``warning``, ``error``).
    identity:
        Subsystem stamped on records the logger emits about itself.
    debug_build:
        Reveal :class:`~tokenlog.formatting.Redacted` values instead of
        rendering the placeholder.
    default_format:
        Template for destinations created without an explicit one.
    """

    level: str = "info"
    identity: str = "tokenlog"
    debug_build: bool = False
    default_format: str = DEFAULT_FORMAT

    def __post_init__(self) -> None:
        # tokenlog.core imports this module at load time.
        from tokenlog.core.level import LogLevel

        try:
            LogLevel.parse(self.level)
        except ValueError as exc:
            raise InvalidSettingError("level", self.level, str(exc)) from exc
        if not self.identity:
            raise InvalidSettingError("identity", self.identity, "must not be empty")

    @classmethod
    def from_env(cls, env_file: str | os.PathLike[str] | None = None, *, override: bool = False) -> LoggerSettings:
        """Build settings from ``TOKENLOG_LEVEL``, ``TOKENLOG_IDENTITY``,
        ``TOKENLOG_DEBUG_BUILD`` and ``TOKENLOG_DEFAULT_FORMAT``.

        Unset variables keep the field default. When *env_file* is given it
        is loaded with python-dotenv first; *override* lets its values replace
        variables that are already set.

        Raises
        ------
        InvalidSettingError
            A variable holds a value the logger rejects; ``source`` names it.
        """
        if env_file is not None:
            load_dotenv(env_file, override=override)

        values: dict[str, object] = {}
        for field in dataclasses.fields(cls):
            variable = ENV_PREFIX + field.name.upper()
            raw = os.environ.get(variable)
            if raw is None:
                continue
            values[field.name] = _parse_flag(variable, raw) if field.type in (bool, "bool") else raw

        try:
            return cls(**values)  # type: ignore[arg-type]
        except InvalidSettingError as exc:
            variable = ENV_PREFIX + exc.setting.upper()
            raise InvalidSettingError(exc.setting, exc.value, exc.reason, source=variable) from exc


def _parse_flag(variable: str, raw: str) -> bool:
    try:
        return _FLAG_VALUES[raw.strip().lower()]
    except KeyError:
        raise InvalidSettingError(
            variable.removeprefix(ENV_PREFIX).lower(),
            raw,
            "expected one of 1/0, true/false, yes/no, on/off",
            source=variable,
        ) from None


__all__ = ["DEFAULT_FORMAT", "ENV_PREFIX", "LoggerSettings"]
