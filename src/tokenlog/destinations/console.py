"""Destinations – ConsoleDestination.

Hands each rendered line to the Python :mod:`logging` machinery at a
severity mapped from the record's level, tagged with the record's
subsystem (as the logger name) and category. The default handler prints
the bare line to ``stderr``; pass a
:class:`logging.handlers.SysLogHandler` to reach the system log.
"""
from __future__ import annotations

import logging
import sys

from tokenlog.core.level import LogLevel
from tokenlog.core.record import LogRecord
from tokenlog.destinations.base import FormattedDestination
from tokenlog.formatting.formatter import MessageFormatter

CONSOLE_LOGGER_NAME = "tokenlog.console"

SEVERITY: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.CRITICAL,
}


class ConsoleDestination(FormattedDestination):
    """Console / platform-log sink.

    Parameters
    ----------
    template:
        Token template for each line (default: ``DEFAULT_FORMAT``).
    handler:
        Receives one :class:`logging.LogRecord` per line. Defaults to a
        :class:`logging.StreamHandler` on ``sys.stderr`` formatting
        ``%(message)s``.
    formatter:
        Token renderer; share one with a :class:`FrozenClock` in tests.
    """

    def __init__(
        self,
        template: str | None = None,
        *,
        handler: logging.Handler | None = None,
        formatter: MessageFormatter | None = None,
    ) -> None:
        super().__init__(template, formatter)
        self._handler = handler or _default_handler()
        # Detached from the logging hierarchy: lines never reach the root logger twice.
        self._logger = logging.Logger(CONSOLE_LOGGER_NAME, logging.DEBUG)
        self._logger.addHandler(self._handler)

    @property
    def handler(self) -> logging.Handler:
        return self._handler

    def start(self) -> None:
        self._active = True

    def emit(self, text: str, record: LogRecord) -> None:
        entry = self._logger.makeRecord(
            record.subsystem or CONSOLE_LOGGER_NAME,
            SEVERITY[record.level],
            record.file,
            record.line,
            text,
            None,
            None,
            func=record.function,
            extra={"subsystem": record.subsystem, "category": record.category},
        )
        self._logger.handle(entry)


def _default_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


__all__ = ["CONSOLE_LOGGER_NAME", "SEVERITY", "ConsoleDestination"]
