"""Core – Logger.

Owns the destination list, the minimum level and the activity flag. All of
them are touched only on the logger's :class:`SerialQueue`; public log calls
enqueue and return without waiting for formatting or I/O.

Typical usage::

    logger = Logger()
    logger.add_destination(ConsoleDestination("$U [$L] $M"))
    logger.start()

    logger.info("Application started", "com.example.app", "App")
    logger.debug(lambda: expensive_dump(state), "com.example.app", "State")
"""
from __future__ import annotations

import functools
import os
import sys
import weakref
from typing import TYPE_CHECKING, Any

from tokenlog.config.settings import LoggerSettings
from tokenlog.core.level import LogLevel
from tokenlog.core.record import LogRecord
from tokenlog.core.serial import SerialQueue
from tokenlog.formatting.thread import describe_thread
from tokenlog.kernel.time import Clock, SystemClock
from tokenlog.observability.diagnostics import report_failure

if TYPE_CHECKING:
    from tokenlog.destinations.base import LogDestination

_THIS_FILE = os.path.normcase(__file__)


class Logger:
    """Leveled, categorized logger fanning out to pluggable destinations.

    The logger is created inactive with no destinations. Destinations can
    be added before or after :meth:`start`; they are never removed. Records
    are dropped until :meth:`start` has been processed.

    Parameters
    ----------
    settings:
        Initial level, own identity and defaults. Defaults to
        :class:`LoggerSettings` with its field defaults.
    clock:
        Source of the timestamp and uptime stamped on every dispatched
        record. Uptime counts from this constructor.
    """

    def __init__(
        self,
        settings: LoggerSettings | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings or LoggerSettings()
        self._clock = clock or SystemClock()
        self._uptime_origin = self._clock.monotonic()
        self._queue = SerialQueue(f"{self._settings.identity}.queue")
        self._destinations: list[LogDestination] = []
        self._level = LogLevel.parse(self._settings.level)
        self._active = False
        weakref.finalize(self, self._queue.stop)

    @classmethod
    def from_env(
        cls, env_file: str | os.PathLike[str] | None = None, *, clock: Clock | None = None
    ) -> Logger:
        """Build a logger from ``TOKENLOG_*`` variables; see :meth:`LoggerSettings.from_env`."""
        return cls(LoggerSettings.from_env(env_file), clock=clock)

    @property
    def settings(self) -> LoggerSettings:
        return self._settings

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def level(self) -> LogLevel:
        """Current minimum level; blocks until pending work has run."""
        return self._queue.call(lambda: self._level)

    @level.setter
    def level(self, value: LogLevel | str) -> None:
        level = LogLevel.parse(value)

        def update() -> None:
            self._level = level

        self._queue.submit(update)

    @property
    def is_active(self) -> bool:
        """Whether :meth:`start` has been processed; blocks like :attr:`level`."""
        return self._queue.call(lambda: self._active)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def add_destination(self, destination: LogDestination) -> None:
        """Append *destination*; it receives records dispatched after it is added."""
        self._queue.submit(functools.partial(self._destinations.append, destination))

    def start(self) -> None:
        """Activate the logger and start every registered destination.

        Repeated calls are ignored.
        """
        self._queue.submit(self._start)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def debug(
        self,
        message: Any,
        subsystem: str,
        category: str,
        *,
        file: str | None = None,
        function: str | None = None,
        line: int | None = None,
    ) -> None:
        """Log *message* at :attr:`LogLevel.DEBUG`.

        *message* may be any value, or a zero-argument callable producing
        it; the callable only runs if the record passes the level filter.
        When the call site is omitted it is read from the caller's frame.
        """
        self._enqueue(LogLevel.DEBUG, message, subsystem, category, file, function, line)

    def info(
        self,
        message: Any,
        subsystem: str,
        category: str,
        *,
        file: str | None = None,
        function: str | None = None,
        line: int | None = None,
    ) -> None:
        """Log *message* at :attr:`LogLevel.INFO`."""
        self._enqueue(LogLevel.INFO, message, subsystem, category, file, function, line)

    def warning(
        self,
        message: Any,
        subsystem: str,
        category: str,
        *,
        file: str | None = None,
        function: str | None = None,
        line: int | None = None,
    ) -> None:
        """Log *message* at :attr:`LogLevel.WARNING`."""
        self._enqueue(LogLevel.WARNING, message, subsystem, category, file, function, line)

    def error(
        self,
        message: Any,
        subsystem: str,
        category: str,
        *,
        file: str | None = None,
        function: str | None = None,
        line: int | None = None,
    ) -> None:
        """Log *message* at :attr:`LogLevel.ERROR`."""
        self._enqueue(LogLevel.ERROR, message, subsystem, category, file, function, line)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _enqueue(
        self,
        level: LogLevel,
        message: Any,
        subsystem: str,
        category: str,
        file: str | None,
        function: str | None,
        line: int | None,
    ) -> None:
        if file is None or function is None or line is None:
            caller_file, caller_function, caller_line = _find_caller()
            file = caller_file if file is None else file
            function = caller_function if function is None else function
            line = caller_line if line is None else line
        record = LogRecord(
            level=level,
            message=message,
            subsystem=subsystem,
            category=category,
            thread=describe_thread(),
            file=file,
            function=function,
            line=line,
        )
        self._queue.submit(functools.partial(self._dispatch, record))

    def _start(self) -> None:
        if self._active:
            return
        self._active = True
        for destination in self._destinations:
            try:
                destination.start()
            except Exception as exc:  # noqa: BLE001 – reported through the pipeline
                self._dispatch(
                    self._own_record(
                        LogLevel.ERROR,
                        f"Destination is not started, {exc}",
                        category=type(destination).__name__,
                    )
                )
        self._dispatch(self._own_record(LogLevel.INFO, self._started_message(), category="Logger"))

    def _dispatch(self, record: LogRecord) -> None:
        if not self._active or record.level < self._level:
            return
        record = record.resolve().stamped(
            self._clock.now(), self._clock.monotonic() - self._uptime_origin
        )
        for destination in [d for d in self._destinations if d.is_active]:
            try:
                destination.write(record)
            except Exception as exc:  # noqa: BLE001 – isolate failing destinations
                report_failure(
                    "logger.destination_write_failed",
                    exc,
                    destination=type(destination).__name__,
                )

    def _own_record(self, level: LogLevel, message: str, *, category: str) -> LogRecord:
        return LogRecord(
            level=level,
            message=message,
            subsystem=self._settings.identity,
            category=category,
            thread=describe_thread(),
            file=__file__,
            function="start",
            line=0,
        )

    def _started_message(self) -> str:
        destinations = ", ".join(
            f"{type(d).__name__} ({'active' if d.is_active else 'NOT active'})"
            for d in self._destinations
        )
        return (
            "Logger has started with properties:\n"
            f"- Destinations: [{destinations}]\n"
            f"- Logging level: {str(self._level)}"
        )


def _find_caller() -> tuple[str, str, int]:
    """Return ``(file, function, line)`` of the first frame outside this module."""
    frame = sys._getframe(1)
    while frame is not None and os.path.normcase(frame.f_code.co_filename) == _THIS_FILE:
        frame = frame.f_back
    if frame is None:
        return "", "", 0
    return frame.f_code.co_filename, frame.f_code.co_name, frame.f_lineno


__all__ = ["Logger"]
