"""Core – LogRecord."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from tokenlog.core.level import LogLevel


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """One log event as it travels through the pipeline.

    ``message`` holds whatever the caller passed: a plain value, or a
    zero-argument producer that :meth:`resolve` invokes once the record
    has passed the level filter. Text conversion is left to the formatter.

    ``timestamp`` and ``uptime`` are read from the owning logger's clock
    when the record is dispatched; ``uptime`` is in seconds since that
    logger was constructed. A record that was never dispatched has no
    timestamp and zero uptime.
    """

    level: LogLevel
    message: Any
    subsystem: str
    category: str
    thread: str
    file: str = ""
    function: str = ""
    line: int = 0
    timestamp: datetime | None = None
    uptime: float = 0.0

    def resolve(self) -> LogRecord:
        """Return a copy whose message producer has been evaluated."""
        if callable(self.message):
            return dataclasses.replace(self, message=self.message())
        return self

    def stamped(self, timestamp: datetime, uptime: float) -> LogRecord:
        """Return a copy carrying the dispatch time."""
        return dataclasses.replace(self, timestamp=timestamp, uptime=max(0.0, uptime))


__all__ = ["LogRecord"]
