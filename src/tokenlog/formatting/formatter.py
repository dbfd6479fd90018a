"""Formatting – MessageFormatter.

Renders a :class:`LogRecord` through a ``$``-token template. The template
is split on ``$``; each chunk's first character selects a substitution and
the rest of the chunk is literal text following it. Chunks that do not
start with a known identifier are kept as written, ``$`` included.
"""
from __future__ import annotations

from datetime import UTC
from pathlib import PurePath

from tokenlog.core.record import LogRecord
from tokenlog.formatting.tokens import TOKEN_PREFIX, FormatToken
from tokenlog.kernel.time import Clock, SystemClock


class MessageFormatter:
    """Token template renderer.

    Parameters
    ----------
    clock:
        Source of "now" for date tokens on records that carry no
        ``timestamp``. Dispatched records are stamped by their logger.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def render(self, record: LogRecord, template: str) -> str:
        """Render *record* through *template*, trimmed of surrounding whitespace."""
        # The leading escape keeps a template's first literal from being read as a token.
        chunks = (FormatToken.ESCAPE.marker + template).split(TOKEN_PREFIX)
        parts: list[str] = []
        for chunk in chunks[1:]:
            token = FormatToken.lookup(chunk[:1])
            if token is None:
                parts.append(TOKEN_PREFIX + chunk)
                continue
            parts.append(self._substitute(token, chunk[1:], record))
        return "".join(parts).strip()

    @staticmethod
    def uptime(record: LogRecord) -> str:
        """The record's uptime as ``HH:MM:SS.mmm``; hours are not wrapped."""
        # Truncated to whole milliseconds; the epsilon absorbs float error such as 1.001 * 1000.
        total_ms = int(record.uptime * 1000 + 1e-6)
        seconds, milliseconds = divmod(total_ms, 1000)
        return f"{seconds // 3600:02d}:{seconds // 60 % 60:02d}:{seconds % 60:02d}.{milliseconds:03d}"

    def _substitute(self, token: FormatToken, remainder: str, record: LogRecord) -> str:
        if token is FormatToken.DATE_LOCAL_OPEN:
            return self._format_date(remainder, record, utc=False)
        if token is FormatToken.DATE_UTC_OPEN:
            return self._format_date(remainder, record, utc=True)
        return self._value(token, record) + remainder

    def _value(self, token: FormatToken, record: LogRecord) -> str:  # noqa: PLR0911
        if token is FormatToken.LEVEL:
            return record.level.label
        if token is FormatToken.MESSAGE:
            return str(record.message)
        if token is FormatToken.SUBSYSTEM:
            return record.subsystem
        if token is FormatToken.CATEGORY:
            return record.category
        if token is FormatToken.THREAD:
            return record.thread
        if token is FormatToken.FILE_NAME_NO_EXT:
            return PurePath(record.file).stem
        if token is FormatToken.FILE_NAME_FULL:
            return PurePath(record.file).name
        if token is FormatToken.FUNCTION:
            return record.function
        if token is FormatToken.LINE:
            return str(record.line)
        if token is FormatToken.UPTIME:
            return self.uptime(record)
        # ESCAPE and the closing date tokens contribute only their remainder.
        return ""

    def _format_date(self, pattern: str, record: LogRecord, *, utc: bool) -> str:
        now = record.timestamp if record.timestamp is not None else self._clock.now()
        moment = now.astimezone(UTC) if utc else now.astimezone()
        try:
            return moment.strftime(pattern)
        except ValueError:
            return pattern


__all__ = ["MessageFormatter"]
