"""Destinations – FileDestination."""
from __future__ import annotations

import os
from pathlib import Path

from tokenlog.core.record import LogRecord
from tokenlog.destinations.base import FormattedDestination
from tokenlog.destinations.file_writer import LogFileWriter, WriterState
from tokenlog.formatting.formatter import MessageFormatter
from tokenlog.kernel.errors import DestinationStartError, DestinationWriteError, FileNotAvailableError
from tokenlog.observability.diagnostics import report_failure


class FileDestination(FormattedDestination):
    """Appends one rendered line per record to a UTF-8 log file.

    Parameters
    ----------
    template:
        Token template for each line.
    path:
        Target file; missing parent directories are created on start.
    formatter:
        Token renderer.
    """

    def __init__(
        self,
        template: str | None,
        path: str | os.PathLike[str],
        *,
        formatter: MessageFormatter | None = None,
    ) -> None:
        super().__init__(template, formatter)
        self._writer = LogFileWriter(path)

    @property
    def path(self) -> Path:
        return self._writer.path

    def start(self) -> None:
        try:
            self._writer.create_if_needed()
            self._writer.open()
        except (OSError, FileNotAvailableError) as exc:
            raise DestinationStartError(
                type(self).__name__,
                f"Cannot open log file '{self.path}': {exc}",
                cause=exc,
            ) from exc
        self._active = True

    def emit(self, text: str, record: LogRecord) -> None:
        try:
            data = (text + "\n").encode("utf-8")
            # The file may have been removed, or never opened.
            if self._writer.create_if_needed() or self._writer.state is WriterState.UNOPENED:
                self._writer.open()
            self._writer.write(data)
        except (OSError, UnicodeError, FileNotAvailableError) as exc:
            report_failure(
                "file_destination.write_failed",
                DestinationWriteError(type(self).__name__, f"Error writing to '{self.path}': {exc}", cause=exc),
                path=str(self.path),
            )

    def close(self) -> None:
        """Flush and close the log file; further writes are reported as failures."""
        try:
            self._writer.close()
        except OSError as exc:
            report_failure("file_destination.close_failed", exc, path=str(self.path))

    def __del__(self) -> None:
        if getattr(self, "_writer", None) is not None:
            self.close()


__all__ = ["FileDestination"]
