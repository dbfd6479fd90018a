"""Destinations – LogFileWriter.

Append-only writer for one log file. States::

    UNOPENED ──open()──▶ OPEN ──close()──▶ CLOSED

Every operation holds the writer's lock, so concurrent callers never
interleave partial writes. Each :meth:`LogFileWriter.write` is flushed and
``fsync``-ed before it returns.
"""
from __future__ import annotations

import os
import threading
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from tokenlog.kernel.errors import FileNotAvailableError


class WriterState(str, Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class LogFileWriter:
    """Serialized, durable appender for the file at *path*."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()
        self._handle: BinaryIO | None = None
        self._state = WriterState.UNOPENED

    @property
    def path(self) -> Path:
        return self._path

    @property
    def state(self) -> WriterState:
        with self._lock:
            return self._state

    def create_if_needed(self) -> bool:
        """Create parent directories and the file; ``True`` if the file was created."""
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            try:
                with self._path.open("xb"):
                    pass
            except FileExistsError:
                return False
            return True

    def open(self) -> None:
        """Open for append, positioned at end of file.

        Re-opening an open writer replaces its handle, which is how a file
        removed behind the writer's back gets picked up again.
        """
        with self._lock:
            if self._state is WriterState.CLOSED:
                raise FileNotAvailableError(str(self._path), f"Log file '{self._path}' is closed")
            handle: BinaryIO = self._path.open("ab")
            handle.seek(0, os.SEEK_END)
            stale, self._handle = self._handle, handle
            self._state = WriterState.OPEN
            if stale is not None:
                stale.close()

    def write(self, data: bytes) -> None:
        with self._lock:
            if self._handle is None or self._state is not WriterState.OPEN:
                raise FileNotAvailableError(str(self._path))
            self._handle.write(data)
            self._handle.flush()
            os.fsync(self._handle.fileno())

    def close(self) -> None:
        """Flush and release the handle; no-op unless the writer is open."""
        with self._lock:
            if self._handle is None or self._state is not WriterState.OPEN:
                return
            handle, self._handle = self._handle, None
            self._state = WriterState.CLOSED
            try:
                handle.flush()
                os.fsync(handle.fileno())
            finally:
                handle.close()


__all__ = ["LogFileWriter", "WriterState"]
