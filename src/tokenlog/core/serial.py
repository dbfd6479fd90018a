"""Core – SerialQueue.

The logger's single serialization point: a worker thread draining an
unbounded :class:`queue.SimpleQueue` of callables one at a time, in the
order they were enqueued. Every read or write of logger state and every
dispatch to destinations runs on this thread.
"""
from __future__ import annotations

import queue
import threading
from concurrent.futures import Future
from typing import Callable, TypeVar

from tokenlog.observability.diagnostics import report_failure

T = TypeVar("T")

_STOP = None


class SerialQueue:
    """Single-consumer FIFO executor.

    :meth:`submit` never blocks the caller. :meth:`call` blocks until the
    worker has run every previously enqueued item and then *fn*, so it
    doubles as an ordering barrier.

    Parameters
    ----------
    name:
        Name of the worker thread; also shows up in thread descriptors of
        records produced on the queue itself.
    """

    def __init__(self, name: str = "tokenlog.queue") -> None:
        self._name = name
        self._queue: queue.SimpleQueue[Callable[[], None] | None] = queue.SimpleQueue()
        self._thread = threading.Thread(target=self._drain, name=name, daemon=True)
        self._thread.start()

    @property
    def name(self) -> str:
        return self._name

    def is_current(self) -> bool:
        """``True`` when called from the worker thread."""
        return threading.current_thread() is self._thread

    def submit(self, fn: Callable[[], None]) -> None:
        """Enqueue *fn* and return immediately."""
        self._queue.put(fn)

    def call(self, fn: Callable[[], T]) -> T:
        """Run *fn* on the worker after all pending work and return its result."""
        if self.is_current():
            return fn()
        future: Future[T] = Future()

        def run() -> None:
            try:
                future.set_result(fn())
            except Exception as exc:  # noqa: BLE001 – re-raised in the caller
                future.set_exception(exc)

        self._queue.put(run)
        return future.result()

    def stop(self) -> None:
        """Let the worker exit once everything enqueued so far has run."""
        self._queue.put(_STOP)

    def _drain(self) -> None:
        while True:
            work = self._queue.get()
            if work is _STOP:
                break
            try:
                work()
            except Exception as exc:  # noqa: BLE001 – the worker must survive
                report_failure("serial_queue.work_failed", exc, queue=self._name)
            # Drop the reference so an idle worker does not keep its owner alive.
            del work


__all__ = ["SerialQueue"]
