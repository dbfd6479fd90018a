"""Formatting – human-readable thread descriptor."""
from __future__ import annotations

import threading

MAIN_THREAD = "MainThread"


def describe_thread(thread: threading.Thread | None = None) -> str:
    """Describe *thread* (default: the calling thread).

    - main thread → ``MainThread``
    - others → ``Thread: 0x<ident> - <thread name>``
    """
    thread = thread or threading.current_thread()
    if thread is threading.main_thread():
        return MAIN_THREAD
    return f"Thread: 0x{thread.ident or 0:x} - {thread.name or repr(thread)}"


__all__ = ["MAIN_THREAD", "describe_thread"]
