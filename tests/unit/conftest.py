"""Shared fixtures for tokenlog unit tests."""
from __future__ import annotations

import pytest

from tokenlog.core import Logger
from tokenlog.formatting import MessageFormatter
from tokenlog.kernel.time import FrozenClock
from tokenlog.testing.fakes import FakeClock


@pytest.fixture
def fake_clock() -> FrozenClock:
    """FrozenClock pinned to 2026-01-01 12:00 UTC, monotonic reading 0."""
    return FakeClock()


@pytest.fixture
def formatter(fake_clock: FrozenClock) -> MessageFormatter:
    return MessageFormatter(clock=fake_clock)


@pytest.fixture
def logger(fake_clock: FrozenClock) -> Logger:
    """Inactive logger sharing the fake clock."""
    return Logger(clock=fake_clock)
