"""Testing fakes – in-memory destinations and a frozen clock."""
from tokenlog.testing.fakes.clock import FakeClock
from tokenlog.testing.fakes.destination import FailingDestination, RecordingDestination

__all__ = ["FailingDestination", "FakeClock", "RecordingDestination"]
