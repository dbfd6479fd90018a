"""Destinations – the capability contract every sink implements."""
from __future__ import annotations

import abc
from typing import Any, TypeVar

from tokenlog.config.settings import DEFAULT_FORMAT, LoggerSettings
from tokenlog.core.record import LogRecord
from tokenlog.formatting.formatter import MessageFormatter
from tokenlog.observability.diagnostics import report_failure

D = TypeVar("D", bound="FormattedDestination")


class LogDestination(abc.ABC):
    """Port: a sink that receives records from the logger.

    The logger calls :meth:`start` once, from :meth:`Logger.start`, and
    writes only to destinations whose :attr:`is_active` is true.
    """

    @property
    @abc.abstractmethod
    def is_active(self) -> bool: ...

    @abc.abstractmethod
    def start(self) -> None:
        """Acquire resources; raise :class:`DestinationStartError` on failure."""

    @abc.abstractmethod
    def write(self, record: LogRecord) -> None:
        """Deliver *record*. Must not raise."""


class FormattedDestination(LogDestination):
    """Base for destinations that render records through a token template.

    Subclasses implement :meth:`emit`; rendering or emission failures are
    reported as diagnostics and never leave :meth:`write`.
    """

    def __init__(self, template: str | None = None, formatter: MessageFormatter | None = None) -> None:
        self._template = DEFAULT_FORMAT if template is None else template
        self._formatter = formatter or MessageFormatter()
        self._active = False

    @classmethod
    def from_settings(cls: type[D], settings: LoggerSettings, *args: Any, **kwargs: Any) -> D:
        """Build with ``settings.default_format`` as the template."""
        return cls(settings.default_format, *args, **kwargs)

    @property
    def template(self) -> str:
        return self._template

    @property
    def is_active(self) -> bool:
        return self._active

    def render(self, record: LogRecord) -> str:
        return self._formatter.render(record, self._template)

    def write(self, record: LogRecord) -> None:
        try:
            self.emit(self.render(record), record)
        except Exception as exc:  # noqa: BLE001 – a destination never raises outward
            report_failure(
                "destination.write_failed",
                exc,
                destination=type(self).__name__,
                subsystem=record.subsystem,
                category=record.category,
            )

    @abc.abstractmethod
    def emit(self, text: str, record: LogRecord) -> None:
        """Write already rendered *text*."""


__all__ = ["FormattedDestination", "LogDestination"]
