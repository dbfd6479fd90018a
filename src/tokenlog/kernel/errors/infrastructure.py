"""Infrastructure errors – destination resources and file I/O."""

from __future__ import annotations

from typing import Any

from tokenlog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure inside the logging pipeline."""

    default_code = "infrastructure_error"


class DestinationStartError(InfrastructureError):
    """A destination could not acquire the resource it writes to."""

    default_code = "destination_start_error"

    def __init__(
        self,
        destination: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Destination '{destination}' failed to start", **kwargs)
        self.destination = destination

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["destination"] = self.destination
        return payload


class FileNotAvailableError(InfrastructureError):
    """The log file handle is not open (never opened, or already closed)."""

    default_code = "file_not_available"

    def __init__(self, path: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Log file '{path}' is not available", **kwargs)
        self.path = path


class DestinationWriteError(InfrastructureError):
    """Rendering, encoding or writing a record failed."""

    default_code = "destination_write_error"

    def __init__(
        self,
        destination: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Destination '{destination}' failed to write", **kwargs)
        self.destination = destination


__all__ = [
    "DestinationStartError",
    "DestinationWriteError",
    "FileNotAvailableError",
    "InfrastructureError",
]
