"""Observability – local, non-propagating diagnostics.

Failures inside the pipeline (a destination that cannot write, a file that
cannot be closed, work that raised on the serialization point) are never
raised back to the code that logged. They are reported here, through
structlog, and the pipeline carries on.
"""
from __future__ import annotations

from typing import Any

import structlog

from tokenlog.kernel.errors import BaseError

DIAGNOSTICS_LOGGER = "tokenlog.diagnostics"


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def report_failure(event: str, error: BaseException, **fields: Any) -> None:
    """Emit *error* as an ``error``-level diagnostic event.

    Best effort: a failure of the diagnostic sink itself is dropped.
    """
    payload: dict[str, Any] = {"error": str(error), "error_type": type(error).__name__}
    if isinstance(error, BaseError):
        payload["code"] = error.code
        if error.cause is not None:
            payload["cause"] = repr(error.cause)
    payload.update(fields)
    try:
        get_logger(DIAGNOSTICS_LOGGER, component=event.split(".", 1)[0]).error(event, **payload)
    except Exception:  # noqa: BLE001
        pass


__all__ = ["DIAGNOSTICS_LOGGER", "get_logger", "report_failure"]
