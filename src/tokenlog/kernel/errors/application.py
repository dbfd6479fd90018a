"""Application errors – misuse of the library by its caller."""

from __future__ import annotations

from tokenlog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The caller asked for something the pipeline cannot do."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
