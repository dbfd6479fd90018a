"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError        (application.py)
    │   └── SettingsError       (tokenlog.config.errors)
    └── InfrastructureError     (infrastructure.py)
        ├── DestinationStartError
        ├── DestinationWriteError
        └── FileNotAvailableError
"""

from tokenlog.kernel.errors.application import ApplicationError
from tokenlog.kernel.errors.base import BaseError
from tokenlog.kernel.errors.infrastructure import (
    DestinationStartError,
    DestinationWriteError,
    FileNotAvailableError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DestinationStartError",
    "DestinationWriteError",
    "FileNotAvailableError",
    "InfrastructureError",
]
