"""
tokenlog – Token-templated logging pipeline.

Import path convention::

    from tokenlog.core import Logger, LogLevel
    from tokenlog.destinations import ConsoleDestination, FileDestination
    from tokenlog.formatting import MessageFormatter, Redacted
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
