"""Destinations – console, file and the contract for custom sinks."""
from tokenlog.destinations.base import FormattedDestination, LogDestination
from tokenlog.destinations.console import CONSOLE_LOGGER_NAME, ConsoleDestination
from tokenlog.destinations.file_writer import LogFileWriter, WriterState
from tokenlog.destinations.file import FileDestination

__all__ = [
    "CONSOLE_LOGGER_NAME",
    "ConsoleDestination",
    "FileDestination",
    "FormattedDestination",
    "LogDestination",
    "LogFileWriter",
    "WriterState",
]
