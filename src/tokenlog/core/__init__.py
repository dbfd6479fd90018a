"""Core – levels, records, the serialization point and the Logger."""
from tokenlog.core.level import LogLevel
from tokenlog.core.record import LogRecord
from tokenlog.core.serial import SerialQueue
from tokenlog.core.logger import Logger

__all__ = ["LogLevel", "LogRecord", "Logger", "SerialQueue"]
