"""Formatting – token templates, thread descriptors and redaction."""
from tokenlog.formatting.tokens import TOKEN_PREFIX, FormatToken
from tokenlog.formatting.thread import MAIN_THREAD, describe_thread
from tokenlog.formatting.formatter import MessageFormatter
from tokenlog.formatting.redaction import REDACTED_PLACEHOLDER, Redacted, RedactionPolicy, redact

__all__ = [
    "MAIN_THREAD",
    "REDACTED_PLACEHOLDER",
    "TOKEN_PREFIX",
    "FormatToken",
    "MessageFormatter",
    "Redacted",
    "RedactionPolicy",
    "describe_thread",
    "redact",
]
