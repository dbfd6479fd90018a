"""Observability – the pipeline's own diagnostics."""
from tokenlog.observability.diagnostics import get_logger, report_failure

__all__ = ["get_logger", "report_failure"]
