"""Observability helpers for logging and metrics."""

from .logging import JsonLogFormatter, configure_logging
from .metrics import MetricsCollector

__all__ = [
    "JsonLogFormatter",
    "configure_logging",
    "MetricsCollector",
]
