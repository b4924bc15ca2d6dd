"""
posbridge utilities.

Logging, the diagnostic sink, retry, concurrency and numeric helpers.
"""

from posbridge.utils.concurrency import gather_all, resolved
from posbridge.utils.converter import to_int
from posbridge.utils.logger import DiagnosticSink, Logger, build_error, safe_log, signal_error
from posbridge.utils.logging import configure_logging, get_logger
from posbridge.utils.retry import RetryConfig, calculate_delay, retry_async

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    # Diagnostics
    "DiagnosticSink",
    "Logger",
    "build_error",
    "safe_log",
    "signal_error",
    # Retry
    "RetryConfig",
    "calculate_delay",
    "retry_async",
    # Concurrency
    "gather_all",
    "resolved",
    # Conversion
    "to_int",
]
