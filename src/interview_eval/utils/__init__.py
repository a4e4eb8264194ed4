"""
Utils Module

Logging configuration and async utility functions.
"""

from .logging import setup_logging, get_logger, get_session_logger, PerformanceTimer
from .async_helpers import retry_with_backoff, gather_with_concurrency

__all__ = [
    "setup_logging",
    "get_logger",
    "get_session_logger",
    "PerformanceTimer",
    "retry_with_backoff",
    "gather_with_concurrency",
]
