"""
CLI Module

Rich formatting helpers for the command-line interface.
"""

from .formatting import (
    console,
    format_evaluation,
    format_json,
    format_quality_report,
    format_session_summary,
    print_issues,
)

__all__ = [
    "console",
    "format_evaluation",
    "format_json",
    "format_quality_report",
    "format_session_summary",
    "print_issues",
]
