"""
Core Module

Foundational components used across the application including configuration
management and custom exceptions.
"""

from .config import get_config, set_config, reload_config, AppConfig, EvaluationConfig
from .exceptions import (
    InterviewEvalException,
    ConfigurationError,
    ValidationError,
    SessionError,
    EvaluationError,
    QualityGateError,
    SourceCheckError,
)

__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "AppConfig",
    "EvaluationConfig",
    "InterviewEvalException",
    "ConfigurationError",
    "ValidationError",
    "SessionError",
    "EvaluationError",
    "QualityGateError",
    "SourceCheckError",
]
