"""
Custom Exception Classes

Application-specific exception classes for the answer evaluator,
practice sessions and blog quality gates.
"""

from typing import Optional, Any, Dict


class InterviewEvalException(Exception):
    """Base exception class for all interview-eval errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(InterviewEvalException):
    """Raised when there's an issue with configuration setup or validation."""
    pass


class ValidationError(InterviewEvalException):
    """Raised when caller-supplied data fails validation."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Optional[Any] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value


class SessionError(InterviewEvalException):
    """Raised when a practice session is driven through an illegal transition."""

    def __init__(self, message: str, state: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.state = state


class EvaluationError(InterviewEvalException):
    """Raised when answer evaluation input cannot be loaded or prepared."""

    def __init__(self, message: str, question_id: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.question_id = question_id


class QualityGateError(InterviewEvalException):
    """Raised when blog content cannot be loaded for quality validation."""
    pass


class SourceCheckError(QualityGateError):
    """Raised when a source URL check fails at the transport level."""

    def __init__(self, message: str, url: Optional[str] = None,
                 status_code: Optional[int] = None, **kwargs):
        super().__init__(message, kwargs)
        self.url = url
        self.status_code = status_code
