"""
Practice Module

Voice interview practice: question selection and the session state machine.
"""

from .questions import Question, load_questions, is_voice_suitable, select_voice_questions
from .session import PracticeSession, PracticeState, PracticeAttempt, SessionSummary

__all__ = [
    "Question",
    "load_questions",
    "is_voice_suitable",
    "select_voice_questions",
    "PracticeSession",
    "PracticeState",
    "PracticeAttempt",
    "SessionSummary",
]
