"""
interview-eval

Heuristic evaluation of spoken interview answers, voice practice sessions
and a quality gate for generated interview blog posts.
"""

__version__ = "1.0.0"

from .core.config import get_config
from .evaluation import evaluate, AnswerEvaluator, EvaluationResult, Verdict

__all__ = [
    "__version__",
    "evaluate",
    "AnswerEvaluator",
    "EvaluationResult",
    "Verdict",
    "get_config",
]
