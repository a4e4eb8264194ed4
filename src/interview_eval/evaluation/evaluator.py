"""
Answer Evaluator

Public entry point that scores a transcribed spoken answer against a
reference answer and produces a graded verdict with structured feedback.
Evaluation is synchronous, deterministic and never raises.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from ..core.config import EvaluationConfig
from ..utils.logging import get_logger
from .feedback import generate_feedback, generate_strengths, generate_improvements
from .scorer import AnswerScorer, ScoreBreakdown, Verdict

logger = get_logger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one practice answer."""
    score: int
    verdict: Verdict
    key_points_covered: Tuple[str, ...]
    key_points_missed: Tuple[str, ...]
    feedback: str
    strengths: Tuple[str, ...]
    improvements: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Render with the field names used by the display layer."""
        return {
            'score': self.score,
            'verdict': self.verdict.value,
            'keyPointsCovered': list(self.key_points_covered),
            'keyPointsMissed': list(self.key_points_missed),
            'feedback': self.feedback,
            'strengths': list(self.strengths),
            'improvements': list(self.improvements),
        }


class AnswerEvaluator:
    """Wires scoring and feedback generation into a single evaluation call."""

    def __init__(self, config: Optional[EvaluationConfig] = None):
        """
        Initialize the evaluator.

        Args:
            config: Evaluation weights and thresholds (defaults when None)
        """
        self.config = config or EvaluationConfig()
        self.scorer = AnswerScorer(self.config)

    def evaluate(self, candidate_answer: str, reference_answer: str,
                 curated_keywords: Optional[Sequence[str]] = None) -> EvaluationResult:
        """
        Evaluate a candidate answer.

        Args:
            candidate_answer: The user-edited transcript
            reference_answer: The ideal answer for the question
            curated_keywords: Catalog keywords; derived from the reference
                answer when None or empty

        Returns:
            EvaluationResult
        """
        return self.evaluate_with_breakdown(candidate_answer, reference_answer, curated_keywords)[0]

    def evaluate_with_breakdown(self, candidate_answer: str, reference_answer: str,
                                curated_keywords: Optional[Sequence[str]] = None
                                ) -> Tuple[EvaluationResult, Optional[ScoreBreakdown]]:
        """Evaluate and also return the scorer's intermediate values."""
        try:
            breakdown = self.scorer.score(candidate_answer, reference_answer, curated_keywords)
            return self._build_result(breakdown), breakdown
        except Exception as e:
            logger.error(f"Answer evaluation failed: {str(e)}", exc_info=True)
            return self._fallback_result(curated_keywords), None

    def _build_result(self, breakdown: ScoreBreakdown) -> EvaluationResult:
        limit = self.config.display_limit
        covered = [str(term) for term in breakdown.covered_terms]
        missed = [str(term) for term in breakdown.missed_terms]

        feedback = generate_feedback(
            breakdown.score, len(covered), breakdown.keyword_count, breakdown.candidate_word_count
        )
        strengths = generate_strengths(
            breakdown.score, covered, breakdown.candidate_word_count, breakdown.reference_word_count
        )
        improvements = generate_improvements(
            breakdown.score, missed, breakdown.candidate_word_count, breakdown.reference_word_count,
            limit=self.config.max_improvements,
        )

        return EvaluationResult(
            score=breakdown.score,
            verdict=breakdown.verdict,
            key_points_covered=tuple(covered[:limit]),
            key_points_missed=tuple(missed[:limit]),
            feedback=feedback,
            strengths=tuple(strengths),
            improvements=tuple(improvements),
        )

    def _fallback_result(self, curated_keywords: Optional[Sequence[str]]) -> EvaluationResult:
        """Zero-score result used when scoring itself failed."""
        missed = []
        if curated_keywords and not isinstance(curated_keywords, str):
            try:
                missed = [str(k) for k in curated_keywords]
            except TypeError:
                missed = []

        return EvaluationResult(
            score=0,
            verdict=Verdict.NO_HIRE,
            key_points_covered=(),
            key_points_missed=tuple(missed[:self.config.display_limit]),
            feedback=generate_feedback(0, 0, len(missed), 0),
            strengths=tuple(generate_strengths(0, [], 0, 0)),
            improvements=tuple(generate_improvements(0, missed, 0, 0, limit=self.config.max_improvements)),
        )


_default_evaluator: Optional[AnswerEvaluator] = None


def evaluate(candidate_answer: str, reference_answer: str,
             curated_keywords: Optional[Sequence[str]] = None) -> EvaluationResult:
    """Evaluate an answer with the default weights and thresholds."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = AnswerEvaluator()
    return _default_evaluator.evaluate(candidate_answer, reference_answer, curated_keywords)
