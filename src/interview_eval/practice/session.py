"""
Voice Practice Session

Drives the practice flow for a list of questions:

    ready -> recording -> editing -> processing -> evaluated

with ``editing -> ready`` (discard) and ``evaluated -> ready`` (retry or
next question). The evaluator runs exactly once per submission, on the
user-edited transcript, never on raw speech-to-text output.
"""

import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.exceptions import SessionError, ValidationError
from ..evaluation.evaluator import AnswerEvaluator, EvaluationResult
from ..evaluation.scorer import Verdict
from ..utils.logging import get_session_logger
from .questions import Question


class PracticeState(str, Enum):
    """Practice session states."""
    READY = "ready"
    RECORDING = "recording"
    EDITING = "editing"
    PROCESSING = "processing"
    EVALUATED = "evaluated"


ALLOWED_TRANSITIONS = {
    PracticeState.READY: {PracticeState.RECORDING},
    PracticeState.RECORDING: {PracticeState.EDITING},
    PracticeState.EDITING: {PracticeState.PROCESSING, PracticeState.READY},
    PracticeState.PROCESSING: {PracticeState.EVALUATED},
    PracticeState.EVALUATED: {PracticeState.READY},
}


@dataclass
class PracticeAttempt:
    """One evaluated answer."""
    question_id: str
    transcript: str
    result: EvaluationResult
    evaluated_at: datetime = field(default_factory=datetime.now)


@dataclass
class SessionSummary:
    """Aggregate view over a session's attempts."""
    total_questions: int
    attempts: int
    questions_attempted: int
    average_score: float
    best_score: int
    best_verdict: Optional[Verdict]
    verdict_distribution: Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_questions': self.total_questions,
            'attempts': self.attempts,
            'questions_attempted': self.questions_attempted,
            'average_score': self.average_score,
            'best_score': self.best_score,
            'best_verdict': self.best_verdict.value if self.best_verdict else None,
            'verdict_distribution': dict(self.verdict_distribution),
        }


class PracticeSession:
    """State machine for a voice interview practice session."""

    def __init__(self, questions: Sequence[Question],
                 evaluator: Optional[AnswerEvaluator] = None,
                 on_verdict: Optional[Callable[[Verdict], Any]] = None):
        """
        Initialize a practice session.

        Args:
            questions: Questions to practice, in order
            evaluator: Answer evaluator (default weights when None)
            on_verdict: Called with each verdict, e.g. by a rewards system
        """
        if not questions:
            raise SessionError("A practice session needs at least one question")

        self.session_id = uuid.uuid4().hex[:12]
        self.questions = list(questions)
        self.evaluator = evaluator or AnswerEvaluator()
        self.on_verdict = on_verdict

        self.state = PracticeState.READY
        self.current_index = 0
        self.transcript = ""
        self.evaluation: Optional[EvaluationResult] = None
        self.attempts: List[PracticeAttempt] = []

        self.logger = get_session_logger(self.session_id)
        self.logger.info(f"Created practice session with {len(self.questions)} questions")

    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.questions) - 1

    def _transition(self, target: PracticeState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise SessionError(
                f"Cannot move from {self.state.value} to {target.value}",
                state=self.state.value
            )
        self.logger.debug(f"{self.state.value} -> {target.value}")
        self.state = target

    def _require(self, state: PracticeState, action: str) -> None:
        if self.state != state:
            raise SessionError(f"Cannot {action} while {self.state.value}", state=self.state.value)

    def start_recording(self) -> None:
        """Begin capturing speech for the current question."""
        self._transition(PracticeState.RECORDING)

    def add_transcript_segment(self, text: str) -> None:
        """Append a finalized speech-to-text segment while recording."""
        self._require(PracticeState.RECORDING, "add transcript segments")
        segment = (text or "").strip()
        if segment:
            self.transcript = f"{self.transcript} {segment}" if self.transcript else segment

    def stop_recording(self) -> None:
        """Stop capturing; the transcript becomes editable."""
        self._transition(PracticeState.EDITING)

    def edit_transcript(self, text: str) -> None:
        """Replace the transcript with the user's corrected text."""
        self._require(PracticeState.EDITING, "edit the transcript")
        self.transcript = text or ""

    def discard(self) -> None:
        """Throw away the transcript and return to ready."""
        self._require(PracticeState.EDITING, "discard")
        self._reset_attempt()
        self._transition(PracticeState.READY)

    def submit(self) -> EvaluationResult:
        """
        Evaluate the edited transcript for the current question.

        Raises:
            ValidationError: If the transcript is blank
            SessionError: If not currently editing
        """
        self._require(PracticeState.EDITING, "submit")
        if not self.transcript.strip():
            raise ValidationError("Please provide an answer before submitting.", field_name='transcript')

        self._transition(PracticeState.PROCESSING)
        question = self.current_question
        result = self.evaluator.evaluate(self.transcript, question.answer, question.voice_keywords)

        self.evaluation = result
        self.attempts.append(PracticeAttempt(
            question_id=question.id,
            transcript=self.transcript,
            result=result,
        ))
        self._transition(PracticeState.EVALUATED)
        self.logger.info(
            f"Question {question.id} evaluated: score={result.score}, verdict={result.verdict.value}",
            extra={'question_id': question.id, 'verdict': result.verdict.value}
        )

        if self.on_verdict is not None:
            self.on_verdict(result.verdict)

        return result

    def retry(self) -> None:
        """Answer the current question again."""
        if self.state == PracticeState.EDITING:
            self.discard()
            return
        self._require(PracticeState.EVALUATED, "retry")
        self._reset_attempt()
        self._transition(PracticeState.READY)

    def next_question(self) -> Question:
        """Advance to the next question after an evaluation."""
        self._require(PracticeState.EVALUATED, "move to the next question")
        if not self.has_next:
            raise SessionError("No more questions in this session", state=self.state.value)

        self.current_index += 1
        self._reset_attempt()
        self._transition(PracticeState.READY)
        return self.current_question

    def _reset_attempt(self) -> None:
        self.transcript = ""
        self.evaluation = None

    def summary(self) -> SessionSummary:
        """Summarize all evaluated attempts so far."""
        scores = [a.result.score for a in self.attempts]
        verdicts = [a.result.verdict for a in self.attempts]
        distribution = Counter(v.value for v in verdicts)

        return SessionSummary(
            total_questions=len(self.questions),
            attempts=len(self.attempts),
            questions_attempted=len({a.question_id for a in self.attempts}),
            average_score=round(sum(scores) / len(scores), 1) if scores else 0.0,
            best_score=max(scores) if scores else 0,
            best_verdict=min(verdicts, key=lambda v: v.rank) if verdicts else None,
            verdict_distribution=dict(distribution),
        )
