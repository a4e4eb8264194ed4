"""
Practice Questions

Question model for voice practice and selection of questions suitable for
spoken answers.
"""

import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..core.exceptions import EvaluationError, ValidationError
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FALLBACK_CHANNELS = ('behavioral', 'system-design', 'sre', 'devops')


@dataclass
class Question:
    """A catalog question with its reference answer."""
    id: str
    question: str
    answer: str
    channel: str = ""
    difficulty: Optional[str] = None
    voice_keywords: Optional[List[str]] = None
    voice_suitable: Optional[bool] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """Build from a catalog entry; camelCase catalog keys are accepted."""
        if not isinstance(data, dict):
            raise ValidationError("Question entry must be an object", invalid_value=data)

        question_id = data.get('id')
        if question_id is None:
            raise ValidationError("Question entry is missing 'id'", field_name='id')

        keywords = data.get('voice_keywords', data.get('voiceKeywords'))
        if keywords is not None and not isinstance(keywords, list):
            raise ValidationError(
                "voiceKeywords must be a list of strings",
                field_name='voiceKeywords', invalid_value=keywords
            )

        known = {'id', 'question', 'answer', 'channel', 'difficulty',
                 'voice_keywords', 'voiceKeywords', 'voice_suitable', 'voiceSuitable'}
        return cls(
            id=str(question_id),
            question=data.get('question') or "",
            answer=data.get('answer') or "",
            channel=data.get('channel') or "",
            difficulty=data.get('difficulty'),
            voice_keywords=keywords,
            voice_suitable=data.get('voice_suitable', data.get('voiceSuitable')),
            metadata={k: v for k, v in data.items() if k not in known},
        )


def load_questions(path: Path) -> List[Question]:
    """Load a JSON catalog: either a list of questions or ``{"questions": [...]}``."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise EvaluationError(f"Could not load question catalog {path}: {e}")

    if isinstance(data, dict):
        data = data.get('questions', [])
    if not isinstance(data, list):
        raise ValidationError("Question catalog must be a list", invalid_value=type(data).__name__)

    questions = [Question.from_dict(entry) for entry in data]
    logger.info(f"Loaded {len(questions)} questions from {path}")
    return questions


def is_voice_suitable(question: Question,
                      fallback_channels: Sequence[str] = DEFAULT_FALLBACK_CHANNELS,
                      min_answer_length: int = 100) -> bool:
    """
    Decide whether a question can be practiced as a spoken answer.

    An explicit ``voice_suitable=False`` always excludes. A question marked
    suitable with curated keywords is included. Anything else falls back to
    a channel allow-list with a substantial reference answer.
    """
    if question.voice_suitable is False:
        return False
    if question.voice_suitable is True and question.voice_keywords:
        return True
    return (question.channel in fallback_channels
            and bool(question.answer) and len(question.answer) > min_answer_length)


def select_voice_questions(questions: Iterable[Question], limit: int = 10,
                           rng: Optional[random.Random] = None,
                           fallback_channels: Sequence[str] = DEFAULT_FALLBACK_CHANNELS,
                           min_answer_length: int = 100) -> List[Question]:
    """Shuffle the voice-suitable questions and keep at most ``limit``."""
    rng = rng or random.Random()
    suitable = [
        q for q in questions
        if is_voice_suitable(q, fallback_channels, min_answer_length)
    ]
    rng.shuffle(suitable)
    return suitable[:limit]
