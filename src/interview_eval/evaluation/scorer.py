"""
Answer Scoring

Combines keyword coverage, fuzzy word overlap and answer length into a
0-100 score and maps (score, keyword coverage) to a hiring verdict.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from ..core.config import EvaluationConfig
from ..utils.logging import get_logger
from .keywords import extract_key_terms
from .matcher import fuzzy_match, word_similar
from .tokenizer import tokenize

logger = get_logger(__name__)


class Verdict(str, Enum):
    """Hiring recommendation, most favorable first."""
    STRONG_HIRE = "strong-hire"
    HIRE = "hire"
    LEAN_HIRE = "lean-hire"
    LEAN_NO_HIRE = "lean-no-hire"
    NO_HIRE = "no-hire"

    @property
    def rank(self) -> int:
        """Position in the total order; 0 is the most favorable."""
        return list(Verdict).index(self)

    @property
    def label(self) -> str:
        return self.value.replace('-', ' ').title()

    @property
    def is_positive(self) -> bool:
        return self in (Verdict.STRONG_HIRE, Verdict.HIRE)


class KeywordSource(str, Enum):
    """Where the mandatory keyword list came from."""
    CURATED = "curated"
    DERIVED = "derived"


@dataclass
class ScoreBreakdown:
    """Intermediate values of a single scoring pass."""
    score: int
    verdict: Verdict
    keyword_coverage: float
    keyword_percent: float
    word_overlap: float
    length_score: float
    short_answer_penalty: float
    raw_score: float
    candidate_word_count: int
    reference_word_count: int
    keyword_source: KeywordSource
    covered_terms: List[str] = field(default_factory=list)
    missed_terms: List[str] = field(default_factory=list)

    @property
    def keyword_count(self) -> int:
        return len(self.covered_terms) + len(self.missed_terms)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values."""
    return int(math.floor(value + 0.5))


class AnswerScorer:
    """Heuristic scorer for spoken interview answers."""

    def __init__(self, config: Optional[EvaluationConfig] = None):
        self.config = config or EvaluationConfig()

    def score(self, candidate_text: str, reference_text: str,
              keywords: Optional[Sequence[str]] = None) -> ScoreBreakdown:
        """
        Score a candidate answer against a reference answer.

        Args:
            candidate_text: The (edited) transcript of the spoken answer
            reference_text: The ideal answer from the question catalog
            keywords: Curated mandatory keywords; extracted from the
                reference answer when missing or empty

        Returns:
            ScoreBreakdown with the final score, verdict and all factors
        """
        candidate_text = candidate_text if isinstance(candidate_text, str) else ""
        reference_text = reference_text if isinstance(reference_text, str) else ""
        if isinstance(keywords, str):
            keywords = [keywords]

        candidate_words = tokenize(candidate_text, self.config.min_token_length)
        reference_words = tokenize(reference_text, self.config.min_token_length)

        if keywords:
            mandatory_keywords = list(keywords)
            keyword_source = KeywordSource.CURATED
        else:
            mandatory_keywords = extract_key_terms(reference_text)
            keyword_source = KeywordSource.DERIVED

        covered_terms, missed_terms = self.partition_keywords(candidate_text, mandatory_keywords)

        keyword_coverage = (
            len(covered_terms) / len(mandatory_keywords) if mandatory_keywords else 0.0
        )
        word_overlap = self.word_overlap(candidate_words, reference_words)
        length_score = min(len(candidate_words) / self.config.substantial_answer_words, 1.0)
        penalty = self.short_answer_penalty(len(candidate_words))

        raw_score = (
            keyword_coverage * self.config.keyword_weight
            + word_overlap * self.config.overlap_weight
            + length_score * self.config.length_weight
        ) * penalty
        score = round_half_up(min(max(raw_score, 0.0), 100.0))

        keyword_percent = keyword_coverage * 100
        verdict = self.determine_verdict(score, keyword_percent)

        logger.debug(
            f"Scored answer: {len(covered_terms)}/{len(mandatory_keywords)} {keyword_source.value} keywords, "
            f"overlap={word_overlap:.2f}, length={length_score:.2f}, penalty={penalty}, "
            f"score={score}, verdict={verdict.value}"
        )

        return ScoreBreakdown(
            score=score,
            verdict=verdict,
            keyword_coverage=keyword_coverage,
            keyword_percent=keyword_percent,
            word_overlap=word_overlap,
            length_score=length_score,
            short_answer_penalty=penalty,
            raw_score=raw_score,
            candidate_word_count=len(candidate_words),
            reference_word_count=len(reference_words),
            keyword_source=keyword_source,
            covered_terms=covered_terms,
            missed_terms=missed_terms,
        )

    def partition_keywords(self, candidate_text: str, keywords: Sequence[str]):
        """Split keywords into (covered, missed), preserving order."""
        candidate_lower = candidate_text.lower()
        covered: List[str] = []
        missed: List[str] = []

        for keyword in keywords:
            if isinstance(keyword, str) and fuzzy_match(candidate_lower, keyword.lower()):
                covered.append(keyword)
            else:
                missed.append(keyword)

        return covered, missed

    def word_overlap(self, candidate_words: Sequence[str], reference_words: Sequence[str]) -> float:
        """Fraction of the overlap target reached; the target is a fifth of the reference vocabulary."""
        matched = 0
        for candidate_word in candidate_words:
            for reference_word in reference_words:
                if word_similar(candidate_word, reference_word):
                    matched += 1
                    break

        target = max(len(reference_words) * self.config.overlap_fraction, 1)
        return min(matched / target, 1.0)

    def short_answer_penalty(self, word_count: int) -> float:
        for limit, factor in self.config.short_answer_penalty.bands:
            if word_count < limit:
                return factor
        return 1.0

    def determine_verdict(self, score: float, keyword_percent: float) -> Verdict:
        """Map a score and keyword percentage to a verdict; both thresholds must hold."""
        thresholds = self.config.verdicts
        tiers = (
            (Verdict.STRONG_HIRE, thresholds.strong_hire),
            (Verdict.HIRE, thresholds.hire),
            (Verdict.LEAN_HIRE, thresholds.lean_hire),
            (Verdict.LEAN_NO_HIRE, thresholds.lean_no_hire),
        )
        for verdict, (min_keyword_percent, min_score) in tiers:
            if keyword_percent >= min_keyword_percent and score >= min_score:
                return verdict
        return Verdict.NO_HIRE
