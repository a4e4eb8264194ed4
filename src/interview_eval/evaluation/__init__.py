"""
Evaluation Module

Heuristic evaluation of spoken interview answers with fuzzy keyword
matching, weighted scoring and hiring verdicts.
"""

from .tokenizer import tokenize
from .matcher import (
    KeywordMatcher,
    MatchResult,
    MatchType,
    contains_phrase,
    contains_with_variants,
    fuzzy_match,
    similar_enough,
    word_similar,
)
from .keywords import extract_key_terms, extract_key_terms_by_category
from .scorer import AnswerScorer, ScoreBreakdown, Verdict, KeywordSource
from .evaluator import AnswerEvaluator, EvaluationResult, evaluate

__all__ = [
    "tokenize",
    "KeywordMatcher",
    "MatchResult",
    "MatchType",
    "contains_phrase",
    "contains_with_variants",
    "fuzzy_match",
    "similar_enough",
    "word_similar",
    "extract_key_terms",
    "extract_key_terms_by_category",
    "AnswerScorer",
    "ScoreBreakdown",
    "Verdict",
    "KeywordSource",
    "AnswerEvaluator",
    "EvaluationResult",
    "evaluate",
]
