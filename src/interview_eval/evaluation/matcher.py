"""
Keyword Matching System

Fuzzy matching of interview keywords against transcribed answers. Speech to
text mis-hears technical jargon, so a term counts as mentioned when it appears
verbatim, through a known pronunciation variant, or as a near-identical word.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .variants import get_pronunciation_variations

# Words shorter than this only match exactly
MIN_SIMILAR_LENGTH = 3
MAX_LENGTH_GAP = 3
PREFIX_RATIO = 0.6
CHARACTER_RATIO = 0.7


class MatchType(str, Enum):
    """Strategy that produced a keyword match."""
    EXACT = "exact"
    VARIANT = "variant"
    SIMILAR = "similar"
    NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """Result of matching a single keyword against an answer."""
    is_match: bool
    match_type: MatchType
    term: str
    matched_on: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_match


def contains_phrase(haystack_lower: str, needle_lower: str) -> bool:
    """Direct substring test."""
    return bool(needle_lower) and needle_lower in haystack_lower


def find_variant(haystack_lower: str, needle: str) -> Optional[str]:
    """Return the first pronunciation variant of ``needle`` found in the haystack."""
    for variation in get_pronunciation_variations(needle):
        # An empty stem (e.g. from the term "s") would match every text
        if variation and variation in haystack_lower:
            return variation
    return None


def contains_with_variants(haystack_lower: str, needle: str) -> bool:
    """Substring test against every pronunciation variant of ``needle``."""
    return find_variant(haystack_lower, needle) is not None


def similar_enough(a: str, b: str) -> bool:
    """
    Approximate edit similarity between two words.

    Words whose lengths differ by more than three characters are never
    similar. Otherwise they are similar when their common prefix covers 60%
    of the shorter word, or when a multiset intersection of their characters
    covers 70% of it.
    """
    if a == b:
        return True

    min_len = min(len(a), len(b))
    max_len = max(len(a), len(b))

    if max_len - min_len > MAX_LENGTH_GAP:
        return False

    common_prefix = 0
    for i in range(min_len):
        if a[i] != b[i]:
            break
        common_prefix += 1
    if common_prefix >= min_len * PREFIX_RATIO:
        return True

    # Each character of b may be consumed once
    remaining = list(b)
    matches = 0
    for char in a:
        if char in remaining:
            remaining.remove(char)
            matches += 1

    return matches >= min_len * CHARACTER_RATIO


def word_similar(a: str, b: str) -> bool:
    """Word-level similarity used for general vocabulary overlap."""
    if a == b:
        return True
    if len(a) < MIN_SIMILAR_LENGTH or len(b) < MIN_SIMILAR_LENGTH:
        return False
    if a in b or b in a:
        return True
    return similar_enough(a, b)


class KeywordMatcher:
    """Matches keywords against answer text using escalating strategies."""

    def match(self, text: str, term: str) -> MatchResult:
        """
        Match ``term`` against ``text``.

        Both arguments are expected lower-cased. Anything that is not a
        non-empty string is reported as no match.
        """
        if not isinstance(term, str) or not term.strip() or not isinstance(text, str):
            return MatchResult(is_match=False, match_type=MatchType.NONE, term=str(term))

        if contains_phrase(text, term):
            return MatchResult(is_match=True, match_type=MatchType.EXACT, term=term, matched_on=term)

        variant = find_variant(text, term)
        if variant is not None:
            return MatchResult(is_match=True, match_type=MatchType.VARIANT, term=term, matched_on=variant)

        for word in text.split():
            if similar_enough(word, term):
                return MatchResult(is_match=True, match_type=MatchType.SIMILAR, term=term, matched_on=word)

        return MatchResult(is_match=False, match_type=MatchType.NONE, term=term)


_default_matcher = KeywordMatcher()


def fuzzy_match(text: str, term: str) -> bool:
    """True when ``term`` is present in ``text`` allowing for transcription noise."""
    return _default_matcher.match(text, term).is_match
