"""Whitespace tokenizer for transcribed answers."""

from typing import List, Optional

# Tokens of length <= 2 are mostly articles and prepositions
MIN_TOKEN_LENGTH = 3


def tokenize(text: Optional[str], min_length: int = MIN_TOKEN_LENGTH) -> List[str]:
    """Lower-case ``text``, split on whitespace and drop tokens shorter than ``min_length``."""
    if not text or not isinstance(text, str):
        return []
    return [word for word in text.lower().split() if len(word) >= min_length]
