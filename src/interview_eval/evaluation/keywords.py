"""
Keyword Extraction

Derives a fallback list of mandatory terms from a reference answer when the
question catalog has not supplied curated keywords. This is a heuristic over
known interview vocabulary and capitalized technology names, not a claim of
completeness.
"""

import re
from typing import Dict, List, Pattern, Tuple

TERM_PATTERNS: Tuple[Tuple[str, Pattern], ...] = (
    ('networking', re.compile(r'\b(api|rest|graphql|grpc|websocket|http|https|tcp|udp)\b', re.IGNORECASE)),
    ('data_stores', re.compile(r'\b(database|sql|nosql|mongodb|postgresql|mysql|redis|cache)\b', re.IGNORECASE)),
    ('containers', re.compile(r'\b(kubernetes|docker|container|microservice|monolith)\b', re.IGNORECASE)),
    ('cloud', re.compile(r'\b(aws|azure|gcp|cloud|serverless|lambda|ec2|s3)\b', re.IGNORECASE)),
    ('delivery', re.compile(r'\b(ci/cd|pipeline|deployment|devops|terraform|ansible)\b', re.IGNORECASE)),
    ('reliability', re.compile(r'\b(scalability|availability|reliability|latency|throughput)\b', re.IGNORECASE)),
    ('edge', re.compile(r'\b(load balancer|cdn|proxy|gateway|firewall)\b', re.IGNORECASE)),
    ('security', re.compile(r'\b(authentication|authorization|oauth|jwt|security)\b', re.IGNORECASE)),
    ('observability', re.compile(r'\b(monitoring|logging|alerting|metrics|observability)\b', re.IGNORECASE)),
    ('messaging', re.compile(r'\b(queue|kafka|rabbitmq|sqs|pub/sub|event-driven)\b', re.IGNORECASE)),
    ('design_patterns', re.compile(r'\b(singleton|factory|observer|strategy|adapter)\b', re.IGNORECASE)),
    ('architecture_patterns', re.compile(r'\b(cqrs|event sourcing|saga|circuit breaker)\b', re.IGNORECASE)),
    ('behavioral_people', re.compile(r'\b(stakeholder|communication|collaboration|leadership)\b', re.IGNORECASE)),
    ('behavioral_execution', re.compile(r'\b(prioritize|deadline|conflict|resolution|feedback)\b', re.IGNORECASE)),
)

# Likely proper nouns and technology names
CAPITALIZED_PHRASE = re.compile(r'\b[A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)*\b')
SENTENCE_STARTERS = frozenset({'The', 'This', 'That', 'When', 'What', 'How', 'Why'})
MAX_CAPITALIZED_PHRASES = 10


def extract_key_terms_by_category(text: str) -> Dict[str, List[str]]:
    """Vocabulary pattern hits grouped by category, lower-cased and de-duplicated."""
    categories: Dict[str, List[str]] = {}
    if not text:
        return categories

    for category, pattern in TERM_PATTERNS:
        hits: List[str] = []
        for match in pattern.finditer(text):
            term = match.group(0).lower()
            if term not in hits:
                hits.append(term)
        if hits:
            categories[category] = hits

    return categories


def extract_capitalized_phrases(text: str) -> List[str]:
    """Capitalized (multi-)word phrases longer than 3 characters, first 10 only."""
    if not text:
        return []
    phrases = [
        m for m in CAPITALIZED_PHRASE.findall(text)
        if len(m) > 3 and m not in SENTENCE_STARTERS
    ]
    return [m.lower() for m in phrases[:MAX_CAPITALIZED_PHRASES]]


def extract_key_terms(text: str) -> List[str]:
    """Derive a de-duplicated keyword list from a reference answer."""
    if not isinstance(text, str) or not text:
        return []

    terms: List[str] = []
    seen = set()

    for hits in extract_key_terms_by_category(text).values():
        for term in hits:
            if term not in seen:
                seen.add(term)
                terms.append(term)

    for phrase in extract_capitalized_phrases(text):
        if phrase not in seen:
            seen.add(phrase)
            terms.append(phrase)

    return terms
