"""
Blog Quality Checks

Pure scoring functions for structure, readability, coherence, technical
depth and citations of a generated blog post. Each check reports its issues
and a 0-100 score; none of them performs I/O.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..core.config import QualityGateConfig
from .content import BlogContent

# Words that signal logical flow between sentences
TRANSITION_WORDS = (
    'however', 'therefore', 'moreover', 'furthermore', 'consequently',
    'additionally', 'meanwhile', 'nevertheless', 'thus', 'hence',
    'accordingly', 'similarly', 'conversely', 'specifically', 'notably',
    'for example', 'for instance', 'in contrast', 'on the other hand',
    'as a result', 'in addition', 'in fact', 'in particular',
)

FIRST_PERSON_PATTERNS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\bi\s", r"\bmy\b", r"\bme\b", r"\bmine\b",
    r"\bwe\s", r"\bour\b", r"\bus\b", r"\bours\b",
    r"\bi'm\b", r"\bi've\b", r"\bi'll\b", r"\bwe're\b", r"\bwe've\b",
))

SENTENCE_END = re.compile(r'[.!?]+')
CITATION = re.compile(r'\[\d+\]')


@dataclass
class CheckResult:
    """Outcome of one quality check."""
    name: str
    score: float
    issues: List[str] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'valid': self.valid,
            'score': self.score,
            'issues': list(self.issues),
            **self.details,
        }


def extract_text_content(blog: BlogContent) -> str:
    """Introduction, section headings and bodies, and conclusion as one text."""
    parts = [blog.introduction]
    parts.extend(f"{s.heading} {s.content}" for s in blog.sections)
    parts.append(blog.conclusion)
    return ' '.join(parts)


def count_sentences(text: str) -> int:
    return len(SENTENCE_END.findall(text))


def count_words(text: str) -> int:
    return len(text.split())


def average_sentence_length(text: str) -> float:
    sentences = count_sentences(text)
    return count_words(text) / sentences if sentences else 0.0


def max_consecutive_long_sentences(text: str, threshold: int = 30) -> int:
    """Longest run of sentences with more than ``threshold`` words."""
    sentences = [s for s in SENTENCE_END.split(text) if s.strip()]
    longest = current = 0
    for sentence in sentences:
        if count_words(sentence) > threshold:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def count_transition_words(text: str) -> int:
    """Number of distinct transition words present."""
    lower = text.lower()
    return sum(1 for word in TRANSITION_WORDS if word in lower)


def find_first_person(text: str) -> List[str]:
    violations = []
    for pattern in FIRST_PERSON_PATTERNS:
        violations.extend(pattern.findall(text))
    return violations


def keyword_density(text: str, keywords: Sequence[str]) -> float:
    """Whole-word keyword occurrences per word of text."""
    total_words = count_words(text)
    if not total_words:
        return 0.0

    lower = text.lower()
    occurrences = 0
    for keyword in keywords:
        if keyword:
            occurrences += len(re.findall(rf'\b{re.escape(keyword.lower())}\b', lower))
    return occurrences / total_words


def topic_keywords(blog: BlogContent, question: str) -> List[str]:
    """Blog tags plus the question's longer words, stripped of punctuation."""
    words = [w.strip('.,;:!?"\'()') for w in (question or "").lower().split()]
    return list(blog.tags) + [w for w in words if len(w) > 4]


def validate_structure(blog: BlogContent, thresholds: QualityGateConfig) -> CheckResult:
    issues = []
    sections = blog.sections

    if len(sections) < thresholds.min_sections:
        issues.append(f"Too few sections: {len(sections)} (need {thresholds.min_sections})")
    if len(sections) > thresholds.max_sections:
        issues.append(f"Too many sections: {len(sections)} (max {thresholds.max_sections})")

    for i, section in enumerate(sections, start=1):
        length = len(section.content)
        if length < thresholds.min_section_length:
            issues.append(f"Section {i} too short: {length} chars (need {thresholds.min_section_length})")
        if length > thresholds.max_section_length:
            issues.append(f"Section {i} too long: {length} chars (max {thresholds.max_section_length})")

    intro_length = len(blog.introduction)
    if intro_length < thresholds.min_intro_length:
        issues.append(f"Introduction too short: {intro_length} chars (need {thresholds.min_intro_length})")

    conclusion_length = len(blog.conclusion)
    if conclusion_length < thresholds.min_conclusion_length:
        issues.append(f"Conclusion too short: {conclusion_length} chars (need {thresholds.min_conclusion_length})")

    return CheckResult(
        name='structure',
        score=max(0, 100 - len(issues) * 15),
        issues=issues,
    )


def validate_readability(blog: BlogContent, thresholds: QualityGateConfig) -> CheckResult:
    text = extract_text_content(blog)
    issues = []

    avg_length = average_sentence_length(text)
    if avg_length > thresholds.max_avg_sentence_length:
        issues.append(f"Sentences too long on average: {avg_length:.1f} words "
                      f"(max {thresholds.max_avg_sentence_length:g})")
    if avg_length < thresholds.min_avg_sentence_length:
        issues.append(f"Sentences too short on average: {avg_length:.1f} words "
                      f"(min {thresholds.min_avg_sentence_length:g})")

    consecutive_long = max_consecutive_long_sentences(text, thresholds.long_sentence_words)
    if consecutive_long > thresholds.max_consecutive_long_sentences:
        issues.append(f"Too many consecutive long sentences: {consecutive_long} "
                      f"(max {thresholds.max_consecutive_long_sentences})")

    violations = find_first_person(text)
    if violations:
        shown = ', '.join(v.strip() for v in violations[:3])
        issues.append(f"First-person usage detected: {shown}{'...' if len(violations) > 3 else ''}")

    return CheckResult(
        name='readability',
        score=max(0, 100 - len(issues) * 20 - len(violations) * 5),
        issues=issues,
        details={
            'avg_sentence_length': avg_length,
            'consecutive_long': consecutive_long,
            'first_person_violations': len(violations),
        },
    )


def validate_coherence(blog: BlogContent, question: str, thresholds: QualityGateConfig) -> CheckResult:
    text = extract_text_content(blog)
    issues = []

    transitions = count_transition_words(text)
    if transitions < thresholds.min_transition_words:
        issues.append(f"Too few transition words: {transitions} (need {thresholds.min_transition_words})")

    keywords = topic_keywords(blog, question)
    density = keyword_density(text, keywords)
    if density < thresholds.min_keyword_density:
        issues.append(f"Topic keywords too sparse: {density * 100:.2f}% "
                      f"(need {thresholds.min_keyword_density * 100:g}%)")
    if density > thresholds.max_keyword_density:
        issues.append(f"Topic keywords too dense: {density * 100:.2f}% "
                      f"(max {thresholds.max_keyword_density * 100:g}%)")

    intro = blog.introduction.lower()
    if not any(kw.lower() in intro for kw in keywords if kw):
        issues.append('Introduction does not clearly mention the main topic')

    conclusion = blog.conclusion.lower()
    if not any(kw.lower() in conclusion for kw in keywords if kw):
        issues.append('Conclusion does not tie back to main topic')

    return CheckResult(
        name='coherence',
        score=max(0, 100 - len(issues) * 20),
        issues=issues,
        details={'transition_count': transitions, 'keyword_density': density},
    )


def validate_technical(blog: BlogContent) -> CheckResult:
    issues = []

    example = blog.real_world_example
    if example is None or not example.company:
        issues.append('Missing real-world example from a known company')
    else:
        if len(example.scenario) < 50:
            issues.append('Real-world scenario is too brief or missing')
        if len(example.lesson) < 30:
            issues.append('Real-world lesson is too brief or missing')

    if len(blog.diagram) < 50:
        issues.append('Missing or insufficient diagram')

    if not blog.glossary:
        issues.append('No glossary terms defined')

    if len(blog.quick_reference) < 3:
        issues.append(f"Too few quick reference items: {len(blog.quick_reference)} (need 3+)")

    return CheckResult(
        name='technical',
        score=max(0, 100 - len(issues) * 15),
        issues=issues,
    )


def count_inline_citations(blog: BlogContent) -> int:
    """``[n]`` markers across section headings and bodies."""
    return sum(
        len(CITATION.findall(section.heading)) + len(CITATION.findall(section.content))
        for section in blog.sections
    )


def citation_distribution(blog: BlogContent) -> Dict[str, Any]:
    """Per-section citation counts; well distributed when at most 30% of sections lack citations."""
    distribution = []
    for section in blog.sections:
        citations = len(CITATION.findall(section.content))
        length = len(section.content)
        distribution.append({
            'heading': section.heading,
            'citations': citations,
            'length': length,
            'density': citations / length if length else 0.0,
        })

    without = sum(1 for d in distribution if d['citations'] == 0)
    avg_density = (
        sum(d['density'] for d in distribution) / len(distribution) if distribution else 0.0
    )

    return {
        'distribution': distribution,
        'sections_without_citations': without,
        'avg_density': avg_density,
        'well_distributed': without <= math.floor(len(blog.sections) * 0.3),
    }


def validate_citations(blog: BlogContent, thresholds: QualityGateConfig,
                       text: Optional[str] = None) -> CheckResult:
    """Citation count is an issue; density and distribution are warnings."""
    text = text if text is not None else extract_text_content(blog)
    inline = count_inline_citations(blog)
    distribution = citation_distribution(blog)
    density = inline / len(text) if text else 0.0

    issues = []
    if inline < thresholds.min_inline_citations:
        issues.append(f"Too few inline citations: {inline} (need {thresholds.min_inline_citations})")

    warnings = []
    if density < thresholds.citation_density:
        warnings.append(f"Low citation density: {density * 1000:.2f} per 1000 chars")
    if not distribution['well_distributed']:
        warnings.append(f"{distribution['sections_without_citations']} sections lack citations")

    return CheckResult(
        name='citations',
        score=100 if not issues else 0,
        issues=issues,
        details={
            'inline': inline,
            'density': density,
            'distribution': distribution,
            'well_distributed': distribution['well_distributed'],
            'warnings': warnings,
        },
    )
