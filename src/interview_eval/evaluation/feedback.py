"""
Feedback Generation

Human-readable feedback for a scored answer. These strings are presentation
only and never influence the score or verdict.
"""

from typing import List, Sequence

STAR_METHOD_TIP = 'Practice structuring answers with STAR method for behavioral questions'


def generate_feedback(score: int, covered: int, total: int, word_count: int) -> str:
    """One sentence selected by score band."""
    if score >= 70:
        return (f"Great answer! You covered {covered} key concepts. "
                "Your response shows solid understanding of the topic.")
    if score >= 55:
        return (f"Good answer! You mentioned {covered} key concepts. "
                "Consider adding a few more specific details.")
    if score >= 40:
        return (f"Decent attempt with {covered} key points covered. "
                "Try to expand on the core concepts more.")
    if score >= 25:
        return (f"You touched on some points but could go deeper. {covered} concepts were identified. "
                "Review the ideal answer for more ideas.")
    return "Keep practicing! Try to mention more specific technical terms and concepts in your answer."


def generate_strengths(score: int, covered_terms: Sequence[str],
                       user_word_count: int, ideal_word_count: int) -> List[str]:
    """Strength bullets; never empty."""
    strengths = []

    if covered_terms:
        strengths.append(f"Mentioned key terms: {', '.join(covered_terms[:3])}")

    if user_word_count >= ideal_word_count * 0.7:
        strengths.append('Good answer length with sufficient detail')

    if score >= 60:
        strengths.append('Demonstrated understanding of core concepts')

    if len(covered_terms) >= 3:
        strengths.append('Covered multiple relevant technical areas')

    if not strengths:
        strengths.append('Attempted to answer the question')

    return strengths


def generate_improvements(score: int, missed_terms: Sequence[str],
                          user_word_count: int, ideal_word_count: int,
                          limit: int = 4) -> List[str]:
    """Improvement bullets, always ending with the STAR-method tip when room remains."""
    improvements = []

    if missed_terms:
        improvements.append(f"Consider mentioning: {', '.join(str(t) for t in missed_terms[:3])}")

    if user_word_count < ideal_word_count * 0.5:
        improvements.append('Provide more detailed explanations')

    if score < 60:
        improvements.append('Study the core concepts more thoroughly')

    if score < 80:
        improvements.append('Add specific examples from your experience')

    improvements.append(STAR_METHOD_TIP)

    return improvements[:limit]
