#!/usr/bin/env python3
"""
Sample Evaluation Script

This script demonstrates how to use the interview answer evaluator
programmatically: scoring single answers and driving a practice session.
"""

import random
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from interview_eval import evaluate
from interview_eval.practice import PracticeSession, load_questions, select_voice_questions


def score_single_answer():
    """Score one transcribed answer against its reference answer."""
    print("Scoring a single answer...")

    reference = (
        "Put the limiter in the API gateway. A token bucket per client allows bursts while "
        "enforcing an average rate, and Redis keeps the counters shared across instances."
    )
    answer = (
        "I would add a token bucket in the gateway for each API key and keep the buckets in "
        "redis so all the gateway nodes agree. Clients over the limit get a 429 response with a "
        "retry after header, and we track rejected requests in our dashboards."
    )

    result = evaluate(answer, reference, ["token bucket", "redis", "gateway", "429"])

    print(f"Score: {result.score}/100 ({result.verdict.label})")
    print(f"Feedback: {result.feedback}")
    print(f"Covered: {', '.join(result.key_points_covered)}")
    print(f"Missed: {', '.join(result.key_points_missed) or '-'}")


def run_practice_session():
    """Answer every selected question once and print the summary."""
    print("\nRunning a scripted practice session...")

    catalog = Path(__file__).parent / "sample_questions.json"
    questions = select_voice_questions(load_questions(catalog), limit=3, rng=random.Random(7))

    session = PracticeSession(questions, on_verdict=lambda verdict: print(f"  verdict: {verdict.value}"))
    while True:
        question = session.current_question
        print(f"- {question.question}")

        session.start_recording()
        # The reference answer stands in for a perfect spoken answer
        session.add_transcript_segment(question.answer)
        session.stop_recording()
        session.submit()

        if not session.has_next:
            break
        session.next_question()

    print(session.summary().to_dict())


if __name__ == "__main__":
    score_single_answer()
    run_practice_session()
