"""
Practice Command

Interactive practice over a question catalog. Typed answers stand in for
the speech transcript; each answer can be corrected before it is scored.
"""

import random
import sys

import click
from rich.panel import Panel

from ..cli.formatting import console, format_evaluation, format_session_summary
from ..core.config import AppConfig
from ..core.exceptions import InterviewEvalException
from ..evaluation.evaluator import AnswerEvaluator
from ..practice.questions import load_questions, select_voice_questions
from ..practice.session import PracticeSession
from ..utils.logging import get_logger

logger = get_logger(__name__)


@click.command()
@click.option('--catalog', type=click.Path(exists=True, dir_okay=False), required=True,
              help='JSON question catalog')
@click.option('--limit', '-n', type=int, default=None, help='Number of questions (default from config)')
@click.option('--seed', type=int, default=None, help='Shuffle seed for reproducible sessions')
@click.pass_context
def practice(ctx, catalog, limit, seed):
    """Practice interview answers interactively.

    \b
    EXAMPLES:

    interview-eval practice --catalog questions.json
    interview-eval practice --catalog questions.json --limit 3 --seed 7
    """
    config = (ctx.obj or {}).get('config') or AppConfig()

    try:
        questions = select_voice_questions(
            load_questions(catalog),
            limit=limit or config.practice.session_size,
            rng=random.Random(seed),
            fallback_channels=config.practice.fallback_channels,
            min_answer_length=config.practice.min_answer_length,
        )
        if not questions:
            console.print("[yellow]No voice-suitable questions found in the catalog[/yellow]")
            return

        session = PracticeSession(questions, evaluator=AnswerEvaluator(config.evaluation))
        _run_session(session)

        console.print(format_session_summary(session.summary()))

    except InterviewEvalException as e:
        console.print(f"[red]Error: {e}[/red]")
        logger.error(f"Practice command failed: {e}")
        sys.exit(1)


def _run_session(session: PracticeSession) -> None:
    while True:
        question = session.current_question
        console.print(Panel(
            question.question,
            title=f"Question {session.current_index + 1}/{len(session.questions)}",
            subtitle=question.channel or None,
            border_style="blue",
        ))

        session.start_recording()
        session.add_transcript_segment(click.prompt("Your answer", default="", show_default=False))
        session.stop_recording()

        correction = click.prompt("Correct the transcript (Enter to keep)", default="", show_default=False)
        if correction.strip():
            session.edit_transcript(correction)

        if not session.transcript.strip():
            console.print("[yellow]Please provide an answer before submitting.[/yellow]")
            session.discard()
            if not click.confirm("Try again?", default=True):
                return
            continue

        result = session.submit()
        console.print(format_evaluation(result))

        choices = ['r', 'q'] + (['n'] if session.has_next else [])
        action = click.prompt(
            "[n]ext, [r]etry or [q]uit" if session.has_next else "[r]etry or [q]uit",
            type=click.Choice(choices), default='n' if session.has_next else 'q',
        )
        if action == 'q':
            return
        if action == 'r':
            session.retry()
        else:
            session.next_question()
