"""
Evaluation Commands

Score a single answer against a reference answer, or preview the keywords
that would be derived from a reference answer.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.table import Table

from ..cli.formatting import console, format_evaluation, format_json
from ..core.config import AppConfig
from ..core.exceptions import InterviewEvalException, ValidationError
from ..evaluation.evaluator import AnswerEvaluator
from ..evaluation.keywords import extract_key_terms, extract_key_terms_by_category, extract_capitalized_phrases
from ..utils.logging import get_logger

logger = get_logger(__name__)


def read_text_option(value: Optional[str], path: Optional[str], name: str) -> str:
    """Return the inline value or the content of the file given for it."""
    if value is not None and path is not None:
        raise click.UsageError(f"Use either --{name} or --{name}-file, not both")
    if path is not None:
        return Path(path).read_text(encoding='utf-8')
    if value is not None:
        return value
    raise click.UsageError(f"Missing --{name} or --{name}-file")


def _config(ctx) -> AppConfig:
    return (ctx.obj or {}).get('config') or AppConfig()


@click.command()
@click.option('--answer', '-a', help='Candidate answer text')
@click.option('--answer-file', type=click.Path(exists=True, dir_okay=False), help='File with the candidate answer')
@click.option('--reference', '-r', help='Reference (ideal) answer text')
@click.option('--reference-file', type=click.Path(exists=True, dir_okay=False), help='File with the reference answer')
@click.option('--keyword', '-k', 'keywords', multiple=True, help='Curated keyword (repeatable)')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.option('--breakdown', is_flag=True, help='Show the scoring factors')
@click.pass_context
def evaluate(ctx, answer, answer_file, reference, reference_file, keywords, output_format, breakdown):
    """Evaluate a spoken (transcribed) answer.

    \b
    EXAMPLES:

    interview-eval evaluate -a "I would use a load balancer..." -r "A scalable design..."
    interview-eval evaluate --answer-file answer.txt --reference-file ideal.txt -k api -k rest
    interview-eval evaluate --answer-file answer.txt --reference-file ideal.txt --format json
    """
    try:
        candidate = read_text_option(answer, answer_file, 'answer')
        ideal = read_text_option(reference, reference_file, 'reference')

        if not candidate.strip():
            raise ValidationError("Please provide an answer before submitting.", field_name='answer')

        evaluator = AnswerEvaluator(_config(ctx).evaluation)
        result, details = evaluator.evaluate_with_breakdown(candidate, ideal, list(keywords) or None)

        if output_format == 'json':
            data = result.to_dict()
            if breakdown and details is not None:
                data['breakdown'] = {
                    'keywordCoverage': details.keyword_coverage,
                    'keywordPercent': details.keyword_percent,
                    'wordOverlap': details.word_overlap,
                    'lengthScore': details.length_score,
                    'shortAnswerPenalty': details.short_answer_penalty,
                    'rawScore': details.raw_score,
                    'keywordSource': details.keyword_source.value,
                    'coveredTerms': [str(t) for t in details.covered_terms],
                    'missedTerms': [str(t) for t in details.missed_terms],
                }
            click.echo(format_json(data))
        else:
            console.print(format_evaluation(result, details if breakdown else None))

    except InterviewEvalException as e:
        console.print(f"[red]Error: {e}[/red]")
        logger.error(f"Evaluate command failed: {e}")
        sys.exit(1)


@click.command()
@click.option('--reference', '-r', help='Reference (ideal) answer text')
@click.option('--reference-file', type=click.Path(exists=True, dir_okay=False), help='File with the reference answer')
@click.option('--by-category', is_flag=True, help='Group vocabulary hits by category')
def keywords(reference, reference_file, by_category):
    """Show the keywords derived from a reference answer.

    \b
    EXAMPLES:

    interview-eval keywords -r "Kubernetes schedules Docker containers..."
    interview-eval keywords --reference-file ideal.txt --by-category
    """
    text = read_text_option(reference, reference_file, 'reference')

    if not by_category:
        terms = extract_key_terms(text)
        if not terms:
            console.print("[yellow]No keywords found[/yellow]")
            return
        for term in terms:
            click.echo(term)
        return

    table = Table(title="Derived Keywords", show_header=True, header_style="bold blue")
    table.add_column("Category", style="cyan")
    table.add_column("Terms")
    for category, terms in extract_key_terms_by_category(text).items():
        table.add_row(category.replace('_', ' '), ", ".join(terms))
    phrases = extract_capitalized_phrases(text)
    if phrases:
        table.add_row("capitalized phrases", ", ".join(phrases))
    console.print(table)
