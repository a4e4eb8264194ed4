"""
CLI Output Formatting

Rich formatting for evaluation results, practice summaries and quality
gate reports.
"""

import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..evaluation.evaluator import EvaluationResult
from ..evaluation.scorer import ScoreBreakdown, Verdict
from ..practice.session import SessionSummary
from ..quality.gate import QualityReport

console = Console()

VERDICT_STYLES = {
    Verdict.STRONG_HIRE: "bold green",
    Verdict.HIRE: "green",
    Verdict.LEAN_HIRE: "yellow",
    Verdict.LEAN_NO_HIRE: "dark_orange",
    Verdict.NO_HIRE: "red",
}


def score_style(score: float) -> str:
    """Color band for a 0-100 score."""
    if score >= 70:
        return "green"
    if score >= 55:
        return "bright_green"
    if score >= 40:
        return "yellow"
    if score >= 25:
        return "dark_orange"
    return "red"


def format_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2, default=str)


def format_evaluation(result: EvaluationResult, breakdown: Optional[ScoreBreakdown] = None) -> Panel:
    """
    Format an evaluation result as a Rich panel.

    Args:
        result: The evaluation to render
        breakdown: Optional scoring factors to include

    Returns:
        Rich Panel object
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    verdict_style = VERDICT_STYLES[result.verdict]
    table.add_row("Verdict", Text(result.verdict.label, style=verdict_style))
    table.add_row("Score", Text(f"{result.score}/100", style=score_style(result.score)))
    table.add_row("Feedback", result.feedback)
    table.add_row("Covered", ", ".join(result.key_points_covered) or "-")
    table.add_row("Missed", ", ".join(result.key_points_missed) or "-")
    table.add_row("Strengths", "\n".join(f"• {s}" for s in result.strengths))
    table.add_row("Improve", "\n".join(f"• {s}" for s in result.improvements))

    if breakdown is not None:
        table.add_row("", "")
        table.add_row("Keywords", f"{len(breakdown.covered_terms)}/{breakdown.keyword_count} "
                                  f"({breakdown.keyword_source.value}, {breakdown.keyword_percent:.0f}%)")
        table.add_row("Overlap", f"{breakdown.word_overlap:.2f}")
        table.add_row("Length", f"{breakdown.length_score:.2f} ({breakdown.candidate_word_count} words)")
        table.add_row("Penalty", f"×{breakdown.short_answer_penalty:g}")

    return Panel(table, title="Answer Evaluation", border_style=verdict_style)


def format_session_summary(summary: SessionSummary) -> Table:
    table = Table(title="Practice Summary", show_header=True, header_style="bold blue")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Questions", f"{summary.questions_attempted}/{summary.total_questions}")
    table.add_row("Attempts", str(summary.attempts))
    table.add_row("Average score", f"{summary.average_score:.1f}")
    table.add_row("Best score", str(summary.best_score))
    table.add_row("Best verdict", summary.best_verdict.label if summary.best_verdict else "-")
    for verdict in Verdict:
        count = summary.verdict_distribution.get(verdict.value, 0)
        if count:
            table.add_row(f"  {verdict.label}", str(count))

    return table


def format_quality_report(report: QualityReport) -> Table:
    status = "[green]PASSED[/green]" if report.passed else "[red]FAILED[/red]"
    table = Table(title=f"Quality Gate: {status}", show_header=True, header_style="bold blue")
    table.add_column("Check", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Issues", justify="right", style="red")

    for check in (report.structure, report.readability, report.coherence, report.technical):
        table.add_row(check.name.title(), Text(f"{check.score:g}", style=score_style(check.score)),
                      str(len(check.issues)))

    sources = report.sources
    checked = "" if sources.checked else " (not checked)"
    table.add_row("Sources", f"{len(sources.valid)}/{sources.total}{checked}", str(len(sources.invalid)))
    table.add_row("Citations", str(report.citations.details.get('inline', 0)), str(len(report.citations.issues)))
    table.add_row("Overall", Text(f"{report.overall_score:.1f}", style=score_style(report.overall_score)), "")

    return table


def print_issues(report: QualityReport) -> None:
    if report.issues:
        console.print(f"\n[red]Issues ({len(report.issues)}):[/red]")
        for issue in report.issues:
            console.print(f"  • {issue}")
    if report.warnings:
        console.print(f"\n[yellow]Warnings ({len(report.warnings)}):[/yellow]")
        for warning in report.warnings:
            console.print(f"  • {warning}")
