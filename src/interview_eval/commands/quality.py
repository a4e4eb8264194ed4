"""
Quality Gate Command

Validate a generated blog post (JSON) before publishing.
"""

import asyncio
import sys

import click

from ..cli.formatting import console, format_json, format_quality_report, print_issues
from ..core.config import AppConfig
from ..core.exceptions import InterviewEvalException
from ..quality.content import load_blog
from ..quality.gate import QualityGate
from ..utils.logging import get_logger

logger = get_logger(__name__)


@click.command('quality-gate')
@click.argument('blog_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--question', '-q', required=True, help='Interview question the post answers')
@click.option('--skip-sources', is_flag=True, help='Do not check source URLs over the network')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.pass_context
def quality_gate(ctx, blog_file, question, skip_sources, output_format):
    """Run the blog quality gate. Exits with status 1 when the gate fails.

    \b
    EXAMPLES:

    interview-eval quality-gate post.json -q "How would you design a rate limiter?"
    interview-eval quality-gate post.json -q "..." --skip-sources --format json
    """
    config = (ctx.obj or {}).get('config') or AppConfig()

    try:
        blog = load_blog(blog_file)
        gate = QualityGate(config.quality_gate)
        report = asyncio.run(gate.validate(blog, question, check_sources=not skip_sources))
    except InterviewEvalException as e:
        console.print(f"[red]Error: {e}[/red]")
        logger.error(f"Quality gate command failed: {e}")
        sys.exit(1)

    if output_format == 'json':
        click.echo(format_json(report.to_dict()))
    else:
        console.print(format_quality_report(report))
        print_issues(report)

    if not report.passed:
        sys.exit(1)
