"""
CLI Entry Point

Main command-line interface for the interview answer evaluator
using Click framework with rich output formatting.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from .core.config import get_config, reload_config
from .core.exceptions import InterviewEvalException
from .utils.logging import setup_logging, get_logger
from .utils.help_text import show_help_with_markdown
from .commands import evaluate, keywords, practice, quality_gate, config as config_group

console = Console()
logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--help', '-h', is_flag=True, expose_value=False, is_eager=True,
              callback=show_help_with_markdown, help='Show this message and exit')
@click.pass_context
def cli(ctx, config, verbose, debug):
    """interview-eval - Spoken Interview Answer Evaluation"""
    ctx.ensure_object(dict)

    try:
        if config:
            app_config = reload_config(Path(config))
        else:
            app_config = get_config()

        if debug:
            app_config.debug = debug

        if verbose or debug:
            app_config.logging.level = 'DEBUG'
            app_config.logging.console_level = 'DEBUG' if debug else 'INFO'
        setup_logging(app_config)

        ctx.obj['config'] = app_config

    except InterviewEvalException as e:
        console.print(f"[red]Error initializing application: {str(e)}[/red]")
        sys.exit(1)

    if ctx.invoked_subcommand is None:
        _display_banner()


def _display_banner():
    """Display application banner."""
    banner = Panel.fit(
        "[bold blue]interview-eval[/bold blue]\n"
        "[dim]Spoken Interview Answer Evaluation[/dim]\n\n"
        "Use --help for available commands",
        title="Interview Practice",
        border_style="blue"
    )
    console.print(banner)


cli.add_command(evaluate)
cli.add_command(keywords)
cli.add_command(practice)
cli.add_command(quality_gate)
cli.add_command(config_group)


def main():
    """Main entry point with comprehensive error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except InterviewEvalException as e:
        logger.error(f"Application error: {str(e)}")
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)


if __name__ == '__main__':
    main()
