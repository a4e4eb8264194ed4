"""
Configuration Commands

Show and validate the active configuration.
"""

import json
import sys
from dataclasses import asdict

import click
import yaml
from rich.table import Table

from ..cli.formatting import console
from ..core.config import AppConfig, validate_config


def _flatten(data, prefix=""):
    for key, value in data.items():
        name = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            yield from _flatten(value, name)
        else:
            yield name, value


@click.group()
def config():
    """Configuration management commands."""
    pass


@config.command()
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'yaml']), default='table',
              help='Output format')
@click.pass_context
def show(ctx, output_format):
    """Show current configuration.

    \b
    EXAMPLES:

    interview-eval config show
    interview-eval config show --format yaml
    """
    app_config = (ctx.obj or {}).get('config') or AppConfig()
    data = asdict(app_config)

    if output_format == 'json':
        click.echo(json.dumps(data, indent=2))
    elif output_format == 'yaml':
        click.echo(yaml.safe_dump(data, sort_keys=False))
    else:
        table = Table(title="Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")
        for name, value in _flatten(data):
            table.add_row(name, str(value))
        console.print(table)


@config.command()
@click.pass_context
def validate(ctx):
    """Validate the active configuration."""
    app_config = (ctx.obj or {}).get('config') or AppConfig()
    errors = validate_config(app_config)

    if errors:
        console.print("[red]Configuration validation failed:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        sys.exit(1)

    console.print("[green]✓ Configuration is valid[/green]")
