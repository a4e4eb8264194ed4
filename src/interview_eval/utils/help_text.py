from rich.console import Console
from rich.markdown import Markdown

console = Console()

HELP_MARKDOWN = """
# interview-eval - Spoken Interview Answer Evaluation

## QUICK START EXAMPLES

```bash
interview-eval evaluate -a "I would put a load balancer..." -r "A scalable design uses..."
interview-eval evaluate --answer-file answer.txt --reference-file ideal.txt -k api -k rest --breakdown
interview-eval keywords --reference-file ideal.txt --by-category
interview-eval practice --catalog questions.json --limit 5
interview-eval quality-gate post.json -q "How would you design a rate limiter?"
interview-eval config show --format yaml
```

## TIP
- Use `interview-eval COMMAND --help` for detailed options on any command.

## Options
- `--config, -c PATH`: Configuration file path
- `--verbose, -v`: Enable verbose logging
- `--debug`: Enable debug mode
- `--help`: Show this message and exit

## Commands
- evaluate      Evaluate a spoken (transcribed) answer.
- keywords      Show the keywords derived from a reference answer.
- practice      Practice interview answers interactively.
- quality-gate  Run the blog quality gate.
- config        Configuration management commands.
"""


def show_help_with_markdown(ctx, param, value):
    """Custom help callback that renders help text using Rich markdown"""
    if not value or ctx.resilient_parsing:
        return

    console.print(Markdown(HELP_MARKDOWN))
    ctx.exit()
