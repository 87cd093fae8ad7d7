"""
CLI Output Utilities

Reordered source and diffs go to stdout; everything else goes to stderr.
"""

import typer
from rich.console import Console
from rich.markup import escape

# soft_wrap keeps long messages (file paths, hints) on their original lines
_console = Console(stderr=True, soft_wrap=True, highlight=False)


def echo(text: str) -> None:
    """Writes text to stdout unchanged."""
    typer.echo(text, nl=False)


def info(message: str) -> None:
    _console.print(escape(message))


def warning(message: str) -> None:
    _console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def error(message: str) -> None:
    _console.print(f"[red]Error:[/red] {escape(message)}")
