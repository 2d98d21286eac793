"""Console output and prompt helpers.

User-facing text goes to stderr through click so stdout stays clean and
tests can capture everything with CliRunner.
"""

import sys
from typing import TypeVar

import click
from rich.console import Console
from rich.table import Table

T = TypeVar("T")


def user_output(message: str = "") -> None:
    """Print a user-facing message to stderr."""
    click.echo(message, err=True)


def user_confirm(prompt: str, default: bool = False) -> bool:
    """Ask a yes/no question on stderr.

    stderr is flushed first so buffered output is visible above the prompt.

    Raises:
        click.Abort: If the user interrupts the prompt
    """
    sys.stderr.flush()
    return click.confirm(prompt, default=default, err=True)


def user_select(message: str, choices: list[tuple[str, T]]) -> T:
    """Show numbered choices and return the value of the one picked.

    Args:
        message: Question shown above the choices
        choices: (label, value) pairs in display order

    Raises:
        click.Abort: If the user interrupts the prompt
    """
    console = Console(stderr=True, highlight=False)

    user_output(message)
    table = Table(show_header=False, box=None)
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("choice", style="cyan", no_wrap=True)
    for i, (label, _) in enumerate(choices, 1):
        table.add_row(str(i), label)
    console.print(table)

    sys.stderr.flush()
    selection = click.prompt(
        "Select number",
        type=click.IntRange(1, len(choices)),
        err=True,
    )
    return choices[selection - 1][1]
