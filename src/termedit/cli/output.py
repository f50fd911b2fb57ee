"""
CLI Output Utilities

Plain-aware output functions. Records and file text always go to stdout as
bare text; only the diff view gets rich highlighting, and only on a terminal.
"""

from typing import Iterable

import typer
from rich.console import Console
from rich.syntax import Syntax

from termedit.cli.config import CLIConfig


_console = Console()
_err_console = Console(stderr=True)


def echo_lines(lines: Iterable[str]) -> None:
    """Print one line per item, unformatted."""
    for line in lines:
        typer.echo(line)


def print_diff(diff_text: str) -> None:
    """
    Print a unified diff.

    In plain mode the diff is written verbatim; otherwise it is highlighted.
    """
    if not diff_text:
        return
    if CLIConfig.is_plain_mode():
        typer.echo(diff_text, nl=False)
    else:
        _console.print(Syntax(diff_text, "diff", theme="ansi_dark", background_color="default"))


def print_usage(usage: str) -> None:
    """Print command usage to stderr after an input error."""
    if CLIConfig.is_plain_mode():
        typer.echo(usage, err=True)
    else:
        _err_console.print(usage, markup=False, highlight=False)
