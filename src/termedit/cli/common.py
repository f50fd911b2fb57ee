"""
Common CLI helpers shared by the read and edit command modules.

Every command funnels through run_command(), which is the single place a
TermEditError is turned into a log line and an exit status.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, NoReturn

import typer

from termedit.exceptions import TermEditError
from termedit.logging_config import logger
from termedit.mutation import EditSession, get_mutation_config, read_document
from termedit.query import Command
from termedit.schemas import EditOptions, EditResult
from .output import print_usage


def fail(ctx: typer.Context, error: TermEditError) -> NoReturn:
    """
    Report a fatal error and exit.

    Input errors also print the command's usage line.

    Raises:
        typer.Exit: Always, with the error's exit code
    """
    logger.error(str(error))
    if error.show_usage:
        print_usage(ctx.get_usage())
    raise typer.Exit(code=error.exit_code)


def load_settings_or_exit(ctx: typer.Context, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merged runtime settings, or exit on a bad user config."""
    try:
        return get_mutation_config(overrides)
    except TermEditError as e:
        fail(ctx, e)


def load_document_or_exit(file: Path) -> str:
    """
    Read a config file or exit with code 1.

    Raises:
        typer.Exit: If the file cannot be read
    """
    try:
        return read_document(file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {file}: {e}")
        raise typer.Exit(code=1)


def run_command(
    ctx: typer.Context,
    text: str,
    command: Command,
    target: str,
    args: List[str],
    options: EditOptions,
) -> EditResult:
    """
    Run one EditSession, exiting on any fatal error.

    Args:
        ctx: Typer context (for usage output)
        text: Document text
        command: Command to run
        target: Name pattern
        args: Positional command arguments
        options: Session switches

    Returns:
        The session result
    """
    try:
        return EditSession(text, command, target, args, options).run()
    except TermEditError as e:
        fail(ctx, e)
