"""
CLI Edit Commands

add, modify, remove
"""

from pathlib import Path
from typing import List, Optional

import typer

from termedit.logging_config import logger
from termedit.mutation import ConfigWriter
from termedit.query import Command
from termedit.schemas import EditOptions
from .common import load_document_or_exit, load_settings_or_exit, run_command
from .config import CLIConfig
from .output import print_diff


FILE_ARGUMENT = typer.Argument(..., help="Config file to edit", dir_okay=False)
NAME_ARGUMENT = typer.Argument(..., help="Exact dotted name")


def _output_option():
    return typer.Option(None, "--output", "-o", help="Write the result here instead of FILE", dir_okay=False)


def _stdout_option():
    return typer.Option(False, "--stdout", help="Print the resulting file instead of writing it")


def _diff_option():
    return typer.Option(False, "--diff", "-d", help="Print a unified diff instead of writing")


def _backup_option():
    return typer.Option(None, "--backup/--no-backup", help="Keep a timestamped copy in .termedit/backups")


def _edit(
    ctx: typer.Context,
    command: Command,
    file: Path,
    name: str,
    args: List[str],
    output: Optional[Path],
    stdout: bool,
    diff: bool,
    backup: Optional[bool],
    force: bool = False,
) -> None:
    overrides = {} if backup is None else {"backup_enabled": backup}
    settings = load_settings_or_exit(ctx, overrides)
    options = EditOptions(force=force, indent_unit=settings["indent_unit"])

    text = load_document_or_exit(file)
    result = run_command(ctx, text, command, name, args, options)

    if not result.write_required:
        logger.info(f"No changes to {file}")
        if stdout:
            typer.echo(text, nl=False)
        return

    writer = ConfigWriter(overrides)
    if diff and not CLIConfig.is_plain_mode():
        print_diff(writer.unified_diff(str(file), text, result.text))
        return

    try:
        writer.save(file, text, result.text, output=output, to_stdout=stdout, diff=diff)
    except OSError as e:
        logger.error(f"Cannot write {output or file}: {e}")
        raise typer.Exit(code=1)


def add_cmd(
    ctx: typer.Context,
    file: Path = FILE_ARGUMENT,
    name: str = NAME_ARGUMENT,
    values: List[str] = typer.Argument(..., help="Literals for the new {...} entry"),
    output: Optional[Path] = _output_option(),
    stdout: bool = _stdout_option(),
    diff: bool = _diff_option(),
    backup: Optional[bool] = _backup_option(),
):
    """
    Append a new {VALUES...} entry to the list held by NAME.

    A single value gets an empty list as its second element.
    """
    _edit(ctx, Command.ADD, file, name, list(values), output, stdout, diff, backup)


def modify_cmd(
    ctx: typer.Context,
    file: Path = FILE_ARGUMENT,
    name: str = NAME_ARGUMENT,
    values: List[str] = typer.Argument(..., help="Replacement literals by position; _ keeps a value"),
    force: bool = typer.Option(False, "--force", "-f", help="Allow a value to change kind"),
    output: Optional[Path] = _output_option(),
    stdout: bool = _stdout_option(),
    diff: bool = _diff_option(),
    backup: Optional[bool] = _backup_option(),
):
    """
    Replace the values of the entry named NAME.
    """
    _edit(ctx, Command.MODIFY, file, name, list(values), output, stdout, diff, backup, force=force)


def remove_cmd(
    ctx: typer.Context,
    file: Path = FILE_ARGUMENT,
    name: str = NAME_ARGUMENT,
    output: Optional[Path] = _output_option(),
    stdout: bool = _stdout_option(),
    diff: bool = _diff_option(),
    backup: Optional[bool] = _backup_option(),
):
    """
    Remove the entry named NAME together with its separator.
    """
    _edit(ctx, Command.REMOVE, file, name, [], output, stdout, diff, backup)
