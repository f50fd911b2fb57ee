"""
CLI Read Commands

list, get, search
"""

from pathlib import Path
from typing import List, Optional

import typer

from termedit.query import Command
from termedit.schemas import EditOptions
from .common import load_document_or_exit, load_settings_or_exit, run_command
from .output import echo_lines


FILE_ARGUMENT = typer.Argument(..., help="Config file to read", dir_okay=False)


def _show_all_option():
    return typer.Option(False, "--all", "-a", help="Also show containers without direct values (as name.*)")


def _line_numbers_option():
    return typer.Option(False, "--line-numbers", "-l", help="Prefix each record with its line number")


def _regex_option():
    return typer.Option(False, "--regex", help="Treat the name as a regular expression")


def _read(
    ctx: typer.Context,
    command: Command,
    file: Path,
    target: str,
    args: List[str],
    show_all: bool,
    line_numbers: bool,
    regex: bool,
) -> None:
    settings = load_settings_or_exit(ctx)
    options = EditOptions(
        show_all=show_all,
        regex=regex,
        line_numbers=line_numbers or settings["line_numbers"],
        indent_unit=settings["indent_unit"],
    )
    text = load_document_or_exit(file)
    result = run_command(ctx, text, command, target, args, options)
    echo_lines(result.render_records(options.line_numbers))


def list_cmd(
    ctx: typer.Context,
    file: Path = FILE_ARGUMENT,
    name: str = typer.Argument("", help="Name prefix; everything when omitted"),
    show_all: bool = _show_all_option(),
    line_numbers: bool = _line_numbers_option(),
    regex: bool = _regex_option(),
):
    """
    List every entry whose dotted name starts with NAME.
    """
    _read(ctx, Command.LIST, file, name, [], show_all, line_numbers, regex)


def get_cmd(
    ctx: typer.Context,
    file: Path = FILE_ARGUMENT,
    name: str = typer.Argument(..., help="Exact dotted name"),
    nth: Optional[List[str]] = typer.Argument(None, help="1-based value positions to print"),
    show_all: bool = _show_all_option(),
    line_numbers: bool = _line_numbers_option(),
    regex: bool = _regex_option(),
):
    """
    Print the values of the entry named NAME, optionally only the NTH ones.
    """
    _read(ctx, Command.GET, file, name, list(nth or []), show_all, line_numbers, regex)


def search_cmd(
    ctx: typer.Context,
    file: Path = FILE_ARGUMENT,
    substring: str = typer.Argument(..., help="Text to look for inside dotted names"),
    show_all: bool = _show_all_option(),
    line_numbers: bool = _line_numbers_option(),
    regex: bool = _regex_option(),
):
    """
    List every entry whose dotted name contains SUBSTRING.
    """
    _read(ctx, Command.SEARCH, file, substring, [], show_all, line_numbers, regex)
