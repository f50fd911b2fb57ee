import typer

from termedit import __version__
from termedit.logging_config import setup_logging
from termedit.cli import reading, editing
from termedit.cli.config import CLIConfig

app = typer.Typer(no_args_is_help=True)


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all log output"),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Never colorize output (also via TERMEDIT_PLAIN or NO_COLOR env vars)"
    ),
):
    """
    termedit: query and edit term config files without touching their layout.

    Names are dotted paths built from tuple names, e.g. kernel.logger_level.
    """
    if quiet:
        setup_logging(suppress_console=True)
    elif verbose:
        setup_logging(level="DEBUG")

    if plain:
        CLIConfig.set_plain_mode(True)


# Read commands
app.command(name="list")(reading.list_cmd)
app.command(name="get")(reading.get_cmd)
app.command(name="search")(reading.search_cmd)

# Edit commands
app.command(name="add")(editing.add_cmd)
app.command(name="modify")(editing.modify_cmd)
app.command(name="remove")(editing.remove_cmd)


@app.command()
def version():
    """
    Prints the current version of termedit.
    """
    typer.echo(f"termedit v{__version__}")


if __name__ == "__main__":
    app()
