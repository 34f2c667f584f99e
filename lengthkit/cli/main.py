"""This module delivers a CLI to convert and normalize lengths."""

import typer

from ..utils import setup_logging
from . import convert, normalize, sum_lengths, units


def version_callback(value: bool) -> None:
    if value:
        from ..version import __version__

        typer.echo(__version__)
        raise typer.Exit()


app = typer.Typer(no_args_is_help=True, pretty_exceptions_short=False)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
        is_flag=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """lengthkit CLI tool."""
    setup_logging(verbose)


app.command("convert")(convert.main)
app.command("normalize")(normalize.main)
app.command("sum")(sum_lengths.main)
app.command("units")(units.main)
