"""This module normalizes a length to the unit of its system that reads best."""

from typing import Any

import typer
from typing_extensions import Annotated

from ._utils import parse_length


def main(
    *,
    length: Annotated[
        Any,
        typer.Argument(
            help="Length to normalize, e.g. 5000m.",
            show_default=False,
            parser=parse_length,
        ),
    ],
) -> None:
    """Normalize a length, e.g. 5000m becomes 5 km."""

    typer.echo(str(length.normalize()))
