"""This module adds up lengths given in arbitrary units."""

from typing import List

import typer
from typing_extensions import Annotated

from ._utils import parse_length


def main(
    *,
    lengths: Annotated[
        List[str],
        typer.Argument(
            help="Lengths to add up. The result is given in the unit of the first one.",
            show_default=False,
        ),
    ],
    normalize: Annotated[
        bool,
        typer.Option(help="Normalize the total to the unit that reads best."),
    ] = False,
) -> None:
    """Add up lengths."""

    first, *rest = [parse_length(length_str) for length_str in lengths]
    total = first.copy()
    for length in rest:
        total += length
    if normalize:
        total.normalize_inplace()
    typer.echo(str(total))
