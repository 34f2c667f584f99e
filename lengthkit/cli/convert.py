"""This module converts a length to another unit."""

import logging
from typing import Any

import typer
from typing_extensions import Annotated

from ._utils import parse_length, parse_unit

logger = logging.getLogger(__name__)


def main(
    *,
    length: Annotated[
        Any,
        typer.Argument(
            help="Length to convert, e.g. 23.5km or '2.3 ly'.",
            show_default=False,
            parser=parse_length,
        ),
    ],
    unit: Annotated[
        Any,
        typer.Argument(
            help="Unit to convert to, given as symbol (mi) or name (mile).",
            show_default=False,
            parser=parse_unit,
        ),
    ],
    normalize: Annotated[
        bool,
        typer.Option(help="Normalize the converted length to the unit that reads best."),
    ] = False,
) -> None:
    """Convert a length to another unit."""

    converted = length.to(unit)
    logger.debug(f"Converted {length.original_string!r} to {converted}.")
    if normalize:
        converted.normalize_inplace()
    typer.echo(str(converted))
