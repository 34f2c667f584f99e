"""Utilities to work with the CLI of lengthkit."""

from enum import Enum

import typer

from ..length import Length
from ..units import LengthUnit, UnitParseError, UnitSystem, length_unit_from_str


class SystemChoice(str, Enum):
    """Enum of the unit systems selectable on the command line."""

    METRIC = "metric"
    IMPERIAL = "imperial"
    ASTRONOMIC = "astronomic"

    def to_unit_system(self) -> UnitSystem:
        return UnitSystem(self.value)


def parse_length(length_str: str) -> Length:
    """Parses str input like 23.5km to Length."""

    length = Length.from_str(length_str)
    if length is None:
        raise typer.BadParameter(
            f"Expected a length formatted like 23.5km or '2.3 ly' but got: {length_str}"
        )
    return length


def parse_unit(unit_str: str) -> LengthUnit:
    """Parses str input like km or kilometer to a length unit."""

    try:
        return length_unit_from_str(unit_str)
    except UnitParseError as err:
        raise typer.BadParameter(
            "The value could not be parsed to a unit. "
            "Please pass a symbol like km or a name like kilometer."
        ) from err
