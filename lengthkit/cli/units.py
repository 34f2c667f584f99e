"""This module lists the supported length units."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from ..units import UnitSystem, units_of_system
from ._utils import SystemChoice


def main(
    *,
    system: Annotated[
        Optional[SystemChoice],
        typer.Option(help="Only list the units of this system."),
    ] = None,
) -> None:
    """List the supported units, from the smallest to the greatest per system."""

    systems = list(UnitSystem) if system is None else [system.to_unit_system()]

    table = Table("Symbol", "Name", "System", "Factor")
    for unit_system in systems:
        for unit in units_of_system(unit_system):
            table.add_row(unit.symbol, unit.value, unit_system.value, repr(unit.factor))

    Console().print(table)
