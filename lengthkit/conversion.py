"""Conversion of length values between units of the same or of different systems.

Within a system a value is scaled by the ratio of the two unit factors.
Conversions between systems are staged through one fixed pivot unit per
system (meter, yard and lightyear): the value is first expressed in the pivot
unit of the destination system and then scaled within that system.

Examples:
    ```
    value, unit = convert(1, ImperialUnit.MILE, MetricUnit.KILOMETER)
    assert unit == MetricUnit.KILOMETER
    ```
"""

from typing import Tuple, TypeVar, Union

import numpy as np
from numpy.typing import ArrayLike

from .units import (
    LIGHTYEAR_TO_METER_FACTOR,
    YARD_TO_METER_FACTOR,
    AstronomicUnit,
    ImperialUnit,
    LengthUnit,
    MetricUnit,
    UnitSystem,
    is_length_unit,
    unit_factor,
    unit_system,
)

_Values = TypeVar("_Values", float, np.ndarray)

_PIVOT_UNITS = {
    UnitSystem.METRIC: MetricUnit.METER,
    UnitSystem.IMPERIAL: ImperialUnit.YARD,
    UnitSystem.ASTRONOMIC: AstronomicUnit.LIGHTYEAR,
}


def pivot_unit(system: UnitSystem) -> LengthUnit:
    """Returns the unit through which conversions into `system` are staged."""
    return _PIVOT_UNITS[system]


def _check_units(source_unit: object, destination_unit: object) -> None:
    for unit in (source_unit, destination_unit):
        if not is_length_unit(unit):
            raise TypeError(f"Expected a length unit, got {unit!r}.")


def _scale(
    value: _Values, source_unit: LengthUnit, destination_unit: LengthUnit
) -> _Values:
    factor = unit_factor(source_unit) * (1.0 / unit_factor(destination_unit))
    return value * factor


def _to_pivot_of(
    value: _Values, source_unit: LengthUnit, destination_system: UnitSystem
) -> Tuple[_Values, LengthUnit]:
    source_system = unit_system(source_unit)

    if destination_system is UnitSystem.ASTRONOMIC:
        # Imperial sources are expressed in meters as well, not in yards.
        meters = _convert(value, source_unit, MetricUnit.METER)
        return meters / LIGHTYEAR_TO_METER_FACTOR, AstronomicUnit.LIGHTYEAR

    if destination_system is UnitSystem.IMPERIAL:
        if source_system is UnitSystem.ASTRONOMIC:
            lightyears = _convert(value, source_unit, AstronomicUnit.LIGHTYEAR)
            meters = lightyears * LIGHTYEAR_TO_METER_FACTOR
        else:
            meters = _convert(value, source_unit, MetricUnit.METER)
        return meters / YARD_TO_METER_FACTOR, ImperialUnit.YARD

    if source_system is UnitSystem.ASTRONOMIC:
        lightyears = _convert(value, source_unit, AstronomicUnit.LIGHTYEAR)
        return lightyears * LIGHTYEAR_TO_METER_FACTOR, MetricUnit.METER
    yards = _convert(value, source_unit, ImperialUnit.YARD)
    return yards * YARD_TO_METER_FACTOR, MetricUnit.METER


def _convert(
    value: _Values, source_unit: LengthUnit, destination_unit: LengthUnit
) -> _Values:
    if source_unit == destination_unit:
        return value

    destination_system = unit_system(destination_unit)
    if unit_system(source_unit) is not destination_system:
        value, source_unit = _to_pivot_of(value, source_unit, destination_system)

    return _scale(value, source_unit, destination_unit)


def convert(
    value: float, source_unit: LengthUnit, destination_unit: LengthUnit
) -> Tuple[float, LengthUnit]:
    """Converts `value` given in `source_unit` to `destination_unit`.

    Any two length units are convertible. Converting to the same unit returns the
    value untouched, so no floating point error is introduced in that case.

    Args:
        value: The magnitude in `source_unit`.
        source_unit: The unit `value` is given in.
        destination_unit: The unit to convert to.

    Returns:
        A tuple of the converted value and `destination_unit`.
    """
    _check_units(source_unit, destination_unit)
    return _convert(float(value), source_unit, destination_unit), destination_unit


def convert_array(
    values: Union[ArrayLike, float],
    source_unit: LengthUnit,
    destination_unit: LengthUnit,
) -> np.ndarray:
    """Elementwise version of `convert` for float64 arrays.

    Every element is converted with the same sequence of floating point
    operations as `convert` would use, so both give identical results. The
    input is never modified, a new array is returned in any case.
    """
    _check_units(source_unit, destination_unit)
    array = np.array(values, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        return np.asarray(_convert(array, source_unit, destination_unit))
