# ruff: noqa: F401 imported but unused
from .constants import (
    ASTRONOMICAL_UNIT_TO_METER_FACTOR,
    JULIAN_YEAR_IN_DAYS,
    LIGHTYEAR_TO_METER_FACTOR,
    PARSEC_TO_ASTRONOMICAL_UNITS_FACTOR,
    YARD_TO_METER_FACTOR,
)
from .length_unit import (
    LENGTH_UNIT_TYPES,
    AstronomicUnit,
    ImperialUnit,
    LengthUnit,
    MetricUnit,
    UnitParseError,
    all_length_units,
    greater_unit,
    is_length_unit,
    length_unit_from_str,
    length_unit_from_symbol,
    smaller_unit,
    unit_factor,
    unit_symbol,
    unit_system,
    units_of_system,
)
from .systems import UnitSystem
