from enum import Enum
from typing import Dict, Optional, Tuple, Union, cast

from .constants import (
    ASTRONOMICAL_UNIT_TO_LIGHTYEAR_FACTOR,
    KILOPARSEC_TO_LIGHTYEAR_FACTOR,
    LIGHTDAY_TO_LIGHTYEAR_FACTOR,
    LIGHTHOUR_TO_LIGHTYEAR_FACTOR,
    LIGHTMINUTE_TO_LIGHTYEAR_FACTOR,
    LIGHTSECOND_TO_LIGHTYEAR_FACTOR,
    MEGAPARSEC_TO_LIGHTYEAR_FACTOR,
    PARSEC_TO_LIGHTYEAR_FACTOR,
)
from .systems import UnitSystem


class UnitParseError(ValueError):
    """Raised when a string does not name a known length unit."""


class _LengthUnitMixin:
    """Table lookups shared by the three unit enums."""

    @property
    def factor(self) -> float:
        """Factor relative to the reference unit of the unit's own system."""
        return unit_factor(cast("LengthUnit", self))

    @property
    def system(self) -> UnitSystem:
        return unit_system(cast("LengthUnit", self))

    @property
    def symbol(self) -> str:
        return unit_symbol(cast("LengthUnit", self))

    @property
    def smaller_unit(self) -> Optional["LengthUnit"]:
        return smaller_unit(cast("LengthUnit", self))

    @property
    def greater_unit(self) -> Optional["LengthUnit"]:
        return greater_unit(cast("LengthUnit", self))

    @property
    def is_metric(self) -> bool:
        return isinstance(self, MetricUnit)

    @property
    def is_imperial(self) -> bool:
        return isinstance(self, ImperialUnit)

    @property
    def is_astronomic(self) -> bool:
        return isinstance(self, AstronomicUnit)

    def __str__(self) -> str:
        return self.symbol


# Members of each enum are declared from the smallest to the greatest unit,
# the declaration order defines the ladder of the system.


class MetricUnit(_LengthUnitMixin, Enum):
    YOCTOMETER = "yoctometer"
    ZEPTOMETER = "zeptometer"
    ATTOMETER = "attometer"
    FEMTOMETER = "femtometer"
    PICOMETER = "picometer"
    NANOMETER = "nanometer"
    MICROMETER = "micrometer"
    MILLIMETER = "millimeter"
    CENTIMETER = "centimeter"
    DECIMETER = "decimeter"
    METER = "meter"
    DECAMETER = "decameter"
    HECTOMETER = "hectometer"
    KILOMETER = "kilometer"
    MEGAMETER = "megameter"
    GIGAMETER = "gigameter"
    TERAMETER = "terameter"
    PETAMETER = "petameter"
    EXAMETER = "exameter"
    ZETTAMETER = "zettameter"
    YOTTAMETER = "yottameter"


class ImperialUnit(_LengthUnitMixin, Enum):
    INCH = "inch"
    FOOT = "foot"
    YARD = "yard"
    MILE = "mile"


class AstronomicUnit(_LengthUnitMixin, Enum):
    ASTRONOMICAL_UNIT = "astronomical_unit"
    LIGHTSECOND = "lightsecond"
    LIGHTMINUTE = "lightminute"
    LIGHTHOUR = "lighthour"
    LIGHTDAY = "lightday"
    LIGHTYEAR = "lightyear"
    PARSEC = "parsec"
    KILOPARSEC = "kiloparsec"
    MEGAPARSEC = "megaparsec"


LengthUnit = Union[MetricUnit, ImperialUnit, AstronomicUnit]

LENGTH_UNIT_TYPES = (MetricUnit, ImperialUnit, AstronomicUnit)

_SYSTEM_TO_UNIT_TYPE = {
    UnitSystem.METRIC: MetricUnit,
    UnitSystem.IMPERIAL: ImperialUnit,
    UnitSystem.ASTRONOMIC: AstronomicUnit,
}

_UNIT_TYPE_TO_SYSTEM = {
    unit_type: system for system, unit_type in _SYSTEM_TO_UNIT_TYPE.items()
}

# Metric factors are in meters, imperial factors in inches and astronomic
# factors in lightyears.
_LENGTH_UNIT_TO_REFERENCE: Dict[LengthUnit, float] = {
    MetricUnit.YOCTOMETER: 1e-24,
    MetricUnit.ZEPTOMETER: 1e-21,
    MetricUnit.ATTOMETER: 1e-18,
    MetricUnit.FEMTOMETER: 1e-15,
    MetricUnit.PICOMETER: 1e-12,
    MetricUnit.NANOMETER: 1e-9,
    MetricUnit.MICROMETER: 1e-6,
    MetricUnit.MILLIMETER: 0.001,
    MetricUnit.CENTIMETER: 0.01,
    MetricUnit.DECIMETER: 0.1,
    MetricUnit.METER: 1.0,
    MetricUnit.DECAMETER: 10.0,
    MetricUnit.HECTOMETER: 100.0,
    MetricUnit.KILOMETER: 1e3,
    MetricUnit.MEGAMETER: 1e6,
    MetricUnit.GIGAMETER: 1e9,
    MetricUnit.TERAMETER: 1e12,
    MetricUnit.PETAMETER: 1e15,
    MetricUnit.EXAMETER: 1e18,
    MetricUnit.ZETTAMETER: 1e21,
    MetricUnit.YOTTAMETER: 1e24,
    ImperialUnit.INCH: 1.0,
    ImperialUnit.FOOT: 12.0,
    ImperialUnit.YARD: 36.0,
    ImperialUnit.MILE: 63360.0,
    AstronomicUnit.ASTRONOMICAL_UNIT: ASTRONOMICAL_UNIT_TO_LIGHTYEAR_FACTOR,
    AstronomicUnit.LIGHTSECOND: LIGHTSECOND_TO_LIGHTYEAR_FACTOR,
    AstronomicUnit.LIGHTMINUTE: LIGHTMINUTE_TO_LIGHTYEAR_FACTOR,
    AstronomicUnit.LIGHTHOUR: LIGHTHOUR_TO_LIGHTYEAR_FACTOR,
    AstronomicUnit.LIGHTDAY: LIGHTDAY_TO_LIGHTYEAR_FACTOR,
    AstronomicUnit.LIGHTYEAR: 1.0,
    AstronomicUnit.PARSEC: PARSEC_TO_LIGHTYEAR_FACTOR,
    AstronomicUnit.KILOPARSEC: KILOPARSEC_TO_LIGHTYEAR_FACTOR,
    AstronomicUnit.MEGAPARSEC: MEGAPARSEC_TO_LIGHTYEAR_FACTOR,
}

_UNIT_TO_SYMBOL_MAP: Dict[LengthUnit, str] = {
    MetricUnit.YOCTOMETER: "ym",
    MetricUnit.ZEPTOMETER: "zm",
    MetricUnit.ATTOMETER: "am",
    MetricUnit.FEMTOMETER: "fm",
    MetricUnit.PICOMETER: "pm",
    MetricUnit.NANOMETER: "nm",
    MetricUnit.MICROMETER: "µm",
    MetricUnit.MILLIMETER: "mm",
    MetricUnit.CENTIMETER: "cm",
    MetricUnit.DECIMETER: "dm",
    MetricUnit.METER: "m",
    MetricUnit.DECAMETER: "dam",
    MetricUnit.HECTOMETER: "hm",
    MetricUnit.KILOMETER: "km",
    MetricUnit.MEGAMETER: "Mm",
    MetricUnit.GIGAMETER: "Gm",
    MetricUnit.TERAMETER: "Tm",
    MetricUnit.PETAMETER: "Pm",
    MetricUnit.EXAMETER: "Em",
    MetricUnit.ZETTAMETER: "Zm",
    MetricUnit.YOTTAMETER: "Ym",
    ImperialUnit.INCH: "in",
    ImperialUnit.FOOT: "ft",
    ImperialUnit.YARD: "yd",
    ImperialUnit.MILE: "mi",
    AstronomicUnit.ASTRONOMICAL_UNIT: "au",
    AstronomicUnit.LIGHTSECOND: "ls",
    AstronomicUnit.LIGHTMINUTE: "lm",
    AstronomicUnit.LIGHTHOUR: "lh",
    AstronomicUnit.LIGHTDAY: "ld",
    AstronomicUnit.LIGHTYEAR: "ly",
    AstronomicUnit.PARSEC: "pc",
    AstronomicUnit.KILOPARSEC: "kpc",
    AstronomicUnit.MEGAPARSEC: "Mpc",
}

_SYMBOL_TO_UNIT_MAP: Dict[str, LengthUnit] = {
    symbol: unit for unit, symbol in _UNIT_TO_SYMBOL_MAP.items()
}

# Lenient lookup: canonical symbols, long names and the greek mu spelling.
_STR_TO_UNIT_MAP: Dict[str, LengthUnit] = {
    **_SYMBOL_TO_UNIT_MAP,
    **{unit.value: unit for unit in _UNIT_TO_SYMBOL_MAP},
    "μm": MetricUnit.MICROMETER,
}

_LADDERS: Dict[UnitSystem, Tuple[LengthUnit, ...]] = {
    system: tuple(unit_type) for system, unit_type in _SYSTEM_TO_UNIT_TYPE.items()
}

_SMALLER_UNIT: Dict[LengthUnit, LengthUnit] = {
    greater: smaller
    for ladder in _LADDERS.values()
    for smaller, greater in zip(ladder, ladder[1:])
}

_GREATER_UNIT: Dict[LengthUnit, LengthUnit] = {
    smaller: greater for greater, smaller in _SMALLER_UNIT.items()
}


def is_length_unit(obj: object) -> bool:
    return isinstance(obj, LENGTH_UNIT_TYPES)


def _check_length_unit(unit: object) -> None:
    if not is_length_unit(unit):
        raise TypeError(f"Expected a length unit, got {unit!r}.")


def unit_factor(unit: LengthUnit) -> float:
    """Returns the factor of `unit` relative to its system's reference unit
    (meter, inch or lightyear)."""
    _check_length_unit(unit)
    return _LENGTH_UNIT_TO_REFERENCE[unit]


def unit_system(unit: LengthUnit) -> UnitSystem:
    _check_length_unit(unit)
    return _UNIT_TYPE_TO_SYSTEM[type(unit)]


def unit_symbol(unit: LengthUnit) -> str:
    _check_length_unit(unit)
    return _UNIT_TO_SYMBOL_MAP[unit]


def smaller_unit(unit: LengthUnit) -> Optional[LengthUnit]:
    """Returns the next smaller unit of the same system, `None` for the smallest."""
    _check_length_unit(unit)
    return _SMALLER_UNIT.get(unit)


def greater_unit(unit: LengthUnit) -> Optional[LengthUnit]:
    """Returns the next greater unit of the same system, `None` for the greatest."""
    _check_length_unit(unit)
    return _GREATER_UNIT.get(unit)


def units_of_system(system: UnitSystem) -> Tuple[LengthUnit, ...]:
    """Returns the ladder of `system`, ordered from the smallest to the greatest unit."""
    return _LADDERS[system]


def all_length_units() -> Tuple[LengthUnit, ...]:
    return tuple(unit for ladder in _LADDERS.values() for unit in ladder)


def length_unit_from_symbol(symbol: str) -> LengthUnit:
    """Parses a canonical unit symbol such as `km`, `mi` or `Mpc` (case-sensitive)."""
    if symbol in _SYMBOL_TO_UNIT_MAP:
        return _SYMBOL_TO_UNIT_MAP[symbol]
    raise UnitParseError(f"Unknown unit symbol: {symbol}")


def length_unit_from_str(unit: str) -> LengthUnit:
    """Parses a unit symbol or a long unit name such as `kilometer`."""
    if unit in _STR_TO_UNIT_MAP:
        return _STR_TO_UNIT_MAP[unit]
    raise UnitParseError(f"Unknown unit: {unit}")
