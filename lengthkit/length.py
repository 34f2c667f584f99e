import copy
import logging
import math
import re
from typing import Optional

import attr
import numpy as np

from .conversion import convert
from .defaults import DEFAULT_LENGTH_UNIT
from .normalization import normalize
from .units import (
    LENGTH_UNIT_TYPES,
    LengthUnit,
    UnitParseError,
    UnitSystem,
    length_unit_from_symbol,
)

logger = logging.getLogger(__name__)

# The symbol group admits the micro sign so that `µm` can be parsed.
_LENGTH_PATTERN = re.compile(r"^\s*([0-9]+(\.[0-9]+)?)\s*([a-zA-Zµ]{1,3})\s*$")


def _divide(value: float, divisor: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(value) / np.float64(divisor))


def _format_value(value: float) -> str:
    # Plain decimal digits without an exponent, so that the text parses back.
    if math.isfinite(value):
        return np.format_float_positional(value, unique=True, trim="-")
    return repr(value)


@attr.define(eq=False)
class Length:
    """A length, made of a floating point value and a unit of one of the
    metric, imperial or astronomic systems.

    Lengths can be converted to any other unit, normalized to a readable unit
    and combined arithmetically. Every operation returns a new `Length`, the
    `*_inplace` variants and the augmented assignment operators modify the
    length itself and return it.

    Examples:
        ```
        distance = Length(5, MetricUnit.KILOMETER) + Length(2000, MetricUnit.METER)
        assert distance.value == 7.0
        assert str(Length.from_str("5000 m").normalize()) == "5 km"
        ```
    """

    value: float = attr.field(default=0.0, converter=float)
    unit: LengthUnit = attr.field(
        default=DEFAULT_LENGTH_UNIT,
        validator=attr.validators.instance_of(LENGTH_UNIT_TYPES),
    )
    _original_string: str = attr.field(default="", repr=False)

    @classmethod
    def from_str(cls, string: str) -> Optional["Length"]:
        """Parses strings like `2m`, `23.5 km` or ` 2.3 ly `.

        Returns `None` if the string is not a non-negative decimal number followed
        by a known unit symbol. The matched text is kept as `original_string`.
        """
        match = _LENGTH_PATTERN.match(string)
        if match is None:
            logger.debug(f"{string!r} is not formatted like a length.")
            return None

        try:
            unit = length_unit_from_symbol(match.group(3))
        except UnitParseError as e:
            logger.debug(f"Could not parse {string!r}: {e}")
            return None

        return cls(float(match.group(1)), unit, original_string=match.group(0))

    @property
    def original_string(self) -> str:
        """The text this length was parsed from, empty if it was not parsed."""
        return self._original_string

    @property
    def system(self) -> UnitSystem:
        return self.unit.system

    def copy(self) -> "Length":
        return copy.copy(self)

    def to(self, unit: LengthUnit) -> "Length":
        """Returns this length converted to `unit`."""
        value, unit = convert(self.value, self.unit, unit)
        return Length(value, unit)

    def to_inplace(self, unit: LengthUnit) -> "Length":
        converted = self.to(unit)
        self.value = converted.value
        self.unit = converted.unit
        return self

    def normalize(self) -> "Length":
        """Returns this length in the unit of its system that reads best,
        e.g. `5000 m` becomes `5 km` and `0.5 in` stays `0.5 in`."""
        value, unit = normalize(self.value, self.unit)
        return Length(value, unit)

    def normalize_inplace(self) -> "Length":
        normalized = self.normalize()
        self.value = normalized.value
        self.unit = normalized.unit
        return self

    def add(self, other: "Length") -> "Length":
        """Adds `other` converted to this length's unit. The unit is kept."""
        return Length(self.value + other.to(self.unit).value, self.unit)

    def add_inplace(self, other: "Length") -> "Length":
        self.value += other.to(self.unit).value
        return self

    def subtract(self, other: "Length") -> "Length":
        return Length(self.value - other.to(self.unit).value, self.unit)

    def subtract_inplace(self, other: "Length") -> "Length":
        self.value -= other.to(self.unit).value
        return self

    def multiply_by(self, factor: float) -> "Length":
        return Length(self.value * factor, self.unit)

    def multiply_by_inplace(self, factor: float) -> "Length":
        self.value *= factor
        return self

    def divide_by(self, divisor: float) -> "Length":
        """Divides the value by `divisor`. Dividing by zero gives an infinite
        (or, for zero lengths, nan) value instead of raising."""
        return Length(_divide(self.value, divisor), self.unit)

    def divide_by_inplace(self, divisor: float) -> "Length":
        self.value = _divide(self.value, divisor)
        return self

    def __add__(self, other: "Length") -> "Length":
        return self.add(other)

    def __iadd__(self, other: "Length") -> "Length":
        return self.add_inplace(other)

    def __sub__(self, other: "Length") -> "Length":
        return self.subtract(other)

    def __isub__(self, other: "Length") -> "Length":
        return self.subtract_inplace(other)

    def __mul__(self, factor: float) -> "Length":
        return self.multiply_by(factor)

    def __rmul__(self, factor: float) -> "Length":
        return self.multiply_by(factor)

    def __imul__(self, factor: float) -> "Length":
        return self.multiply_by_inplace(factor)

    def __truediv__(self, divisor: float) -> "Length":
        return self.divide_by(divisor)

    def __itruediv__(self, divisor: float) -> "Length":
        return self.divide_by_inplace(divisor)

    def __str__(self) -> str:
        return self.to_text()

    def to_text(self) -> str:
        return f"{_format_value(self.value)} {self.unit.symbol}"
