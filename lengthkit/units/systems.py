from enum import Enum


class UnitSystem(Enum):
    """The three measurement systems a `LengthUnit` can belong to.

    Each system has its own reference unit (factor 1.0) and its own pivot unit
    through which conversions into other systems are staged.
    """

    METRIC = "metric"
    IMPERIAL = "imperial"
    ASTRONOMIC = "astronomic"
