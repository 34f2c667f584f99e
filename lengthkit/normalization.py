import logging
from typing import Tuple

from .conversion import convert
from .defaults import NORMALIZE_MAX_ITERATIONS
from .units import LengthUnit, greater_unit, smaller_unit

logger = logging.getLogger(__name__)


def normalize(
    value: float,
    unit: LengthUnit,
    max_iterations: int = NORMALIZE_MAX_ITERATIONS,
) -> Tuple[float, LengthUnit]:
    """Walks the ladder of `unit`'s system to find the most readable unit for `value`.

    Values below 1 are moved to the next smaller unit as long as there is one.
    Values of at least 1 are moved to the next greater unit only if they stay at
    least 1 there. The walk never leaves the system of `unit` and takes at most
    `max_iterations` steps.

    Examples:
        ```
        assert normalize(5000, MetricUnit.METER) == (5.0, MetricUnit.KILOMETER)
        ```
    """
    value = float(value)

    for _ in range(max_iterations):
        if value < 1.0:
            next_unit = smaller_unit(unit)
            if next_unit is None:
                break
            value, unit = convert(value, unit, next_unit)
        else:
            next_unit = greater_unit(unit)
            if next_unit is None:
                break
            candidate, _ = convert(value, unit, next_unit)
            if candidate >= 1.0:
                value, unit = candidate, next_unit
            else:
                break
    else:
        logger.debug(
            f"Normalization stopped after {max_iterations} steps at {value} {unit.symbol}."
        )

    return value, unit
