"""
This package provides a length type that understands metric, imperial and
astronomic units.

A `Length` can be created from a value and a unit or parsed from text, converted
to any other unit, normalized to the unit that reads best and combined with other
lengths:

```python
from lengthkit import ImperialUnit, Length, MetricUnit

marathon = Length(42.195, MetricUnit.KILOMETER)
print(marathon.to(ImperialUnit.MILE))
print(Length.from_str("5000 m").normalize())  # 5 km
```

The conversion and normalization functions work on plain `(value, unit)` pairs
as well, see `lengthkit.conversion` and `lengthkit.normalization`.
"""

# ruff: noqa: F401, F403
from .conversion import convert, convert_array, pivot_unit
from .length import Length
from .normalization import normalize
from .units import *
from .version import __version__
