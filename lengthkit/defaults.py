import os

from .units import MetricUnit

DEFAULT_LENGTH_UNIT = MetricUnit.METER
NORMALIZE_MAX_ITERATIONS = 10
DEFAULT_LOG_LEVEL = os.environ.get("LENGTHKIT_LOG_LEVEL", "WARNING").upper()
