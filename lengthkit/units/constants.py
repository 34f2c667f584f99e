from math import pi

YARD_TO_METER_FACTOR = 0.9144
LIGHTYEAR_TO_METER_FACTOR = 9_460_730_472_580_800.0
ASTRONOMICAL_UNIT_TO_METER_FACTOR = 149_597_870_700.0

# Julian year, the basis of the IAU lightyear.
JULIAN_YEAR_IN_DAYS = 365.25

LIGHTDAY_TO_LIGHTYEAR_FACTOR = 1.0 / JULIAN_YEAR_IN_DAYS
LIGHTHOUR_TO_LIGHTYEAR_FACTOR = 1.0 / (JULIAN_YEAR_IN_DAYS * 24.0)
LIGHTMINUTE_TO_LIGHTYEAR_FACTOR = 1.0 / (JULIAN_YEAR_IN_DAYS * 24.0 * 60.0)
LIGHTSECOND_TO_LIGHTYEAR_FACTOR = 1.0 / (JULIAN_YEAR_IN_DAYS * 24.0 * 60.0 * 60.0)
ASTRONOMICAL_UNIT_TO_LIGHTYEAR_FACTOR = (
    ASTRONOMICAL_UNIT_TO_METER_FACTOR / LIGHTYEAR_TO_METER_FACTOR
)
PARSEC_TO_ASTRONOMICAL_UNITS_FACTOR = 648_000.0 / pi
PARSEC_TO_LIGHTYEAR_FACTOR = (
    ASTRONOMICAL_UNIT_TO_LIGHTYEAR_FACTOR * PARSEC_TO_ASTRONOMICAL_UNITS_FACTOR
)
KILOPARSEC_TO_LIGHTYEAR_FACTOR = PARSEC_TO_LIGHTYEAR_FACTOR * 1_000.0
MEGAPARSEC_TO_LIGHTYEAR_FACTOR = PARSEC_TO_LIGHTYEAR_FACTOR * 1_000_000.0
