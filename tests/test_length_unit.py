import pytest
from hypothesis import given, infer

from lengthkit import (
    AstronomicUnit,
    ImperialUnit,
    MetricUnit,
    UnitParseError,
    UnitSystem,
    all_length_units,
    greater_unit,
    length_unit_from_str,
    length_unit_from_symbol,
    smaller_unit,
    unit_factor,
    unit_symbol,
    unit_system,
    units_of_system,
)


def test_number_of_units() -> None:
    assert len(units_of_system(UnitSystem.METRIC)) == 21
    assert len(units_of_system(UnitSystem.IMPERIAL)) == 4
    assert len(units_of_system(UnitSystem.ASTRONOMIC)) == 9
    assert len(all_length_units()) == 34


def test_symbols_are_unique() -> None:
    symbols = [unit.symbol for unit in all_length_units()]
    assert len(set(symbols)) == len(symbols)
    assert all(1 <= len(symbol) <= 3 for symbol in symbols)


@pytest.mark.parametrize("unit", all_length_units())
def test_symbol_round_trip(unit: MetricUnit) -> None:
    assert length_unit_from_symbol(unit_symbol(unit)) is unit
    assert length_unit_from_str(unit.symbol) is unit
    assert length_unit_from_str(unit.value) is unit


def test_symbols() -> None:
    assert MetricUnit.KILOMETER.symbol == "km"
    assert MetricUnit.METER.symbol == "m"
    assert MetricUnit.MEGAMETER.symbol == "Mm"
    assert MetricUnit.DECAMETER.symbol == "dam"
    assert MetricUnit.MICROMETER.symbol == "µm"
    assert ImperialUnit.MILE.symbol == "mi"
    assert AstronomicUnit.LIGHTYEAR.symbol == "ly"
    assert AstronomicUnit.MEGAPARSEC.symbol == "Mpc"
    assert str(AstronomicUnit.KILOPARSEC) == "kpc"


def test_symbols_are_case_sensitive() -> None:
    assert length_unit_from_symbol("Mm") is MetricUnit.MEGAMETER
    assert length_unit_from_symbol("mm") is MetricUnit.MILLIMETER
    assert length_unit_from_symbol("Pm") is MetricUnit.PETAMETER
    assert length_unit_from_symbol("pm") is MetricUnit.PICOMETER
    with pytest.raises(UnitParseError):
        length_unit_from_symbol("KM")


def test_unknown_symbol() -> None:
    with pytest.raises(UnitParseError):
        length_unit_from_symbol("xyz")
    with pytest.raises(ValueError):
        length_unit_from_symbol("")
    # long names are only accepted by the lenient lookup
    with pytest.raises(UnitParseError):
        length_unit_from_symbol("kilometer")
    with pytest.raises(UnitParseError):
        length_unit_from_str("kilometers")


def test_lenient_lookup() -> None:
    assert length_unit_from_str("kilometer") is MetricUnit.KILOMETER
    assert length_unit_from_str("astronomical_unit") is AstronomicUnit.ASTRONOMICAL_UNIT
    assert length_unit_from_str("μm") is MetricUnit.MICROMETER
    assert length_unit_from_str("µm") is MetricUnit.MICROMETER


def test_system() -> None:
    assert unit_system(MetricUnit.NANOMETER) is UnitSystem.METRIC
    assert ImperialUnit.FOOT.system is UnitSystem.IMPERIAL
    assert AstronomicUnit.PARSEC.system is UnitSystem.ASTRONOMIC
    assert MetricUnit.METER.is_metric
    assert not MetricUnit.METER.is_imperial
    assert ImperialUnit.INCH.is_imperial
    assert AstronomicUnit.LIGHTDAY.is_astronomic
    assert not AstronomicUnit.LIGHTDAY.is_metric


def test_reference_units() -> None:
    assert unit_factor(MetricUnit.METER) == 1.0
    assert unit_factor(ImperialUnit.INCH) == 1.0
    assert unit_factor(AstronomicUnit.LIGHTYEAR) == 1.0


def test_factors() -> None:
    assert MetricUnit.YOCTOMETER.factor == 1e-24
    assert MetricUnit.CENTIMETER.factor == 0.01
    assert MetricUnit.KILOMETER.factor == 1000.0
    assert MetricUnit.YOTTAMETER.factor == 1e24
    assert ImperialUnit.FOOT.factor == 12.0
    assert ImperialUnit.YARD.factor == 36.0
    assert ImperialUnit.MILE.factor == 63360.0
    assert AstronomicUnit.LIGHTDAY.factor == 1.0 / 365.25
    assert AstronomicUnit.LIGHTSECOND.factor == pytest.approx(1.0 / 31_557_600.0)
    assert AstronomicUnit.ASTRONOMICAL_UNIT.factor == pytest.approx(
        1.581_250_740_982_066e-05
    )
    assert AstronomicUnit.PARSEC.factor == pytest.approx(3.261_563_777_167_433_7)
    assert AstronomicUnit.MEGAPARSEC.factor == pytest.approx(
        AstronomicUnit.PARSEC.factor * 1e6
    )


@pytest.mark.parametrize("system", list(UnitSystem))
def test_ladder_links(system: UnitSystem) -> None:
    ladder = units_of_system(system)
    for smaller, greater in zip(ladder, ladder[1:]):
        assert greater_unit(smaller) is greater
        assert smaller_unit(greater) is smaller


def test_ladder_ends() -> None:
    assert smaller_unit(MetricUnit.YOCTOMETER) is None
    assert greater_unit(MetricUnit.YOTTAMETER) is None
    assert smaller_unit(ImperialUnit.INCH) is None
    assert greater_unit(ImperialUnit.MILE) is None
    assert AstronomicUnit.ASTRONOMICAL_UNIT.smaller_unit is None
    assert AstronomicUnit.MEGAPARSEC.greater_unit is None


@pytest.mark.parametrize("unit", all_length_units())
def test_neighbors_stay_in_system(unit: MetricUnit) -> None:
    neighbors = [unit.smaller_unit, unit.greater_unit]
    assert any(neighbor is not None for neighbor in neighbors)
    for neighbor in neighbors:
        if neighbor is not None:
            assert neighbor.system is unit.system
    if unit.smaller_unit is not None:
        assert unit.smaller_unit.greater_unit is unit
    if unit.greater_unit is not None:
        assert unit.greater_unit.smaller_unit is unit


def test_non_unit_is_rejected() -> None:
    with pytest.raises(TypeError):
        unit_factor("m")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        unit_system(UnitSystem.METRIC)  # type: ignore[arg-type]


@pytest.mark.parametrize("system", [UnitSystem.METRIC, UnitSystem.IMPERIAL])
def test_ladder_is_ordered_by_factor(system: UnitSystem) -> None:
    factors = [unit.factor for unit in units_of_system(system)]
    assert factors == sorted(factors)


def test_astronomic_ladder_starts_with_astronomical_unit() -> None:
    # The astronomical unit is about 499 lightseconds but is still the first rung.
    ladder = units_of_system(UnitSystem.ASTRONOMIC)
    assert ladder[0] is AstronomicUnit.ASTRONOMICAL_UNIT
    assert ladder[1] is AstronomicUnit.LIGHTSECOND
    factors = [unit.factor for unit in ladder[1:]]
    assert factors == sorted(factors)


@given(metric=infer, imperial=infer, astronomic=infer)
def test_unit_kinds(
    metric: MetricUnit, imperial: ImperialUnit, astronomic: AstronomicUnit
) -> None:
    assert metric.is_metric and not metric.is_imperial and not metric.is_astronomic
    assert imperial.is_imperial and not imperial.is_metric
    assert astronomic.is_astronomic and not astronomic.is_imperial
    assert {metric.system, imperial.system, astronomic.system} == set(UnitSystem)
    for unit in (metric, imperial, astronomic):
        assert length_unit_from_str(unit.value) is unit
