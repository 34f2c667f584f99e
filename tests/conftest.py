from hypothesis import strategies as st

from lengthkit import (
    AstronomicUnit,
    ImperialUnit,
    Length,
    MetricUnit,
    all_length_units,
)

### HYPOTHESIS STRATEGIES (library to test many combinations for data class input)


st.register_type_strategy(MetricUnit, st.sampled_from(MetricUnit))
st.register_type_strategy(ImperialUnit, st.sampled_from(ImperialUnit))
st.register_type_strategy(AstronomicUnit, st.sampled_from(AstronomicUnit))

_length_unit_strategy = st.sampled_from(all_length_units())

_readable_value_strategy = st.floats(
    min_value=1e-6, max_value=1e6, allow_nan=False, allow_infinity=False
)

st.register_type_strategy(
    Length, st.builds(Length, _readable_value_strategy, _length_unit_strategy)
)
