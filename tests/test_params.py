import math

import pytest

from fsrs.params import (
    DEFAULT_PARAMETERS,
    FUZZ_RANGES,
    LOWER_BOUNDS_PARAMETERS,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    STABILITY_MIN,
    UPPER_BOUNDS_PARAMETERS,
    FuzzRange,
    InvalidParameterError,
    validate_parameters,
)


def test_default_parameters_validate():
    assert validate_parameters(DEFAULT_PARAMETERS) == DEFAULT_PARAMETERS


def test_list_input_returns_tuple():
    result = validate_parameters(list(DEFAULT_PARAMETERS))
    assert result == DEFAULT_PARAMETERS


def test_bounds_consistent():
    assert len(LOWER_BOUNDS_PARAMETERS) == len(UPPER_BOUNDS_PARAMETERS)
    assert all(lo <= hi for lo, hi in zip(LOWER_BOUNDS_PARAMETERS, UPPER_BOUNDS_PARAMETERS))
    midpoints = [(lo + hi) / 2 for lo, hi in zip(LOWER_BOUNDS_PARAMETERS, UPPER_BOUNDS_PARAMETERS)]
    assert validate_parameters(midpoints) == tuple(midpoints)


def test_bounds_validate_themselves():
    assert validate_parameters(LOWER_BOUNDS_PARAMETERS) == LOWER_BOUNDS_PARAMETERS
    assert validate_parameters(UPPER_BOUNDS_PARAMETERS) == UPPER_BOUNDS_PARAMETERS


def test_custom_parameters_from_source_validate():
    parameters = [
        0.1456, 0.4186, 1.1104, 4.1315, 5.2417, 1.3098, 0.8975, 0.0010,
        1.5674, 0.0567, 0.9661, 2.0275, 0.1592, 0.2446, 1.5071, 0.2272,
        2.8755, 1.234, 0.56789, 0.1437, 0.6,
    ]
    assert validate_parameters(parameters) == tuple(parameters)


def test_wrong_length_raises():
    with pytest.raises(InvalidParameterError, match="got 20"):
        validate_parameters(DEFAULT_PARAMETERS[:-1])


def test_empty_raises():
    with pytest.raises(InvalidParameterError):
        validate_parameters([])


def test_out_of_bounds_reports_index():
    params = list(DEFAULT_PARAMETERS)
    params[20] = 5.0
    params[0] = -1.0
    with pytest.raises(InvalidParameterError) as info:
        validate_parameters(params)
    message = str(info.value)
    assert "parameters[0]" in message
    assert "parameters[20]" in message
    assert "parameters[1]" not in message


def test_error_is_value_error():
    with pytest.raises(ValueError):
        validate_parameters([0.0] * len(DEFAULT_PARAMETERS))


def test_documented_constants():
    assert MIN_DIFFICULTY == 1.0
    assert MAX_DIFFICULTY == 10.0
    params = list(DEFAULT_PARAMETERS)
    params[0] = STABILITY_MIN
    assert validate_parameters(params)[0] == 0.001
    params[0] = STABILITY_MIN / 2
    with pytest.raises(InvalidParameterError, match="parameters\\[0\\]"):
        validate_parameters(params)


def test_fuzz_ranges_contiguous():
    assert FUZZ_RANGES[0] == FuzzRange(start=2.5, end=7.0, factor=0.15)
    assert FUZZ_RANGES[1] == FuzzRange(start=7.0, end=20.0, factor=0.1)
    for prev, nxt in zip(FUZZ_RANGES, FUZZ_RANGES[1:]):
        assert prev.end == nxt.start
    assert math.isinf(FUZZ_RANGES[-1].end)


def test_fuzz_range_is_frozen():
    fr = FuzzRange(start=1.0, end=2.0, factor=0.5)
    with pytest.raises(AttributeError):
        fr.start = 3.0  # type: ignore[misc]
    assert fr.start == 1.0