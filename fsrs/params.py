"""Model parameters, their bounds and the interval fuzz ranges."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

STABILITY_MIN = 0.001
INITIAL_STABILITY_MAX = 100.0

MIN_DIFFICULTY = 1.0
MAX_DIFFICULTY = 10.0

DEFAULT_PARAMETERS: tuple[float, ...] = (
    0.2172,
    1.1771,
    3.2602,
    16.1507,
    7.0114,
    0.57,
    2.0966,
    0.0069,
    1.5261,
    0.112,
    1.0178,
    1.849,
    0.1133,
    0.3127,
    2.2934,
    0.2191,
    3.0004,
    0.7536,
    0.3332,
    0.1437,
    0.2,
)

LOWER_BOUNDS_PARAMETERS: tuple[float, ...] = (
    STABILITY_MIN,
    STABILITY_MIN,
    STABILITY_MIN,
    STABILITY_MIN,
    1.0,
    0.001,
    0.001,
    0.001,
    0.0,
    0.0,
    0.001,
    0.001,
    0.001,
    0.001,
    0.0,
    0.0,
    1.0,
    0.0,
    0.0,
    0.0,
    0.1,
)

UPPER_BOUNDS_PARAMETERS: tuple[float, ...] = (
    INITIAL_STABILITY_MAX,
    INITIAL_STABILITY_MAX,
    INITIAL_STABILITY_MAX,
    INITIAL_STABILITY_MAX,
    10.0,
    4.0,
    4.0,
    0.75,
    4.5,
    0.8,
    3.5,
    5.0,
    0.25,
    0.9,
    4.0,
    1.0,
    6.0,
    2.0,
    2.0,
    0.8,
    0.8,
)


class InvalidParameterError(ValueError):
    """Raised when model parameters are missing or out of bounds."""


@dataclass(frozen=True)
class FuzzRange:
    """A span of interval lengths, in days, and its fuzz factor."""

    start: float
    end: float
    factor: float


FUZZ_RANGES: tuple[FuzzRange, ...] = (
    FuzzRange(start=2.5, end=7.0, factor=0.15),
    FuzzRange(start=7.0, end=20.0, factor=0.1),
    FuzzRange(start=20.0, end=math.inf, factor=0.05),
)


def validate_parameters(parameters: Sequence[float]) -> tuple[float, ...]:
    """Check the parameters against their bounds and return them as a tuple.

    Raises InvalidParameterError on a wrong count or any out-of-bounds value.
    """
    expected = len(LOWER_BOUNDS_PARAMETERS)
    if len(parameters) != expected:
        raise InvalidParameterError(
            f"Parameters invalid expected {expected} parameters, got {len(parameters)}"
        )

    problems = [
        f"parameters[{i}] = {value:f} is out of bounds: ({low:f}, {high:f})"
        for i, (value, low, high) in enumerate(
            zip(parameters, LOWER_BOUNDS_PARAMETERS, UPPER_BOUNDS_PARAMETERS)
        )
        if value < low or value > high
    ]
    if problems:
        raise InvalidParameterError(
            "Parameters invalid one or more parameters are out of bounds:\n"
            + "\n".join(problems)
        )
    return tuple(parameters)