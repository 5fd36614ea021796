"""Descriptive statistics over a sample of ratings."""

import math
from collections.abc import Iterable

from rating_ab.core.stats.result_types import DescriptiveStats


def _as_float(value: float) -> float:
    # Integers beyond the float range saturate to an infinity of their sign
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _float_values(sample: Iterable[float]) -> list[float]:
    return [_as_float(value) for value in sample]


def mean(sample: Iterable[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sample."""
    values = _float_values(sample)
    if not values:
        return 0.0
    return sum(values) / len(values)


def standard_deviation(sample: Iterable[float]) -> float:
    """Sample standard deviation with Bessel's correction.

    Returns 0.0 when fewer than two values are given.
    """
    values = _float_values(sample)
    if len(values) < 2:
        return 0.0
    avg = mean(values)
    squared_diffs = sum((value - avg) * (value - avg) for value in values)
    return math.sqrt(squared_diffs / (len(values) - 1))


def is_constant(sample: Iterable[float]) -> bool:
    """True when every value equals the first (vacuously for an empty sample).

    nan never compares equal, so a sample containing nan is not constant.
    """
    values = _float_values(sample)
    return all(value == values[0] for value in values)


def describe(sample: Iterable[float]) -> DescriptiveStats:
    """Summarize a sample as a DescriptiveStats record."""
    values = _float_values(sample)
    return DescriptiveStats(
        mean=mean(values), std=standard_deviation(values), n=len(values)
    )
