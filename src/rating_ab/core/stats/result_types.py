"""Typed result records for the statistics engine.

Both records are frozen: a result is computed once per call and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DescriptiveStats:
    """Mean, sample standard deviation and size of one sample."""

    mean: float
    std: float
    n: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TestResult:
    """Outcome of a two-sample Welch's t-test.

    ``std1``/``std2`` use the n - 1 divisor. ``degrees_of_freedom`` is the
    (generally non-integer) Welch-Satterthwaite estimate. Degenerate inputs
    surface as nan/inf values rather than exceptions.
    """

    __test__ = False  # not a pytest test class

    mean1: float
    mean2: float
    std1: float
    std2: float
    t_statistic: float
    degrees_of_freedom: float
    p_value: float
    is_significant: bool
    effect_size: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict keyed by field name."""
        return asdict(self)
