"""Statistical inference engine."""

from rating_ab.core.stats.descriptive import describe, mean, standard_deviation
from rating_ab.core.stats.distributions import (
    beta_continued_fraction,
    incomplete_beta,
    ln_gamma,
    t_cdf,
)
from rating_ab.core.stats.result_types import DescriptiveStats, TestResult
from rating_ab.core.stats.welch import DEFAULT_ALPHA, independent_t_test

__all__ = [
    "DEFAULT_ALPHA",
    "DescriptiveStats",
    "TestResult",
    "beta_continued_fraction",
    "describe",
    "incomplete_beta",
    "independent_t_test",
    "ln_gamma",
    "mean",
    "standard_deviation",
    "t_cdf",
]
