"""Welch's unequal-variance t-test for two independent samples."""

import logging
import math
from collections.abc import Iterable

from rating_ab.core.stats.descriptive import describe, is_constant
from rating_ab.core.stats.distributions import ieee_divide, t_cdf
from rating_ab.core.stats.result_types import TestResult

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 0.05


def _welch_degrees_of_freedom(
    var1: float, n1: int, var2: float, n2: int, *, both_constant: bool = False
) -> float:
    """Welch-Satterthwaite approximation of the degrees of freedom.

    nan when either sample has a single value. When both samples are
    constant the approximation is 0/0; the pooled n1 + n2 - 2 is used
    instead. A variance that merely underflows to zero keeps the 0/0.
    """
    term1 = ieee_divide(var1, n1)
    term2 = ieee_divide(var2, n2)
    pooled = term1 + term2

    if both_constant and pooled == 0 and n1 >= 2 and n2 >= 2:
        return float(n1 + n2 - 2)

    numerator = pooled * pooled
    denominator = ieee_divide(term1 * term1, n1 - 1) + ieee_divide(
        term2 * term2, n2 - 1
    )
    return ieee_divide(numerator, denominator)


def independent_t_test(
    sample1: Iterable[float],
    sample2: Iterable[float],
    alpha: float = DEFAULT_ALPHA,
) -> TestResult:
    """Compare the means of two samples with Welch's t-test.

    Does not assume equal variances. The p-value is two-tailed and the
    effect size is Cohen's d computed against the simple average of the
    two variances (not weighted by sample size).

    Never raises for numeric input. Degenerate samples (zero standard
    error, a sample of size one, empty samples) produce inf or nan in the
    affected fields, and a nan p-value is never significant.

    Args:
        sample1: First sample of ratings
        sample2: Second sample of ratings
        alpha: Significance threshold for ``is_significant``

    Returns:
        Immutable test result
    """
    values1 = list(sample1)
    values2 = list(sample2)
    stats1 = describe(values1)
    stats2 = describe(values2)

    var1 = stats1.std * stats1.std
    var2 = stats2.std * stats2.std
    mean_diff = stats1.mean - stats2.mean

    se = math.sqrt(ieee_divide(var1, stats1.n) + ieee_divide(var2, stats2.n))
    t_statistic = ieee_divide(mean_diff, se)

    df = _welch_degrees_of_freedom(
        var1,
        stats1.n,
        var2,
        stats2.n,
        both_constant=is_constant(values1) and is_constant(values2),
    )

    p_value = 2 * (1 - t_cdf(abs(t_statistic), df))
    effect_size = ieee_divide(mean_diff, math.sqrt((var1 + var2) / 2))

    if math.isnan(p_value):
        logger.debug(
            "Undefined p-value (n1=%d, n2=%d, t=%r, df=%r)",
            stats1.n,
            stats2.n,
            t_statistic,
            df,
        )

    return TestResult(
        mean1=stats1.mean,
        mean2=stats2.mean,
        std1=stats1.std,
        std2=stats2.std,
        t_statistic=t_statistic,
        degrees_of_freedom=df,
        p_value=p_value,
        is_significant=p_value < alpha,
        effect_size=effect_size,
    )
