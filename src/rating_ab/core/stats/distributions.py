"""Student-t distribution numerics.

The t CDF is evaluated through the regularized incomplete beta function,
which in turn combines a Lanczos log-gamma with a continued fraction
evaluated by Lentz's method. The iteration cap and epsilon are fixed so
results are reproducible bit for bit across runs.

Python float division raises on a zero denominator; ``ieee_divide`` is
used wherever a zero denominator is a legitimate degenerate input so that
inf/nan propagate instead.
"""

import logging
import math

logger = logging.getLogger(__name__)

LANCZOS_G = 7
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

MAX_ITERATIONS = 100
EPSILON = 1e-10


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics: x/0 is ±inf, 0/0 and nan/0 are nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def ln_gamma(z: float) -> float:
    """Natural log of the Gamma function (Lanczos approximation, g = 7).

    For z < 0.5 the reflection formula is applied. Negative non-integer
    arguments yield ln|Gamma(z)|; poles yield +inf.
    """
    if z < 0.5:
        reflected = ieee_divide(math.pi, math.sin(math.pi * z))
        return math.log(abs(reflected)) - ln_gamma(1 - z)

    z -= 1
    x = LANCZOS_COEFFICIENTS[0]
    for i in range(1, LANCZOS_G + 2):
        x += LANCZOS_COEFFICIENTS[i] / (z + i)

    t = z + LANCZOS_G + 0.5
    return 0.5 * math.log(2 * math.pi) + (z + 0.5) * math.log(t) - t + math.log(x)


def _clamp_tiny(value: float) -> float:
    if abs(value) < EPSILON:
        return EPSILON
    return value


def beta_continued_fraction(x: float, a: float, b: float) -> float:
    """Continued fraction for the incomplete beta function (Lentz's method).

    Runs at most ``MAX_ITERATIONS`` iterations, each one even and one odd
    step of the fraction. When the cap is reached without
    ``|delta - 1| < EPSILON`` the current estimate is returned as is.
    """
    qab = a + b
    qap = a + 1
    qam = a - 1
    c = 1.0
    d = 1 / _clamp_tiny(1 - qab * x / qap)
    h = d

    for i in range(1, MAX_ITERATIONS + 1):
        m2 = 2 * i

        # Even step
        aa = i * (b - i) * x / ((qam + m2) * (a + m2))
        d = 1 / _clamp_tiny(1 + aa * d)
        c = _clamp_tiny(1 + aa / c)
        h *= d * c

        # Odd step
        aa = -(a + i) * (qab + i) * x / ((a + m2) * (qap + m2))
        d = 1 / _clamp_tiny(1 + aa * d)
        c = _clamp_tiny(1 + aa / c)
        delta = d * c
        h *= delta

        if abs(delta - 1) < EPSILON:
            break
    else:
        logger.debug(
            "Beta continued fraction not converged after %d iterations "
            "(x=%r, a=%r, b=%r)",
            MAX_ITERATIONS,
            x,
            a,
            b,
        )

    return h


def incomplete_beta(x: float, a: float, b: float) -> float:
    """Regularized incomplete beta function I_x(a, b) for x in [0, 1].

    Exactly 0.0 at x == 0 and 1.0 at x == 1. Elsewhere the continued
    fraction is evaluated on whichever side of ``(a + 1) / (a + b + 2)``
    it converges on, using the symmetry I_x(a, b) = 1 - I_{1-x}(b, a).
    """
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0

    bt = math.exp(
        ln_gamma(a + b)
        - ln_gamma(a)
        - ln_gamma(b)
        + a * math.log(x)
        + b * math.log(1 - x)
    )

    if x < (a + 1) / (a + b + 2):
        return bt * beta_continued_fraction(x, a, b) / a
    return 1 - bt * beta_continued_fraction(1 - x, b, a) / b


def t_cdf(t: float, df: float) -> float:
    """P(T <= t) for a central Student-t with ``df`` degrees of freedom.

    Intended for t >= 0; callers pass the absolute t-statistic.
    """
    x = ieee_divide(df, df + t * t)
    return 1 - 0.5 * incomplete_beta(x, df / 2, 0.5)
