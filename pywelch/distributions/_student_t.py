"""
Student's t distribution: approximate critical values and exact CDF.

student_t_critical_value uses the first two Cornish-Fisher correction
terms on top of the normal quantile z = Phi^-1(p):

    t* ~= z + (z^3 + z) / (4 df) + (5 z^5 + 16 z^3 + 3 z) / (96 df^2)

The expansion is accurate to about 1e-3 for df >= 30 and to a few
percent for df >= 5. For non-finite or non-positive df the normal
quantile is returned unmodified.

student_t_cdf is the exact distribution function (scipy), offered for
the optional exact p-value mode.
"""

from __future__ import annotations

import math

from scipy import stats as sp_stats

from pywelch.distributions._normal import standard_normal_inverse


def student_t_critical_value(probability: float, degrees_of_freedom: float) -> float:
    """
    Approximate quantile of Student's t at cumulative probability
    `probability` with `degrees_of_freedom` degrees of freedom.

    Strictly increasing in probability; for probability > 0.5,
    decreasing in degrees_of_freedom towards the normal quantile.

    Raises:
        DomainError: If probability is outside (0, 1).
    """
    z = standard_normal_inverse(probability)
    df = float(degrees_of_freedom)

    if not math.isfinite(df) or df <= 0.0:
        return z

    z3 = z ** 3
    z5 = z ** 5
    g1 = (z3 + z) / (4.0 * df)
    g2 = (5.0 * z5 + 16.0 * z3 + 3.0 * z) / (96.0 * df * df)
    return z + g1 + g2


def student_t_cdf(t: float, degrees_of_freedom: float) -> float:
    """Exact P(T <= t) for Student's t; NaN when df is not positive."""
    df = float(degrees_of_freedom)
    if math.isnan(t) or math.isnan(df) or df <= 0.0:
        return math.nan
    return float(sp_stats.t.cdf(t, df))


def student_t_sf(t: float, degrees_of_freedom: float) -> float:
    """Exact P(T > t); more accurate than 1 - cdf in the upper tail."""
    df = float(degrees_of_freedom)
    if math.isnan(t) or math.isnan(df) or df <= 0.0:
        return math.nan
    return float(sp_stats.t.sf(t, df))
