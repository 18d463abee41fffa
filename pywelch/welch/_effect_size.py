"""
Effect size and power for the two-sample comparison.

Cohen's d uses the pooled standard deviation

    s_p = sqrt(((n1 - 1) s1^2 + (n2 - 1) s2^2) / (n1 + n2 - 2))
    d   = |m1 - m2| / s_p

Power treats the alternative as a normal distribution centred on the
non-centrality parameter ncp = d sqrt(n1 n2 / (n1 + n2)):

    power = 1 - Phi(z_c - ncp) + Phi(-z_c - ncp),  z_c = |Phi^-1(alpha / 2)|

This is a normal model even though the test itself reports Welch df;
the two approximations are kept as-is for compatibility with earlier
results.
"""

from __future__ import annotations

import math

import numpy as np

from pywelch.core.validation import check_probability
from pywelch.distributions import standard_normal_cdf, standard_normal_inverse
from pywelch.welch._common import GroupSummary


# Upper bounds (exclusive) of the conventional Cohen's d bands
EFFECT_SIZE_BANDS = (
    (0.2, "very small"),
    (0.5, "small"),
    (0.8, "medium"),
)
LARGEST_BAND = "large"

_PRACTICAL_SIGNIFICANCE = {
    "very small": "very small and might not be practically meaningful",
    "small": "small but might be meaningful in some contexts",
    "medium": "moderate and likely practically meaningful",
    "large": "large and practically significant",
}


def pooled_standard_deviation(group1: GroupSummary, group2: GroupSummary) -> float:
    """Pooled SD of the two groups; zero only if both SDs are zero."""
    n1, n2 = group1.sample_size, group2.sample_size
    numerator = (
        (n1 - 1) * group1.standard_deviation ** 2
        + (n2 - 1) * group2.standard_deviation ** 2
    )
    with np.errstate(divide='ignore', invalid='ignore'):
        pooled_var = np.float64(numerator) / np.float64(n1 + n2 - 2)
    return float(np.sqrt(pooled_var))


def cohens_d(group1: GroupSummary, group2: GroupSummary) -> float:
    """
    Cohen's d for two groups, always non-negative.

    Returns inf when the pooled SD is zero and the means differ, NaN
    when the means are also equal. These are degenerate results, not
    errors.
    """
    pooled_sd = pooled_standard_deviation(group1, group2)
    diff = abs(group1.mean - group2.mean)
    with np.errstate(divide='ignore', invalid='ignore'):
        d = np.float64(diff) / np.float64(pooled_sd)
    return float(d)


def power(d: float, n1: int, n2: int, alpha: float = 0.05) -> float:
    """
    Approximate two-sided power of the test to detect effect size d.

    Parameters
    ----------
    d : float
        Standardized effect size (Cohen's d).
    n1, n2 : int
        Group sample sizes.
    alpha : float
        Significance level in (0, 1).

    Returns
    -------
    float
        Power in [0, 1]. Equals alpha (up to the CDF approximation)
        when d = 0.

    Raises
    ------
    DomainError
        If alpha is outside (0, 1).
    """
    check_probability(alpha, "alpha")
    ncp = d * math.sqrt((n1 * n2) / (n1 + n2))
    z_crit = abs(standard_normal_inverse(alpha / 2.0))
    return 1.0 - standard_normal_cdf(z_crit - ncp) + standard_normal_cdf(-z_crit - ncp)


def interpret_effect_size(d: float) -> str:
    """Conventional label for |d|: 'very small', 'small', 'medium' or 'large'."""
    if math.isnan(d):
        return "undefined"
    d = abs(d)
    for upper, label in EFFECT_SIZE_BANDS:
        if d < upper:
            return label
    return LARGEST_BAND


def describe_practical_significance(d: float) -> str:
    """One-clause reading of what an effect of size d means in practice."""
    label = interpret_effect_size(d)
    if label == "undefined":
        return "undefined because both groups have zero spread"
    return _PRACTICAL_SIGNIFICANCE[label]
