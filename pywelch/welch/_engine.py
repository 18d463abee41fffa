"""
Welch two-sample t-test from summary statistics.

    v_i = s_i^2 / n_i
    se  = sqrt(v1 + v2)
    t   = (m1 - m2 - delta0) / se
    df  = (v1 + v2)^2 / (v1^2 / (n1 - 1) + v2^2 / (n2 - 1))

Group summaries are not re-validated here. Malformed input (zero SD,
n < 2) propagates as NaN or inf rather than raising.
"""

from __future__ import annotations

import math

import numpy as np

from pywelch.core.validation import check_probability
from pywelch.distributions import standard_normal_cdf, student_t_sf
from pywelch.welch._common import (
    DEFAULT_CONF_LEVEL,
    VALID_P_VALUE_METHODS,
    GroupSummary,
    TestHypothesis,
    WelchResult,
)
from pywelch.welch._effect_size import cohens_d, power


def welch_satterthwaite_df(group1: GroupSummary, group2: GroupSummary) -> float:
    """Welch-Satterthwaite degrees of freedom (fractional, not rounded)."""
    v1 = np.float64(group1.variance) / group1.sample_size
    v2 = np.float64(group2.variance) / group2.sample_size
    with np.errstate(divide='ignore', invalid='ignore'):
        df = (v1 + v2) ** 2 / (
            v1 ** 2 / np.float64(group1.sample_size - 1)
            + v2 ** 2 / np.float64(group2.sample_size - 1)
        )
    return float(df)


def run_welch_test(
    group1: GroupSummary,
    group2: GroupSummary,
    hypothesis: TestHypothesis | None = None,
    *,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> WelchResult:
    """
    Run the Welch test on two group summaries.

    Parameters
    ----------
    group1, group2 : GroupSummary
        Pre-validated group statistics.
    hypothesis : TestHypothesis or None
        Null difference; None means H0: mean1 = mean2.
    conf_level : float
        Reporting confidence level. Power is evaluated at
        alpha = 1 - conf_level.

    Returns
    -------
    WelchResult

    Raises
    ------
    DomainError
        If conf_level is outside (0, 1).
    """
    check_probability(conf_level, "conf_level")
    if hypothesis is None:
        hypothesis = TestHypothesis()

    v1 = np.float64(group1.variance) / group1.sample_size
    v2 = np.float64(group2.variance) / group2.sample_size
    se = np.sqrt(v1 + v2)

    mean_diff = group1.mean - group2.mean
    with np.errstate(divide='ignore', invalid='ignore'):
        t_stat = (np.float64(mean_diff) - hypothesis.null_difference) / se

    d = cohens_d(group1, group2)
    alpha = 1.0 - conf_level

    return WelchResult(
        t_statistic=float(t_stat),
        degrees_of_freedom=welch_satterthwaite_df(group1, group2),
        standard_error=float(se),
        cohens_d=d,
        power=power(d, group1.sample_size, group2.sample_size, alpha),
        mean_difference=float(mean_diff),
    )


def two_sided_p_value(
    t_statistic: float,
    degrees_of_freedom: float | None = None,
    method: str = "normal",
) -> float:
    """
    Two-sided p-value for a t statistic.

    method="normal" (default) computes 2 * (1 - Phi(|t|)), ignoring df.
    Kept as the default for compatibility with earlier results.
    method="t" uses the exact Student's t survival function with
    `degrees_of_freedom`; it gives larger p-values for small df.

    Raises
    ------
    ValueError
        If method is unknown, or method="t" without degrees_of_freedom.
    """
    if method not in VALID_P_VALUE_METHODS:
        raise ValueError(
            f"method must be one of {VALID_P_VALUE_METHODS}, got {method!r}"
        )
    if math.isnan(t_statistic):
        return math.nan

    if method == "normal":
        return 2.0 * (1.0 - standard_normal_cdf(abs(t_statistic)))

    if degrees_of_freedom is None:
        raise ValueError("degrees_of_freedom is required for method='t'")
    return 2.0 * student_t_sf(abs(t_statistic), degrees_of_freedom)
