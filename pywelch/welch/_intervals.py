"""
Confidence intervals at several levels for the two group means and
their difference.

For each level, critical = t*(1 - alpha/2, df) with the Welch df of the
test, then

    group i:     m_i +/- critical * s_i / sqrt(n_i)
    difference:  (m1 - m2) +/- critical * se_welch

Critical values increase with the level, so intervals for a set of
levels are nested.
"""

from __future__ import annotations

from collections.abc import Iterable

from pywelch.core.validation import check_confidence_levels
from pywelch.distributions import student_t_critical_value
from pywelch.welch._common import (
    GROUP1,
    GROUP2,
    GroupSummary,
    IntervalBound,
    IntervalSet,
    WelchResult,
)


def _symmetric(center: float, margin: float) -> IntervalBound:
    margin = abs(margin)
    return IntervalBound(lower=center - margin, upper=center + margin)


def critical_value_for_level(level: float, degrees_of_freedom: float) -> float:
    """Two-sided critical value at a confidence level."""
    alpha = 1.0 - level
    return student_t_critical_value(1.0 - alpha / 2.0, degrees_of_freedom)


def build_intervals(
    group1: GroupSummary,
    group2: GroupSummary,
    welch_result: WelchResult,
    levels: Iterable[float],
) -> IntervalSet:
    """
    Build per-group and difference intervals for every level.

    Parameters
    ----------
    group1, group2 : GroupSummary
        The summaries the Welch result was computed from.
    welch_result : WelchResult
        Supplies degrees of freedom and the Welch standard error.
    levels : iterable of float
        Confidence levels in (0, 1). Duplicates are dropped and the
        levels sorted ascending.

    Group summaries are not re-validated. Margins are taken in absolute
    value, so a negative SD gives an ordinary interval and NaN input
    gives NaN bounds.

    Raises
    ------
    DomainError
        If any level is outside (0, 1), before anything is computed.
    """
    ordered = check_confidence_levels(levels)
    df = welch_result.degrees_of_freedom
    mean_diff = group1.mean - group2.mean

    per_group: dict[str, dict[float, IntervalBound]] = {GROUP1: {}, GROUP2: {}}
    difference: dict[float, IntervalBound] = {}

    for level in ordered:
        critical = critical_value_for_level(level, df)
        per_group[GROUP1][level] = _symmetric(
            group1.mean, critical * group1.standard_error,
        )
        per_group[GROUP2][level] = _symmetric(
            group2.mean, critical * group2.standard_error,
        )
        difference[level] = _symmetric(
            mean_diff, critical * welch_result.standard_error,
        )

    return IntervalSet(levels=ordered, per_group=per_group, difference=difference)
