"""
Common types for the Welch two-sample test.

Defines the immutable value types passed between the engine layers
(GroupSummary, TestHypothesis, WelchResult, IntervalBound, IntervalSet)
and the WelchParams payload carried inside Result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


GROUP1 = "group1"
GROUP2 = "group2"
DIFFERENCE = "difference"
SUBJECTS = (GROUP1, GROUP2, DIFFERENCE)

DEFAULT_CONF_LEVEL = 0.95
DEFAULT_LEVELS = (0.5, 0.8, 0.95)

VALID_P_VALUE_METHODS = ("normal", "t")

# Conventional power target below which a test is flagged as underpowered
ADEQUATE_POWER = 0.8


@dataclass(frozen=True)
class GroupSummary:
    """
    Descriptive statistics of one observed group.

    The numeric kernel assumes standard_deviation > 0 and
    sample_size >= 2; use WelchDesign factories to validate.
    """
    mean: float
    standard_deviation: float
    sample_size: int

    @property
    def variance(self) -> float:
        return self.standard_deviation ** 2

    @property
    def standard_error(self) -> float:
        """Standard error of the group mean, sd / sqrt(n)."""
        return self.standard_deviation / math.sqrt(self.sample_size)


@dataclass(frozen=True)
class TestHypothesis:
    """H0: mean1 - mean2 = null_difference."""
    # Not a pytest test class despite the name
    __test__ = False

    null_difference: float = 0.0


@dataclass(frozen=True)
class WelchResult:
    """
    Output of one Welch test invocation.

    Attributes
    ----------
    t_statistic : float
        (mean1 - mean2 - null_difference) / standard_error.
    degrees_of_freedom : float
        Welch-Satterthwaite df, fractional.
    standard_error : float
        sqrt(sd1^2/n1 + sd2^2/n2).
    cohens_d : float
        |mean1 - mean2| / pooled SD. Infinite when both SDs are zero
        and the means differ.
    power : float
        Approximate two-sided power at the reporting alpha.
    mean_difference : float
        mean1 - mean2 (not shifted by the null difference).
    """
    t_statistic: float
    degrees_of_freedom: float
    standard_error: float
    cohens_d: float
    power: float
    mean_difference: float


@dataclass(frozen=True)
class IntervalBound:
    """Two-sided interval [lower, upper] with lower <= upper."""
    lower: float
    upper: float

    def __post_init__(self):
        # NaN bounds from unvalidated input are allowed through
        if self.lower > self.upper:
            raise ValueError(
                f"IntervalBound: lower ({self.lower}) exceeds upper ({self.upper})"
            )

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def center(self) -> float:
        return 0.5 * (self.lower + self.upper)

    def contains(self, other: IntervalBound) -> bool:
        """True if `other` lies entirely inside this interval."""
        return self.lower <= other.lower and other.upper <= self.upper

    def covers(self, value: float) -> bool:
        """True if value lies inside the closed interval."""
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class IntervalSet:
    """
    Confidence intervals for every subject at every requested level.

    Attributes
    ----------
    levels : tuple of float
        Confidence levels, deduplicated and ascending.
    per_group : dict
        {GROUP1: {level: IntervalBound}, GROUP2: {level: IntervalBound}}
    difference : dict
        {level: IntervalBound} for mean1 - mean2.
    """
    levels: tuple[float, ...]
    per_group: dict[str, dict[float, IntervalBound]]
    difference: dict[float, IntervalBound]

    def for_subject(self, subject: str) -> dict[float, IntervalBound]:
        """Intervals keyed by level for GROUP1, GROUP2 or DIFFERENCE."""
        if subject == DIFFERENCE:
            return self.difference
        if subject in self.per_group:
            return self.per_group[subject]
        raise KeyError(
            f"Unknown subject {subject!r}. Use one of {SUBJECTS}."
        )

    def bands(self, subject: str) -> Iterator[tuple[float, IntervalBound]]:
        """
        Yield (level, bound) widest-first, the drawing order for a fan
        chart where narrower bands are painted over wider ones.
        """
        intervals = self.for_subject(subject)
        for level in reversed(self.levels):
            yield level, intervals[level]


@dataclass(frozen=True)
class WelchParams:
    """
    Parameter payload for a Welch test computation.

    Bundles the inputs that produced the result with every derived
    quantity, so a Result[WelchParams] is self-describing.
    """
    group1: GroupSummary
    group2: GroupSummary
    hypothesis: TestHypothesis
    result: WelchResult
    p_value: float
    p_value_method: str
    conf_level: float
    intervals: IntervalSet
    extras: dict[str, float] = field(default_factory=dict)
