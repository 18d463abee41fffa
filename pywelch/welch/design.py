"""
WelchDesign: validated inputs for a Welch two-sample test.

Factory classmethods validate everything the numeric kernel assumes
(finite means, positive SDs, integer sample sizes >= 2, levels in (0, 1)).
Immutable after construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pywelch.core.exceptions import InvalidInputError
from pywelch.core.validation import (
    check_1d,
    check_array,
    check_confidence_levels,
    check_finite_scalar,
    check_positive,
    check_probability,
    check_sample_size,
)
from pywelch.welch._common import (
    DEFAULT_CONF_LEVEL,
    DEFAULT_LEVELS,
    VALID_P_VALUE_METHODS,
    GroupSummary,
    TestHypothesis,
)


def _validate_p_value_method(method: str) -> str:
    if method not in VALID_P_VALUE_METHODS:
        raise InvalidInputError(
            f"p_value_method must be one of {VALID_P_VALUE_METHODS}, got {method!r}",
            field="p_value_method", value=method,
        )
    return method


def _validate_group(
    mean: Any, sd: Any, n: Any, suffix: str,
) -> GroupSummary:
    mean = check_finite_scalar(mean, f"mean{suffix}")
    sd = check_finite_scalar(sd, f"sd{suffix}")
    check_positive(sd, f"sd{suffix}")
    n = check_sample_size(n, f"n{suffix}")
    return GroupSummary(mean=mean, standard_deviation=sd, sample_size=n)


def _to_float64_1d(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to 1D float64 array, removing NaN values."""
    arr = check_array(x, name).astype(np.float64, copy=False)
    check_1d(arr, name)
    return arr[~np.isnan(arr)]


def _summarize(x: NDArray[np.floating[Any]], suffix: str) -> GroupSummary:
    n = check_sample_size(len(x), f"n{suffix}")
    if not np.all(np.isfinite(x)):
        raise InvalidInputError(
            f"sample{suffix}: contains infinite values",
            field=f"sample{suffix}", value=None,
        )
    sd = float(np.std(x, ddof=1))
    check_positive(sd, f"sd{suffix}")
    return GroupSummary(mean=float(np.mean(x)), standard_deviation=sd, sample_size=n)


@dataclass(frozen=True)
class WelchDesign:
    """
    Design for a Welch two-sample t-test.

    Do not construct directly; use from_summaries, from_groups or
    from_samples.

    Attributes
    ----------
    group1, group2 : GroupSummary
    hypothesis : TestHypothesis
    conf_level : float
        Reporting level; alpha = 1 - conf_level.
    levels : tuple of float
        Fan-chart levels, always including conf_level, ascending.
    p_value_method : str
        "normal" or "t".
    labels : tuple of str
        Display names used only when formatting output.
    """
    group1: GroupSummary
    group2: GroupSummary
    hypothesis: TestHypothesis
    conf_level: float = DEFAULT_CONF_LEVEL
    levels: tuple[float, ...] = DEFAULT_LEVELS
    p_value_method: str = "normal"
    labels: tuple[str, str] = ("Group 1", "Group 2")

    @property
    def alpha(self) -> float:
        return 1.0 - self.conf_level

    @property
    def data_name(self) -> str:
        return f"{self.labels[0]} and {self.labels[1]}"

    # --- Factory classmethods ---

    @classmethod
    def from_groups(
        cls,
        group1: GroupSummary,
        group2: GroupSummary,
        *,
        null_difference: float = 0.0,
        conf_level: float = DEFAULT_CONF_LEVEL,
        levels: Iterable[float] = DEFAULT_LEVELS,
        p_value_method: str = "normal",
        labels: tuple[str, str] | None = None,
    ) -> WelchDesign:
        """Build a design from two GroupSummary values, validating both."""
        g1 = _validate_group(
            group1.mean, group1.standard_deviation, group1.sample_size, "1",
        )
        g2 = _validate_group(
            group2.mean, group2.standard_deviation, group2.sample_size, "2",
        )
        return cls._build(
            g1, g2,
            null_difference=null_difference,
            conf_level=conf_level,
            levels=levels,
            p_value_method=p_value_method,
            labels=labels,
        )

    @classmethod
    def from_summaries(
        cls,
        mean1: float, sd1: float, n1: int,
        mean2: float, sd2: float, n2: int,
        *,
        null_difference: float = 0.0,
        conf_level: float = DEFAULT_CONF_LEVEL,
        levels: Iterable[float] = DEFAULT_LEVELS,
        p_value_method: str = "normal",
        labels: tuple[str, str] | None = None,
    ) -> WelchDesign:
        """Build a design from means, standard deviations and sizes."""
        g1 = _validate_group(mean1, sd1, n1, "1")
        g2 = _validate_group(mean2, sd2, n2, "2")
        return cls._build(
            g1, g2,
            null_difference=null_difference,
            conf_level=conf_level,
            levels=levels,
            p_value_method=p_value_method,
            labels=labels,
        )

    @classmethod
    def from_samples(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        null_difference: float = 0.0,
        conf_level: float = DEFAULT_CONF_LEVEL,
        levels: Iterable[float] = DEFAULT_LEVELS,
        p_value_method: str = "normal",
        labels: tuple[str, str] | None = None,
    ) -> WelchDesign:
        """
        Build a design from raw observations.

        NaN values are dropped; SDs use ddof=1. Each sample needs at
        least two non-NaN values and non-zero spread.
        """
        g1 = _summarize(_to_float64_1d(x, "x"), "1")
        g2 = _summarize(_to_float64_1d(y, "y"), "2")
        return cls._build(
            g1, g2,
            null_difference=null_difference,
            conf_level=conf_level,
            levels=levels,
            p_value_method=p_value_method,
            labels=labels,
        )

    @classmethod
    def _build(
        cls,
        group1: GroupSummary,
        group2: GroupSummary,
        *,
        null_difference: float,
        conf_level: float,
        levels: Iterable[float],
        p_value_method: str,
        labels: tuple[str, str] | None,
    ) -> WelchDesign:
        null_difference = check_finite_scalar(null_difference, "null_difference")
        conf_level = float(conf_level)
        check_probability(conf_level, "conf_level")
        all_levels = check_confidence_levels([*levels, conf_level])

        if labels is None:
            labels = ("Group 1", "Group 2")
        elif len(labels) != 2:
            raise InvalidInputError(
                f"labels: expected two names, got {len(labels)}",
                field="labels", value=labels,
            )

        return cls(
            group1=group1,
            group2=group2,
            hypothesis=TestHypothesis(null_difference=null_difference),
            conf_level=conf_level,
            levels=all_levels,
            p_value_method=_validate_p_value_method(p_value_method),
            labels=(str(labels[0]), str(labels[1])),
        )
