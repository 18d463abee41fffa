"""
Welch test solution type.

WelchSolution wraps Result[WelchParams], exposes every computed
quantity as a property and renders the plain-text report.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pywelch.core.result import Result
from pywelch.welch._common import (
    ADEQUATE_POWER,
    DIFFERENCE,
    GROUP1,
    GROUP2,
    IntervalBound,
    IntervalSet,
    WelchParams,
    WelchResult,
)
from pywelch.welch._effect_size import (
    describe_practical_significance,
    interpret_effect_size,
)

if TYPE_CHECKING:
    from pywelch.welch.design import WelchDesign


@dataclass
class WelchSolution:
    """
    User-facing Welch test results.

    Wraps Result[WelchParams]. summary() produces an R-style block,
    interpretation() the narrative reading of the same numbers.
    """
    _result: Result[WelchParams]
    _design: 'WelchDesign | None'

    # --- Test statistics ---

    @property
    def welch_result(self) -> WelchResult:
        return self._result.params.result

    @property
    def t_statistic(self) -> float:
        return self._result.params.result.t_statistic

    @property
    def degrees_of_freedom(self) -> float:
        """Welch-Satterthwaite degrees of freedom."""
        return self._result.params.result.degrees_of_freedom

    @property
    def standard_error(self) -> float:
        return self._result.params.result.standard_error

    @property
    def mean_difference(self) -> float:
        """mean1 - mean2."""
        return self._result.params.result.mean_difference

    @property
    def null_difference(self) -> float:
        return self._result.params.hypothesis.null_difference

    @property
    def p_value(self) -> float:
        """Two-sided p-value, see p_value_method."""
        return self._result.params.p_value

    @property
    def p_value_method(self) -> str:
        return self._result.params.p_value_method

    # --- Effect size and power ---

    @property
    def cohens_d(self) -> float:
        return self._result.params.result.cohens_d

    @property
    def effect_size_label(self) -> str:
        """'very small', 'small', 'medium' or 'large'."""
        return interpret_effect_size(self.cohens_d)

    @property
    def power(self) -> float:
        return self._result.params.result.power

    # --- Confidence intervals ---

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def alpha(self) -> float:
        return 1.0 - self._result.params.conf_level

    @property
    def intervals(self) -> IntervalSet:
        """Intervals for both groups and the difference at every level."""
        return self._result.params.intervals

    @property
    def conf_int(self) -> NDArray[np.floating[Any]]:
        """Interval for the mean difference at conf_level, shape (2,)."""
        bound = self.difference_interval()
        return np.array([bound.lower, bound.upper])

    def difference_interval(self, level: float | None = None) -> IntervalBound:
        """Interval for mean1 - mean2 at `level` (default conf_level)."""
        return self._interval(DIFFERENCE, level)

    def group_interval(self, group: int, level: float | None = None) -> IntervalBound:
        """Interval for the mean of group 1 or 2 at `level`."""
        if group not in (1, 2):
            raise ValueError(f"group must be 1 or 2, got {group!r}")
        return self._interval(GROUP1 if group == 1 else GROUP2, level)

    def _interval(self, subject: str, level: float | None) -> IntervalBound:
        if level is None:
            level = self.conf_level
        intervals = self.intervals.for_subject(subject)
        if level not in intervals:
            raise KeyError(
                f"level {level} was not computed; available: {self.intervals.levels}"
            )
        return intervals[level]

    # --- Decision ---

    @property
    def reject_null(self) -> bool:
        """True if p_value < alpha."""
        return self.p_value < self.alpha

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def _labels(self) -> tuple[str, str]:
        if self._design is not None:
            return self._design.labels
        return ("Group 1", "Group 2")

    def summary(self) -> str:
        """
        Format as an R-style test report.

        Produces output like:
            Welch Two Sample t-test

        data:  Group 1 and Group 2
        t = 1.291, df = 58, p-value = 0.1967
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         -2.752566  12.75257
        sample estimates:
               Group 1        Group 2
                   100             95
        effect size:  Cohen's d = 0.3333 (small)
        power:  0.2523
        """
        p = self._result.params
        r = p.result
        label1, label2 = self._labels()
        lines = [f"\t{self.info.get('method', 'Welch Two Sample t-test')}", ""]

        lines.append(f"data:  {label1} and {label2}")
        lines.append(
            f"t = {r.t_statistic:.5g}, df = {r.degrees_of_freedom:.5g}, "
            f"p-value = {_format_pvalue(p.p_value)}"
        )
        lines.append(
            "alternative hypothesis: true difference in means "
            f"is not equal to {p.hypothesis.null_difference:g}"
        )

        pct = _format_percent(p.conf_level)
        bound = self.difference_interval()
        lines.append(f"{pct} percent confidence interval:")
        lines.append(f" {_format_number(bound.lower)}  {_format_number(bound.upper)}")

        lines.append("sample estimates:")
        lines.append(f"{label1:>14s} {label2:>14s}")
        lines.append(f"{p.group1.mean:14.7g} {p.group2.mean:14.7g}")

        lines.append(
            f"effect size:  Cohen's d = {r.cohens_d:.4g} "
            f"({interpret_effect_size(r.cohens_d)})"
        )
        lines.append(f"power:  {r.power:.4g}")
        lines.append("")
        return "\n".join(lines)

    def interpretation(self) -> str:
        """Narrative reading of significance, effect size and power."""
        p = self._result.params
        r = p.result
        delta0 = p.hypothesis.null_difference
        label = interpret_effect_size(r.cohens_d)
        power_pct = f"{r.power * 100:.1f}%"

        if self.reject_null:
            decision = (
                f"We reject the null hypothesis that the true difference "
                f"equals {delta0:g}."
            )
            evidence = "provides"
        else:
            decision = (
                f"We fail to reject the null hypothesis that the true "
                f"difference equals {delta0:g}."
            )
            evidence = "does not provide"

        if math.isnan(r.power):
            adequacy = "Power could not be computed."
        elif r.power < ADEQUATE_POWER:
            adequacy = (
                "This is below the conventional 80% threshold, suggesting "
                "the test might be underpowered. Consider increasing sample sizes."
            )
        else:
            adequacy = (
                "This exceeds the conventional 80% threshold, indicating "
                "adequate power to detect the observed effect."
            )

        return "\n".join([
            "Statistical significance:",
            decision,
            f"The data {evidence} sufficient evidence of a difference from the "
            f"hypothesized value at the {self.alpha:g} significance level.",
            "",
            "Practical significance:",
            f"The effect size (Cohen's d = {r.cohens_d:.3f}) indicates a "
            f"{label} effect. The difference between the groups is "
            f"{describe_practical_significance(r.cohens_d)}.",
            "",
            "Statistical power:",
            f"The test has {power_pct} power to detect the observed effect size. "
            f"{adequacy}",
        ])

    def __repr__(self) -> str:
        r = self._result.params.result
        return (
            f"WelchSolution(t={r.t_statistic:.4g}, "
            f"df={r.degrees_of_freedom:.4g}, "
            f"p_value={self._result.params.p_value:.4g}, "
            f"cohens_d={r.cohens_d:.4g})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_percent(level: float) -> str:
    """95 for 0.95, 99.9 for 0.999."""
    return f"{level * 100:.10g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
