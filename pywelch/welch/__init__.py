"""
Welch two-sample t-test module.

Summary-statistic Welch test with effect size, power and multi-level
confidence intervals.

Public API:
    welch_test(mean1, sd1, n1, mean2, sd2, n2)  - full test, WelchSolution
    run_welch_test(g1, g2, hypothesis)          - numeric kernel, WelchResult
    build_intervals(g1, g2, result, levels)     - per-level intervals
    cohens_d(g1, g2)                            - pooled-SD effect size
    power(d, n1, n2, alpha)                     - approximate two-sided power
    two_sided_p_value(t, df, method)            - normal or exact t p-value
    interpret_effect_size(d)                    - conventional d band
"""

from pywelch.welch._common import (
    DIFFERENCE,
    GROUP1,
    GROUP2,
    GroupSummary,
    IntervalBound,
    IntervalSet,
    TestHypothesis,
    WelchParams,
    WelchResult,
)
from pywelch.welch._effect_size import (
    cohens_d,
    describe_practical_significance,
    interpret_effect_size,
    pooled_standard_deviation,
    power,
)
from pywelch.welch._engine import (
    run_welch_test,
    two_sided_p_value,
    welch_satterthwaite_df,
)
from pywelch.welch._intervals import build_intervals, critical_value_for_level
from pywelch.welch.design import WelchDesign
from pywelch.welch.solution import WelchSolution
from pywelch.welch.solvers import welch_test

__all__ = [
    "welch_test",
    "run_welch_test",
    "build_intervals",
    "critical_value_for_level",
    "cohens_d",
    "pooled_standard_deviation",
    "power",
    "two_sided_p_value",
    "welch_satterthwaite_df",
    "interpret_effect_size",
    "describe_practical_significance",
    "GroupSummary",
    "TestHypothesis",
    "WelchResult",
    "WelchParams",
    "IntervalBound",
    "IntervalSet",
    "WelchDesign",
    "WelchSolution",
    "GROUP1",
    "GROUP2",
    "DIFFERENCE",
]
