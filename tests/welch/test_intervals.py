"""
Tests for the multi-level confidence interval builder.
"""

import math

import pytest

from pywelch.core.exceptions import DomainError, ValidationError
from pywelch.distributions import student_t_critical_value
from pywelch.welch import (
    DIFFERENCE,
    GROUP1,
    GROUP2,
    GroupSummary,
    IntervalBound,
    TestHypothesis,
    build_intervals,
    critical_value_for_level,
    run_welch_test,
)


LEVELS = (0.5, 0.8, 0.95)


class TestIntervalValues:

    def test_difference_at_95(self, unequal_groups):
        result = run_welch_test(*unequal_groups)
        intervals = build_intervals(*unequal_groups, result, [0.95])
        bound = intervals.difference[0.95]
        assert bound.lower == pytest.approx(-2.1594080226, abs=1e-8)
        assert bound.upper == pytest.approx(6.1594080226, abs=1e-8)

    def test_group_uses_own_standard_error(self, unequal_groups):
        g1, g2 = unequal_groups
        result = run_welch_test(g1, g2)
        intervals = build_intervals(g1, g2, result, [0.95])
        bound = intervals.per_group[GROUP1][0.95]
        assert bound.lower == pytest.approx(17.4204446493, abs=1e-8)
        assert bound.upper == pytest.approx(22.5795553507, abs=1e-8)

        critical = student_t_critical_value(0.975, result.degrees_of_freedom)
        g2_bound = intervals.per_group[GROUP2][0.95]
        assert g2_bound.width == pytest.approx(2 * critical * 8.0 / 5.0, rel=1e-12)

    def test_centered_on_estimates(self, equal_groups):
        g1, g2 = equal_groups
        intervals = build_intervals(g1, g2, run_welch_test(g1, g2), LEVELS)
        for level in LEVELS:
            assert intervals.per_group[GROUP1][level].center == pytest.approx(100.0)
            assert intervals.per_group[GROUP2][level].center == pytest.approx(95.0)
            assert intervals.difference[level].center == pytest.approx(5.0)

    def test_difference_ignores_null_difference(self, equal_groups):
        g1, g2 = equal_groups
        a = build_intervals(g1, g2, run_welch_test(g1, g2), [0.9])
        b = build_intervals(
            g1, g2, run_welch_test(g1, g2, TestHypothesis(null_difference=3.0)), [0.9],
        )
        assert a.difference == b.difference

    def test_critical_value_for_level(self):
        assert critical_value_for_level(0.95, 58.0) == student_t_critical_value(0.975, 58.0)


class TestLevels:

    def test_sorted_and_deduplicated(self, equal_groups):
        g1, g2 = equal_groups
        intervals = build_intervals(g1, g2, run_welch_test(g1, g2), [0.95, 0.5, 0.8, 0.5])
        assert intervals.levels == LEVELS
        assert list(intervals.difference) == list(LEVELS)
        assert list(intervals.per_group[GROUP1]) == list(LEVELS)

    @pytest.mark.parametrize("bad", [0.0, 1.0, -0.2, 1.5])
    def test_out_of_domain_rejected(self, equal_groups, bad):
        g1, g2 = equal_groups
        with pytest.raises(DomainError):
            build_intervals(g1, g2, run_welch_test(g1, g2), [0.9, bad])

    def test_empty_rejected(self, equal_groups):
        g1, g2 = equal_groups
        with pytest.raises(ValidationError):
            build_intervals(g1, g2, run_welch_test(g1, g2), [])


class TestNesting:
    """Wider confidence gives a containing interval."""

    @pytest.mark.parametrize("fixture", ["equal_groups", "unequal_groups"])
    def test_nested(self, fixture, request):
        g1, g2 = request.getfixturevalue(fixture)
        intervals = build_intervals(g1, g2, run_welch_test(g1, g2), LEVELS)
        for subject in (GROUP1, GROUP2, DIFFERENCE):
            bounds = intervals.for_subject(subject)
            assert bounds[0.95].contains(bounds[0.8])
            assert bounds[0.8].contains(bounds[0.5])
            assert bounds[0.5].width < bounds[0.8].width < bounds[0.95].width

    def test_bands_widest_first(self, equal_groups):
        g1, g2 = equal_groups
        intervals = build_intervals(g1, g2, run_welch_test(g1, g2), LEVELS)
        bands = list(intervals.bands(DIFFERENCE))
        assert [level for level, _ in bands] == [0.95, 0.8, 0.5]
        widths = [bound.width for _, bound in bands]
        assert widths == sorted(widths, reverse=True)

    def test_unknown_subject(self, equal_groups):
        g1, g2 = equal_groups
        intervals = build_intervals(g1, g2, run_welch_test(g1, g2), LEVELS)
        with pytest.raises(KeyError, match="Unknown subject"):
            intervals.for_subject("group3")


class TestIntervalBound:

    def test_inverted_rejected(self):
        with pytest.raises(ValueError, match="exceeds"):
            IntervalBound(lower=2.0, upper=1.0)

    def test_degenerate_allowed(self):
        bound = IntervalBound(lower=1.0, upper=1.0)
        assert bound.width == 0.0
        assert bound.covers(1.0)

    def test_nan_allowed(self):
        bound = IntervalBound(lower=math.nan, upper=math.nan)
        assert math.isnan(bound.width)

    def test_covers(self):
        bound = IntervalBound(lower=-1.0, upper=3.0)
        assert bound.covers(0.0)
        assert not bound.covers(3.5)


class TestUnvalidatedInput:
    """Bad summaries pass through as numbers rather than raising."""

    def test_negative_sd_gives_ordered_interval(self):
        g1 = GroupSummary(mean=1.0, standard_deviation=-2.0, sample_size=10)
        g2 = GroupSummary(mean=0.0, standard_deviation=2.0, sample_size=10)
        result = run_welch_test(g1, g2)
        intervals = build_intervals(g1, g2, result, LEVELS)

        mirrored = GroupSummary(mean=1.0, standard_deviation=2.0, sample_size=10)
        expected = build_intervals(mirrored, g2, result, LEVELS)
        for level in LEVELS:
            bound = intervals.per_group[GROUP1][level]
            assert bound.lower <= bound.upper
            assert bound == expected.per_group[GROUP1][level]

    def test_zero_sd_gives_degenerate_intervals(self):
        g1 = GroupSummary(mean=1.0, standard_deviation=0.0, sample_size=5)
        g2 = GroupSummary(mean=2.0, standard_deviation=0.0, sample_size=5)
        result = run_welch_test(g1, g2)
        assert math.isnan(result.degrees_of_freedom)

        intervals = build_intervals(g1, g2, result, [0.95])
        assert intervals.difference[0.95].width == 0.0
        assert intervals.difference[0.95].center == -1.0
        assert intervals.per_group[GROUP2][0.95].width == 0.0

    def test_nan_mean_gives_nan_bounds(self, equal_groups):
        g1, g2 = equal_groups
        bad = GroupSummary(mean=math.nan, standard_deviation=15.0, sample_size=30)
        intervals = build_intervals(bad, g2, run_welch_test(bad, g2), [0.95])
        assert math.isnan(intervals.per_group[GROUP1][0.95].lower)
        assert math.isnan(intervals.difference[0.95].upper)
