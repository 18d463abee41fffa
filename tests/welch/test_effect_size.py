"""
Tests for Cohen's d, the power approximation and effect-size bands.
"""

import math

import pytest

from pywelch.core.exceptions import DomainError
from pywelch.welch import (
    GroupSummary,
    cohens_d,
    describe_practical_significance,
    interpret_effect_size,
    pooled_standard_deviation,
    power,
)


class TestCohensD:

    def test_equal_variance_unit_effect(self, unit_effect_groups):
        g1, g2 = unit_effect_groups
        assert pooled_standard_deviation(g1, g2) == 2.0
        assert cohens_d(g1, g2) == 1.0

    def test_non_negative_and_symmetric(self, unit_effect_groups):
        g1, g2 = unit_effect_groups
        assert cohens_d(g1, g2) == cohens_d(g2, g1)
        assert cohens_d(g1, g2) >= 0.0

    def test_unequal_groups(self, unequal_groups):
        g1, g2 = unequal_groups
        assert pooled_standard_deviation(g1, g2) == pytest.approx(7.135060680127, rel=1e-10)
        assert cohens_d(g1, g2) == pytest.approx(0.280305955291, rel=1e-10)

    def test_minimum_sizes(self):
        g1 = GroupSummary(mean=1.0, standard_deviation=1.0, sample_size=2)
        g2 = GroupSummary(mean=2.0, standard_deviation=1.0, sample_size=2)
        assert cohens_d(g1, g2) == 1.0

    def test_zero_spread_differing_means_is_infinite(self):
        g1 = GroupSummary(mean=1.0, standard_deviation=0.0, sample_size=5)
        g2 = GroupSummary(mean=2.0, standard_deviation=0.0, sample_size=5)
        assert math.isinf(cohens_d(g1, g2))

    def test_zero_spread_equal_means_is_nan(self):
        g = GroupSummary(mean=1.0, standard_deviation=0.0, sample_size=5)
        assert math.isnan(cohens_d(g, g))


class TestPower:

    def test_known_value(self):
        assert power(1.0 / 3.0, 30, 30, 0.05) == pytest.approx(0.2523325342, abs=1e-8)

    def test_large_effect(self):
        assert power(1.0, 30, 30, 0.05) == pytest.approx(0.9721272826, abs=1e-8)

    def test_medium_effect_n64(self):
        """Classic planning case: d = 0.5, 64 per group gives ~80% power."""
        assert power(0.5, 64, 64, 0.05) == pytest.approx(0.8074304606, abs=1e-8)

    def test_zero_effect_equals_alpha(self):
        assert power(0.0, 30, 30, 0.05) == pytest.approx(0.05, abs=1e-6)

    def test_default_alpha(self):
        assert power(0.4, 20, 25) == power(0.4, 20, 25, 0.05)

    def test_increasing_in_d(self):
        values = [power(d, 20, 20, 0.05) for d in (0.0, 0.2, 0.5, 0.8, 1.2)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_increasing_in_n(self):
        assert power(0.5, 10, 20) < power(0.5, 20, 20) < power(0.5, 20, 40)

    def test_smaller_alpha_lowers_power(self):
        assert power(1.0 / 3.0, 30, 30, 0.01) == pytest.approx(0.0994802196, abs=1e-8)
        assert power(0.5, 30, 30, 0.01) < power(0.5, 30, 30, 0.05) < power(0.5, 30, 30, 0.1)

    def test_bounded(self):
        for d in (0.0, 0.1, 1.0, 5.0):
            assert 0.0 <= power(d, 5, 7, 0.05) <= 1.0

    def test_infinite_effect(self):
        assert power(math.inf, 5, 5, 0.05) == 1.0

    @pytest.mark.parametrize("alpha", [0.0, 1.0, 1.5, 1.99, 2.0, -0.5, math.nan])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(DomainError):
            power(0.5, 10, 10, alpha)

    def test_invalid_alpha_names_parameter(self):
        with pytest.raises(DomainError) as excinfo:
            power(0.5, 10, 10, 1.5)
        assert excinfo.value.name == "alpha"
        assert excinfo.value.value == 1.5


class TestInterpretation:

    @pytest.mark.parametrize("d,label", [
        (0.0, "very small"),
        (0.19, "very small"),
        (0.2, "small"),
        (0.49, "small"),
        (0.5, "medium"),
        (0.79, "medium"),
        (0.8, "large"),
        (3.0, "large"),
        (math.inf, "large"),
        (-0.6, "medium"),
    ])
    def test_bands(self, d, label):
        assert interpret_effect_size(d) == label

    def test_nan(self):
        assert interpret_effect_size(math.nan) == "undefined"

    def test_practical_significance(self):
        assert describe_practical_significance(0.1).startswith("very small")
        assert "moderate" in describe_practical_significance(0.6)
        assert "practically significant" in describe_practical_significance(1.0)
