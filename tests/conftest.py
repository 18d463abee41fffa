"""
pytest configuration and shared fixtures.
"""

import pytest

from pywelch.welch import GroupSummary, TestHypothesis


@pytest.fixture
def equal_groups():
    """Equal SDs and sizes: df = n1 + n2 - 2 = 58, t = 5 / sqrt(15)."""
    return (
        GroupSummary(mean=100.0, standard_deviation=15.0, sample_size=30),
        GroupSummary(mean=95.0, standard_deviation=15.0, sample_size=30),
    )


@pytest.fixture
def unit_effect_groups():
    """Pooled SD 2, mean difference 2: Cohen's d = 1."""
    return (
        GroupSummary(mean=10.0, standard_deviation=2.0, sample_size=30),
        GroupSummary(mean=12.0, standard_deviation=2.0, sample_size=30),
    )


@pytest.fixture
def unequal_groups():
    """Unequal SDs and sizes: fractional Welch df of about 31.04."""
    return (
        GroupSummary(mean=20.0, standard_deviation=4.0, sample_size=10),
        GroupSummary(mean=18.0, standard_deviation=8.0, sample_size=25),
    )


@pytest.fixture
def null_hypothesis():
    return TestHypothesis(null_difference=0.0)
