"""
PyWelch: Welch's two-sample t-test from summary statistics.

Computes the test statistic, Welch-Satterthwaite degrees of freedom,
p-value, nested confidence intervals, Cohen's d and approximate power
from the mean, standard deviation and size of two groups, using
closed-form approximations to the normal and Student's t distributions.

Submodules:
    distributions: Normal CDF / quantile and t critical value approximations
    welch: The test engine, interval builder and report formatting
"""

__version__ = "0.1.0"

from pywelch import distributions
from pywelch import welch
from pywelch.welch import welch_test

__all__ = [
    "__version__",
    "distributions",
    "welch",
    "welch_test",
]
