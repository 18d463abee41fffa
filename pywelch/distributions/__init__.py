"""
Distribution approximations.

Closed-form, table-free approximations used by the Welch test engine.

Public API:
    standard_normal_cdf(x)          - Phi(x) via A&S 7.1.26 erf
    standard_normal_inverse(p)      - Phi^-1(p), three-region rational fit
    student_t_critical_value(p, df) - Cornish-Fisher t quantile
    student_t_cdf(t, df)            - exact t CDF (scipy)
    student_t_sf(t, df)             - exact t survival function (scipy)
"""

from pywelch.distributions._normal import (
    erf,
    standard_normal_cdf,
    standard_normal_inverse,
)
from pywelch.distributions._student_t import (
    student_t_critical_value,
    student_t_cdf,
    student_t_sf,
)

__all__ = [
    "erf",
    "standard_normal_cdf",
    "standard_normal_inverse",
    "student_t_critical_value",
    "student_t_cdf",
    "student_t_sf",
]
