"""
Tolerance tiers for the closed-form approximations.

Each tier records how closely an approximation tracks the exact
distribution function it replaces. Used by the test suite when
comparing against scipy.stats, and available to callers who need to
know how many digits of a reported value are meaningful.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Abramowitz & Stegun 7.1.26: |erf error| <= 1.5e-7, so the CDF is within 7.5e-8
NORMAL_CDF = ToleranceTier(
    rtol=0.0,
    atol=1.5e-7,
    name='normal_cdf',
    description='A&S 7.1.26 error function: absolute error below 1.5e-7',
)

# Acklam's rational approximation to the normal quantile
NORMAL_INVERSE = ToleranceTier(
    rtol=1.15e-9,
    atol=1e-12,
    name='normal_inverse',
    description='Three-region rational approximation: relative error below 1.15e-9',
)

# Composition of the two above; the CDF error is amplified by 1/pdf in the tails
NORMAL_ROUND_TRIP = ToleranceTier(
    rtol=0.0,
    atol=2e-5,
    name='normal_round_trip',
    description='inverse(cdf(x)) for |x| <= 3',
)

# Two-term Cornish-Fisher expansion; coarse for small df
STUDENT_T_LARGE_DF = ToleranceTier(
    rtol=1e-3,
    atol=1e-3,
    name='student_t_large_df',
    description='Cornish-Fisher t quantile for df >= 30',
)

STUDENT_T_SMALL_DF = ToleranceTier(
    rtol=5e-2,
    atol=5e-2,
    name='student_t_small_df',
    description='Cornish-Fisher t quantile for 5 <= df < 30',
)


def get_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    tiers = {
        t.name: t for t in (
            NORMAL_CDF, NORMAL_INVERSE, NORMAL_ROUND_TRIP,
            STUDENT_T_LARGE_DF, STUDENT_T_SMALL_DF,
        )
    }
    if name not in tiers:
        raise ValueError(f"Unknown tolerance tier: {name!r}. Known: {sorted(tiers)}")
    return tiers[name]
