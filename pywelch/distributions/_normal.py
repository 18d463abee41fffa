"""
Closed-form approximations to the standard normal distribution.

Two table-free routines:

    standard_normal_cdf:
        Phi(x) = 0.5 * (1 + erf(x / sqrt(2))), with erf from Abramowitz &
        Stegun formula 7.1.26:

            erf(x) ~= 1 - (a1 t + a2 t^2 + a3 t^3 + a4 t^4 + a5 t^5) exp(-x^2)
            t = 1 / (1 + p x),  x >= 0

        |error| <= 1.5e-7. Negative arguments use erf(-x) = -erf(x), so
        Phi(0) = 0.5 exactly and Phi(-x) = 1 - Phi(x).

    standard_normal_inverse:
        Acklam's rational approximation of the quantile function. The
        domain is split at p_low = 0.02425 and p_high = 1 - p_low; the
        central region uses a rational function in (p - 0.5), the tails
        a rational function in sqrt(-2 log(p)). Relative error < 1.15e-9.

References:
    Abramowitz, M. & Stegun, I. A. (1964). Handbook of Mathematical
    Functions, formula 7.1.26.
    Acklam, P. J. (2003). An algorithm for computing the inverse normal
    cumulative distribution function.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pywelch.core.validation import check_probability


# A&S 7.1.26
_ERF_P = 0.3275911
_ERF_A = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)

# Acklam, central region numerator / denominator
_INV_A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
_INV_B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)

# Acklam, tail regions numerator / denominator
_INV_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
_INV_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)

P_LOW = 0.02425
P_HIGH = 1.0 - P_LOW

_SQRT2 = math.sqrt(2.0)


def _horner(coefs: tuple[float, ...], x):
    """Evaluate a polynomial with coefficients in descending order."""
    acc = coefs[0]
    for c in coefs[1:]:
        acc = acc * x + c
    return acc


def erf(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Error function via Abramowitz & Stegun 7.1.26.

    Accepts a scalar or array. Scalars return a Python float.
    """
    x = np.asarray(x, dtype=np.float64)
    sign = np.sign(x)
    ax = np.abs(x)

    t = 1.0 / (1.0 + _ERF_P * ax)
    poly = _horner(_ERF_A[::-1], t) * t
    y = 1.0 - poly * np.exp(-ax * ax)

    result = sign * y
    if result.ndim == 0:
        return float(result)
    return result


def standard_normal_cdf(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    P(Z <= x) for standard normal Z.

    Total over the reals: +/-inf map to 1/0, NaN propagates.

    Args:
        x: Scalar or array of quantiles.

    Returns:
        Probability, float for scalar input, ndarray otherwise.
    """
    x = np.asarray(x, dtype=np.float64)
    result = 0.5 * (1.0 + np.asarray(erf(x / _SQRT2)))
    if result.ndim == 0:
        return float(result)
    return result


def standard_normal_inverse(p: float) -> float:
    """
    Quantile z of the standard normal such that Phi(z) = p.

    Args:
        p: Probability in the open interval (0, 1).

    Returns:
        The quantile z.

    Raises:
        DomainError: If p <= 0 or p >= 1 (or p is NaN).
    """
    p = float(p)
    check_probability(p, "p")

    if p < P_LOW:
        q = math.sqrt(-2.0 * math.log(p))
        return _horner(_INV_C, q) / (_horner(_INV_D, q) * q + 1.0)

    if p > P_HIGH:
        q = math.sqrt(-2.0 * math.log1p(-p))
        return -_horner(_INV_C, q) / (_horner(_INV_D, q) * q + 1.0)

    q = p - 0.5
    r = q * q
    return _horner(_INV_A, r) * q / (_horner(_INV_B, r) * r + 1.0)
