"""
Solver dispatch for the Welch test.

welch_test() accepts either raw summary statistics or a prebuilt
WelchDesign, selects a backend and returns a WelchSolution.
"""

from __future__ import annotations

from collections.abc import Iterable

from pywelch.core.exceptions import ValidationError
from pywelch.welch._common import DEFAULT_CONF_LEVEL, DEFAULT_LEVELS
from pywelch.welch.backends.cpu import CPUWelchBackend
from pywelch.welch.design import WelchDesign
from pywelch.welch.solution import WelchSolution


def _get_backend(backend: str = 'cpu'):
    """
    Select backend for the Welch test.

    The computation is a handful of scalar operations; CPU is the only
    backend.
    """
    if backend in ('cpu', 'auto'):
        return CPUWelchBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def welch_test(
    mean1: float | WelchDesign,
    sd1: float | None = None,
    n1: int | None = None,
    mean2: float | None = None,
    sd2: float | None = None,
    n2: int | None = None,
    *,
    null_difference: float = 0.0,
    conf_level: float = DEFAULT_CONF_LEVEL,
    levels: Iterable[float] = DEFAULT_LEVELS,
    p_value_method: str = "normal",
    labels: tuple[str, str] | None = None,
    backend: str = 'cpu',
) -> WelchSolution:
    """
    Welch's unequal-variance two-sample t-test from summary statistics.

    Parameters
    ----------
    mean1, sd1, n1 : float, float, int
        Mean, standard deviation (> 0) and sample size (>= 2) of group 1.
        mean1 may instead be a prebuilt WelchDesign, in which case the
        remaining arguments are ignored.
    mean2, sd2, n2 : float, float, int
        Same for group 2.
    null_difference : float
        Hypothesized mean1 - mean2 under H0. Default 0.
    conf_level : float
        Reporting confidence level. Default 0.95.
    levels : iterable of float
        Additional levels for fan-chart intervals. conf_level is always
        included.
    p_value_method : str
        "normal" (default) for 2 * (1 - Phi(|t|)), or "t" for the exact
        Student's t p-value at the Welch df.
    labels : tuple of str or None
        Display names for the groups in summary().
    backend : str
        'cpu' (default).

    Returns
    -------
    WelchSolution

    Raises
    ------
    InvalidInputError
        If any group statistic is malformed.
    DomainError
        If conf_level or a level is outside (0, 1).
    """
    if isinstance(mean1, WelchDesign):
        design = mean1
    else:
        missing = [
            name for name, value in (
                ("sd1", sd1), ("n1", n1), ("mean2", mean2),
                ("sd2", sd2), ("n2", n2),
            )
            if value is None
        ]
        if missing:
            raise ValidationError(
                f"welch_test: missing group statistics: {', '.join(missing)}"
            )
        design = WelchDesign.from_summaries(
            mean1, sd1, n1,
            mean2, sd2, n2,
            null_difference=null_difference,
            conf_level=conf_level,
            levels=levels,
            p_value_method=p_value_method,
            labels=labels,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return WelchSolution(_result=result, _design=design)
