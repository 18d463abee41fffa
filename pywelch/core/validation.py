"""
Input validation utilities for PyWelch.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from collections.abc import Iterable
from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pywelch.core.exceptions import (
    DomainError,
    InvalidInputError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float numpy array.

    Rejects inputs that result in object dtype (indicating mixed types
    or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ValidationError: If array is not 1D
    """
    if array.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify a value is a finite real number and return it as float.

    Booleans are rejected even though they are ints in Python.

    Raises:
        InvalidInputError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        raise InvalidInputError(
            f"{name}: expected a real number, got {type(value).__name__}",
            field=name, value=value,
        )
    result = float(value)
    if not math.isfinite(result):
        raise InvalidInputError(
            f"{name}: must be finite, got {result}",
            field=name, value=value,
        )
    return result


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is strictly positive.

    Raises:
        InvalidInputError: If value <= 0
    """
    if not value > 0.0:
        raise InvalidInputError(
            f"{name}: must be positive, got {value}",
            field=name, value=value,
        )


def check_sample_size(value: Any, name: str, min_size: int = 2) -> int:
    """
    Verify a sample size is an integer of at least min_size.

    Integral floats (30.0) are accepted; 30.5 is not.

    Returns:
        The sample size as int

    Raises:
        InvalidInputError: If value is not an integer or is below min_size
    """
    if isinstance(value, bool):
        raise InvalidInputError(
            f"{name}: expected an integer sample size, got bool",
            field=name, value=value,
        )
    if isinstance(value, (Integral, np.integer)):
        n = int(value)
    elif isinstance(value, (Real, np.floating)) and float(value).is_integer():
        n = int(value)
    else:
        raise InvalidInputError(
            f"{name}: expected an integer sample size, got {value!r}",
            field=name, value=value,
        )
    if n < min_size:
        raise InvalidInputError(
            f"{name}: requires at least {min_size} observations, got {n}",
            field=name, value=value,
        )
    return n


def check_probability(p: float, name: str) -> None:
    """
    Verify a probability lies in the open interval (0, 1).

    NaN fails the check.

    Raises:
        DomainError: If p <= 0, p >= 1, or p is NaN
    """
    if not (0.0 < p < 1.0):
        raise DomainError(
            f"{name} must be in the open interval (0, 1), got {p}",
            name=name, value=p,
        )


def check_confidence_levels(levels: Iterable[float]) -> tuple[float, ...]:
    """
    Validate a set of confidence levels and return them deduplicated
    and sorted ascending.

    Raises:
        ValidationError: If no levels are given
        DomainError: If any level lies outside (0, 1)
    """
    values = [float(level) for level in levels]
    if not values:
        raise ValidationError("levels: at least one confidence level is required")
    for level in values:
        check_probability(level, "level")
    return tuple(sorted(set(values)))
