"""
Core infrastructure for PyWelch.

Shared abstractions used by the domain subpackages (distributions, welch).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and approximation tolerance tiers
"""

from pywelch.core.result import Result
from pywelch.core.exceptions import (
    PyWelchError,
    ValidationError,
    InvalidInputError,
    DomainError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyWelchError",
    "ValidationError",
    "InvalidInputError",
    "DomainError",
]
