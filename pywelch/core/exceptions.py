"""
Exception hierarchy for PyWelch.

All exceptions inherit from PyWelchError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyWelchError(Exception):
    """Base exception for all PyWelch errors."""
    pass


class ValidationError(PyWelchError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidInputError(ValidationError):
    """
    A group summary is malformed.

    Raised by the design factories when a mean or standard deviation is
    not a finite number, a standard deviation is not positive, or a
    sample size is not an integer >= 2. The numeric kernel itself never
    raises this; it assumes pre-validated input.

    Attributes:
        field: Name of the offending field (e.g. 'sd1', 'n2')
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value


class DomainError(ValidationError):
    """
    A probability argument lies outside the open interval (0, 1).

    Raised by standard_normal_inverse (and transitively by
    student_t_critical_value) and when a requested confidence level
    is 0, 1, or outside that range.

    Attributes:
        name: Name of the offending argument (e.g. 'p', 'level')
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value
