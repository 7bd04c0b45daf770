"""
Custom exceptions for FinGrow.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all FinGrow modules. All exceptions inherit from FinGrowError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
FinGrowError (base)
├── ConfigurationError - Invalid configuration documents or settings
└── ValidationError - Data validation failures
    └── InvalidParameter - Out-of-bounds projection parameters
        └── PeriodLimitError - Simulation would exceed MAX_PERIODS

Messages are written for end users: the presentation layer displays
them verbatim.

Usage
-----
>>> from fingrow.exceptions import InvalidParameter
>>>
>>> try:
...     future_value(-1000, 0.05, 5)
... except InvalidParameter as e:
...     print(f"Cannot project: {e}")
"""


class FinGrowError(Exception):
    """
    Base exception for all FinGrow errors.

    Examples
    --------
    >>> try:
    ...     project(principal=1000, annual_rate=0.05, years=10)
    ... except FinGrowError as e:
    ...     logger.error(f"Projection failed: {e}")
    """
    pass


class ConfigurationError(FinGrowError):
    """
    Invalid configuration document or settings.

    Raised when a projection config file cannot be read or does not
    conform to the ProjectionConfig schema.

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "investment.annual_rate: Input should be greater than or equal to 0"
    ... )
    """
    pass


class ValidationError(FinGrowError):
    """
    Data validation failures.

    Raised when input data fails validation checks such as
    out-of-bounds values or non-finite numbers.
    """
    pass


class InvalidParameter(ValidationError, ValueError):
    """
    Projection parameters violate their bounds.

    Raised synchronously by the compounding engine, the timeline generator
    and the rate solver. Validation failure aborts the computation; no
    partial result is returned.

    Examples
    --------
    >>> raise InvalidParameter(
    ...     "Invalid input: principal must be non-negative (got -1000)."
    ... )
    """
    pass


class PeriodLimitError(InvalidParameter):
    """
    Simulation horizon too large.

    Raised when compounding_frequency * years exceeds MAX_PERIODS and the
    computation needs a period-by-period loop.

    Examples
    --------
    >>> raise PeriodLimitError(
    ...     f"Projection needs {n:,} compounding periods; "
    ...     f"the maximum supported is {MAX_PERIODS:,}."
    ... )
    """
    pass
