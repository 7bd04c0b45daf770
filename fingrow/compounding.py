"""
Compounding engine for FinGrow.

Purpose
-------
Computes the future value of a principal plus recurring contributions
under periodic compounding. This is the leaf of the projection pipeline:
the timeline generator reuses its validation and period limits, and the
narrative generators consume its result.

Key Formulas
------------
- Periodic rate: r = annual_rate / m, with m compounding periods per year
- Base growth: B = P * (1 + r)^(m * t)
- Contribution sub-balance (simulated, start-of-period deposits):
      C_0 = 0
      C_{i+1} = (C_i + d * [i mod k == 0]) * (1 + r),  i = 0 .. ceil(m*t) - 1
  with deposit size d = c * (q / m) and spacing k = m / q for q deposits
  per year of nominal amount c.
- Future value: round_half_up(B + C_n, 2)

The spacing test `i mod k == 0` assumes k is a whole number. When
contributions are more frequent than compounding (q > m) k is fractional
and only some periods receive a deposit; that behaviour is kept and
signalled with a UserWarning.

Example
-------
>>> future_value(1000, 0.05, 5)
1276.28
>>> future_value(1000, 0.05, 5, 12)
1283.36
>>> params = InvestmentParameters(1000, 0.05, 5, 12, contribution_amount=100)
>>> future_value_of(params)
8112.3
"""

from __future__ import annotations

import logging
import math
import warnings
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_COMPOUNDING_FREQUENCY, MAX_PERIODS
from .exceptions import InvalidParameter, PeriodLimitError
from .types import ParametersDict
from .utils import (
    check_finite,
    check_non_negative,
    check_positive,
    check_whole_number,
    round_currency,
)

__all__ = [
    "InvestmentParameters",
    "validate_inputs",
    "validate_parameters",
    "future_value",
    "future_value_of",
    "period_count",
    "contribution_spacing",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvestmentParameters:
    """
    Inputs of a compounding projection.

    Parameters
    ----------
    principal : float
        Initial lump sum (>= 0).
    annual_rate : float
        Annual rate as a decimal fraction (>= 0), e.g. 0.05 for 5%.
    years : float
        Horizon in years (>= 0).
    compounding_frequency : int, default 1
        Compounding periods per year (> 0).
    contribution_amount : float, default 0.0
        Nominal recurring deposit. Values <= 0 mean no contributions.
    contribution_frequency : int, optional
        Deposits per year (> 0). None means "same as compounding".

    Notes
    -----
    Construction does not validate; the engine refuses to compute on
    invalid values (see validate_parameters).
    """

    principal: float
    annual_rate: float
    years: float
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY
    contribution_amount: float = 0.0
    contribution_frequency: Optional[int] = None

    def __post_init__(self):
        if self.contribution_frequency is None:
            object.__setattr__(self, "contribution_frequency", self.compounding_frequency)

    @property
    def periodic_rate(self) -> float:
        """Interest rate applied per compounding period."""
        return self.annual_rate / self.compounding_frequency

    @property
    def total_periods(self) -> float:
        """compounding_frequency * years (may be fractional)."""
        return self.compounding_frequency * self.years

    @property
    def has_contributions(self) -> bool:
        return self.contribution_amount > 0

    def as_dict(self) -> ParametersDict:
        return {
            "principal": self.principal,
            "annual_rate": self.annual_rate,
            "years": self.years,
            "compounding_frequency": self.compounding_frequency,
            "contribution_amount": self.contribution_amount,
            "contribution_frequency": self.contribution_frequency,
        }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_inputs(
    principal: float,
    rate: float,
    years: float,
    compounding_frequency: int,
    contribution_amount: float,
    contribution_frequency: int,
) -> None:
    """
    Check the engine's bounds, raising InvalidParameter on the first violation.

    Checks run in a fixed order: principal, rate, years, compounding
    frequency, contribution frequency. contribution_amount only has to be
    finite: a value <= 0 simply disables contributions.
    """
    check_non_negative("principal", principal)
    check_non_negative("annual_rate", rate)
    check_non_negative("years", years)
    check_positive("compounding_frequency", compounding_frequency)
    check_whole_number("compounding_frequency", compounding_frequency)
    check_positive("contribution_frequency", contribution_frequency)
    check_whole_number("contribution_frequency", contribution_frequency)
    check_finite("contribution_amount", contribution_amount)


def validate_parameters(params: InvestmentParameters) -> None:
    """Validate an InvestmentParameters value (see validate_inputs)."""
    validate_inputs(
        params.principal,
        params.annual_rate,
        params.years,
        params.compounding_frequency,
        params.contribution_amount,
        params.contribution_frequency,
    )


def period_count(total_periods: float) -> int:
    """
    Number of loop iterations needed to cover *total_periods*.

    A fractional total is rounded up (the loop runs while i < total).
    Raises PeriodLimitError above MAX_PERIODS.
    """
    periods = int(math.ceil(total_periods))
    if periods > MAX_PERIODS:
        raise PeriodLimitError(
            f"Invalid input: projection needs {periods:,} compounding periods; "
            f"the maximum supported is {MAX_PERIODS:,}. "
            f"Reduce the horizon or the compounding frequency."
        )
    return periods


def contribution_spacing(compounding_frequency: int, contribution_frequency: int) -> float:
    """Periods between deposits; warn when it is not a whole number."""
    spacing = compounding_frequency / contribution_frequency
    if not float(spacing).is_integer():
        warnings.warn(
            f"contribution_frequency ({contribution_frequency}) does not divide "
            f"compounding_frequency ({compounding_frequency}); deposits are only "
            f"added on periods whose index is a multiple of {spacing:.4f}, "
            f"so some contributions are skipped.",
            UserWarning,
            stacklevel=3,
        )
    return spacing


# ---------------------------------------------------------------------------
# Future value
# ---------------------------------------------------------------------------

def _too_large(periods: float, rate: float) -> InvalidParameter:
    return InvalidParameter(
        f"Invalid input: growth over {periods:g} periods at {rate} is too large to represent."
    )


def future_value(
    principal: float,
    rate: float,
    years: float,
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY,
    contribution_amount: float = 0.0,
    contribution_frequency: Optional[int] = None,
) -> float:
    """
    Future value of a principal plus recurring contributions.

    Parameters
    ----------
    principal : float
        Initial lump sum (>= 0).
    rate : float
        Annual rate as a decimal fraction (>= 0).
    years : float
        Horizon in years (>= 0).
    compounding_frequency : int, default 1
        Compounding periods per year (> 0).
    contribution_amount : float, default 0.0
        Nominal recurring deposit; <= 0 disables contributions.
    contribution_frequency : int, optional
        Deposits per year (> 0); defaults to compounding_frequency.

    Returns
    -------
    float
        Future value rounded half-up to cents. Intermediate values keep
        full floating precision.

    Raises
    ------
    InvalidParameter
        If any bound is violated.
    PeriodLimitError
        If contributions are simulated over more than MAX_PERIODS periods.

    Examples
    --------
    >>> future_value(1000, 0.05, 5)
    1276.28
    >>> future_value(1000, 0.05, 5, 12, 100, 12)
    8112.3
    """
    if contribution_frequency is None:
        contribution_frequency = compounding_frequency
    validate_inputs(
        principal, rate, years, compounding_frequency,
        contribution_amount, contribution_frequency,
    )

    r = rate / compounding_frequency
    n = compounding_frequency * years
    try:
        base = principal * (1 + r) ** n
    except OverflowError:
        raise _too_large(n, rate) from None
    if not math.isfinite(base):
        raise _too_large(n, rate)

    if contribution_amount <= 0:
        return round_currency(base)

    periods = period_count(n)
    deposit = contribution_amount * (contribution_frequency / compounding_frequency)
    spacing = contribution_spacing(compounding_frequency, contribution_frequency)

    contributions = 0.0
    for i in range(periods):
        if i % spacing == 0:
            contributions += deposit
        contributions *= 1 + r

    total = base + contributions
    if not math.isfinite(total):
        raise _too_large(n, rate)

    logger.debug(
        "future_value: base=%.6f contributions=%.6f periods=%d deposit=%.6f spacing=%g",
        base, contributions, periods, deposit, spacing,
    )
    return round_currency(total)


def future_value_of(params: InvestmentParameters) -> float:
    """future_value() for an InvestmentParameters value."""
    return future_value(
        params.principal,
        params.annual_rate,
        params.years,
        params.compounding_frequency,
        params.contribution_amount,
        params.contribution_frequency,
    )
