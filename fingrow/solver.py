"""
Required-rate solver for FinGrow.

Inverts the no-contribution compounding formula

    T = P * (1 + r/m)^(m*t)   =>   r = m * ((T/P)^(1/(m*t)) - 1)

to find the annual rate needed to grow a principal P into a target T over
t years with m compounding periods per year. Contributions are not
modelled; the contribution-aware simulation is not inverted.
"""

from __future__ import annotations

import logging

from .constants import DEFAULT_COMPOUNDING_FREQUENCY
from .exceptions import InvalidParameter
from .utils import check_finite, check_positive, check_whole_number, round_rate

__all__ = ["required_rate"]

logger = logging.getLogger(__name__)


def required_rate(
    principal: float,
    target_amount: float,
    years: float,
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY,
) -> float:
    """
    Annual rate needed to reach *target_amount* from *principal*.

    Parameters
    ----------
    principal : float
        Initial lump sum (> 0).
    target_amount : float
        Desired future value (> principal).
    years : float
        Horizon in years (> 0).
    compounding_frequency : int, default 1
        Compounding periods per year (> 0).

    Returns
    -------
    float
        Annual rate as a decimal fraction, rounded half-up to 4 places.

    Raises
    ------
    InvalidParameter
        If principal <= 0, target_amount <= principal, years <= 0 or
        compounding_frequency <= 0.

    Examples
    --------
    >>> required_rate(1000, 1500, 5)
    0.0845
    >>> required_rate(1000, 1500, 5, 12)
    0.0814
    """
    check_positive("principal", principal)
    check_finite("target_amount", target_amount)
    if target_amount <= principal:
        raise InvalidParameter(
            f"Invalid input: target_amount must be greater than principal "
            f"(got target_amount={target_amount}, principal={principal})."
        )
    check_positive("years", years)
    check_positive("compounding_frequency", compounding_frequency)
    check_whole_number("compounding_frequency", compounding_frequency)

    n = compounding_frequency * years
    rate = compounding_frequency * ((target_amount / principal) ** (1 / n) - 1)
    logger.debug("required_rate: n=%g raw=%.10f", n, rate)
    return round_rate(rate)
