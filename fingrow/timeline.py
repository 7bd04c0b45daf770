"""
Year-by-year growth timeline for FinGrow.

Purpose
-------
Simulates a projection period by period and emits one TimelineEntry per
elapsed whole year: the end-of-year balance, the interest earned that
year, and the cumulative amount paid in (principal plus contributions).

Period mechanics
----------------
Within each compounding period the balance first earns interest at
r = annual_rate / m; a deposit of d = c * (q / m) is then added when the
1-based global period index is a multiple of k = m / q. The balance and
the cumulative contributions both start at the principal.

Yearly interest uses a fixed inflow estimate for every year:

    interest_y = B_y - B_{y-1} - c * min(q, m)

This matches the per-period deposits whenever q divides m; it is an
approximation otherwise and is kept as is because consumers rely on it.

Example
-------
>>> params = InvestmentParameters(1000, 0.05, 3)
>>> entries = timeline(params)
>>> entries[0]
TimelineEntry(year=1, balance=1050.0, interest_earned=50.0, cumulative_contributions=1000.0)
>>> timeline_to_frame(entries).loc[3, "balance"]
1157.63
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import pandas as pd

from .compounding import (
    InvestmentParameters,
    contribution_spacing,
    period_count,
    validate_parameters,
)
from .constants import DEFAULT_COMPOUNDING_FREQUENCY
from .exceptions import InvalidParameter
from .types import TimelineEntryDict
from .utils import round_currency

__all__ = [
    "TimelineEntry",
    "timeline",
    "build_timeline",
    "timeline_to_frame",
    "TIMELINE_COLUMNS",
]

logger = logging.getLogger(__name__)

TIMELINE_COLUMNS = ("balance", "interest_earned", "cumulative_contributions")


@dataclass(frozen=True)
class TimelineEntry:
    """
    One year of a growth timeline.

    Attributes
    ----------
    year : int
        1-based year number; entries are sequential with no gaps.
    balance : float
        End-of-year balance, rounded to cents.
    interest_earned : float
        Interest earned during the year net of the contribution inflow,
        rounded to cents.
    cumulative_contributions : float
        Principal plus all contributions made through this year, rounded
        to cents.
    """

    year: int
    balance: float
    interest_earned: float
    cumulative_contributions: float

    def to_dict(self) -> TimelineEntryDict:
        return {
            "year": self.year,
            "balance": self.balance,
            "interest_earned": self.interest_earned,
            "cumulative_contributions": self.cumulative_contributions,
        }


def timeline(params: InvestmentParameters) -> Tuple[TimelineEntry, ...]:
    """
    Simulate *params* period by period and summarise each elapsed year.

    Parameters
    ----------
    params : InvestmentParameters
        Projection inputs. Validated exactly like future_value().

    Returns
    -------
    tuple of TimelineEntry
        One entry per whole year, in order. A horizon under one year
        (including years=0) gives an empty tuple.

    Raises
    ------
    InvalidParameter
        If any bound is violated, or the balance overflows.
    PeriodLimitError
        If the simulated periods exceed MAX_PERIODS.
    """
    validate_parameters(params)

    m = int(params.compounding_frequency)
    q = int(params.contribution_frequency)
    whole_years = int(math.floor(params.years))
    period_count(whole_years * m)

    amount = params.contribution_amount if params.has_contributions else 0.0
    r = params.periodic_rate
    deposit = amount * (q / m)
    spacing = contribution_spacing(m, q) if amount > 0 else 1.0
    yearly_inflow = amount * min(q, m)

    balance = float(params.principal)
    paid_in = float(params.principal)
    previous = balance

    entries = []
    for year in range(1, whole_years + 1):
        for period in range(1, m + 1):
            balance += balance * r
            index = (year - 1) * m + period
            if index % spacing == 0:
                balance += deposit
                paid_in += deposit

        if not math.isfinite(balance):
            raise InvalidParameter(
                f"Invalid input: balance is too large to represent after {year} years."
            )

        entries.append(
            TimelineEntry(
                year=year,
                balance=round_currency(balance),
                interest_earned=round_currency(balance - previous - yearly_inflow),
                cumulative_contributions=round_currency(paid_in),
            )
        )
        previous = balance

    logger.debug("timeline: %d entries over %d periods/year", len(entries), m)
    return tuple(entries)


def build_timeline(
    principal: float,
    rate: float,
    years: float,
    compounding_frequency: int = DEFAULT_COMPOUNDING_FREQUENCY,
    contribution_amount: float = 0.0,
    contribution_frequency: Optional[int] = None,
) -> Tuple[TimelineEntry, ...]:
    """timeline() taking the same positional arguments as future_value()."""
    return timeline(
        InvestmentParameters(
            principal=principal,
            annual_rate=rate,
            years=years,
            compounding_frequency=compounding_frequency,
            contribution_amount=contribution_amount,
            contribution_frequency=contribution_frequency,
        )
    )


def timeline_to_frame(entries: Iterable[TimelineEntry]) -> pd.DataFrame:
    """
    Tabulate timeline entries as a DataFrame indexed by year.

    Columns: balance, interest_earned, cumulative_contributions. An empty
    timeline gives an empty frame with the same columns.
    """
    rows = [entry.to_dict() for entry in entries]
    if not rows:
        return pd.DataFrame(
            columns=list(TIMELINE_COLUMNS),
            index=pd.Index([], name="year", dtype="int64"),
            dtype=float,
        )
    return pd.DataFrame(rows).set_index("year")[list(TIMELINE_COLUMNS)]
