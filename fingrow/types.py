"""
Type definitions for FinGrow.

Purpose
-------
Provides TypedDict definitions for the plain-dictionary views of FinGrow
results. Dataclasses expose `to_dict()` methods returning these shapes,
which are what the CLI prints as JSON.

Usage
-----
>>> from fingrow.types import TimelineEntryDict
>>> row: TimelineEntryDict = {
...     "year": 1,
...     "balance": 1050.0,
...     "interest_earned": 50.0,
...     "cumulative_contributions": 1000.0,
... }

Type Definitions
----------------
ParametersDict
    Projection inputs: {"principal", "annual_rate", "years", ...}

TimelineEntryDict
    One year of the growth timeline.

BenchmarkDict
    Narrative comparison against the four fixed benchmarks.

ProjectionDict
    Full projection bundle as rendered by the presentation layer.
"""

from typing import List, Optional
from typing_extensions import TypedDict

__all__ = [
    "ParametersDict",
    "TimelineEntryDict",
    "BenchmarkDict",
    "ProjectionDict",
]


class ParametersDict(TypedDict):
    """
    Projection inputs.

    Attributes
    ----------
    principal : float
        Initial lump sum.
    annual_rate : float
        Annual rate as a decimal fraction (0.05 for 5%).
    years : float
        Horizon in years.
    compounding_frequency : int
        Compounding periods per year.
    contribution_amount : float
        Recurring deposit size.
    contribution_frequency : int
        Deposits per year (resolved, never None).
    """

    principal: float
    annual_rate: float
    years: float
    compounding_frequency: int
    contribution_amount: float
    contribution_frequency: int


class TimelineEntryDict(TypedDict):
    """
    One year of the growth timeline.

    Attributes
    ----------
    year : int
        1-based year number.
    balance : float
        End-of-year balance, cents-rounded.
    interest_earned : float
        Interest for the year net of the contribution inflow.
    cumulative_contributions : float
        Principal plus all contributions made through this year.
    """

    year: int
    balance: float
    interest_earned: float
    cumulative_contributions: float


class BenchmarkDict(TypedDict):
    """
    Benchmark comparison sentences.

    Examples
    --------
    >>> benchmarks(0.05, 10).to_dict()["savings_accounts"]
    'Your investment is projected to outperform the typical savings accounts by approximately 47.5%.'
    """

    stock_market: str
    bonds: str
    savings_accounts: str
    inflation: str


class ProjectionDict(TypedDict):
    """
    Full projection bundle.

    `benchmarks` is None and the narrative lists are empty when the
    projection has no positive principal or future value to describe.
    """

    parameters: ParametersDict
    future_value: float
    total_contributions: float
    total_interest: float
    timeline: List[TimelineEntryDict]
    insights: List[str]
    recommendations: List[str]
    benchmarks: Optional[BenchmarkDict]
