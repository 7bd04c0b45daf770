"""
Rule-based narrative for FinGrow projections.

Purpose
-------
Turns projection numbers into short sentences for the presentation layer:

- insights(): risk tier, horizon tier, growth tier and one general tip
- recommendations(): principal, rate, optional age and horizon advice

Every tier is an ordered table of Tier(predicate, template) rows. Rows are
evaluated top to bottom and the first matching predicate wins, so tier
boundaries can be read (and tested) directly from the tables below. A table
may match nothing, in which case it contributes no sentence.

Randomness
----------
The general tip is the only non-deterministic output. It is drawn from
GENERAL_TIPS with a NumPy Generator passed in by the caller (a Generator,
an int seed, or None for an unseeded one).

Preconditions
-------------
These functions do not validate their inputs. Callers pass values that
already went through the compounding engine, with principal > 0.

Example
-------
>>> lines = insights(1000, 0.05, 10, 1628.89, rng=42)
>>> len(lines)
4
>>> lines[2]
'Your money will grow 62.9% over 10 years, a solid return on investment.'
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional, Sequence

from .constants import (
    AGE_MIDDLE_MAX,
    AGE_YOUNG_MAX,
    GROWTH_MODEST_MAX,
    GROWTH_SOLID_MAX,
    HORIZON_LONG_RECOMMENDATION_MIN,
    HORIZON_MEDIUM_MAX,
    HORIZON_SHORT_MAX,
    PRINCIPAL_MEDIUM_MAX,
    PRINCIPAL_SMALL_MAX,
    RATE_HIGH_RECOMMENDATION_MIN,
    RATE_LOW_RECOMMENDATION_MAX,
    RISK_LOW_MAX,
    RISK_MODERATE_MAX,
)
from .utils import RandomSource, format_years, resolve_rng

__all__ = [
    "Tier",
    "match_tier",
    "RISK_TIERS",
    "HORIZON_TIERS",
    "GROWTH_TIERS",
    "PRINCIPAL_TIERS",
    "RATE_TIERS",
    "AGE_TIERS",
    "YEARS_TIERS",
    "GENERAL_TIPS",
    "insights",
    "recommendations",
    "choose_tip",
]


class Tier(NamedTuple):
    """A narrative rule: emit *template* when *predicate(value)* is true."""

    predicate: Callable[[float], bool]
    template: str


def _always(_value: float) -> bool:
    return True


def match_tier(tiers: Sequence[Tier], value: float) -> Optional[Tier]:
    """Return the first tier whose predicate accepts *value*, or None."""
    for tier in tiers:
        if tier.predicate(value):
            return tier
    return None


# ---------------------------------------------------------------------------
# Insight tables
# ---------------------------------------------------------------------------

RISK_TIERS = (
    Tier(
        lambda rate: rate < RISK_LOW_MAX,
        "Your investment has a low-risk profile, which is good for capital "
        "preservation but may not outpace inflation.",
    ),
    Tier(
        lambda rate: rate < RISK_MODERATE_MAX,
        "Your investment has a moderate-risk profile, balancing growth potential "
        "with reasonable security.",
    ),
    Tier(
        _always,
        "Your investment has a high-risk profile. Consider diversifying to protect "
        "against market volatility.",
    ),
)

HORIZON_TIERS = (
    Tier(
        lambda years: years < HORIZON_SHORT_MAX,
        "Short investment horizons limit compounding benefits. Consider extending "
        "your time frame if possible.",
    ),
    Tier(
        lambda years: years < HORIZON_MEDIUM_MAX,
        "Your medium-term investment horizon allows for meaningful compound growth "
        "while maintaining flexibility.",
    ),
    Tier(
        _always,
        "Your long-term investment horizon maximizes compound interest benefits. "
        "Stay consistent with contributions.",
    ),
)

# Templates take {growth} (percent gained) and {years}.
GROWTH_TIERS = (
    Tier(
        lambda multiple: multiple < GROWTH_MODEST_MAX,
        "Your money will grow {growth:.1f}% over {years} years. Consider increasing "
        "contributions or finding higher returns.",
    ),
    Tier(
        lambda multiple: multiple < GROWTH_SOLID_MAX,
        "Your money will grow {growth:.1f}% over {years} years, a solid return on "
        "investment.",
    ),
    Tier(
        _always,
        "Your money will grow {growth:.1f}% over {years} years, an excellent return "
        "demonstrating the power of compound interest.",
    ),
)

GENERAL_TIPS = (
    "Consider inflation when planning long-term investments. Historical inflation "
    "averages around 2-3% annually.",
    "Dollar-cost averaging (regular contributions) can help reduce risk and enhance "
    "returns over time.",
    "Tax-advantaged accounts like 401(k)s and IRAs can significantly boost your "
    "effective return rate.",
    "Rebalancing your portfolio annually can help maintain your target risk level "
    "and potentially improve returns.",
    "Emergency funds should typically cover 3-6 months of expenses before investing "
    "aggressively.",
    "Diversification across asset classes can help protect your portfolio during "
    "market downturns.",
)


# ---------------------------------------------------------------------------
# Recommendation tables
# ---------------------------------------------------------------------------

PRINCIPAL_TIERS = (
    Tier(
        lambda principal: principal < PRINCIPAL_SMALL_MAX,
        "Consider building a larger initial investment to maximize compound growth "
        "potential.",
    ),
    Tier(
        lambda principal: principal < PRINCIPAL_MEDIUM_MAX,
        "Your initial investment provides a good foundation. Regular contributions "
        "will accelerate growth.",
    ),
    Tier(
        _always,
        "Your substantial initial investment gives you a strong head start. Focus on "
        "maintaining an appropriate asset allocation.",
    ),
)

# No catch-all row: rates in [0.04, 0.10] get no sentence.
RATE_TIERS = (
    Tier(
        lambda rate: rate < RATE_LOW_RECOMMENDATION_MAX,
        "Explore other investment vehicles that might offer higher returns while "
        "matching your risk tolerance.",
    ),
    Tier(
        lambda rate: rate > RATE_HIGH_RECOMMENDATION_MIN,
        "High expected returns often come with higher risk. Ensure you're comfortable "
        "with potential volatility.",
    ),
)

AGE_TIERS = (
    Tier(
        lambda age: age < AGE_YOUNG_MAX,
        "At your age, you can afford to take more risk for potential higher returns "
        "due to your long time horizon.",
    ),
    Tier(
        lambda age: age < AGE_MIDDLE_MAX,
        "Balance growth with increasing stability as you approach retirement age.",
    ),
    Tier(
        _always,
        "Focus on preserving capital while maintaining growth to combat inflation "
        "during retirement.",
    ),
)

YEARS_TIERS = (
    Tier(
        lambda years: years < HORIZON_LONG_RECOMMENDATION_MIN,
        "For short to medium time horizons, consider maintaining more liquidity and "
        "focusing on lower-volatility investments.",
    ),
    Tier(
        _always,
        "Your long investment horizon allows you to potentially benefit from "
        "higher-growth asset classes like equities.",
    ),
)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

def choose_tip(rng: RandomSource = None) -> str:
    """Draw one general tip uniformly from GENERAL_TIPS."""
    generator = resolve_rng(rng)
    return GENERAL_TIPS[int(generator.integers(0, len(GENERAL_TIPS)))]


def insights(
    principal: float,
    rate: float,
    years: float,
    future_value: float,
    *,
    rng: RandomSource = None,
) -> List[str]:
    """
    Narrative insights for a projection.

    Parameters
    ----------
    principal : float
        Initial lump sum. Must be > 0 (not checked).
    rate : float
        Annual rate as a decimal fraction.
    years : float
        Horizon in years.
    future_value : float
        Result of future_value() for the same inputs.
    rng : numpy.random.Generator, int or None, optional
        Random source for the general tip.

    Returns
    -------
    list of str
        Exactly four sentences: risk, horizon, growth, tip.
    """
    multiple = future_value / principal
    growth = match_tier(GROWTH_TIERS, multiple)
    return [
        match_tier(RISK_TIERS, rate).template,
        match_tier(HORIZON_TIERS, years).template,
        growth.template.format(growth=multiple * 100 - 100, years=format_years(years)),
        choose_tip(rng),
    ]


def recommendations(
    principal: float,
    rate: float,
    years: float,
    age: Optional[float] = None,
) -> List[str]:
    """
    Personalized recommendations, in the order principal, rate, age, years.

    Each table contributes at most one sentence; the age table is consulted
    only when *age* is given.
    """
    rules = [(PRINCIPAL_TIERS, principal), (RATE_TIERS, rate)]
    if age is not None:
        rules.append((AGE_TIERS, age))
    rules.append((YEARS_TIERS, years))

    sentences = []
    for tiers, value in rules:
        tier = match_tier(tiers, value)
        if tier is not None:
            sentences.append(tier.template)
    return sentences
