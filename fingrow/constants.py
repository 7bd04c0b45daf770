"""
Global constants for FinGrow.

Purpose
-------
Centralizes default values, tier thresholds and reference rates used
throughout the FinGrow codebase. Narrative tier boundaries live here so
they can be audited in one place.

Usage
-----
>>> from fingrow.constants import BENCHMARK_RATES, MAX_PERIODS
>>> BENCHMARK_RATES["stock_market"]
0.1

Categories
----------
- Engine: Period limits, rounding precision, default frequencies
- Frequencies: Named compounding / contribution frequencies
- Benchmarks: Historical reference annual rates
- Narrative: Tier thresholds for insights and recommendations
- Plotting: Figure sizes, colors, transparency values
"""

from typing import Dict, Tuple

__all__ = [
    # Engine
    "MAX_PERIODS",
    "CURRENCY_DECIMALS",
    "RATE_DECIMALS",
    "DEFAULT_COMPOUNDING_FREQUENCY",
    # Frequencies
    "COMPOUNDING_FREQUENCIES",
    "CONTRIBUTION_FREQUENCIES",
    # Benchmarks
    "BENCHMARK_RATES",
    "BENCHMARK_LABELS",
    # Narrative thresholds
    "RISK_LOW_MAX",
    "RISK_MODERATE_MAX",
    "HORIZON_SHORT_MAX",
    "HORIZON_MEDIUM_MAX",
    "GROWTH_MODEST_MAX",
    "GROWTH_SOLID_MAX",
    "PRINCIPAL_SMALL_MAX",
    "PRINCIPAL_MEDIUM_MAX",
    "RATE_LOW_RECOMMENDATION_MAX",
    "RATE_HIGH_RECOMMENDATION_MIN",
    "AGE_YOUNG_MAX",
    "AGE_MIDDLE_MAX",
    "HORIZON_LONG_RECOMMENDATION_MIN",
    # Plotting
    "DEFAULT_FIGSIZE",
    "DEFAULT_ALPHA_BANDS",
    "DEFAULT_LINEWIDTH",
    "DEFAULT_LINEWIDTH_THICK",
]


# =============================================================================
# Engine
# =============================================================================

MAX_PERIODS: int = 365 * 200
"""Maximum number of compounding periods simulated period by period.

200 years of daily compounding. The closed-form branch (no contributions)
is not bounded.
"""

CURRENCY_DECIMALS: int = 2
"""Decimal places for monetary results (half-up rounding)."""

RATE_DECIMALS: int = 4
"""Decimal places for solved rates (half-up rounding)."""

DEFAULT_COMPOUNDING_FREQUENCY: int = 1
"""Default number of compounding periods per year (annual)."""


# =============================================================================
# Frequencies
# =============================================================================

COMPOUNDING_FREQUENCIES: Dict[str, int] = {
    "annually": 1,
    "semi-annually": 2,
    "quarterly": 4,
    "monthly": 12,
    "bi-weekly": 26,
    "weekly": 52,
    "daily": 365,
}
"""Named compounding frequencies (periods per year)."""

CONTRIBUTION_FREQUENCIES: Dict[str, int] = {
    name: value
    for name, value in COMPOUNDING_FREQUENCIES.items()
    if name != "daily"
}
"""Named contribution frequencies. Daily deposits are not offered."""


# =============================================================================
# Benchmarks
# =============================================================================

BENCHMARK_RATES: Dict[str, float] = {
    "stock_market": 0.10,
    "bonds": 0.04,
    "savings_accounts": 0.01,
    "inflation": 0.025,
}
"""Average historical annual rates used for comparison narration."""

BENCHMARK_LABELS: Dict[str, str] = {
    "stock_market": "stock market average",
    "bonds": "bond market average",
    "savings_accounts": "typical savings accounts",
}
"""Names used inside benchmark sentences."""


# =============================================================================
# Narrative thresholds
# =============================================================================

RISK_LOW_MAX: float = 0.03
"""Rates below this are low-risk."""

RISK_MODERATE_MAX: float = 0.07
"""Rates in [RISK_LOW_MAX, RISK_MODERATE_MAX) are moderate-risk."""

HORIZON_SHORT_MAX: float = 5
"""Horizons below this many years are short."""

HORIZON_MEDIUM_MAX: float = 15
"""Horizons in [HORIZON_SHORT_MAX, HORIZON_MEDIUM_MAX) are medium-term."""

GROWTH_MODEST_MAX: float = 1.5
"""Growth multiples below this are modest."""

GROWTH_SOLID_MAX: float = 3.0
"""Growth multiples in [GROWTH_MODEST_MAX, GROWTH_SOLID_MAX) are solid."""

PRINCIPAL_SMALL_MAX: float = 1_000
"""Principals below this get the 'build a larger base' recommendation."""

PRINCIPAL_MEDIUM_MAX: float = 10_000
"""Principals in [PRINCIPAL_SMALL_MAX, PRINCIPAL_MEDIUM_MAX) are a good foundation."""

RATE_LOW_RECOMMENDATION_MAX: float = 0.04
"""Rates below this suggest exploring other vehicles."""

RATE_HIGH_RECOMMENDATION_MIN: float = 0.10
"""Rates above this trigger the volatility warning."""

AGE_YOUNG_MAX: int = 30
"""Investors younger than this get the growth-oriented recommendation."""

AGE_MIDDLE_MAX: int = 50
"""Investors in [AGE_YOUNG_MAX, AGE_MIDDLE_MAX) get the balance recommendation."""

HORIZON_LONG_RECOMMENDATION_MIN: float = 10
"""Horizons of at least this many years favour growth asset classes."""


# =============================================================================
# Plotting Defaults
# =============================================================================

DEFAULT_FIGSIZE: Tuple[int, int] = (12, 6)
"""Default figure size (width, height) in inches for timeline plots."""

DEFAULT_ALPHA_BANDS: float = 0.2
"""Default alpha for filled areas."""

DEFAULT_LINEWIDTH: float = 1.0
"""Default line width for standard plot lines."""

DEFAULT_LINEWIDTH_THICK: float = 2.0
"""Line width for emphasized lines (balance)."""
