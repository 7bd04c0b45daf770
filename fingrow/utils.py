"""General utilities for FinGrow

Contents
--------
- Validation helpers
- Rounding helpers (half-up currency and rate rounding)
- Randomness helpers (resolve_rng)
- Frequency parsing (names or integers)
- Formatters (format_currency, format_percent, thousands_formatter)
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Mapping, Optional, Union

import numpy as np

from .constants import (
    COMPOUNDING_FREQUENCIES,
    CURRENCY_DECIMALS,
    RATE_DECIMALS,
)
from .exceptions import InvalidParameter

__all__ = [
    # Validation
    "check_finite",
    "check_non_negative",
    "check_positive",
    "check_whole_number",
    # Rounding
    "round_half_up",
    "round_currency",
    "round_rate",
    # Randomness
    "RandomSource",
    "resolve_rng",
    # Frequencies
    "parse_frequency",
    # Formatters
    "format_currency",
    "format_percent",
    "format_years",
    "thousands_formatter",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_finite(name: str, value: float) -> None:
    """Raise InvalidParameter if *value* is NaN or infinite."""
    if not math.isfinite(value):
        raise InvalidParameter(f"Invalid input: {name} must be a finite number (got {value}).")


def check_non_negative(name: str, value: float) -> None:
    """Raise if *value* is negative (strict)."""
    check_finite(name, value)
    if value < 0:
        raise InvalidParameter(f"Invalid input: {name} must be non-negative (got {value}).")


def check_positive(name: str, value: float) -> None:
    """Raise if *value* is zero or negative."""
    check_finite(name, value)
    if value <= 0:
        raise InvalidParameter(f"Invalid input: {name} must be positive (got {value}).")


def check_whole_number(name: str, value: float) -> None:
    """Raise if *value* has a fractional part (frequencies are counts)."""
    if float(value) != int(value):
        raise InvalidParameter(f"Invalid input: {name} must be a whole number (got {value}).")


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def round_half_up(value: float, decimals: int) -> float:
    """Round *value* to *decimals* places, ties away from zero.

    Works on the shortest decimal representation of the float, so
    1.005 rounds to 1.01 as a person would expect. Any finite float can be
    rounded; NaN and infinity raise InvalidParameter.
    """
    check_finite("value", value)
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # Largest float has 309 integer digits
        ctx.prec = 330 + decimals
        return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def round_currency(value: float) -> float:
    """Round a monetary amount to cents."""
    return round_half_up(value, CURRENCY_DECIMALS)


def round_rate(value: float) -> float:
    """Round a decimal rate to four places (basis-point hundredths)."""
    return round_half_up(value, RATE_DECIMALS)


# ---------------------------------------------------------------------------
# Randomness
# ---------------------------------------------------------------------------

RandomSource = Union[np.random.Generator, int, None]


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return a NumPy Generator from a Generator, an integer seed, or None.

    A Generator is used as is (and advanced by the caller's draws); an int
    seeds a fresh Generator; None gives an unseeded one.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


# ---------------------------------------------------------------------------
# Frequencies
# ---------------------------------------------------------------------------

def parse_frequency(
    value: Union[str, int],
    *,
    table: Mapping[str, int] = COMPOUNDING_FREQUENCIES,
) -> int:
    """Map a frequency name ("monthly") or integer string ("12") to periods/year.

    Names are case-insensitive and accept underscores or spaces in place of
    hyphens. Raises InvalidParameter for unknown names and non-positive
    numbers.
    """
    if isinstance(value, int):
        check_positive("frequency", value)
        return value
    text = str(value).strip().lower().replace("_", "-").replace(" ", "-")
    if text in table:
        return table[text]
    try:
        number = int(text)
    except ValueError:
        raise InvalidParameter(
            f"Unknown frequency {value!r}. "
            f"Use a positive integer or one of: {', '.join(table)}."
        ) from None
    check_positive("frequency", number)
    return number


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def format_currency(value: float, symbol: str = "$", decimals: int = 2) -> str:
    """
    Format a monetary amount with thousands separators.

    Examples
    --------
    >>> format_currency(1276.28)
    '$1,276.28'
    >>> format_currency(-50)
    '-$50.00'
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_percent(rate: float, decimals: int = 2) -> str:
    """Format a decimal rate as a percentage: 0.0845 -> '8.45%'."""
    return f"{rate * 100:.{decimals}f}%"


def format_years(years: float) -> str:
    """Render a year count without a trailing '.0' (10.0 -> '10', 2.5 -> '2.5')."""
    return f"{years:g}"


def thousands_formatter(x, pos):
    """
    Format axis values in thousands for matplotlib FuncFormatter.

    - 25_000 → "25K"
    - 12_500 → "12.5K"
    - 0 → "0"

    Examples
    --------
    >>> from matplotlib.ticker import FuncFormatter
    >>> ax.yaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    """
    if x == 0:
        return '0'
    val = x / 1e3
    return f'{val:.0f}K' if val == int(val) else f'{val:.1f}K'
