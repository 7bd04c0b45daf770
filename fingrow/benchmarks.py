"""
Benchmark comparison for FinGrow.

Compares the compounded growth multiple (1 + rate)^years of an investment
with four fixed reference rates (stock market, bonds, savings accounts,
inflation) and narrates the difference.

The three market benchmarks get a three-way sentence (outperform,
underperform, perform similarly) with the relative difference

    pct_diff = (investment - benchmark) / benchmark * 100

shown to one decimal. Inflation gets a binary sentence only: the
investment either outpaces it or it does not, with no percentage and no
equality case.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import BENCHMARK_LABELS, BENCHMARK_RATES
from .types import BenchmarkDict

__all__ = [
    "BenchmarkResult",
    "growth_multiple",
    "compare_growth",
    "inflation_sentence",
    "benchmarks",
]


@dataclass(frozen=True)
class BenchmarkResult:
    """Narrative comparison against each benchmark."""

    stock_market: str
    bonds: str
    savings_accounts: str
    inflation: str

    def to_dict(self) -> BenchmarkDict:
        return {
            "stock_market": self.stock_market,
            "bonds": self.bonds,
            "savings_accounts": self.savings_accounts,
            "inflation": self.inflation,
        }


def growth_multiple(rate: float, years: float) -> float:
    """Annually compounded growth multiple (1 + rate)^years."""
    return (1 + rate) ** years


def compare_growth(investment: float, benchmark: float, name: str) -> str:
    """
    Describe how an investment multiple compares with a benchmark multiple.

    Outperform and underperform sentences both print the magnitude with one
    decimal place, keeping a trailing zero: a 10% gap reads "10.0%", not "10%".
    """
    pct_diff = (investment - benchmark) / benchmark * 100
    if investment > benchmark:
        return (
            f"Your investment is projected to outperform the {name} "
            f"by approximately {abs(pct_diff):.1f}%."
        )
    if investment < benchmark:
        return (
            f"Your investment is projected to underperform the {name} "
            f"by approximately {abs(pct_diff):.1f}%."
        )
    return f"Your investment is projected to perform similarly to the {name}."


def inflation_sentence(investment: float, inflation: float) -> str:
    if investment > inflation:
        return "Your investment is projected to outpace inflation, maintaining purchasing power."
    return (
        "Your investment may not keep pace with inflation, potentially reducing "
        "purchasing power over time."
    )


def benchmarks(rate: float, years: float) -> BenchmarkResult:
    """
    Compare an annual *rate* held for *years* with the fixed benchmarks.

    Examples
    --------
    >>> benchmarks(0.05, 10).savings_accounts
    'Your investment is projected to outperform the typical savings accounts by approximately 47.5%.'
    >>> benchmarks(0.10, 10).stock_market
    'Your investment is projected to perform similarly to the stock market average.'
    """
    investment = growth_multiple(rate, years)
    comparisons = {
        key: compare_growth(investment, growth_multiple(BENCHMARK_RATES[key], years), label)
        for key, label in BENCHMARK_LABELS.items()
    }
    return BenchmarkResult(
        stock_market=comparisons["stock_market"],
        bonds=comparisons["bonds"],
        savings_accounts=comparisons["savings_accounts"],
        inflation=inflation_sentence(
            investment, growth_multiple(BENCHMARK_RATES["inflation"], years)
        ),
    )
