"""
Unit tests for utils.py module.

Tests validation functions, rounding, frequency parsing and formatting.
"""

import numpy as np
import pytest

from fingrow.constants import CONTRIBUTION_FREQUENCIES
from fingrow.exceptions import InvalidParameter
from fingrow.utils import (
    check_finite,
    check_non_negative,
    check_positive,
    check_whole_number,
    format_currency,
    format_percent,
    format_years,
    parse_frequency,
    resolve_rng,
    round_currency,
    round_half_up,
    round_rate,
    thousands_formatter,
)


class TestValidation:
    """Test input validation functions."""

    def test_check_non_negative_valid(self):
        """Valid non-negative values should pass."""
        check_non_negative("test", 0)
        check_non_negative("test", 1.5)

    def test_check_non_negative_invalid(self):
        with pytest.raises(InvalidParameter, match="test must be non-negative"):
            check_non_negative("test", -0.1)

    def test_check_positive(self):
        check_positive("test", 0.1)
        with pytest.raises(InvalidParameter, match="test must be positive"):
            check_positive("test", 0)

    def test_check_finite(self):
        with pytest.raises(InvalidParameter, match="finite"):
            check_finite("test", float("nan"))
        with pytest.raises(InvalidParameter, match="finite"):
            check_non_negative("test", float("inf"))

    def test_check_whole_number(self):
        check_whole_number("test", 12)
        check_whole_number("test", 12.0)
        with pytest.raises(InvalidParameter, match="whole number"):
            check_whole_number("test", 12.5)


class TestRounding:
    """Half-up rounding on the decimal representation."""

    def test_half_up(self):
        assert round_half_up(1.005, 2) == 1.01
        assert round_half_up(2.675, 2) == 2.68
        assert round_half_up(0.125, 2) == 0.13

    def test_negative_ties_away_from_zero(self):
        assert round_half_up(-1.005, 2) == -1.01

    def test_currency_and_rate(self):
        assert round_currency(1276.2815625) == 1276.28
        assert round_rate(0.08447) == 0.0845

    def test_large_values(self):
        assert round_half_up(1e30, 2) == 1e30
        assert round_half_up(1.7e308, 2) == 1.7e308

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidParameter, match="finite"):
            round_half_up(float("inf"), 2)
        with pytest.raises(InvalidParameter, match="finite"):
            round_currency(float("nan"))


class TestRandomness:
    """resolve_rng() inputs."""

    def test_generator_passed_through(self):
        gen = np.random.default_rng(1)
        assert resolve_rng(gen) is gen

    def test_int_seed_reproducible(self):
        assert resolve_rng(3).integers(0, 1000) == resolve_rng(3).integers(0, 1000)

    def test_none_gives_generator(self):
        assert isinstance(resolve_rng(None), np.random.Generator)


class TestParseFrequency:
    """Frequency names and integers."""

    @pytest.mark.parametrize("value,expected", [
        ("monthly", 12),
        ("Semi_Annually", 2),
        ("bi weekly", 26),
        ("DAILY", 365),
        ("12", 12),
        (4, 4),
    ])
    def test_valid(self, value, expected):
        assert parse_frequency(value) == expected

    def test_unknown_name(self):
        with pytest.raises(InvalidParameter, match="Unknown frequency"):
            parse_frequency("fortnightly")

    def test_non_positive(self):
        with pytest.raises(InvalidParameter, match="must be positive"):
            parse_frequency("0")

    def test_daily_not_a_contribution_frequency(self):
        with pytest.raises(InvalidParameter, match="Unknown frequency"):
            parse_frequency("daily", table=CONTRIBUTION_FREQUENCIES)


class TestFormatting:
    """Test formatting functions."""

    def test_format_currency(self):
        assert format_currency(1276.28) == "$1,276.28"
        assert format_currency(-50) == "-$50.00"
        assert format_currency(1000, symbol="€") == "€1,000.00"

    def test_format_percent(self):
        assert format_percent(0.0845) == "8.45%"
        assert format_percent(0.05, decimals=1) == "5.0%"

    def test_format_years(self):
        assert format_years(10.0) == "10"
        assert format_years(2.5) == "2.5"

    def test_thousands_formatter(self):
        assert thousands_formatter(0, None) == "0"
        assert thousands_formatter(25_000, None) == "25K"
        assert thousands_formatter(12_500, None) == "12.5K"
