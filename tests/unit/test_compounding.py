"""
Unit tests for compounding.py module.

Tests the future value engine:
- Closed-form growth without contributions
- Simulated contribution sub-balance (start-of-period deposits)
- Parameter validation order and messages
- Period limits and overflow handling
"""

import dataclasses
import warnings

import pytest

from fingrow.compounding import (
    InvestmentParameters,
    contribution_spacing,
    future_value,
    future_value_of,
    period_count,
    validate_inputs,
)
from fingrow.constants import MAX_PERIODS
from fingrow.exceptions import InvalidParameter, PeriodLimitError


# ============================================================================
# InvestmentParameters
# ============================================================================

class TestInvestmentParameters:
    """Test the parameter value object."""

    def test_contribution_frequency_defaults_to_compounding(self):
        params = InvestmentParameters(1000, 0.05, 5, compounding_frequency=12)
        assert params.contribution_frequency == 12

    def test_explicit_contribution_frequency_kept(self):
        params = InvestmentParameters(1000, 0.05, 5, 12, 100, 4)
        assert params.contribution_frequency == 4

    def test_derived_properties(self):
        params = InvestmentParameters(1000, 0.06, 2.5, compounding_frequency=12)
        assert params.periodic_rate == pytest.approx(0.005)
        assert params.total_periods == pytest.approx(30.0)
        assert not params.has_contributions

    def test_has_contributions_only_when_positive(self):
        assert InvestmentParameters(0, 0.05, 1, contribution_amount=10).has_contributions
        assert not InvestmentParameters(0, 0.05, 1, contribution_amount=-10).has_contributions

    def test_frozen(self):
        params = InvestmentParameters(1000, 0.05, 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.principal = 2000

    def test_as_dict(self):
        data = InvestmentParameters(1000, 0.05, 5).as_dict()
        assert data == {
            "principal": 1000,
            "annual_rate": 0.05,
            "years": 5,
            "compounding_frequency": 1,
            "contribution_amount": 0.0,
            "contribution_frequency": 1,
        }


# ============================================================================
# Future value: known values
# ============================================================================

class TestFutureValue:
    """Test future_value() against known results."""

    def test_annual_compounding(self):
        assert future_value(1000, 0.05, 5) == 1276.28

    def test_monthly_compounding(self):
        assert future_value(1000, 0.05, 5, 12) == 1283.36

    def test_monthly_contributions(self):
        """Deposits are made at the start of each period."""
        result = future_value(1000, 0.05, 5, 12, 100, 12)
        assert result == pytest.approx(8112.30, abs=0.01)

    def test_contributions_only(self):
        """Two annual deposits of 100 at 10%: (100*1.1 + 100)*1.1."""
        assert future_value(0, 0.10, 2, 1, 100) == pytest.approx(231.0)

    def test_zero_rate(self):
        assert future_value(1000, 0.0, 10) == 1000.0

    def test_zero_rate_with_contributions(self):
        assert future_value(0, 0.0, 1, 12, 100) == pytest.approx(1200.0)

    def test_zero_years(self):
        assert future_value(1000, 0.05, 0) == 1000.0
        assert future_value(1000, 0.05, 0, 12, 100) == 1000.0

    def test_zero_principal_no_contributions(self):
        assert future_value(0, 0.05, 10) == 0.0

    def test_negative_contribution_means_none(self):
        assert future_value(1000, 0.05, 5, 1, -50) == future_value(1000, 0.05, 5)

    def test_quarterly_deposits_monthly_compounding(self):
        """q divides m: no warning, deposits every third period."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = future_value(0, 0.0, 1, 12, 300, 4)
        # Four deposits of 300 * (4/12) = 100 each
        assert result == pytest.approx(400.0)

    def test_rounded_to_cents(self):
        result = future_value(1234.567, 0.0375, 7.3, 4)
        assert result == round(result, 2)

    def test_higher_rate_grows_more(self):
        assert future_value(1000, 0.08, 10) > future_value(1000, 0.05, 10)

    def test_more_frequent_compounding_grows_more(self):
        assert future_value(1000, 0.05, 10, 365) > future_value(1000, 0.05, 10, 12)

    def test_fractional_years(self):
        # 1000 * 1.05 ** 0.5
        assert future_value(1000, 0.05, 0.5) == pytest.approx(1024.70, abs=0.01)

    def test_future_value_of_matches(self):
        params = InvestmentParameters(1000, 0.05, 5, 12, 100, 12)
        assert future_value_of(params) == future_value(1000, 0.05, 5, 12, 100, 12)


# ============================================================================
# Fractional contribution spacing
# ============================================================================

class TestContributionSpacing:
    """Test the deposit spacing helper."""

    def test_whole_spacing(self):
        assert contribution_spacing(12, 4) == 3.0
        assert contribution_spacing(12, 12) == 1.0

    def test_fractional_spacing_warns(self):
        with pytest.warns(UserWarning, match="does not divide"):
            contribution_spacing(1, 12)

    def test_future_value_warns_when_contributions_outpace_compounding(self):
        with pytest.warns(UserWarning, match="does not divide"):
            future_value(1000, 0.05, 2, 1, 100, 12)

    def test_fractional_spacing_values(self):
        """Only period 0 matches a fractional spacing: one deposit in total."""
        with pytest.warns(UserWarning):
            assert future_value(0, 0.0, 1, 1, 100, 12) == 1200.0
        with pytest.warns(UserWarning):
            assert future_value(0, 0.0, 2, 4, 100, 12) == 300.0

    def test_no_warning_without_contributions(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            future_value(1000, 0.05, 2, 1, 0, 12)


# ============================================================================
# Validation
# ============================================================================

class TestValidation:
    """Test parameter validation and error messages."""

    def test_negative_principal(self):
        with pytest.raises(InvalidParameter, match="principal must be non-negative"):
            future_value(-1000, 0.05, 5)

    def test_negative_rate(self):
        with pytest.raises(InvalidParameter, match="annual_rate must be non-negative"):
            future_value(1000, -0.05, 5)

    def test_negative_years(self):
        with pytest.raises(InvalidParameter, match="years must be non-negative"):
            future_value(1000, 0.05, -1)

    def test_zero_compounding_frequency(self):
        with pytest.raises(InvalidParameter, match="compounding_frequency must be positive"):
            future_value(1000, 0.05, 5, 0)

    def test_fractional_compounding_frequency(self):
        with pytest.raises(InvalidParameter, match="compounding_frequency must be a whole number"):
            future_value(1000, 0.05, 5, 1.5)

    def test_zero_contribution_frequency(self):
        with pytest.raises(InvalidParameter, match="contribution_frequency must be positive"):
            future_value(1000, 0.05, 5, 12, 100, 0)

    def test_non_finite_principal(self):
        with pytest.raises(InvalidParameter, match="principal must be a finite number"):
            future_value(float("nan"), 0.05, 5)

    def test_non_finite_contribution(self):
        with pytest.raises(InvalidParameter, match="contribution_amount must be a finite number"):
            future_value(1000, 0.05, 5, 12, float("inf"))

    def test_first_violation_reported(self):
        with pytest.raises(InvalidParameter, match="principal"):
            validate_inputs(-1, -1, -1, 0, 0, 0)

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            future_value(-1, 0.05, 5)


# ============================================================================
# Limits
# ============================================================================

class TestLimits:
    """Test period limits and overflow."""

    def test_period_count_rounds_up(self):
        assert period_count(2.5) == 3
        assert period_count(12) == 12

    def test_period_count_limit(self):
        assert period_count(MAX_PERIODS) == MAX_PERIODS
        with pytest.raises(PeriodLimitError, match="maximum supported"):
            period_count(MAX_PERIODS + 1)

    def test_contribution_loop_limited(self):
        with pytest.raises(PeriodLimitError):
            future_value(1000, 0.05, 201, 365, 10)

    def test_closed_form_not_limited(self):
        assert future_value(1000, 0.0, 201, 365) == 1000.0

    def test_overflow_reported_as_invalid_parameter(self):
        with pytest.raises(InvalidParameter, match="too large"):
            future_value(1000, 1e6, 1000)

    def test_large_closed_form_result(self):
        result = future_value(1000, 0.5, 150)
        assert result == pytest.approx(1000 * 1.5 ** 150, rel=1e-12)

    def test_infinite_closed_form_result(self):
        """Float multiplication overflows to inf without raising."""
        with pytest.raises(InvalidParameter, match="too large"):
            future_value(1e10, 1.0, 1020)

    def test_infinite_contribution_result(self):
        with pytest.raises(InvalidParameter, match="too large"):
            future_value(0, 1.0, 30, 1, 1e300)
