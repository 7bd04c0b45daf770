"""
Pytest configuration and fixtures for FinGrow test suite.

This module provides reusable fixtures for testing all FinGrow components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

import json

import numpy as np
import pytest

from fingrow.compounding import InvestmentParameters


# ---------------------------------------------------------------------------
# Randomness Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def seed() -> int:
    """Standard random seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed) -> np.random.Generator:
    """Seeded NumPy generator."""
    return np.random.default_rng(seed)


# ---------------------------------------------------------------------------
# Parameter Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def simple_params() -> InvestmentParameters:
    """
    Lump sum with annual compounding.

    Principal: 1,000
    Rate: 5%
    Horizon: 3 years
    """
    return InvestmentParameters(principal=1000, annual_rate=0.05, years=3)


@pytest.fixture
def monthly_contribution_params() -> InvestmentParameters:
    """
    Monthly compounding with monthly deposits.

    Principal: 1,000
    Rate: 5%
    Horizon: 2 years
    Contribution: 100 per month
    """
    return InvestmentParameters(
        principal=1000,
        annual_rate=0.05,
        years=2,
        compounding_frequency=12,
        contribution_amount=100,
        contribution_frequency=12,
    )


@pytest.fixture
def long_horizon_params() -> InvestmentParameters:
    """
    Twenty-year plan with monthly deposits.

    Principal: 10,000
    Rate: 6%
    Contribution: 200 per month
    """
    return InvestmentParameters(
        principal=10_000,
        annual_rate=0.06,
        years=20,
        compounding_frequency=12,
        contribution_amount=200,
    )


# ---------------------------------------------------------------------------
# Config Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def config_dict() -> dict:
    """Valid projection config document."""
    return {
        "investment": {
            "principal": 1000,
            "annual_rate": 0.05,
            "years": 5,
            "compounding_frequency": 12,
            "contribution_amount": 100,
            "contribution_frequency": 12,
        },
        "age": 28,
        "seed": 42,
        "target_amount": 10_000,
    }


@pytest.fixture
def config_file(tmp_path, config_dict):
    """Projection config written to a temporary JSON file."""
    path = tmp_path / "projection.json"
    path.write_text(json.dumps(config_dict), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from FINGROW_* variables and any local .env file."""
    for name in ("FINGROW_LOG_LEVEL", "FINGROW_SEED", "FINGROW_CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
