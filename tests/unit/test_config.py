"""
Unit tests for config.py module.

Tests Pydantic config documents, JSON loading and environment settings.
"""

import json

import pytest
from pydantic import ValidationError

from fingrow.config import (
    AppSettings,
    InvestmentConfig,
    ProjectionConfig,
    format_validation_error,
)
from fingrow.exceptions import ConfigurationError


class TestInvestmentConfig:
    """Test InvestmentConfig validation."""

    def test_valid_minimal(self):
        config = InvestmentConfig(principal=1000, annual_rate=0.05, years=10)
        assert config.compounding_frequency == 1
        assert config.contribution_amount == 0.0
        assert config.contribution_frequency is None

    def test_to_parameters(self):
        config = InvestmentConfig(
            principal=1000, annual_rate=0.05, years=5,
            compounding_frequency=12, contribution_amount=100,
        )
        params = config.to_parameters()
        assert params.principal == 1000
        assert params.contribution_frequency == 12

    def test_negative_principal_rejected(self):
        with pytest.raises(ValidationError):
            InvestmentConfig(principal=-1, annual_rate=0.05, years=10)

    def test_zero_frequency_rejected(self):
        with pytest.raises(ValidationError):
            InvestmentConfig(principal=1000, annual_rate=0.05, years=10, compounding_frequency=0)

    def test_infinite_rejected(self):
        with pytest.raises(ValidationError):
            InvestmentConfig(principal=float("inf"), annual_rate=0.05, years=10)

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            InvestmentConfig(principal=1000, annual_rate=0.05, years=10, volatility=0.2)

    def test_frozen(self):
        config = InvestmentConfig(principal=1000, annual_rate=0.05, years=10)
        with pytest.raises(ValidationError):
            config.principal = 2000


class TestProjectionConfig:
    """Test ProjectionConfig validation and loading."""

    def test_valid(self, config_dict):
        config = ProjectionConfig.model_validate(config_dict)
        assert config.age == 28
        assert config.seed == 42
        assert config.target_amount == 10_000

    def test_target_must_exceed_principal(self, config_dict):
        config_dict["target_amount"] = 500
        with pytest.raises(ValidationError, match="must be greater than principal"):
            ProjectionConfig.model_validate(config_dict)

    def test_age_bounds(self, config_dict):
        config_dict["age"] = 130
        with pytest.raises(ValidationError):
            ProjectionConfig.model_validate(config_dict)

    def test_json_round_trip(self, config_dict):
        config = ProjectionConfig.model_validate(config_dict)
        loaded = ProjectionConfig.model_validate_json(config.model_dump_json())
        assert loaded == config

    def test_from_json(self, config_file):
        config = ProjectionConfig.from_json(config_file)
        assert config.investment.compounding_frequency == 12

    def test_from_json_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            ProjectionConfig.from_json(tmp_path / "missing.json")

    def test_from_json_invalid_document(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"investment": {"principal": -5, "annual_rate": 0.05, "years": 1}}))
        with pytest.raises(ConfigurationError, match="investment.principal"):
            ProjectionConfig.from_json(path)

    def test_from_json_malformed(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            ProjectionConfig.from_json(path)


class TestFormatValidationError:
    """Test error flattening."""

    def test_paths_joined(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectionConfig.model_validate({"investment": {"principal": 1, "annual_rate": -1, "years": 1}})
        message = format_validation_error(exc_info.value)
        assert message.startswith("investment.annual_rate:")


class TestAppSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.log_level == "WARNING"
        assert settings.seed is None
        assert settings.currency_symbol == "$"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FINGROW_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FINGROW_SEED", "7")
        monkeypatch.setenv("FINGROW_CURRENCY_SYMBOL", "€")
        settings = AppSettings()
        assert settings.log_level == "DEBUG"
        assert settings.seed == 7
        assert settings.currency_symbol == "€"

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("FINGROW_LOG_LEVEL=INFO\n", encoding="utf-8")
        assert AppSettings().log_level == "INFO"

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("FINGROW_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            AppSettings()
