"""
Configuration management module for FinGrow.

Purpose
-------
Type-safe projection inputs and application settings using Pydantic.
Config documents (JSON) describe a projection so the CLI can run it
without a long list of options; AppSettings reads environment variables.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: Easy conversion to/from JSON
- Environment-aware: Settings from FINGROW_* variables or a .env file

Example
-------
>>> from fingrow.config import InvestmentConfig, ProjectionConfig
>>> investment = InvestmentConfig(principal=1000, annual_rate=0.05, years=10)
>>> config = ProjectionConfig(investment=investment, age=30, seed=42)
>>>
>>> # Serialize to dict/JSON
>>> json_str = config.model_dump_json()
>>>
>>> # Load from JSON
>>> loaded = ProjectionConfig.model_validate_json(json_str)
>>> loaded.investment.to_parameters().annual_rate
0.05
"""

from __future__ import annotations
from typing import Literal, Optional
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .compounding import InvestmentParameters
from .constants import DEFAULT_COMPOUNDING_FREQUENCY
from .exceptions import ConfigurationError

__all__ = [
    "InvestmentConfig",
    "ProjectionConfig",
    "AppSettings",
    "format_validation_error",
]


def format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into 'field.path: message; ...'."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "config"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


# ---------------------------------------------------------------------------
# Investment Configuration
# ---------------------------------------------------------------------------

class InvestmentConfig(BaseModel):
    """
    Configuration for one set of projection parameters.

    Attributes
    ----------
    principal : float
        Initial lump sum (>= 0).
    annual_rate : float
        Annual rate as a decimal fraction (>= 0).
    years : float
        Horizon in years (>= 0).
    compounding_frequency : int
        Compounding periods per year (> 0).
    contribution_amount : float
        Recurring deposit (>= 0).
    contribution_frequency : int, optional
        Deposits per year (> 0). Defaults to compounding_frequency.

    Examples
    --------
    >>> config = InvestmentConfig(principal=1000, annual_rate=0.05, years=5,
    ...                           compounding_frequency=12, contribution_amount=100)
    >>> config.to_parameters().contribution_frequency
    12
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    principal: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="Initial lump sum"
    )
    annual_rate: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="Annual rate as a decimal fraction"
    )
    years: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="Horizon in years"
    )
    compounding_frequency: int = Field(
        default=DEFAULT_COMPOUNDING_FREQUENCY,
        gt=0,
        description="Compounding periods per year"
    )
    contribution_amount: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Recurring deposit amount"
    )
    contribution_frequency: Optional[int] = Field(
        default=None,
        gt=0,
        description="Deposits per year (defaults to compounding_frequency)"
    )

    def to_parameters(self) -> InvestmentParameters:
        """Build the engine's InvestmentParameters value."""
        return InvestmentParameters(
            principal=self.principal,
            annual_rate=self.annual_rate,
            years=self.years,
            compounding_frequency=self.compounding_frequency,
            contribution_amount=self.contribution_amount,
            contribution_frequency=self.contribution_frequency,
        )


# ---------------------------------------------------------------------------
# Projection Configuration
# ---------------------------------------------------------------------------

class ProjectionConfig(BaseModel):
    """
    Configuration for a complete projection run.

    Attributes
    ----------
    investment : InvestmentConfig
        Projection parameters.
    age : float, optional
        Investor age, enables the age-based recommendation.
    seed : int, optional
        Seed for the general-tip random source.
    target_amount : float, optional
        If set, the CLI also reports the rate needed to reach it.

    Examples
    --------
    >>> config = ProjectionConfig.model_validate({
    ...     "investment": {"principal": 5000, "annual_rate": 0.07, "years": 15},
    ...     "age": 28,
    ... })
    >>> config.age
    28.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    investment: InvestmentConfig = Field(
        description="Projection parameters"
    )
    age: Optional[float] = Field(
        default=None,
        ge=0,
        le=120,
        description="Investor age in years"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for tip selection"
    )
    target_amount: Optional[float] = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Target value for the required-rate report"
    )

    @field_validator("target_amount")
    @classmethod
    def validate_target_above_principal(cls, v, info):
        """Ensure target_amount exceeds the principal."""
        investment = info.data.get("investment")
        if v is not None and investment is not None and v <= investment.principal:
            raise ValueError(
                f"target_amount ({v}) must be greater than principal ({investment.principal})"
            )
        return v

    @classmethod
    def from_json(cls, path: Path) -> "ProjectionConfig":
        """
        Load a projection config document.

        Raises
        ------
        ConfigurationError
            If the file cannot be read or does not match the schema.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise ConfigurationError(format_validation_error(e)) from e


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    should be prefixed with FINGROW_ (e.g., FINGROW_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    seed : int, optional
        Default seed for tip selection when the CLI gets no --seed.
    currency_symbol : str
        Symbol used when formatting amounts.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'

    # With .env file:
    # FINGROW_LOG_LEVEL=DEBUG
    >>> settings = AppSettings(_env_file=".env")
    """

    model_config = SettingsConfigDict(
        env_prefix="FINGROW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Default random seed for tip selection"
    )
    currency_symbol: str = Field(
        default="$",
        min_length=1,
        max_length=3,
        description="Currency symbol for formatted output"
    )
