"""
FinGrow - Compound Growth Projector

Projects how an investment grows under periodic compounding with optional
recurring contributions, solves for the rate needed to reach a target, and
describes a projection with rule-based insights, recommendations and
benchmark comparisons.

Modules
-------
- compounding : Future value engine and parameter validation
- timeline    : Year-by-year growth simulation
- solver      : Required annual rate for a target amount
- insights    : Tiered narrative insights and recommendations
- benchmarks  : Comparison against historical reference rates
- projection  : Orchestration of numbers and narrative
- config      : Pydantic config documents and environment settings
- plotting    : Matplotlib timeline chart
- utils       : Shared utilities (validation, rounding, formatting)

"""

from .benchmarks import BenchmarkResult, benchmarks
from .compounding import InvestmentParameters, future_value, future_value_of
from .exceptions import (
    ConfigurationError,
    FinGrowError,
    InvalidParameter,
    PeriodLimitError,
    ValidationError,
)
from .insights import insights, recommendations
from .projection import ProjectionEngine, ProjectionResult, project
from .solver import required_rate
from .timeline import TimelineEntry, build_timeline, timeline, timeline_to_frame
from . import utils

__all__ = [
    "InvestmentParameters",
    "future_value",
    "future_value_of",
    "TimelineEntry",
    "timeline",
    "build_timeline",
    "timeline_to_frame",
    "required_rate",
    "insights",
    "recommendations",
    "BenchmarkResult",
    "benchmarks",
    "ProjectionEngine",
    "ProjectionResult",
    "project",
    "FinGrowError",
    "ConfigurationError",
    "ValidationError",
    "InvalidParameter",
    "PeriodLimitError",
    "utils",
]
