"""Projection orchestrator for FinGrow

Connects `compounding.py`, `timeline.py`, `insights.py` and `benchmarks.py`
the way a front end drives them: compute the future value and the yearly
timeline, derive the totals, then narrate the result.

Design goals
------------
- Validate once, up front; invalid parameters raise InvalidParameter and
  nothing is computed.
- Deterministic when seeded: the general tip uses a Generator built from
  the engine's seed.
- Narrative is produced only when there is something to describe
  (principal > 0 and future value > 0).

Typical usage
-------------
>>> params = InvestmentParameters(
...     principal=10_000,
...     annual_rate=0.06,
...     years=20,
...     compounding_frequency=12,
...     contribution_amount=200,
... )
>>> engine = ProjectionEngine(params, age=35, seed=42)
>>> result = engine.run()
>>> result.timeline[-1].year
20
>>> len(result.insights), len(result.recommendations)
(4, 3)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .benchmarks import BenchmarkResult, benchmarks
from .compounding import InvestmentParameters, future_value_of, validate_parameters
from .insights import insights, recommendations
from .timeline import TimelineEntry, timeline
from .types import ProjectionDict
from .utils import resolve_rng, round_currency

__all__ = [
    "ProjectionResult",
    "ProjectionEngine",
    "project",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionResult:
    parameters: InvestmentParameters
    future_value: float
    timeline: Tuple[TimelineEntry, ...]
    total_contributions: float
    total_interest: float
    insights: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    benchmarks: Optional[BenchmarkResult] = None

    @property
    def has_narrative(self) -> bool:
        return bool(self.insights)

    def to_dict(self) -> ProjectionDict:
        return {
            "parameters": self.parameters.as_dict(),
            "future_value": self.future_value,
            "total_contributions": self.total_contributions,
            "total_interest": self.total_interest,
            "timeline": [entry.to_dict() for entry in self.timeline],
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
            "benchmarks": self.benchmarks.to_dict() if self.benchmarks else None,
        }


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class ProjectionEngine:
    """High-level orchestrator that computes the numbers for one set of
    parameters and the narrative that describes them.
    """

    def __init__(
        self,
        params: InvestmentParameters,
        *,
        age: Optional[float] = None,
        seed: Optional[int] = None,
    ):
        validate_parameters(params)
        self.params = params
        self.age = age
        self.seed = seed

    # -------------------- Numbers --------------------
    def future_value(self) -> float:
        return future_value_of(self.params)

    def timeline(self) -> Tuple[TimelineEntry, ...]:
        return timeline(self.params)

    def total_contributions(self, entries: Optional[Tuple[TimelineEntry, ...]] = None) -> float:
        """Cumulative contributions at the end of the horizon.

        Falls back to the principal when the horizon is shorter than a year.
        """
        entries = self.timeline() if entries is None else entries
        if not entries:
            return round_currency(self.params.principal)
        return entries[-1].cumulative_contributions

    def total_interest(
        self,
        fv: Optional[float] = None,
        entries: Optional[Tuple[TimelineEntry, ...]] = None,
    ) -> float:
        """Future value minus everything paid in."""
        fv = self.future_value() if fv is None else fv
        return round_currency(fv - self.total_contributions(entries))

    # -------------------- Narrative --------------------
    def can_narrate(self, fv: float) -> bool:
        """Narrative needs a positive principal (growth multiple) and value."""
        return self.params.principal > 0 and fv > 0

    def insights(self, fv: Optional[float] = None) -> List[str]:
        fv = self.future_value() if fv is None else fv
        if not self.can_narrate(fv):
            return []
        return insights(
            self.params.principal,
            self.params.annual_rate,
            self.params.years,
            fv,
            rng=resolve_rng(self.seed),
        )

    def recommendations(self, fv: Optional[float] = None) -> List[str]:
        fv = self.future_value() if fv is None else fv
        if not self.can_narrate(fv):
            return []
        return recommendations(
            self.params.principal,
            self.params.annual_rate,
            self.params.years,
            age=self.age,
        )

    def benchmarks(self, fv: Optional[float] = None) -> Optional[BenchmarkResult]:
        fv = self.future_value() if fv is None else fv
        if not self.can_narrate(fv):
            return None
        return benchmarks(self.params.annual_rate, self.params.years)

    # -------------------- Full run --------------------
    def run(self) -> ProjectionResult:
        """Compute every figure and sentence for the parameters."""
        fv = self.future_value()
        entries = self.timeline()
        result = ProjectionResult(
            parameters=self.params,
            future_value=fv,
            timeline=entries,
            total_contributions=self.total_contributions(entries),
            total_interest=self.total_interest(fv, entries),
            insights=self.insights(fv),
            recommendations=self.recommendations(fv),
            benchmarks=self.benchmarks(fv),
        )
        logger.debug(
            "projection: fv=%.2f years=%d narrative=%s",
            fv, len(entries), result.has_narrative,
        )
        return result


def project(
    principal: float,
    annual_rate: float,
    years: float,
    compounding_frequency: int = 1,
    contribution_amount: float = 0.0,
    contribution_frequency: Optional[int] = None,
    *,
    age: Optional[float] = None,
    seed: Optional[int] = None,
) -> ProjectionResult:
    """Run a full projection from plain arguments (see ProjectionEngine)."""
    params = InvestmentParameters(
        principal=principal,
        annual_rate=annual_rate,
        years=years,
        compounding_frequency=compounding_frequency,
        contribution_amount=contribution_amount,
        contribution_frequency=contribution_frequency,
    )
    return ProjectionEngine(params, age=age, seed=seed).run()
