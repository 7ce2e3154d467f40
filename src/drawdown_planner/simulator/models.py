"""Simulation data structures."""

from __future__ import annotations

from dataclasses import dataclass

from drawdown_planner.strategy.models import StrategyName


@dataclass(frozen=True)
class PositionMetrics:
    filled_position: float
    total_cost: float
    avg_cost: float
    value_at_target: float
    profit: float
    roi: float  # percent

    @classmethod
    def zero(cls) -> "PositionMetrics":
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class ProfitCurvePoint:
    x: float  # bottom price
    y: float  # profit


@dataclass(frozen=True)
class ProfitCurve:
    name: StrategyName
    points: list[ProfitCurvePoint]
