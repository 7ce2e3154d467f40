"""Advice data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from drawdown_planner.strategy.models import StrategyName


@dataclass(frozen=True)
class AdviceSegment:
    range_high: float
    range_low: float
    is_last: bool
    winner: StrategyName
    # next active level below the segment, None when it reaches the lowest level
    floor_price: Optional[float] = None


@dataclass(frozen=True)
class BestStrategy:
    name: StrategyName
    count: int


@dataclass(frozen=True)
class StrategyAdvice:
    zero_zone_price: float
    segments: list[AdviceSegment]
    best_strategy: Optional[BestStrategy]
    coverage_pct: int
