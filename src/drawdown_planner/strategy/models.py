"""Strategy and allocation models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class StrategyName(str, Enum):
    PYRAMID = "pyramid"
    UNIFORM = "uniform"
    INVERTED = "inverted"
    CUSTOM = "custom"

    @property
    def is_custom(self) -> bool:
        return self is StrategyName.CUSTOM

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Allocation:
    price: float
    weight: float  # fraction of total size


@dataclass(frozen=True)
class ComparableStrategy:
    name: StrategyName
    allocations: Sequence[Allocation]


@dataclass(frozen=True)
class PlannerSelection:
    active_strategy: StrategyName = StrategyName.PYRAMID
    # one weight per configured price slot, zero slots included
    custom_weights: Optional[tuple[float, ...]] = None
    bottom_price: Optional[float] = None
