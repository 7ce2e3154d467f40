"""Allocation weight shapes for staged limit orders."""

from __future__ import annotations

from dataclasses import dataclass

from drawdown_planner.strategy.models import StrategyName

EXPONENTIAL_BASE = 1.8

STRATEGY_ORDER: tuple[StrategyName, ...] = (
    StrategyName.PYRAMID,
    StrategyName.UNIFORM,
    StrategyName.INVERTED,
)


@dataclass(frozen=True)
class PresetWeights:
    pyramid: list[float]
    uniform: list[float]
    inverted: list[float]

    def for_strategy(self, name: StrategyName) -> list[float]:
        if name == StrategyName.PYRAMID:
            return self.pyramid
        if name == StrategyName.UNIFORM:
            return self.uniform
        if name == StrategyName.INVERTED:
            return self.inverted
        raise ValueError(f"No preset weights for {name.value}")


def generate_preset_weights(level_count: int) -> PresetWeights:
    """Build the three preset shapes for ``level_count`` levels.

    Index 0 is the highest price level. Pyramid weights grow towards the
    lowest level, inverted is its mirror and uniform spreads evenly.
    """
    raw = [i + 1 for i in range(level_count)]
    total = sum(raw)
    pyramid = [value / total for value in raw]
    inverted = list(reversed(pyramid))

    uniform_base = 1 / level_count
    uniform = [uniform_base] * level_count
    # last slot absorbs the rounding residue so the sum is exactly 1
    uniform[level_count - 1] = 1 - uniform_base * (level_count - 1)

    return PresetWeights(pyramid=pyramid, uniform=uniform, inverted=inverted)


def generate_exponential_weights(level_count: int, base: float = EXPONENTIAL_BASE) -> list[float]:
    """Steep falloff from the highest level, e.g. 35%, 20%, 11%, ... for 7 levels."""
    raw = [base ** (level_count - 1 - i) for i in range(level_count)]
    total = sum(raw)
    return [value / total for value in raw]
