"""Which strategy wins where across the bottom-price sweep."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from drawdown_planner.advice.models import AdviceSegment, BestStrategy, StrategyAdvice
from drawdown_planner.simulator.metrics import calculate_position_stats
from drawdown_planner.strategy.models import ComparableStrategy, StrategyName


@dataclass
class _MergedSegment:
    high_price: float
    low_price: float
    winner: StrategyName


def analyze_strategy_advice(
    strategies: Sequence[ComparableStrategy],
    price_levels: Sequence[float],
    target_price: float,
    total_size: float,
    sweep_min: float,
    sweep_max: float,
    sweep_step: float,
) -> Optional[StrategyAdvice]:
    """Summarise the most profitable strategy per price segment.

    The filled set only changes at a price level, so between two adjacent
    levels every strategy's profit is constant and a single evaluation per
    level describes the whole sweep. Returns ``None`` when there is nothing
    to compare.
    """
    if not strategies:
        return None

    active_levels = sorted((price for price in price_levels if price > 0), reverse=True)
    if not active_levels:
        return None

    level_winners: list[tuple[float, StrategyName]] = []
    win_counts: dict[StrategyName, int] = {}
    for level in active_levels:
        winner = _winner_at(strategies, level, target_price, total_size)
        if winner is None:
            continue
        win_counts[winner] = win_counts.get(winner, 0) + 1
        level_winners.append((level, winner))

    merged = _merge_segments(level_winners)
    best = _best_strategy(win_counts)

    coverage_pct = 0
    if best is not None:
        coverage_pct = _coverage_pct(merged, best.name, active_levels, sweep_min, sweep_max, sweep_step)

    segments = []
    for index, segment in enumerate(merged):
        low_index = active_levels.index(segment.low_price)
        reaches_lowest = low_index == len(active_levels) - 1
        segments.append(
            AdviceSegment(
                range_high=segment.high_price,
                range_low=segment.low_price,
                is_last=index == len(merged) - 1 or reaches_lowest,
                winner=segment.winner,
                floor_price=None if reaches_lowest else active_levels[low_index + 1],
            )
        )

    return StrategyAdvice(
        zero_zone_price=active_levels[0],
        segments=segments,
        best_strategy=best,
        coverage_pct=coverage_pct,
    )


def _winner_at(
    strategies: Sequence[ComparableStrategy],
    level: float,
    target_price: float,
    total_size: float,
) -> Optional[StrategyName]:
    profits = [
        (strategy.name, calculate_position_stats(strategy.allocations, level, target_price, total_size).profit)
        for strategy in strategies
    ]
    max_profit = max(profit for _, profit in profits)
    if max_profit <= 0:
        return None

    tied = [name for name, profit in profits if profit == max_profit]
    # a hand-tuned custom allocation beats a preset on an exact tie
    for name in tied:
        if name == StrategyName.CUSTOM:
            return name
    return tied[0]


def _merge_segments(level_winners: list[tuple[float, StrategyName]]) -> list[_MergedSegment]:
    merged: list[_MergedSegment] = []
    for price, winner in level_winners:
        if merged and merged[-1].winner == winner:
            merged[-1].low_price = price
        else:
            merged.append(_MergedSegment(high_price=price, low_price=price, winner=winner))
    return merged


def _best_strategy(win_counts: dict[StrategyName, int]) -> Optional[BestStrategy]:
    best: Optional[BestStrategy] = None
    for name, count in win_counts.items():
        if best is None or count > best.count:
            best = BestStrategy(name=name, count=count)
    return best


def _coverage_pct(
    merged: list[_MergedSegment],
    best_name: StrategyName,
    active_levels: list[float],
    sweep_min: float,
    sweep_max: float,
    sweep_step: float,
) -> int:
    covered = 0.0
    for segment in merged:
        if segment.winner != best_name:
            continue
        low_index = active_levels.index(segment.low_price)
        if low_index == len(active_levels) - 1:
            lower_bound = sweep_min
        else:
            # bottoms at or below the next level belong to the next segment
            lower_bound = active_levels[low_index + 1] + sweep_step
        clamped_high = min(segment.high_price, sweep_max)
        clamped_low = max(lower_bound, sweep_min)
        covered += max(0.0, (clamped_high - clamped_low) / sweep_step + 1)

    total_steps = (sweep_max - sweep_min) / sweep_step + 1
    return _round_half_up(covered / total_steps * 100)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
