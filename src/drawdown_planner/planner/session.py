"""Derive everything a planner view shows from config plus explicit selection state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from drawdown_planner.advice.analyzer import analyze_strategy_advice
from drawdown_planner.advice.models import StrategyAdvice
from drawdown_planner.config.models import CONSTANTS, SimulatorConfig
from drawdown_planner.monitoring.monitor import Monitor
from drawdown_planner.simulator.curves import build_profit_curves, rank_by_profit, sweep_prices
from drawdown_planner.simulator.metrics import calculate_position_stats
from drawdown_planner.simulator.models import PositionMetrics, ProfitCurve
from drawdown_planner.strategy.allocations import (
    build_allocations,
    filter_active,
    is_weight_sum_valid,
    seed_custom_allocations,
    weight_sum,
)
from drawdown_planner.strategy.models import (
    Allocation,
    ComparableStrategy,
    PlannerSelection,
    StrategyName,
)
from drawdown_planner.strategy.weights import STRATEGY_ORDER, PresetWeights, generate_preset_weights


@dataclass(frozen=True)
class PlanSnapshot:
    active_price_levels: list[float]
    presets: PresetWeights
    custom_allocations: list[Allocation]
    active_strategy: StrategyName
    active_allocations: list[Allocation]
    bottom_price: float
    preset_stats: dict[StrategyName, PositionMetrics]
    custom_stats: PositionMetrics
    profit_curves: list[ProfitCurve]
    comparable_strategies: list[ComparableStrategy]
    profit_rankings: dict[StrategyName, int]
    advice: Optional[StrategyAdvice]
    custom_weight_sum: float
    is_custom_weight_valid: bool
    active_weight_sum: float

    @property
    def active_stats(self) -> PositionMetrics:
        if self.active_strategy.is_custom:
            return self.custom_stats
        return self.preset_stats[self.active_strategy]


def default_bottom_price(config: SimulatorConfig) -> float:
    if config.bottom_step <= 0:
        return config.bottom_min
    middle = (config.bottom_min + config.bottom_max) / 2
    return _snap(middle, config)


def align_bottom_price(price: float, config: SimulatorConfig) -> float:
    """Snap ``price`` onto the sweep grid; out-of-range prices reset to the middle."""
    if config.bottom_min >= config.bottom_max or config.bottom_step <= 0:
        return price
    middle = _clamp(default_bottom_price(config), config)
    if price < config.bottom_min or price > config.bottom_max:
        return middle
    return _clamp(_snap(price, config), config)


def nudge_bottom_price(price: float, steps: int, config: SimulatorConfig) -> float:
    return _clamp(price + steps * config.bottom_step, config)


def preset_allocations(
    name: StrategyName, presets: PresetWeights, active_levels: list[float]
) -> list[Allocation]:
    return build_allocations(active_levels, presets.for_strategy(name))


def build_plan_snapshot(
    config: SimulatorConfig,
    selection: PlannerSelection = PlannerSelection(),
    monitor: Optional[Monitor] = None,
) -> PlanSnapshot:
    active_levels = config.active_price_levels
    presets = generate_preset_weights(len(active_levels) or 1)

    if selection.custom_weights is None:
        custom_allocations = seed_custom_allocations(config.price_levels)
    else:
        custom_allocations = build_allocations(config.price_levels, selection.custom_weights)
    active_custom = filter_active(custom_allocations)

    by_strategy: dict[StrategyName, list[Allocation]] = {
        name: preset_allocations(name, presets, active_levels) for name in STRATEGY_ORDER
    }
    by_strategy[StrategyName.CUSTOM] = active_custom
    active_allocations = by_strategy[selection.active_strategy]

    if selection.bottom_price is None:
        bottom_price = default_bottom_price(config)
    else:
        bottom_price = align_bottom_price(selection.bottom_price, config)

    preset_stats = {
        name: calculate_position_stats(by_strategy[name], bottom_price, config.target_price, config.total_size)
        for name in STRATEGY_ORDER
    }
    custom_stats = calculate_position_stats(active_custom, bottom_price, config.target_price, config.total_size)

    prices = sweep_prices(config.bottom_min, config.bottom_max, config.bottom_step)
    profit_curves = build_profit_curves(by_strategy, prices, config.target_price, config.total_size)

    custom_weight_sum = weight_sum(custom_allocations)
    custom_valid = is_weight_sum_valid(custom_weight_sum, CONSTANTS.allocation_tolerance)
    if not custom_valid and monitor is not None:
        monitor.custom_allocation_invalid(custom_weight_sum)

    # presets always compete, custom only with a fully deployed allocation
    comparable = [ComparableStrategy(name=name, allocations=by_strategy[name]) for name in STRATEGY_ORDER]
    profits = {name: stats.profit for name, stats in preset_stats.items()}
    if custom_valid:
        comparable.append(ComparableStrategy(name=StrategyName.CUSTOM, allocations=active_custom))
        profits[StrategyName.CUSTOM] = custom_stats.profit

    advice = analyze_strategy_advice(
        comparable,
        config.price_levels,
        config.target_price,
        config.total_size,
        config.bottom_min,
        config.bottom_max,
        config.bottom_step,
    )
    if advice is None and monitor is not None:
        monitor.advice_unavailable("no active price levels")

    return PlanSnapshot(
        active_price_levels=active_levels,
        presets=presets,
        custom_allocations=custom_allocations,
        active_strategy=selection.active_strategy,
        active_allocations=active_allocations,
        bottom_price=bottom_price,
        preset_stats=preset_stats,
        custom_stats=custom_stats,
        profit_curves=profit_curves,
        comparable_strategies=comparable,
        profit_rankings=rank_by_profit(profits),
        advice=advice,
        custom_weight_sum=custom_weight_sum,
        is_custom_weight_valid=custom_valid,
        active_weight_sum=weight_sum(active_allocations),
    )


def _snap(price: float, config: SimulatorConfig) -> float:
    steps = math.floor((price - config.bottom_min) / config.bottom_step + 0.5)
    return steps * config.bottom_step + config.bottom_min


def _clamp(price: float, config: SimulatorConfig) -> float:
    return max(config.bottom_min, min(config.bottom_max, price))
