"""Profit curves across the bottom-price sweep."""

from __future__ import annotations

from typing import Mapping, Sequence

from drawdown_planner.simulator.metrics import calculate_position_stats
from drawdown_planner.simulator.models import ProfitCurve, ProfitCurvePoint
from drawdown_planner.strategy.models import Allocation, StrategyName


def sweep_prices(bottom_min: float, bottom_max: float, bottom_step: float) -> list[float]:
    if bottom_step <= 0:
        return []
    prices = []
    price = bottom_min
    while price <= bottom_max:
        prices.append(price)
        price += bottom_step
    return prices


def build_profit_curve(
    name: StrategyName,
    allocations: Sequence[Allocation],
    prices: Sequence[float],
    target_price: float,
    total_size: float,
) -> ProfitCurve:
    points = [
        ProfitCurvePoint(
            x=price,
            y=calculate_position_stats(allocations, price, target_price, total_size).profit,
        )
        for price in prices
    ]
    return ProfitCurve(name=name, points=points)


def build_profit_curves(
    strategies: Mapping[StrategyName, Sequence[Allocation]],
    prices: Sequence[float],
    target_price: float,
    total_size: float,
) -> list[ProfitCurve]:
    return [
        build_profit_curve(name, allocations, prices, target_price, total_size)
        for name, allocations in strategies.items()
    ]


def rank_by_profit(profits: Mapping[StrategyName, float]) -> dict[StrategyName, int]:
    """1 is the most profitable; equal profits keep their input order."""
    ordered = sorted(profits.items(), key=lambda item: item[1], reverse=True)
    return {name: index + 1 for index, (name, _) in enumerate(ordered)}
