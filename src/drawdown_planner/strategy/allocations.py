"""Helpers pairing price levels with weights."""

from __future__ import annotations

from typing import Iterable, Sequence

from drawdown_planner.strategy.models import Allocation
from drawdown_planner.strategy.weights import generate_exponential_weights


def build_allocations(price_levels: Sequence[float], weights: Sequence[float]) -> list[Allocation]:
    return [
        Allocation(price=price, weight=weights[i] if i < len(weights) else 0.0)
        for i, price in enumerate(price_levels)
    ]


def filter_active(allocations: Iterable[Allocation]) -> list[Allocation]:
    return [allocation for allocation in allocations if allocation.price > 0]


def seed_custom_allocations(price_levels: Sequence[float]) -> list[Allocation]:
    """Exponential seed over the active levels; empty slots get zero weight."""
    active = [price for price in price_levels if price > 0]
    weights = generate_exponential_weights(len(active) or 1)
    allocations = []
    for price in price_levels:
        weight = 0.0
        if price > 0:
            weight = weights[active.index(price)]
        allocations.append(Allocation(price=price, weight=weight))
    return allocations


def weight_sum(allocations: Iterable[Allocation]) -> float:
    return sum(allocation.weight for allocation in allocations)


def is_weight_sum_valid(total: float, tolerance: float) -> bool:
    return tolerance < total < 1 + tolerance


def replace_weight(allocations: Sequence[Allocation], index: int, weight: float) -> list[Allocation]:
    updated = list(allocations)
    updated[index] = Allocation(price=updated[index].price, weight=weight)
    return updated
