"""Position metrics for a set of limit orders at a given bottom price."""

from __future__ import annotations

from typing import Iterable

from drawdown_planner.simulator.models import PositionMetrics
from drawdown_planner.strategy.models import Allocation


def calculate_position_stats(
    allocations: Iterable[Allocation],
    threshold_price: float,
    target_price: float,
    total_size: float,
) -> PositionMetrics:
    """Fill every order priced at or above ``threshold_price`` and value it at the target.

    Orders below the threshold stay pending and their capital is not deployed.
    """
    filled = [allocation for allocation in allocations if allocation.price >= threshold_price]
    if not filled:
        return PositionMetrics.zero()

    filled_position = sum(allocation.weight for allocation in filled) * total_size
    total_cost = sum(allocation.weight * allocation.price for allocation in filled) * total_size
    # zero-weight fills deploy nothing; keep profit at 0 instead of dividing by it
    avg_cost = total_cost / filled_position if filled_position else 0.0
    value_at_target = filled_position * target_price
    profit = value_at_target - total_cost
    roi = (profit / total_cost) * 100 if total_cost else 0.0

    return PositionMetrics(
        filled_position=filled_position,
        total_cost=total_cost,
        avg_cost=avg_cost,
        value_at_target=value_at_target,
        profit=profit,
        roi=roi,
    )
