"""Strategy shapes and allocations."""

from drawdown_planner.strategy.allocations import (
    build_allocations,
    filter_active,
    is_weight_sum_valid,
    replace_weight,
    seed_custom_allocations,
    weight_sum,
)
from drawdown_planner.strategy.models import (
    Allocation,
    ComparableStrategy,
    PlannerSelection,
    StrategyName,
)
from drawdown_planner.strategy.weights import (
    EXPONENTIAL_BASE,
    STRATEGY_ORDER,
    PresetWeights,
    generate_exponential_weights,
    generate_preset_weights,
)

__all__ = [
    "Allocation",
    "ComparableStrategy",
    "EXPONENTIAL_BASE",
    "PlannerSelection",
    "PresetWeights",
    "STRATEGY_ORDER",
    "StrategyName",
    "build_allocations",
    "filter_active",
    "generate_exponential_weights",
    "generate_preset_weights",
    "is_weight_sum_valid",
    "replace_weight",
    "seed_custom_allocations",
    "weight_sum",
]
