"""Position and profit simulation."""

from drawdown_planner.simulator.curves import (
    build_profit_curve,
    build_profit_curves,
    rank_by_profit,
    sweep_prices,
)
from drawdown_planner.simulator.metrics import calculate_position_stats
from drawdown_planner.simulator.models import PositionMetrics, ProfitCurve, ProfitCurvePoint

__all__ = [
    "PositionMetrics",
    "ProfitCurve",
    "ProfitCurvePoint",
    "build_profit_curve",
    "build_profit_curves",
    "calculate_position_stats",
    "rank_by_profit",
    "sweep_prices",
]
