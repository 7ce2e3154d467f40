"""Strategy advice across the simulated bottom-price range."""

from drawdown_planner.advice.analyzer import analyze_strategy_advice
from drawdown_planner.advice.formatting import describe_segment_range, format_usd, render_advice
from drawdown_planner.advice.models import AdviceSegment, BestStrategy, StrategyAdvice

__all__ = [
    "AdviceSegment",
    "BestStrategy",
    "StrategyAdvice",
    "analyze_strategy_advice",
    "describe_segment_range",
    "format_usd",
    "render_advice",
]
