"""Human-readable rendering of strategy advice."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from drawdown_planner.advice.models import AdviceSegment, StrategyAdvice


def format_usd(value: float) -> str:
    rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${rounded:,}"


def describe_segment_range(segment: AdviceSegment) -> str:
    upper = f"<= {format_usd(segment.range_high)}"
    if segment.is_last or segment.floor_price is None:
        return upper
    return f"{upper} and > {format_usd(segment.floor_price)}"


def render_advice(advice: StrategyAdvice) -> list[str]:
    lines = []
    if advice.best_strategy is not None:
        lines.append(
            f"Recommended: {advice.best_strategy.name.label} "
            f"(covers {advice.coverage_pct}% of the bottom-price range)"
        )
    if advice.zero_zone_price > 0:
        lines.append(f"No strategy profits when the bottom is > {format_usd(advice.zero_zone_price)}")
    for segment in advice.segments:
        lines.append(
            f"{segment.winner.label} earns the most when the bottom is {describe_segment_range(segment)}"
        )
    return lines
