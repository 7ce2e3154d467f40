"""Planner orchestration over explicit selection state."""

from drawdown_planner.planner.report import build_plan_report, make_run_id
from drawdown_planner.planner.session import (
    PlanSnapshot,
    align_bottom_price,
    build_plan_snapshot,
    default_bottom_price,
    nudge_bottom_price,
    preset_allocations,
)

__all__ = [
    "PlanSnapshot",
    "align_bottom_price",
    "build_plan_report",
    "build_plan_snapshot",
    "default_bottom_price",
    "make_run_id",
    "nudge_bottom_price",
    "preset_allocations",
]
