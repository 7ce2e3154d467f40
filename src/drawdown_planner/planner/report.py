"""JSON-ready plan reports."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from drawdown_planner.advice.formatting import render_advice
from drawdown_planner.config.loader import compute_config_hash, serialize_config, validate_config
from drawdown_planner.config.models import SimulatorConfig
from drawdown_planner.planner.session import PlanSnapshot


def build_plan_report(
    config: SimulatorConfig,
    snapshot: PlanSnapshot,
    config_path: Optional[str | Path] = None,
    run_id: Optional[str] = None,
) -> dict[str, Any]:
    advice = snapshot.advice
    generated_at = datetime.now(timezone.utc)
    config_hash = compute_config_hash(config_path) if config_path is not None else None
    if run_id is None:
        run_id = make_run_id(config.asset_name, generated_at, config_hash)
    return {
        "run_id": run_id,
        "generated_at_utc": generated_at.isoformat(),
        "config_path": str(config_path) if config_path is not None else None,
        "config_hash": config_hash,
        "config": serialize_config(config),
        "warnings": [asdict(warning) for warning in validate_config(config)],
        "selection": {
            "strategy": snapshot.active_strategy.value,
            "bottom_price": snapshot.bottom_price,
            "custom_weight_sum": snapshot.custom_weight_sum,
            "custom_weight_valid": snapshot.is_custom_weight_valid,
        },
        "stats": {
            **{name.value: asdict(stats) for name, stats in snapshot.preset_stats.items()},
            "custom": asdict(snapshot.custom_stats),
        },
        "rankings": {name.value: rank for name, rank in snapshot.profit_rankings.items()},
        "curves": [
            {"name": curve.name.value, "points": [[point.x, point.y] for point in curve.points]}
            for curve in snapshot.profit_curves
        ],
        "advice": None if advice is None else {
            "zero_zone_price": advice.zero_zone_price,
            "segments": [
                {**asdict(segment), "winner": segment.winner.value} for segment in advice.segments
            ],
            "best_strategy": None if advice.best_strategy is None else {
                "name": advice.best_strategy.name.value,
                "count": advice.best_strategy.count,
            },
            "coverage_pct": advice.coverage_pct,
            "summary": render_advice(advice),
        },
    }


def make_run_id(prefix: str, started_at: datetime, config_hash: Optional[str] = None) -> str:
    stamp = started_at.strftime("%Y%m%dT%H%M%SZ")
    run_id = f"{prefix.lower()}-{stamp}"
    if config_hash:
        run_id = f"{run_id}-{config_hash[:8]}"
    return run_id
