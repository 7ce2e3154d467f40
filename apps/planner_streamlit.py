from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path

import streamlit as st

from drawdown_planner.advice import format_usd, render_advice
from drawdown_planner.config import (
    CONSTANTS,
    DEFAULT_CONFIG,
    SimulatorConfig,
    load_config,
    recommend_sweep_range,
    validate_config,
)
from drawdown_planner.monitoring import MemoryNotifier, Monitor
from drawdown_planner.planner import build_plan_snapshot, default_bottom_price
from drawdown_planner.strategy import STRATEGY_ORDER, PlannerSelection, StrategyName


def _load_base_config(path: Path) -> SimulatorConfig:
    if not path.exists():
        return DEFAULT_CONFIG
    try:
        return load_config(path)
    except ValueError as exc:
        st.sidebar.error(str(exc))
        return DEFAULT_CONFIG


def _sidebar_config(base: SimulatorConfig) -> SimulatorConfig:
    st.sidebar.subheader("Plan")
    target_price = st.sidebar.number_input("Target price", value=float(base.target_price), min_value=0.0)
    total_size = st.sidebar.number_input(
        f"Total size ({base.asset_unit})", value=float(base.total_size), min_value=0.0
    )
    levels_text = st.sidebar.text_input(
        "Price levels", value=", ".join(f"{price:g}" for price in base.price_levels)
    )
    try:
        price_levels = tuple(float(item) for item in levels_text.split(",") if item.strip())
    except ValueError:
        st.sidebar.error(f"Price levels must be numbers: {levels_text}")
        price_levels = base.price_levels

    st.sidebar.subheader("Bottom range")
    recommended = recommend_sweep_range(price_levels)
    if recommended is not None and st.sidebar.button("Use recommended range"):
        base = replace(
            base,
            bottom_min=recommended.bottom_min,
            bottom_max=recommended.bottom_max,
            bottom_step=recommended.bottom_step,
        )
    bottom_min = st.sidebar.number_input("Min", value=float(base.bottom_min), min_value=1.0)
    bottom_max = st.sidebar.number_input("Max", value=float(base.bottom_max), min_value=1.0)
    bottom_step = st.sidebar.number_input("Step", value=float(base.bottom_step), min_value=1.0)

    config = replace(
        base,
        target_price=target_price,
        total_size=total_size,
        price_levels=price_levels,
        bottom_min=bottom_min,
        bottom_max=bottom_max,
        bottom_step=bottom_step,
    )
    # active levels high to low, empty slots last
    return replace(config, price_levels=tuple(config.sorted_price_levels()))


def main() -> None:
    st.set_page_config(page_title="Drawdown Planner", layout="wide")

    default_config_path = os.getenv("PLANNER_CONFIG_PATH", "configs/btc_drawdown.yaml")
    config_path = Path(st.sidebar.text_input("Config path", value=default_config_path))
    config = _sidebar_config(_load_base_config(config_path))

    st.title(f"{config.asset_name} drawdown buying plan")
    st.caption(f"Target {format_usd(config.target_price)} by {config.target_date}")

    warnings = validate_config(config)
    for warning in warnings:
        st.warning(warning.message)
    if any(warning.code in {"NO_ACTIVE_LEVEL", "RANGE_INVERTED", "STEP_NOT_POSITIVE"} for warning in warnings):
        return

    options = [name.value for name in (*STRATEGY_ORDER, StrategyName.CUSTOM)]
    strategy = StrategyName(st.radio("Strategy", options, horizontal=True))
    bottom_price = st.slider(
        "Bottom price",
        min_value=float(config.bottom_min),
        max_value=float(config.bottom_max),
        step=float(config.bottom_step),
        value=float(default_bottom_price(config)),
    )

    custom_weights = None
    if strategy.is_custom:
        st.subheader("Custom weights")
        seeded = build_plan_snapshot(config).custom_allocations
        custom_weights = tuple(
            st.slider(
                format_usd(allocation.price),
                min_value=0.0,
                max_value=CONSTANTS.max_level_weight,
                value=min(allocation.weight, CONSTANTS.max_level_weight),
                step=0.01,
                key=f"weight-{index}",
            )
            for index, allocation in enumerate(seeded)
        )

    notices = MemoryNotifier()
    snapshot = build_plan_snapshot(
        config,
        PlannerSelection(active_strategy=strategy, custom_weights=custom_weights, bottom_price=bottom_price),
        monitor=Monitor(notices),
    )
    for message in notices.messages("CUSTOM_ALLOCATION"):
        st.error(message)

    stats = snapshot.active_stats
    col_a, col_b, col_c, col_d = st.columns(4)
    col_a.metric("Filled", f"{stats.filled_position:.4f} {config.asset_unit}")
    col_b.metric("Avg cost", format_usd(stats.avg_cost))
    col_c.metric("Profit at target", format_usd(stats.profit))
    col_d.metric("ROI", f"{stats.roi:.1f}%")

    st.subheader("Profit by bottom price")
    chart = {curve.name.label: [point.y for point in curve.points] for curve in snapshot.profit_curves}
    index = [point.x for point in snapshot.profit_curves[0].points] if snapshot.profit_curves else []
    st.line_chart({"bottom": index, **chart}, x="bottom")

    st.subheader("Ranking")
    st.json({name.label: rank for name, rank in snapshot.profit_rankings.items()})

    st.subheader("Advice")
    if snapshot.advice is None:
        st.info("Not enough data yet")
    else:
        for line in render_advice(snapshot.advice):
            st.write(line)


if __name__ == "__main__":
    main()
