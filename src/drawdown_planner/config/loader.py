"""Load, check and freeze plan configuration files."""

from __future__ import annotations

import hashlib
import json
import math
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from drawdown_planner.config.models import ConfigWarning, SimulatorConfig, SweepRange
from drawdown_planner.strategy.models import PlannerSelection, StrategyName


def load_config(path: str | Path) -> SimulatorConfig:
    path = Path(path)
    data = _load_yaml(path)

    asset = _require(data, "asset")
    target = _require(data, "target")
    bottom_range = _require(data, "bottom_range")

    return SimulatorConfig(
        asset_name=str(_require(asset, "name")),
        asset_unit=str(asset.get("unit", asset["name"])),
        target_price=float(_require(target, "price")),
        target_date=str(target.get("date", "")),
        price_levels=tuple(float(price) for price in _require(data, "price_levels")),
        total_size=float(_require(data, "total_size")),
        bottom_min=float(_require(bottom_range, "min")),
        bottom_max=float(_require(bottom_range, "max")),
        bottom_step=float(_require(bottom_range, "step")),
    )


def load_selection(path: str | Path, config: SimulatorConfig) -> PlannerSelection:
    data = _load_yaml(Path(path)).get("selection") or {}
    return _parse_selection(data, config)


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def freeze_config(path: str | Path, lock_path: Optional[str | Path] = None) -> Path:
    path = Path(path)
    config_hash = compute_config_hash(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)

    payload = {
        "config_path": str(path),
        "config_hash": config_hash,
        "frozen_at_utc": datetime.now(timezone.utc).isoformat(),
    }
    lock_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return lock_path


def verify_config_lock(path: str | Path, lock_path: Optional[str | Path] = None) -> bool:
    path = Path(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)
    if not lock_path.exists():
        return False
    payload = json.loads(lock_path.read_text(encoding="utf-8"))
    expected = payload.get("config_hash")
    return expected == compute_config_hash(path)


def serialize_config(config: SimulatorConfig) -> dict[str, Any]:
    payload = asdict(config)
    payload["price_levels"] = list(config.price_levels)
    return payload


def validate_config(config: SimulatorConfig) -> list[ConfigWarning]:
    """Problems that make the plan meaningless; the engine still runs on them."""
    warnings: list[ConfigWarning] = []
    active = config.active_price_levels

    if not active:
        warnings.append(ConfigWarning("NO_ACTIVE_LEVEL", "At least one price level must be set"))
    else:
        highest = max(active)
        lowest = min(active)
        if config.target_price <= highest:
            warnings.append(
                ConfigWarning(
                    "TARGET_NOT_ABOVE_LEVELS",
                    f"Target {config.target_price:g} is not above the highest level {highest:g}",
                )
            )
        if config.bottom_max < lowest:
            warnings.append(
                ConfigWarning(
                    "BOTTOM_ABOVE_LEVELS",
                    f"Bottom range max {config.bottom_max:g} is below the lowest level {lowest:g}",
                )
            )
    if config.bottom_min >= config.bottom_max:
        warnings.append(ConfigWarning("RANGE_INVERTED", "Bottom range min must be below max"))
    if config.bottom_step <= 0:
        warnings.append(ConfigWarning("STEP_NOT_POSITIVE", "Bottom range step must be positive"))
    return warnings


def recommend_sweep_range(price_levels: Sequence[float], target_step_count: int = 40) -> Optional[SweepRange]:
    """A sweep of roughly ``target_step_count`` steps padded one step past the levels."""
    active = [price for price in price_levels if price > 0]
    if not active:
        return None

    lowest = min(active)
    highest = max(active)
    raw_step = (highest - lowest) / (target_step_count - 2)
    if raw_step <= 0:
        return None

    magnitude = 10 ** math.floor(math.log10(raw_step))
    normalized = raw_step / magnitude
    if normalized <= 1:
        step = magnitude
    elif normalized <= 2:
        step = 2 * magnitude
    elif normalized <= 5:
        step = 5 * magnitude
    else:
        step = 10 * magnitude

    aligned_min = math.floor(lowest / step) * step
    aligned_max = math.ceil(highest / step) * step
    return SweepRange(bottom_min=aligned_min - step, bottom_max=aligned_max + step, bottom_step=step)


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _parse_selection(data: dict[str, Any], config: SimulatorConfig) -> PlannerSelection:
    try:
        strategy = StrategyName(data.get("strategy", StrategyName.PYRAMID.value))
    except ValueError as exc:
        raise ValueError(f"Invalid strategy: {data.get('strategy')}") from exc

    custom_weights = None
    if data.get("custom_weights") is not None:
        custom_weights = tuple(float(weight) for weight in data["custom_weights"])
        if len(custom_weights) != len(config.price_levels):
            raise ValueError(
                f"custom_weights has {len(custom_weights)} entries, expected {len(config.price_levels)}"
            )

    bottom_price = data.get("bottom_price")
    return PlannerSelection(
        active_strategy=strategy,
        custom_weights=custom_weights,
        bottom_price=float(bottom_price) if bottom_price is not None else None,
    )
