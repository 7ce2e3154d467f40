from dataclasses import replace
from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from drawdown_planner.config import (
    CONSTANTS,
    DEFAULT_CONFIG,
    freeze_config,
    load_config,
    load_selection,
    recommend_sweep_range,
    serialize_config,
    validate_config,
    verify_config_lock,
)
from drawdown_planner.strategy import StrategyName

CONFIGS = Path(__file__).resolve().parents[1] / "configs"


def test_load_config_sample():
    config = load_config(CONFIGS / "btc_drawdown.yaml")
    assert config.asset_name == "BTC"
    assert config.price_levels == DEFAULT_CONFIG.price_levels
    assert config.bottom_step == 1000

    selection = load_selection(CONFIGS / "btc_drawdown.yaml", config)
    assert selection.active_strategy == StrategyName.PYRAMID
    assert selection.bottom_price == 52000
    assert selection.custom_weights is None


def test_load_custom_selection():
    config = load_config(CONFIGS / "eth_custom.yaml")
    assert config.active_price_levels == [3200, 2800, 2400, 2000]

    selection = load_selection(CONFIGS / "eth_custom.yaml", config)
    assert selection.active_strategy == StrategyName.CUSTOM
    assert selection.custom_weights == (0.1, 0.2, 0.0, 0.3, 0.4)


def test_missing_key_and_bad_selection(tmp_path):
    path = tmp_path / "plan.yaml"
    path.write_text("asset: {name: BTC}\ntarget: {price: 100}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config key"):
        load_config(path)

    path.write_text("- not a mapping\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)

    source = (CONFIGS / "btc_drawdown.yaml").read_text(encoding="utf-8")
    path.write_text(source.replace("strategy: pyramid", "strategy: martingale"), encoding="utf-8")
    config = load_config(path)
    with pytest.raises(ValueError, match="Invalid strategy"):
        load_selection(path, config)

    path.write_text(source + "  custom_weights: [0.5, 0.5]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="custom_weights"):
        load_selection(path, config)


def test_freeze_and_verify(tmp_path):
    source = CONFIGS / "btc_drawdown.yaml"
    target = tmp_path / "btc_drawdown.yaml"
    target.write_text(source.read_text(encoding="utf-8"), encoding="utf-8")

    lock_path = freeze_config(target)
    assert verify_config_lock(target, lock_path)

    target.write_text(source.read_text(encoding="utf-8") + "\n# edited\n", encoding="utf-8")
    assert not verify_config_lock(target, lock_path)


def test_validate_config_warnings():
    assert validate_config(DEFAULT_CONFIG) == []

    codes = [w.code for w in validate_config(replace(DEFAULT_CONFIG, target_price=60000))]
    assert codes == ["TARGET_NOT_ABOVE_LEVELS"]

    codes = [w.code for w in validate_config(replace(DEFAULT_CONFIG, bottom_max=30000))]
    assert codes == ["BOTTOM_ABOVE_LEVELS", "RANGE_INVERTED"]

    codes = [w.code for w in validate_config(replace(DEFAULT_CONFIG, price_levels=(0, 0), bottom_step=0))]
    assert codes == ["NO_ACTIVE_LEVEL", "STEP_NOT_POSITIVE"]


def test_recommend_sweep_range():
    sweep = recommend_sweep_range(DEFAULT_CONFIG.price_levels)
    assert (sweep.bottom_min, sweep.bottom_max, sweep.bottom_step) == (39000, 71000, 1000)

    sweep = recommend_sweep_range([3200, 2800, 0, 2400, 2000])
    assert sweep.bottom_step == 50
    assert (sweep.bottom_min, sweep.bottom_max) == (1950, 3250)

    assert recommend_sweep_range([50000]) is None
    assert recommend_sweep_range([0, 0]) is None


def test_serialize_config():
    payload = serialize_config(DEFAULT_CONFIG)
    assert payload["price_levels"] == list(DEFAULT_CONFIG.price_levels)
    assert payload["target_price"] == 126277
    assert DEFAULT_CONFIG.sorted_price_levels()[0] == 70000


def test_sorted_price_levels_puts_empty_slots_last():
    config = replace(DEFAULT_CONFIG, price_levels=(50000.0, 0.0, 70000.0, 60000.0))
    assert config.sorted_price_levels() == [70000.0, 60000.0, 50000.0, 0.0]


def test_planner_constants():
    assert CONSTANTS.max_level_weight == 0.4
    assert CONSTANTS.allocation_tolerance == 0.005
    assert not hasattr(CONSTANTS, "grid_size")
