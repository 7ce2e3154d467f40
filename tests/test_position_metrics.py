import pytest

from drawdown_planner.simulator import PositionMetrics, calculate_position_stats
from drawdown_planner.strategy import Allocation


def test_partial_fill():
    allocations = [Allocation(90, 0.2), Allocation(80, 0.3), Allocation(70, 0.5)]
    result = calculate_position_stats(allocations, 75, target_price=100, total_size=1000)

    assert result.filled_position == pytest.approx(500)
    assert result.total_cost == pytest.approx(42000)
    assert result.avg_cost == pytest.approx(84)
    assert result.value_at_target == pytest.approx(50000)
    assert result.profit == pytest.approx(8000)
    assert result.roi == pytest.approx(19.0476, abs=1e-3)


def test_all_levels_filled():
    allocations = [Allocation(90, 0.4), Allocation(80, 0.3), Allocation(70, 0.3)]
    result = calculate_position_stats(allocations, 60, target_price=100, total_size=1000)

    assert result.filled_position == pytest.approx(1000)
    assert result.total_cost == pytest.approx(81000)
    assert result.avg_cost == pytest.approx(81)


def test_threshold_above_all_orders_returns_zero():
    allocations = [Allocation(50, 0.5), Allocation(40, 0.5)]
    result = calculate_position_stats(allocations, 60, target_price=100, total_size=1000)

    assert result == PositionMetrics.zero()
    assert result.roi == 0.0


def test_exact_price_match_fills():
    allocations = [Allocation(80, 0.6), Allocation(70, 0.4)]
    result = calculate_position_stats(allocations, 80, target_price=100, total_size=1000)

    assert result.filled_position == pytest.approx(600)
    assert result.total_cost == pytest.approx(48000)
    assert result.avg_cost == pytest.approx(80)


def test_single_level_doubles():
    result = calculate_position_stats([Allocation(50, 1.0)], 40, target_price=100, total_size=1000)
    assert result.profit == pytest.approx(50000)
    assert result.roi == pytest.approx(100)


def test_empty_allocations():
    assert calculate_position_stats([], 10, target_price=100, total_size=1) == PositionMetrics.zero()


def test_zero_weight_fill_returns_zero_metrics():
    allocations = [Allocation(90, 0.0), Allocation(70, 1.0)]
    result = calculate_position_stats(allocations, 80, target_price=100, total_size=1000)
    assert result == PositionMetrics.zero()


def test_zero_total_size_returns_zero_metrics():
    allocations = [Allocation(90, 0.5), Allocation(70, 0.5)]
    result = calculate_position_stats(allocations, 60, target_price=100, total_size=0)
    assert result == PositionMetrics.zero()
