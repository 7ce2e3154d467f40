import json
import sys
from datetime import datetime, timezone

from drawdown_planner.advice import analyze_strategy_advice, describe_segment_range, format_usd, render_advice
from drawdown_planner.config import DEFAULT_CONFIG
from drawdown_planner.monitoring import LogNotifier, Monitor
from drawdown_planner.planner import build_plan_report, build_plan_snapshot, make_run_id
from drawdown_planner.strategy import Allocation, ComparableStrategy, StrategyName


def test_format_usd():
    assert format_usd(70000) == "$70,000"
    assert format_usd(1234.5) == "$1,235"
    assert format_usd(0) == "$0"


def test_render_advice_lines():
    strategies = [
        ComparableStrategy(StrategyName.INVERTED, [Allocation(90, 0.9), Allocation(70, 0.1)]),
        ComparableStrategy(StrategyName.PYRAMID, [Allocation(90, 0.1), Allocation(70, 0.9)]),
    ]
    advice = analyze_strategy_advice(strategies, [90, 70], 100, 1000, 50, 90, 1)

    assert describe_segment_range(advice.segments[0]) == "<= $90 and > $70"
    assert describe_segment_range(advice.segments[1]) == "<= $70"
    assert render_advice(advice) == [
        "Recommended: Inverted (covers 49% of the bottom-price range)",
        "No strategy profits when the bottom is > $90",
        "Inverted earns the most when the bottom is <= $90 and > $70",
        "Pyramid earns the most when the bottom is <= $70",
    ]


def test_build_plan_report_is_json_ready():
    snapshot = build_plan_snapshot(DEFAULT_CONFIG)
    report = build_plan_report(DEFAULT_CONFIG, snapshot)

    payload = json.loads(json.dumps(report))
    assert payload["config_hash"] is None
    assert payload["warnings"] == []
    assert payload["selection"]["strategy"] == "pyramid"
    assert set(payload["stats"]) == {"pyramid", "uniform", "inverted", "custom"}
    assert payload["advice"]["zero_zone_price"] == 70000
    assert payload["advice"]["summary"]


def test_make_run_id():
    started = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert make_run_id("BTC", started, "abcdef123456") == "btc-20250102T030405Z-abcdef12"
    assert make_run_id("BTC", started) == "btc-20250102T030405Z"


def test_report_carries_run_id():
    snapshot = build_plan_snapshot(DEFAULT_CONFIG)

    report = build_plan_report(DEFAULT_CONFIG, snapshot)
    assert report["run_id"].startswith("btc-")
    assert report["run_id"].endswith("Z")

    report = build_plan_report(DEFAULT_CONFIG, snapshot, run_id="nightly-1")
    assert report["run_id"] == "nightly-1"


def test_log_notifier_prints(capsys):
    Monitor(LogNotifier()).report_written("reports/plan.json")
    assert capsys.readouterr().out.strip() == "[PLANNER] REPORT: wrote reports/plan.json"


def test_log_notifier_stream(capsys):
    Monitor(LogNotifier(prefix="[TEST]", stream=sys.stderr)).advice_unavailable("no active price levels")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[TEST] ADVICE_UNAVAILABLE: no active price levels" in captured.err
