from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path

from drawdown_planner.config import load_config, load_selection, validate_config
from drawdown_planner.monitoring import LogNotifier, Monitor
from drawdown_planner.planner import build_plan_report, build_plan_snapshot


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", required=True)
    parser.add_argument("--output", required=True)
    parser.add_argument("--bottom-price", type=float, default=None)
    args = parser.parse_args()

    config_path = Path(args.config)
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    monitor = Monitor(LogNotifier())
    config = load_config(config_path)
    selection = load_selection(config_path, config)
    if args.bottom_price is not None:
        selection = replace(selection, bottom_price=args.bottom_price)
    for warning in validate_config(config):
        monitor.config_warning(warning)

    snapshot = build_plan_snapshot(config, selection, monitor=monitor)
    report = build_plan_report(config, snapshot, config_path=config_path)

    output_path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    monitor.report_written(str(output_path))


if __name__ == "__main__":
    main()
