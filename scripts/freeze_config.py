import sys
from pathlib import Path

from drawdown_planner.config import freeze_config, load_config, validate_config, verify_config_lock
from drawdown_planner.monitoring import LogNotifier, Monitor


def main() -> None:
    if len(sys.argv) < 2:
        raise SystemExit("Usage: python scripts/freeze_config.py <plan_config_path>")
    path = Path(sys.argv[1])
    monitor = Monitor(LogNotifier(stream=sys.stderr))
    warnings = validate_config(load_config(path))
    for warning in warnings:
        monitor.config_warning(warning)
    if warnings and "--force" not in sys.argv[2:]:
        raise SystemExit(f"Refusing to freeze {path} with {len(warnings)} warning(s); pass --force")

    lock_path = freeze_config(path)
    status = "ok" if verify_config_lock(path, lock_path) else "mismatch"
    print(f"Frozen plan {path} -> {lock_path} ({status})")


if __name__ == "__main__":
    main()
