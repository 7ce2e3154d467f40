"""Planner event routing."""

from __future__ import annotations

from dataclasses import dataclass

from drawdown_planner.config.models import ConfigWarning
from drawdown_planner.monitoring.notifier import Notifier


@dataclass
class Monitor:
    notifier: Notifier

    def config_warning(self, warning: ConfigWarning) -> None:
        self.notifier.notify("CONFIG_WARNING", f"{warning.code}: {warning.message}")

    def custom_allocation_invalid(self, weight_sum: float) -> None:
        self.notifier.notify(
            "CUSTOM_ALLOCATION",
            f"custom weights sum to {weight_sum * 100:.1f}%, excluded from advice",
        )

    def advice_unavailable(self, reason: str) -> None:
        self.notifier.notify("ADVICE_UNAVAILABLE", reason)

    def report_written(self, path: str) -> None:
        self.notifier.notify("REPORT", f"wrote {path}")
