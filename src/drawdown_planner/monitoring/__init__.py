"""Monitoring exports."""

from drawdown_planner.monitoring.monitor import Monitor
from drawdown_planner.monitoring.notifier import LogNotifier, MemoryNotifier, Notifier

__all__ = [
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
]
