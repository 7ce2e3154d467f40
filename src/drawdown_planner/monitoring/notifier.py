"""Notification backends."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


class Notifier:
    def notify(self, event: str, message: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass
class LogNotifier(Notifier):
    prefix: str = "[PLANNER]"
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def notify(self, event: str, message: str) -> None:
        print(f"{self.prefix} {event}: {message}", file=self.stream)


@dataclass
class MemoryNotifier(Notifier):
    """Keeps events for callers that render them later, e.g. a UI panel."""

    events: list[tuple[str, str]] = field(default_factory=list)

    def notify(self, event: str, message: str) -> None:
        self.events.append((event, message))

    def messages(self, event: str) -> list[str]:
        return [message for name, message in self.events if name == event]
