"""Fake MeterRegistry for testing.

Records all observations in memory so tests can assert on metrics
behaviour without reaching into prometheus-client internals.
"""

from dataclasses import dataclass, field
from typing import Mapping


@dataclass
class TimerRecord:
    """Single timer observation."""

    name: str
    description: str
    tags: dict[str, str] = field(default_factory=dict)
    duration: float = 0.0


class FakeMeterRegistry:
    """In-memory spy implementing the MeterRegistry protocol.

    Usage:
        fake = FakeMeterRegistry()
        # … inject into the interceptor …
        assert fake.count("http.client.requests", method="GET") == 1
    """

    def __init__(self) -> None:
        self.timers: list[TimerRecord] = []

    def record_timer(
        self,
        name: str,
        description: str,
        tags: Mapping[str, str],
        duration: float,
    ) -> None:
        self.timers.append(TimerRecord(name, description, dict(tags), duration))

    # -- test helpers --

    def find(self, name: str, **tags: str) -> list[TimerRecord]:
        """Observations of ``name`` whose tags include every given pair."""
        return [
            record
            for record in self.timers
            if record.name == name and all(record.tags.get(k) == v for k, v in tags.items())
        ]

    def count(self, name: str, **tags: str) -> int:
        """Number of matching observations."""
        return len(self.find(name, **tags))

    def clear(self) -> None:
        """Reset all recorded state."""
        self.timers.clear()
