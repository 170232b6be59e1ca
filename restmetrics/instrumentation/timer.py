"""Timer samples: a started measurement that records once when stopped."""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from restmetrics.core.protocols.meter_registry import MeterRegistry
from restmetrics.instrumentation.context import HttpClientHandlerContext


@dataclass(frozen=True)
class TimerSpec:
    """Name and description of the timer a sample is recorded into."""

    name: str
    description: str


class TimerSample:
    """Started-but-not-recorded measurement bound to a handler context."""

    def __init__(
        self,
        registry: MeterRegistry,
        context: HttpClientHandlerContext,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._registry = registry
        self._context = context
        self._clock = clock or time.perf_counter
        self._start = self._clock()
        self._stopped = False

    @classmethod
    def start(
        cls,
        registry: MeterRegistry,
        context: HttpClientHandlerContext,
        clock: Optional[Callable[[], float]] = None,
    ) -> "TimerSample":
        return cls(registry, context, clock)

    def stop(self, timer: TimerSpec) -> float:
        """Record the elapsed time with the context's tags.

        Tags are derived before the clock is read, so tag derivation is part
        of the measured duration.

        Returns:
            The recorded duration in seconds.

        Raises:
            RuntimeError: If the sample was already stopped.
        """
        if self._stopped:
            raise RuntimeError(f"Timer sample for '{timer.name}' already stopped")
        self._stopped = True
        tags = self._context.get_tags()
        duration = max(self._clock() - self._start, 0.0)
        self._registry.record_timer(timer.name, timer.description, tags, duration)
        return duration
