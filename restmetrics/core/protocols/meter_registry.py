"""MeterRegistry protocol for timer observations.

Abstracts metric recording so the interceptor depends on a protocol rather
than a concrete library.  Production uses Prometheus; tests inject a fake
that records observations in memory.
"""

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class MeterRegistry(Protocol):
    """Protocol for recording timer observations."""

    def record_timer(
        self,
        name: str,
        description: str,
        tags: Mapping[str, str],
        duration: float,
    ) -> None:
        """Record one observation (count + duration) into a named timer.

        Args:
            name: Dotted timer name, e.g. ``http.client.requests``.
            description: Human-readable description of the timer.
            tags: Tag key/value pairs for this observation.
            duration: Observed duration in seconds.
        """
        ...
