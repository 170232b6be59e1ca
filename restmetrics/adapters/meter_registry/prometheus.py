"""Prometheus implementation of the MeterRegistry protocol.

Each dotted timer name maps to one Histogram on a dedicated
CollectorRegistry, so client metrics stay isolated from the default global
registry.  Prometheus fixes the label names of a metric family when it is
created; the first observation of a timer decides them.
"""

import re
import threading
from typing import Mapping, Optional, Sequence

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Histogram, generate_latest

from restmetrics.core.config import settings

_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_:]")


class TimerRegistrationError(Exception):
    """Raised when a timer is observed with a different tag key set than it was created with."""


def prometheus_timer_name(name: str, namespace: str = "") -> str:
    """Convert a dotted timer name to a Prometheus histogram name.

    ``http.client.requests`` becomes ``http_client_requests_seconds``.
    """
    converted = _INVALID_NAME_CHARS.sub("_", name)
    if namespace:
        converted = f"{namespace}_{converted}"
    if not converted.endswith("_seconds"):
        converted = f"{converted}_seconds"
    return converted


class PrometheusMeterRegistry:
    """Prometheus-backed timer recording."""

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        buckets: Optional[Sequence[float]] = None,
        namespace: Optional[str] = None,
    ) -> None:
        self._registry = registry or CollectorRegistry()
        self._buckets = tuple(buckets or settings.HISTOGRAM_BUCKETS)
        self._namespace = settings.PROMETHEUS_NAMESPACE if namespace is None else namespace
        self._timers: dict[str, tuple[Histogram, tuple[str, ...]]] = {}
        self._lock = threading.Lock()

    # -- MeterRegistry protocol method --

    def record_timer(
        self,
        name: str,
        description: str,
        tags: Mapping[str, str],
        duration: float,
    ) -> None:
        labels = {_INVALID_NAME_CHARS.sub("_", key): str(value) for key, value in tags.items()}
        histogram, label_names = self._histogram(name, description, tuple(sorted(labels)))
        if label_names:
            histogram.labels(**labels).observe(duration)
        else:
            histogram.observe(duration)

    # -- rendering --

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        return generate_latest(self._registry)

    def sample_count(self, name: str, **tags: str) -> float:
        """Observation count of ``name`` for the given tags (0.0 if never observed)."""
        value = self._registry.get_sample_value(
            f"{prometheus_timer_name(name, self._namespace)}_count", tags
        )
        return value or 0.0

    def _histogram(
        self, name: str, description: str, label_names: tuple[str, ...]
    ) -> tuple[Histogram, tuple[str, ...]]:
        with self._lock:
            existing = self._timers.get(name)
            if existing is None:
                histogram = Histogram(
                    prometheus_timer_name(name, self._namespace),
                    description,
                    label_names,
                    buckets=self._buckets,
                    registry=self._registry,
                )
                existing = self._timers[name] = (histogram, label_names)
        if existing[1] != label_names:
            raise TimerRegistrationError(
                f"Timer '{name}' was registered with tags {list(existing[1])}, "
                f"got {list(label_names)}"
            )
        return existing
