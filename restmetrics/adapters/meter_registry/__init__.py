"""Meter registry adapters."""

from restmetrics.adapters.meter_registry.fake import FakeMeterRegistry, TimerRecord
from restmetrics.adapters.meter_registry.prometheus import (
    PrometheusMeterRegistry,
    TimerRegistrationError,
)

__all__ = ["PrometheusMeterRegistry", "FakeMeterRegistry", "TimerRecord", "TimerRegistrationError"]
