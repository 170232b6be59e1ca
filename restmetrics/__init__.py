"""Timing metrics for outbound HTTP client calls."""

from restmetrics.adapters.meter_registry import FakeMeterRegistry, PrometheusMeterRegistry
from restmetrics.http import DefaultUriTemplateHandler, InterceptingTransport, RestClient
from restmetrics.instrumentation import (
    CapturingUriTemplateHandler,
    DefaultHttpTagsProvider,
    MetricsClientHttpInterceptor,
    MetricsRestClientCustomizer,
    Outcome,
    route_templates,
)

__all__ = [
    "CapturingUriTemplateHandler",
    "DefaultHttpTagsProvider",
    "DefaultUriTemplateHandler",
    "FakeMeterRegistry",
    "InterceptingTransport",
    "MetricsClientHttpInterceptor",
    "MetricsRestClientCustomizer",
    "Outcome",
    "PrometheusMeterRegistry",
    "RestClient",
    "route_templates",
]
