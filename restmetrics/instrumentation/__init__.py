"""Client request instrumentation."""

from restmetrics.instrumentation.context import HttpClientHandlerContext
from restmetrics.instrumentation.customizer import MetricsRestClientCustomizer
from restmetrics.instrumentation.interceptor import MetricsClientHttpInterceptor
from restmetrics.instrumentation.route_templates import (
    CapturingUriTemplateHandler,
    RouteTemplateStack,
    route_templates,
)
from restmetrics.instrumentation.tags import DefaultHttpTagsProvider, Outcome
from restmetrics.instrumentation.timer import TimerSample, TimerSpec
from restmetrics.instrumentation.views import ClientRequestView, ClientResponseView

__all__ = [
    "CapturingUriTemplateHandler",
    "ClientRequestView",
    "ClientResponseView",
    "DefaultHttpTagsProvider",
    "HttpClientHandlerContext",
    "MetricsClientHttpInterceptor",
    "MetricsRestClientCustomizer",
    "Outcome",
    "RouteTemplateStack",
    "TimerSample",
    "TimerSpec",
    "route_templates",
]
