"""Interceptor that times every outbound exchange.

Records one observation of the ``http.client.requests`` timer per call,
tagged by the configured tag provider.  The interceptor is purely
observational: the delegate's response is returned as-is and its
exceptions propagate unchanged.  Failures while recording are logged and
dropped.
"""

import time
from typing import Callable, Optional

import httpx

from restmetrics.core.config import settings
from restmetrics.core.logging import logger
from restmetrics.core.protocols.interceptor import ClientHttpRequestExecution
from restmetrics.core.protocols.meter_registry import MeterRegistry
from restmetrics.core.protocols.tags_provider import HttpTagsProvider
from restmetrics.instrumentation.context import HttpClientHandlerContext
from restmetrics.instrumentation.route_templates import RouteTemplateStack, route_templates
from restmetrics.instrumentation.tags import DefaultHttpTagsProvider
from restmetrics.instrumentation.timer import TimerSample, TimerSpec
from restmetrics.instrumentation.views import ClientRequestView, ClientResponseView


class MetricsClientHttpInterceptor:
    """Times client exchanges into a meter registry.

    Satisfies the ``ClientHttpRequestInterceptor`` protocol structurally.
    """

    def __init__(
        self,
        meter_registry: MeterRegistry,
        tags_provider: Optional[HttpTagsProvider] = None,
        *,
        timer_name: Optional[str] = None,
        timer_description: Optional[str] = None,
        route_templates: RouteTemplateStack = route_templates,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """Initialize the interceptor.

        Args:
            meter_registry: Registry the timer observations are recorded into.
            tags_provider: Tag policy; defaults to ``DefaultHttpTagsProvider``.
            timer_name: Timer name, ``settings.TIMER_NAME`` by default.
            timer_description: Timer description, ``settings.TIMER_DESCRIPTION`` by default.
            route_templates: Stack the URI template handler captured routes into.
            clock: Monotonic clock in seconds, for tests.
        """
        self.meter_registry = meter_registry
        self.tags_provider = tags_provider or DefaultHttpTagsProvider()
        self.timer = TimerSpec(
            timer_name or settings.TIMER_NAME,
            timer_description or settings.TIMER_DESCRIPTION,
        )
        self.route_templates = route_templates
        self._clock = clock or time.perf_counter
        self.logger = logger.with_context(context_base="http_client", operation="metrics")

    def intercept(
        self,
        request: httpx.Request,
        body: bytes,
        execution: ClientHttpRequestExecution,
    ) -> httpx.Response:
        route_mark, route = self.route_templates.claim()
        request_view = ClientRequestView(request, route=route)
        handler_context = HttpClientHandlerContext(request_view, self.tags_provider)
        sample = TimerSample.start(self.meter_registry, handler_context, clock=self._clock)
        response = None
        try:
            response = execution.execute(request, body)
            return response
        except BaseException as e:
            handler_context.error = e
            raise
        finally:
            try:
                handler_context.response = ClientResponseView(response, request_view)
                sample.stop(self.timer)
            except Exception as e:
                self.logger.info(f"Failed to record metrics: {e}", exc_info=True)
            self.route_templates.release(route_mark)
