"""Installs client metrics onto a ``RestClient`` in one call."""

from typing import TYPE_CHECKING

from restmetrics.instrumentation.interceptor import MetricsClientHttpInterceptor
from restmetrics.instrumentation.route_templates import CapturingUriTemplateHandler

if TYPE_CHECKING:
    from restmetrics.http.client import RestClient


class MetricsRestClientCustomizer:
    """Wires the metrics interceptor and route capture into a client.

    The interceptor goes first in the chain so its timer covers every other
    interceptor.  Customizing the same client twice is a no-op.
    """

    def __init__(self, interceptor: MetricsClientHttpInterceptor) -> None:
        self.interceptor = interceptor

    def customize(self, client: "RestClient") -> None:
        handler = client.uri_template_handler
        if not isinstance(handler, CapturingUriTemplateHandler):
            client.uri_template_handler = CapturingUriTemplateHandler(
                handler, self.interceptor.route_templates
            )
        if self.interceptor not in client.interceptors:
            client.interceptors.insert(0, self.interceptor)
