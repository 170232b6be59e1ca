"""Core protocols for dependency injection."""

from restmetrics.core.protocols.http_exchange import HttpClientRequest, HttpClientResponse
from restmetrics.core.protocols.interceptor import (
    ClientHttpRequestExecution,
    ClientHttpRequestInterceptor,
)
from restmetrics.core.protocols.meter_registry import MeterRegistry
from restmetrics.core.protocols.tags_provider import HttpTagsProvider
from restmetrics.core.protocols.uri_template import UriTemplateHandler

__all__ = [
    "ClientHttpRequestExecution",
    "ClientHttpRequestInterceptor",
    "HttpClientRequest",
    "HttpClientResponse",
    "HttpTagsProvider",
    "MeterRegistry",
    "UriTemplateHandler",
]
