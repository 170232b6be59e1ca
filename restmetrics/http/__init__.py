"""Host pipeline: URI templates, interceptor chain and REST client."""

from restmetrics.http.client import RestClient
from restmetrics.http.transport import InterceptingExecution, InterceptingTransport
from restmetrics.http.uri_template import DefaultUriTemplateHandler

__all__ = [
    "DefaultUriTemplateHandler",
    "InterceptingExecution",
    "InterceptingTransport",
    "RestClient",
]
