"""Minimal synchronous REST client with URI templates and interceptors."""

from types import TracebackType
from typing import Any, Mapping, Optional, Union

import httpx

from restmetrics.core.protocols.interceptor import ClientHttpRequestInterceptor
from restmetrics.core.protocols.uri_template import UriTemplateHandler
from restmetrics.http.transport import InterceptingTransport
from restmetrics.http.uri_template import DefaultUriTemplateHandler
from restmetrics.instrumentation.route_templates import RouteTemplateStack, route_templates


class RestClient:
    """``httpx.Client`` wrapper that expands URI templates and runs interceptors.

    Usage:
        client = RestClient("https://example.com", interceptors=[...])
        client.get("/hotels/{hotel}/bookings/{booking}", 42, 21)
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        interceptors: Optional[list[ClientHttpRequestInterceptor]] = None,
        transport: Optional[httpx.BaseTransport] = None,
        uri_template_handler: Optional[UriTemplateHandler] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float = 30.0,
        route_templates: RouteTemplateStack = route_templates,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Prefix for relative templates.
            interceptors: Initial interceptor chain, outermost first.
            transport: Transport that actually sends requests.
            uri_template_handler: Template expander; ``DefaultUriTemplateHandler`` by default.
            headers: Default headers for every request.
            timeout: httpx timeout in seconds.
            route_templates: Route stack scoped around every call.
        """
        self.uri_template_handler: UriTemplateHandler = (
            uri_template_handler or DefaultUriTemplateHandler(base_url)
        )
        self._route_templates = route_templates
        self._transport = InterceptingTransport(transport, interceptors)
        self._client = httpx.Client(transport=self._transport, headers=headers, timeout=timeout)

    @property
    def interceptors(self) -> list[ClientHttpRequestInterceptor]:
        """Live interceptor list."""
        return self._transport.interceptors

    def execute(
        self,
        method: str,
        url: Union[str, httpx.URL],
        *uri_variables: Any,
        content: Optional[Union[bytes, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        **named_variables: Any,
    ) -> httpx.Response:
        """Send one request.

        String URLs are expanded as templates; an ``httpx.URL`` is sent unchanged.
        """
        with self._route_templates.scope():
            if isinstance(url, httpx.URL):
                target = url
            else:
                target = self.uri_template_handler.expand(url, *uri_variables, **named_variables)
            return self._client.request(method, target, content=content, headers=headers)

    def get(self, url: Union[str, httpx.URL], *uri_variables: Any, **kwargs: Any) -> httpx.Response:
        return self.execute("GET", url, *uri_variables, **kwargs)

    def post(self, url: Union[str, httpx.URL], *uri_variables: Any, **kwargs: Any) -> httpx.Response:
        return self.execute("POST", url, *uri_variables, **kwargs)

    def put(self, url: Union[str, httpx.URL], *uri_variables: Any, **kwargs: Any) -> httpx.Response:
        return self.execute("PUT", url, *uri_variables, **kwargs)

    def delete(self, url: Union[str, httpx.URL], *uri_variables: Any, **kwargs: Any) -> httpx.Response:
        return self.execute("DELETE", url, *uri_variables, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]] = None,
        exc_value: Optional[BaseException] = None,
        traceback: Optional[TracebackType] = None,
    ) -> None:
        self.close()
