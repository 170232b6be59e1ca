"""Interceptor chain on top of an httpx transport.

httpx has no interceptor mechanism of its own; ``InterceptingTransport``
adds one by running each request through the configured interceptors
before the wrapped transport sends it.
"""

from typing import Iterator, Optional

import httpx

from restmetrics.core.protocols.interceptor import ClientHttpRequestInterceptor

_BODY_HEADERS = ("content-length", "transfer-encoding")


class InterceptingExecution:
    """One pass through the chain; each ``execute`` advances to the next interceptor."""

    def __init__(
        self,
        interceptors: list[ClientHttpRequestInterceptor],
        transport: httpx.BaseTransport,
    ) -> None:
        self._iterator: Iterator[ClientHttpRequestInterceptor] = iter(interceptors)
        self._transport = transport

    def execute(self, request: httpx.Request, body: bytes) -> httpx.Response:
        interceptor = next(self._iterator, None)
        if interceptor is not None:
            return interceptor.intercept(request, body, self)
        if body != request.content:
            request = _with_body(request, body)
        return self._transport.handle_request(request)


def _with_body(request: httpx.Request, body: bytes) -> httpx.Request:
    headers = httpx.Headers(request.headers)
    for name in _BODY_HEADERS:
        headers.pop(name, None)
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=body,
        extensions=request.extensions,
    )


class InterceptingTransport(httpx.BaseTransport):
    """Transport that runs interceptors around a wrapped transport.

    ``interceptors`` is a live list: changes apply to the next request.
    """

    def __init__(
        self,
        transport: Optional[httpx.BaseTransport] = None,
        interceptors: Optional[list[ClientHttpRequestInterceptor]] = None,
    ) -> None:
        self._transport = transport or httpx.HTTPTransport()
        self.interceptors: list[ClientHttpRequestInterceptor] = (
            interceptors if interceptors is not None else []
        )

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        body = request.read()
        return InterceptingExecution(list(self.interceptors), self._transport).execute(request, body)

    def close(self) -> None:
        self._transport.close()
