"""Interceptor chain protocols.

An interceptor receives the request, its body and an execution handle for
"the rest of the chain".  It must either return the response produced by
the execution or let the execution's exception propagate.
"""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class ClientHttpRequestExecution(Protocol):
    """Continuation that runs the remaining interceptors and the transport."""

    def execute(self, request: httpx.Request, body: bytes) -> httpx.Response:
        """Send ``request`` through the rest of the chain."""
        ...


@runtime_checkable
class ClientHttpRequestInterceptor(Protocol):
    """Wraps one request/response exchange."""

    def intercept(
        self,
        request: httpx.Request,
        body: bytes,
        execution: ClientHttpRequestExecution,
    ) -> httpx.Response:
        """Observe or modify the exchange around ``execution.execute``."""
        ...
