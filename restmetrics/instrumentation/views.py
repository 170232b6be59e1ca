"""httpx-backed request and response views."""

from typing import Optional

import httpx

from restmetrics.core.protocols.http_exchange import HttpClientRequest


class ClientRequestView:
    """Read-only view of an ``httpx.Request``; header writes go to the real request."""

    def __init__(self, request: httpx.Request, route: Optional[str] = None) -> None:
        self._request = request
        self._route = route

    @property
    def method(self) -> str:
        return self._request.method

    @property
    def path(self) -> str:
        return self._request.url.path

    @property
    def url(self) -> str:
        return str(self._request.url)

    @property
    def route(self) -> Optional[str]:
        return self._route

    def get_header(self, name: str) -> Optional[str]:
        values = self._request.headers.get_list(name)
        return values[0] if values else None

    def header_names(self) -> list[str]:
        return list(dict.fromkeys(self._request.headers.keys()))

    def set_header(self, name: str, value: str) -> None:
        self._request.headers[name] = value

    def unwrap(self) -> httpx.Request:
        return self._request


class ClientResponseView:
    """Read-only view of a response that may be missing.

    A missing response (the transport raised) reports status ``0`` and no
    headers instead of raising.
    """

    def __init__(self, response: Optional[httpx.Response], request: HttpClientRequest) -> None:
        self._response = response
        self._request = request

    @property
    def status_code(self) -> int:
        if self._response is None:
            return 0
        return self._response.status_code

    @property
    def request(self) -> HttpClientRequest:
        return self._request

    def get_header(self, name: str) -> Optional[str]:
        if self._response is None:
            return None
        values = self._response.headers.get_list(name)
        return values[0] if values else None

    def header_names(self) -> list[str]:
        if self._response is None:
            return []
        return list(dict.fromkeys(self._response.headers.keys()))

    def unwrap(self) -> Optional[httpx.Response]:
        return self._response
