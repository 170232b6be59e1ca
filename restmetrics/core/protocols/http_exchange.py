"""Read-only views of one HTTP client exchange.

Tag providers see these views instead of the transport's own request and
response objects, so tagging policy never depends on ``httpx`` directly.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class HttpClientRequest(Protocol):
    """View of an outbound request."""

    @property
    def method(self) -> str:
        """HTTP method, e.g. ``GET``."""
        ...

    @property
    def path(self) -> str:
        """Path component of the request URL."""
        ...

    @property
    def url(self) -> str:
        """Full request URL, or ``None`` if it cannot be rendered."""
        ...

    @property
    def route(self) -> Optional[str]:
        """Unexpanded URI template the request was built from, if known."""
        ...

    def get_header(self, name: str) -> Optional[str]:
        """First value of header ``name``, or ``None``."""
        ...

    def header_names(self) -> list[str]:
        """Names of all request headers."""
        ...

    def set_header(self, name: str, value: str) -> None:
        """Set a header on the underlying request (tracing propagation)."""
        ...

    def unwrap(self) -> Any:
        """The underlying request object."""
        ...


@runtime_checkable
class HttpClientResponse(Protocol):
    """View of a possibly absent inbound response."""

    @property
    def status_code(self) -> int:
        """Status code, or ``0`` when there is no readable response."""
        ...

    @property
    def request(self) -> HttpClientRequest:
        """The request view this response answers."""
        ...

    def get_header(self, name: str) -> Optional[str]:
        """First value of header ``name``, or ``None``."""
        ...

    def header_names(self) -> list[str]:
        """Names of all response headers; empty when there is no response."""
        ...

    def unwrap(self) -> Any:
        """The underlying response object, or ``None``."""
        ...
