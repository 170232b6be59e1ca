"""HttpTagsProvider protocol.

Any callable with this signature works, plain functions included.
"""

from typing import Mapping, Optional, Protocol, runtime_checkable

from restmetrics.core.protocols.http_exchange import HttpClientRequest, HttpClientResponse


@runtime_checkable
class HttpTagsProvider(Protocol):
    """Derives the tags of one timer observation from an exchange."""

    def __call__(
        self,
        request: HttpClientRequest,
        response: Optional[HttpClientResponse],
        error: Optional[BaseException],
    ) -> Mapping[str, str]:
        """Return tag key/value pairs for the exchange.

        Args:
            request: The request view.
            response: The response view, ``None`` before the exchange finished.
            error: The exception raised by the delegate, if any.
        """
        ...
