"""Tagging context for one intercepted exchange."""

from typing import Optional

from restmetrics.core.protocols.http_exchange import HttpClientRequest, HttpClientResponse
from restmetrics.core.protocols.tags_provider import HttpTagsProvider


class HttpClientHandlerContext:
    """Collects what is known about an exchange until the timer is stopped.

    The response and error are filled in after the delegate returns or
    raises; ``get_tags`` asks the provider for tags of whatever is known at
    that point.
    """

    def __init__(self, request: HttpClientRequest, tags_provider: HttpTagsProvider) -> None:
        self.request = request
        self.response: Optional[HttpClientResponse] = None
        self.error: Optional[BaseException] = None
        self._tags_provider = tags_provider

    def get_tags(self) -> dict[str, str]:
        return dict(self._tags_provider(self.request, self.response, self.error))
