"""Default tagging policy for HTTP client timers."""

import re
from enum import Enum
from typing import Optional

from restmetrics.core.protocols.http_exchange import HttpClientRequest, HttpClientResponse

UNKNOWN = "UNKNOWN"
NONE = "None"
CLIENT_ERROR = "CLIENT_ERROR"

_SCHEME_AND_AUTHORITY = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://[^/]*")


class Outcome(str, Enum):
    """Coarse classification of a response status."""

    INFORMATIONAL = "INFORMATIONAL"
    SUCCESS = "SUCCESS"
    REDIRECTION = "REDIRECTION"
    CLIENT_ERROR = "CLIENT_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def for_status(cls, status: int) -> "Outcome":
        if 100 <= status < 200:
            return cls.INFORMATIONAL
        if 200 <= status < 300:
            return cls.SUCCESS
        if 300 <= status < 400:
            return cls.REDIRECTION
        if 400 <= status < 500:
            return cls.CLIENT_ERROR
        if 500 <= status < 600:
            return cls.SERVER_ERROR
        return cls.UNKNOWN


def normalize_route(route: str) -> str:
    """Strip scheme and host from a template and ensure a leading slash.

    ``https://example.com/hotels/{hotel}`` and ``hotels/{hotel}`` both
    become ``/hotels/{hotel}``.
    """
    path = _SCHEME_AND_AUTHORITY.sub("", route)
    if not path.startswith("/"):
        path = f"/{path}"
    return path


class DefaultHttpTagsProvider:
    """Tags every observation with method, uri, status, outcome and exception."""

    def __call__(
        self,
        request: HttpClientRequest,
        response: Optional[HttpClientResponse],
        error: Optional[BaseException],
    ) -> dict[str, str]:
        status = response.status_code if response is not None else 0
        return {
            "method": self.method(request),
            "uri": self.uri(request),
            "status": self.status(status),
            "outcome": Outcome.for_status(status).value,
            "exception": self.exception(error),
        }

    @staticmethod
    def method(request: HttpClientRequest) -> str:
        return request.method.upper() if request.method else UNKNOWN

    @staticmethod
    def uri(request: HttpClientRequest) -> str:
        return normalize_route(request.route) if request.route else UNKNOWN

    @staticmethod
    def status(status: int) -> str:
        return str(status) if status > 0 else CLIENT_ERROR

    @staticmethod
    def exception(error: Optional[BaseException]) -> str:
        if error is None:
            return NONE
        return type(error).__name__
