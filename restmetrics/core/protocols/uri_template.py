"""UriTemplateHandler protocol for turning URI templates into URLs."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class UriTemplateHandler(Protocol):
    """Expands ``{placeholder}`` templates into concrete URLs."""

    def expand(self, template: str, *args: Any, **kwargs: Any) -> str:
        """Expand ``template`` with positional or named variables."""
        ...
