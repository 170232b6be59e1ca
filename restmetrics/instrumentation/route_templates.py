"""Thread-local stack of unexpanded URI templates.

The URI template handler runs before the request is dispatched and knows
the logical route (``/hotels/{hotel}``); the metrics interceptor runs later,
on the same thread, and only sees the expanded URL.  The capturing handler
pushes the raw template here and the interceptor reads it back for the
``uri`` tag.

Entries are released explicitly: the interceptor truncates the stack back
to the position it claimed when the call started, which also drops stray
pushes made above it, and ``scope()`` truncates anything pushed inside it
when the call finishes.  The per-thread storage is dropped as soon as it is
empty so pooled threads never carry templates from one call into the next.
"""

import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from restmetrics.core.protocols.uri_template import UriTemplateHandler

_BOUNDARY = object()


class RouteTemplateStack:
    """Per-thread LIFO of route templates separated by call scopes."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._local = threading.local()

    def push(self, template: str) -> None:
        self._entries().append(template)

    def peek(self) -> Optional[str]:
        """Innermost template pushed in the current scope, or ``None``."""
        entries = self._entries(create=False)
        if not entries or entries[-1] is _BOUNDARY:
            return None
        return entries[-1]

    def claim(self) -> tuple[int, Optional[str]]:
        """Mark the current call's position on the stack.

        Returns:
            ``(mark, template)``: ``template`` is the innermost template of the
            current scope (or ``None``) and ``mark`` the depth ``release``
            truncates back to, which drops that template and anything pushed
            above it afterwards.
        """
        entries = self._entries(create=False) or []
        template = self.peek()
        if template is None:
            return len(entries), None
        return len(entries) - 1, template

    def release(self, mark: int) -> None:
        """Truncate the stack back to ``mark``, then drop empty storage."""
        entries = self._entries(create=False)
        if entries is None:
            return
        del entries[mark:]
        self._discard_if_empty()

    @contextmanager
    def scope(self) -> Iterator[None]:
        """Bound everything pushed inside the block to this block."""
        entries = self._entries()
        depth = len(entries)
        entries.append(_BOUNDARY)
        try:
            yield
        finally:
            del entries[depth:]
            self._discard_if_empty()

    def depth(self) -> int:
        """Number of templates held for the current thread."""
        entries = self._entries(create=False) or []
        return sum(1 for entry in entries if entry is not _BOUNDARY)

    @property
    def allocated(self) -> bool:
        """Whether the current thread holds any storage."""
        return self._entries(create=False) is not None

    def _entries(self, create: bool = True) -> Optional[list[Any]]:
        entries = getattr(self._local, "entries", None)
        if entries is None and create:
            entries = self._local.entries = []
        return entries

    def _discard_if_empty(self) -> None:
        entries = getattr(self._local, "entries", None)
        if entries is not None and not entries:
            del self._local.entries

    def __repr__(self) -> str:
        return f"RouteTemplateStack({self.name!r})"


route_templates = RouteTemplateStack("rest-client-url-template")


class CapturingUriTemplateHandler:
    """UriTemplateHandler decorator that records the raw template before expanding it."""

    def __init__(
        self,
        delegate: UriTemplateHandler,
        stack: RouteTemplateStack = route_templates,
    ) -> None:
        self.delegate = delegate
        self._stack = stack

    def expand(self, template: str, *args: Any, **kwargs: Any) -> str:
        self._stack.push(template)
        return self.delegate.expand(template, *args, **kwargs)
