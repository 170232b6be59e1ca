"""URI template expansion.

Supports ``{name}`` and ``{name:regex}`` placeholders.  Variables are
filled by name when keyword arguments are given, otherwise in order of
appearance.  Values are percent-encoded as a single path segment.
"""

import re
from typing import Any
from urllib.parse import quote

_VARIABLE = re.compile(r"\{([^{}]+)\}")
_ABSOLUTE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


class DefaultUriTemplateHandler:
    """Expands templates and resolves relative results against ``base_url``."""

    def __init__(self, base_url: str = "") -> None:
        self.base_url = base_url

    def expand(self, template: str, *args: Any, **kwargs: Any) -> str:
        """Expand ``template``.

        Raises:
            ValueError: If a placeholder has no value.
        """
        positional = iter(args)

        def _substitute(match: re.Match) -> str:
            name = match.group(1).split(":", 1)[0].strip()
            if kwargs:
                if name not in kwargs:
                    raise ValueError(f"Map has no value for '{name}' in template '{template}'")
                value = kwargs[name]
            else:
                try:
                    value = next(positional)
                except StopIteration:
                    raise ValueError(
                        f"Not enough variable values available to expand '{name}'"
                    ) from None
            return quote(str(value), safe="")

        expanded = _VARIABLE.sub(_substitute, template)
        if not self.base_url or _ABSOLUTE.match(expanded):
            return expanded
        return f"{self.base_url.rstrip('/')}/{expanded.lstrip('/')}"
