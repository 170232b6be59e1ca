"""Contextual logging.

Every logger carries a dict of *dimensions* (request id, operation, …) that
is rendered into each record. ``with_context`` derives a child logger with
extra dimensions without mutating the parent, so components can hand a
scoped logger to their collaborators.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

from restmetrics.core.config import settings

_LOCAL_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s%(dimensions_suffix)s"
_DEFAULT_FORMAT = "level=%(levelname)s logger=%(name)s msg=%(message)r%(dimensions_suffix)s"


class _DimensionsFilter(logging.Filter):
    """Render the ``dimensions`` extra into a printable suffix."""

    def filter(self, record: logging.LogRecord) -> bool:
        dimensions = getattr(record, "dimensions", None) or {}
        record.dimensions_suffix = "".join(f" {key}={value}" for key, value in dimensions.items())
        return True


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches a fixed set of dimensions to every record."""

    def __init__(self, logger: logging.Logger, dimensions: Optional[dict[str, Any]] = None):
        """Initialize the adapter.

        Args:
            logger: The underlying stdlib logger.
            dimensions: Key/value pairs added to every record.
        """
        super().__init__(logger, {})
        self.dimensions: dict[str, Any] = dict(dimensions or {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions"] = {**self.dimensions, **extra.get("dimensions", {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **kwargs: Any) -> "ContextualLogger":
        """Return a new logger with ``kwargs`` merged into the dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **kwargs})


class LoggerConfigurator:
    """Builds contextual loggers with the package's handler and format."""

    @staticmethod
    def configure_logger(name: str, dimensions: Optional[dict[str, Any]] = None) -> ContextualLogger:
        """Configure and return a contextual logger.

        Args:
            name (str): The logger name, usually ``__name__``.
            dimensions (dict[str, Any] | None): Initial dimensions.

        Returns:
            ContextualLogger: The configured logger.
        """
        base = logging.getLogger(name)
        base.setLevel(settings.LOG_LEVEL.upper())

        if not any(getattr(h, "_restmetrics", False) for h in base.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler._restmetrics = True  # type: ignore[attr-defined]
            handler.addFilter(_DimensionsFilter())
            handler.setFormatter(
                logging.Formatter(_LOCAL_FORMAT if settings.LOCAL_DEVELOPMENT else _DEFAULT_FORMAT)
            )
            base.addHandler(handler)
        # Records are written by the handler above only; the root logger never sees them.
        base.propagate = False

        return ContextualLogger(base, dimensions)


logger = LoggerConfigurator.configure_logger("restmetrics")
