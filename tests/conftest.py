"""Shared test fixtures."""

import itertools
import logging
from typing import Callable

import pytest

from restmetrics.adapters.meter_registry import FakeMeterRegistry
from restmetrics.instrumentation.route_templates import RouteTemplateStack


@pytest.fixture
def fake_registry() -> FakeMeterRegistry:
    return FakeMeterRegistry()


@pytest.fixture
def route_stack() -> RouteTemplateStack:
    """Fresh stack so tests never share route state with the module-wide one."""
    return RouteTemplateStack("test-url-template")


@pytest.fixture
def ticking_clock() -> Callable[[], float]:
    """Clock that advances a quarter second on every read."""
    ticks = itertools.count()
    return lambda: next(ticks) * 0.25


@pytest.fixture
def package_caplog(caplog):
    """``caplog`` attached to the package logger, which does not propagate to root."""
    package_logger = logging.getLogger("restmetrics")
    package_logger.addHandler(caplog.handler)
    caplog.handler.setLevel(logging.INFO)
    try:
        yield caplog
    finally:
        package_logger.removeHandler(caplog.handler)
