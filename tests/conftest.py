"""Shared pytest fixtures and configuration."""

import logging
from collections.abc import Iterator

import pytest

from diagram_core import V2, Curve, Group, Polygon, combine, curve, polygon
from diagram_core.config import Settings
from diagram_core.utils.logging import clear_correlation_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context and the package log level between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()
    logging.getLogger("diagram_core").setLevel(logging.NOTSET)


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def triangle() -> Polygon:
    """Closed right triangle spanning (0, 0)-(4, 3)."""
    return polygon([V2(0, 0), V2(4, 0), V2(0, 3), V2(0, 0)])


@pytest.fixture
def wave() -> Curve:
    """Open three-point curve spanning (5, -1)-(7, 2)."""
    return curve([V2(5, 1), V2(6, -1), V2(7, 2)])


@pytest.fixture
def scene(triangle: Polygon, wave: Curve) -> Group:
    """Group of the triangle and the wave; bounding box (0, -1)-(7, 3)."""
    return combine(triangle, wave, names=["tri", "wave"])
