"""Structured logging for diagram_core.

Loggers are structlog wrappers around stdlib loggers under the
``diagram_core`` namespace. Until the host application configures logging,
output follows the stdlib defaults: debug events from the builders are
dropped and nothing is written to stdout.

Each factory runs inside ``building(name)``, so every event it logs carries
the builder name. Figure-level callers add a ``figure_id`` with
``set_correlation_context``.
"""

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.types import Processor

from diagram_core.config import settings

_figure_id: ContextVar[str | None] = ContextVar("figure_id", default=None)
_builder: ContextVar[str | None] = ContextVar("builder", default=None)


def set_correlation_context(
    figure_id: str | None = None,
    builder: str | None = None,
) -> None:
    """Set correlation IDs for the current context.

    Args:
        figure_id: Identifier of the figure being assembled.
        builder: Name of the builder doing the work (e.g. "table").
    """
    if figure_id is not None:
        _figure_id.set(figure_id)
    if builder is not None:
        _builder.set(builder)


def clear_correlation_context() -> None:
    _figure_id.set(None)
    _builder.set(None)


@contextmanager
def building(builder: str) -> Iterator[None]:
    """Tag log events emitted inside the block with a builder name.

    Nested blocks take over the builder name and hand it back on exit.
    """
    token = _builder.set(builder)
    try:
        yield
    finally:
        _builder.reset(token)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor adding figure_id and builder when set."""
    _ = logger, method_name
    figure_id = _figure_id.get()
    builder = _builder.get()

    if figure_id is not None:
        event_dict["figure_id"] = figure_id
    if builder is not None:
        event_dict["builder"] = builder

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Route diagram_core events through structlog to stdout.

    Meant for applications and scripts; the library never calls it.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_correlation_ids,
    ]

    renderer: Processor
    if log_format == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("diagram_core").setLevel(getattr(logging, level.upper()))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger called name.

    The stdlib logger decides which events are emitted, so an unconfigured
    host sees only warnings and above, on stderr.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger
