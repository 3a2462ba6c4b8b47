"""Logging configuration using structlog.

Log lines are JSON in deployment and colourised key/value pairs in debug
mode. Service calls bind their operation and player id with
``operation_context`` so every line emitted below them carries both.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from structlog import contextvars as structlog_contextvars

# Processors shared by both renderers, in order
_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog_contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structlog over the standard library root logger.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param json_logs: Render JSON lines; otherwise use the console renderer
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def operation_context(**fields: Any) -> Iterator[None]:
    """Bind the non-null ``fields`` to every log line emitted inside the block.

    Bindings made outside the block are restored on exit.

    :example:
        with operation_context(operation="get_player", player_id="7"):
            logger.info("player_retrieved")
    """
    bound = {key: value for key, value in fields.items() if value is not None}
    with structlog_contextvars.bound_contextvars(**bound):
        yield


def get_logger(name: str) -> Any:
    """
    Get a configured structlog logger.

    :param name: Logger name (usually __name__)
    :returns: Configured logger instance
    """
    return structlog.get_logger(name)
