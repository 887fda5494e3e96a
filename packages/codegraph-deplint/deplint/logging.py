"""
Structured Logging for deplint

structlog on top of stdlib logging. Events are snake_case names with
key/value context:

    logger = get_logger(__name__)
    logger.debug("resource_skipped", resource="web", reason="no_inferred_dependencies")
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.contextvars import merge_contextvars

from deplint.config import get_config


def setup_logging(
    level: str | None = None,
    format: Literal["json", "console"] | None = None,
    include_timestamp: bool = True,
) -> None:
    """
    Setup structured logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to DEPLINT_LOGGING__LEVEL.
        format: Output format ("json" for pipelines, "console" for editors/terminals).
            Defaults to DEPLINT_LOGGING__FORMAT.
        include_timestamp: Include ISO timestamp in logs
    """
    config = get_config().logging
    level = level or config.level
    format = format or config.format

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )

    shared_processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if include_timestamp:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))

    shared_processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
    )

    if format == "json":
        output_processors: list[Any] = [
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        output_processors = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=shared_processors + output_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Events go through the stdlib logger of the same name, so nothing is
    emitted until the host configures logging (see setup_logging).

    Args:
        name: Logger name (usually __name__ from calling module)

    Returns:
        Structured logger instance
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


__all__ = [
    "setup_logging",
    "get_logger",
]
