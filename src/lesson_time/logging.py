"""Structured logging configuration using structlog.

The engine itself only emits debug events (rejected input, bucket counts).
Applications embedding it call setup_logging() once at start-up; the
month_calendar script does so from EngineConfig.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from src.lesson_time.config import EngineConfig


def setup_logging(
    json_output: bool | None = None,
    log_level: str | None = None,
    *,
    config: "EngineConfig | None" = None,
) -> None:
    """Configure structlog with console or JSON rendering.

    Explicit arguments win over the config; the config fills whatever is left
    unset.

    Args:
        json_output: If True, output JSON (production). If False, console format (dev).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        config: Engine configuration providing log_json and log_level defaults.
    """
    if config is not None:
        if json_output is None:
            json_output = config.log_json
        if log_level is None:
            log_level = config.log_level

    numeric_level = getattr(logging, (log_level or "INFO").upper(), logging.INFO)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # Rendered lines go to stderr so scripts can keep stdout for their output.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance bound with the module name.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured structlog logger with module name context.
    """
    return structlog.get_logger(name)
