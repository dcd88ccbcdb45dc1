"""
Structured logging configuration using structlog.

The package logs through the stdlib logger ``monads``, which carries a
NullHandler, so nothing is emitted unless the host application configures
logging (for example with ``configure_logging``).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

from monads.config import get_settings

if TYPE_CHECKING:
    from structlog.typing import Processor

LOGGER_NAME = "monads"
HANDLER_NAME = "monads.structlog"

# Processors run before the formatter sees the event dict.
_LOGGER_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def configure_logging(
    *,
    json_format: bool | None = None,
    log_level: str | None = None,
) -> None:
    """
    Configure structlog and stdlib logging for an application using monads.

    Installs a single stdout handler on the root logger whose
    ProcessorFormatter renders both structlog events (including the ones
    emitted by this package) and plain stdlib records. Calling it again
    replaces the handler.

    Args:
        json_format: Use JSON format instead of console format.
            Defaults to the ``MONADS_JSON_FORMAT`` setting.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the ``MONADS_LOG_LEVEL`` setting.
    """
    settings = get_settings()
    if json_format is None:
        json_format = settings.json_format
    level = logging.getLevelName((log_level or settings.log_level).upper())

    shared_processors: list[Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=_LOGGER_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processors=processors))

    root = logging.getLogger()
    remove_handler()
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger(LOGGER_NAME).setLevel(level)


def remove_handler() -> None:
    """Remove the handler installed by configure_logging, if any."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger backed by a stdlib logger.

    The event dict travels to stdlib logging as the record's message, so
    bound keys never collide with LogRecord attributes.

    Args:
        name: Optional logger name (typically __name__). Defaults to ``monads``.

    Returns:
        A bound structlog logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_LOGGER_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger


def bind_context(**kwargs: object) -> None:
    """
    Bind context variables to the current context.

    Args:
        **kwargs: Key-value pairs to bind to the context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
