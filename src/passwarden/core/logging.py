"""Structured logging for Passwarden.

This module configures structlog for structured JSON logging with
correlation ID tracking, so validation events can be traced back to the
caller that requested them. Password material is never passed to loggers.
"""

import logging
import sys
import uuid
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from passwarden.core.config import get_settings

PACKAGE_LOGGER = "passwarden"

# Library default: stay silent unless the host application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add correlation ID to log entry if not present in context.

    Args:
        logger: Logger instance (unused).
        method_name: Method name (unused).
        event_dict: Event dictionary to modify.

    Returns:
        EventDict: Modified event dictionary with correlation_id.
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = f"cid_{uuid.uuid4().hex[:12]}"
    return event_dict


def rename_message_field(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' field to 'message' for compatibility."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(settings: Any | None = None) -> None:
    """Configure structured logging for the package.

    Sets up structlog with JSON formatting for production and
    console formatting for development. Entries are routed through the
    standard library ``passwarden`` logger, which gets a stdout handler at
    the configured level.

    Until this is called the package logs nothing: the ``passwarden``
    logger only carries a NullHandler and inherits the host application's
    logging setup.

    Args:
        settings: Optional settings instance. If not provided, will load from environment.
    """
    if settings is None:
        settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_correlation_id,
        rename_message_field,
    ]

    if settings.is_development or settings.log_format == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )
        cache_logger = False
    else:
        renderer = structlog.processors.JSONRenderer()
        cache_logger = True

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_logger,
    )

    level = getattr(logging, settings.log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    remove_stream_handlers(package_logger)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def remove_stream_handlers(logger: logging.Logger) -> None:
    """Detach every handler added by configure_logging from logger."""
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    The logger always writes through the standard library logger of the
    same name, so output follows the ``passwarden`` logger's handlers
    whether or not configure_logging was called.

    Args:
        name: Optional logger name. If not provided, uses 'passwarden'.

    Returns:
        BoundLogger: Configured structured logger instance.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class LoggingContext:
    """Context manager for adding logging context.

    Useful for tagging every entry emitted while validating one batch of
    passwords.

    Example:
        with LoggingContext(correlation_id="abc123", policy="default"):
            validator.validate(data)  # Log entries include correlation_id and policy
    """

    def __init__(self, **kwargs: str) -> None:
        """Initialize logging context with key-value pairs.

        Args:
            **kwargs: Key-value pairs to add to logging context.
        """
        self.context = kwargs
        self.token: Any | None = None

    def __enter__(self) -> "LoggingContext":
        """Enter the context and add context variables."""
        self.token = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit the context and clear context variables."""
        if self.token is not None:
            structlog.contextvars.unbind_contextvars(*self.context.keys())


def clear_context() -> None:
    """Clear all context variables from the current logging context."""
    structlog.contextvars.clear_contextvars()
