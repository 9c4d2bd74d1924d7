"""
Structured logging configuration for the bidder adapters.

Adapters log through ``bidder_logger`` and bind the auction ID per call.
Anything the host binds with ``structlog.contextvars`` (request IDs,
account IDs...) is merged into every adapter log line.
"""

import logging
import os
import sys
from typing import Any

import structlog

SERVICE_NAME = "pbs-adapters"


def add_service_info(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to add service info to log entries."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    show_timestamps: bool = True,
) -> None:
    """
    Configure structured logging for the adapters.

    LOG_LEVEL and LOG_FORMAT in the environment take precedence over the
    arguments.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ('json' or 'console')
        show_timestamps: Whether to include timestamps
    """
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_info,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if format == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        )
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def bidder_logger(bidder_code: str) -> structlog.stdlib.BoundLogger:
    """Get logger for bidder-specific events."""
    return get_logger("pbs.bidder").bind(bidder=bidder_code)


def config_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for configuration loading."""
    return get_logger("pbs.config")


# Initialize with defaults on module load
configure_logging()
