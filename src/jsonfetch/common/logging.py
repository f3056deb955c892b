"""Structured logging setup."""

import logging
import sys
from typing import Optional, TextIO
import structlog


def setup_logging(
    level: str = "INFO",
    service_name: Optional[str] = None,
    json_format: bool = True,
    stream: Optional[TextIO] = None,
) -> structlog.BoundLogger:
    """
    Setup structured logging with structlog.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        service_name: Name of the service (for log context)
        json_format: If True, output JSON logs; otherwise, console format
        stream: Where log lines go (default: stderr, keeping stdout for output)

    Returns:
        Configured logger instance
    """
    stream = stream or sys.stderr
    log_level = getattr(logging, level.upper())

    # Configure standard logging
    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=log_level,
    )

    # Configure structlog processors
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if service_name:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                }
            )
        )

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger()

    if service_name:
        logger = logger.bind(service=service_name)

    return logger
