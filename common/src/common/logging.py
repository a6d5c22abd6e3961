"""structlog configuration shared by the pipeline steps."""

import logging
import sys
from typing import Any, Optional

import structlog


def configure_logging(
    level: str = "INFO",
    service_name: Optional[str] = None,
    structured: bool = True,
) -> None:
    """Configure logging for a pipeline step.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Name bound to every log line as ``service``
        structured: Render JSON lines instead of the plain console format
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if service_name:
        processors.insert(0, _bind_service(service_name))

    if structured:
        processors.append(structlog.processors.JSONRenderer())
        fmt = "%(message)s"
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    # force=True so a second call (tests, re-entry) replaces the handler
    logging.basicConfig(
        format=fmt,
        stream=sys.stdout,
        level=log_level,
        force=True,
    )


def _bind_service(service_name: str):
    def add_service(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service


def get_logger(name: str, **context: Any) -> Any:
    """Get a structlog logger with optional bound context.

    Args:
        name: Logger name
        **context: Key/value pairs bound to every line from this logger

    Returns:
        Bound structlog logger
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
