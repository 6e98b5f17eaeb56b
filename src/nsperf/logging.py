"""
structlog setup for the nsperf API

Request-scoped values (request id, GraphQL operation) live in structlog's
context variables, so every log line emitted while serving a request carries
them, including lines from resolvers and the storage layer.
"""

import logging
import sys

import structlog
from bson import ObjectId


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Render human-readable console output instead of JSON lines.
        level: Log level name. Defaults to DEBUG in debug mode, INFO otherwise.
    """
    if level:
        log_level = logging.getLevelName(level.upper())
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None = None, **values) -> str:
    """Start a fresh logging context for one request.

    The request id defaults to a new ObjectId string, which sorts by time like
    the stored documents. Extra keyword values are bound alongside it.
    """
    request_id = request_id or str(ObjectId())
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **values)
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
