"""
Structured logging for Graphbook using structlog

Per-request fields (request id, viewer id) live in structlog's contextvars
and are merged into every event logged while the request is handled.
"""

import logging
import secrets
import sys

import structlog


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Render colored console output instead of JSON lines.
        log_level: Level name such as "warning". Defaults to DEBUG when
            `debug` is set and INFO otherwise.
    """
    if log_level is not None:
        level = logging.getLevelNamesMapping()[log_level.upper()]
    else:
        level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None = None, viewer_id: int | None = None) -> str:
    """Bind request fields to every log event of the current context.

    Returns:
        The request id, generated when none was supplied
    """
    request_id = request_id or secrets.token_urlsafe(8)
    structlog.contextvars.bind_contextvars(request_id=request_id, viewer_id=viewer_id)
    return request_id


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
