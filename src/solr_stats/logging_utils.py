import logging
import sys

import structlog

from .config.loader import load_settings


def configure_logging(
    *, level: int | str | None = None, json_logs: bool | None = None
) -> None:
    """Configure structlog-based logging on stderr.

    Parameters
    ----------
    level:
        Logging level, e.g. ``logging.INFO`` or ``"DEBUG"``. Defaults to the
        ``log_level`` environment variable or ``WARNING``.
    json_logs:
        If ``True``, use JSON formatted logs. Defaults to the ``log_json``
        environment variable (``"1"``, ``"true"``).
    """
    settings = load_settings()
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    if json_logs is None:
        json_logs = settings.log_json

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
