"""structlog setup shared by the register and the demo."""

import logging
import sys
from typing import Optional

import structlog

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def configure_logging(level: Optional[str] = None, json: bool = False) -> None:
    """Configure structlog with ISO timestamps and a level filter.

    Log lines go to stderr.

    Args:
        level: Minimum level name ("debug", "info", ...); None logs everything.
        json: Render JSON lines instead of the human-readable console format.
    """
    if level is None:
        min_level = 0
    else:
        try:
            min_level = LOG_LEVELS[level.lower()]
        except KeyError:
            raise ValueError(f"Unknown log level: {level}") from None

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
