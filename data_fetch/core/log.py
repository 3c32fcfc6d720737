"""Logging setup.

DataFetch logs through structlog and never configures logging on import.
Applications call ``setup_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(level: int = logging.INFO, *, json: bool = False) -> None:
    """Configure stdlib logging and the structlog processor chain.

    Args:
        level: Minimum level handled by the root logger.
        json: Render JSON lines instead of colorized console output.
    """
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
