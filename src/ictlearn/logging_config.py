"""structlog setup shared by the API server and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from ictlearn.config.app_config import LoggingConfig


def configure_logging(config: LoggingConfig | None = None, stream: TextIO | None = None) -> None:
    """Route structlog and stdlib logging through one renderer.

    Console output by default, one JSON object per line when
    config.json is set. Output goes to stream (stdout by default).
    """
    config = config or LoggingConfig()
    stream = stream or sys.stdout
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=stream, level=level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if config.json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
