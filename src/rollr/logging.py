# logging.py

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

import structlog
from structlog.contextvars import merge_contextvars

from rollr.config import Settings


def _level(name: str, default: int) -> int:
    return getattr(logging, name.upper(), default)


def setup_logging(settings: Settings | None = None) -> None:
    """Initialize structlog + stdlib logging.

    Console output goes to stderr so stdout only ever carries the roll line.
    Defaults: WARNING level, console on, file off.
    """
    level_name = (settings.logging_level if settings else "WARNING").upper()
    level = _level(level_name, logging.WARNING)

    logging.captureWarnings(True)

    # ProcessorFormatter renders both structlog and stdlib records as JSON
    processor_formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
        foreign_pre_chain=[
            structlog.processors.add_log_level,
            merge_contextvars,
        ],
    )

    root_handlers: list[logging.Handler] = []
    console_lvl_name = settings.logging_console if settings is not None else level_name
    if console_lvl_name.upper() != "NONE":
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(_level(console_lvl_name, level))
        ch.setFormatter(processor_formatter)
        root_handlers.append(ch)

    file_lvl_name = settings.logging_file if settings is not None else "NONE"
    if file_lvl_name.upper() != "NONE":
        path = settings.logging_file_path
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        fh = RotatingFileHandler(
            path,
            maxBytes=settings.logging_max_bytes,
            backupCount=settings.logging_backup_count,
            encoding="utf-8",
        )
        fh.setLevel(_level(file_lvl_name, level))
        fh.setFormatter(processor_formatter)
        root_handlers.append(fh)

    # Root must pass the most verbose handler level through
    handler_levels = [h.level for h in root_handlers]
    root_level = min([level, *handler_levels])

    # force=True replaces any prior configuration
    logging.basicConfig(level=root_level, handlers=root_handlers, force=True)

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
