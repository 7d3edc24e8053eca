from __future__ import annotations

import logging
import logging.handlers
import sys
from typing import IO, Any

import structlog

from currencli.infrastructure.config.settings import AppSettings, get_settings


def _resolve_level(level_name: str) -> int:
    """Return logging level from name with safe fallback to WARNING."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _file_handler(settings: AppSettings) -> logging.Handler:
    assert settings.log_file is not None
    if settings.log_rotation == "size":
        return logging.handlers.RotatingFileHandler(
            filename=settings.log_file,
            maxBytes=max(1024, settings.log_max_bytes),
            backupCount=max(1, settings.log_backup_count),
            encoding="utf-8",
        )
    return logging.handlers.TimedRotatingFileHandler(
        filename=settings.log_file,
        when=settings.log_rotate_when,
        interval=1,
        backupCount=max(1, settings.log_backup_count),
        utc=settings.log_rotate_utc,
        encoding="utf-8",
    )


def configure_logging(stream: IO[str] | None = None, settings: AppSettings | None = None) -> None:
    """Initialize structlog + stdlib logging for console or JSON rendering.

    - stderr console handler by default; stdout carries command output only
    - rotating file handler instead when JSON_LOGS and LOG_FILE are both set
    - contextvars merged; ISO timestamp, level and logger name added
    - force reconfigure to avoid duplicate handlers between tests/runs

    stream: optional text stream for the console handler (defaults to sys.stderr).
    """
    settings = settings or get_settings()
    if not settings.logging_enabled:
        logging.basicConfig(handlers=[logging.NullHandler()], level=logging.CRITICAL, force=True)
        structlog.configure(
            processors=[structlog.stdlib.filter_by_level, structlog.processors.KeyValueRenderer()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,  # type: ignore[arg-type]
            cache_logger_on_first_use=False,
        )
        return

    timestamper = structlog.processors.TimeStamper(fmt="iso")
    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    if settings.json_logs:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    if settings.json_logs and settings.log_file:
        handler = _file_handler(settings)
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=pre_chain,
        )
    )

    logging.basicConfig(handlers=[handler], level=_resolve_level(settings.log_level), force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,  # type: ignore[arg-type]
        # module-level loggers must follow reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "currencli") -> structlog.stdlib.BoundLogger:
    """Return a structured logger; configuration happens lazily or via configure_logging()."""
    return structlog.get_logger(name)
