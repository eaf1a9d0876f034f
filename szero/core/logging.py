"""Structured logging for szero — structlog routed through stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

DEFAULT_LEVEL = "WARNING"


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging for the CLI.

    Environment variables:
        SZERO_LOG_LEVEL  — log level (default: WARNING)
        SZERO_LOG_FORMAT — console | json (default: console)

    *level* overrides ``SZERO_LOG_LEVEL``.  Records go to stderr; stdout is
    reserved for the report.
    """
    log_level = (level or os.environ.get("SZERO_LOG_LEVEL", DEFAULT_LEVEL)).upper()
    as_json = os.environ.get("SZERO_LOG_FORMAT", "console").lower() == "json"

    pre_chain = _processors()
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "szero": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "szero",
                },
            },
            "loggers": {
                "szero": {"handlers": ["stderr"], "level": log_level, "propagate": False},
            },
        }
    )
