"""Structured logging for depguard.

structlog renders every record, including ones from stdlib loggers, through
a single ``ProcessorFormatter`` attached to a stderr handler.  stdout is left
for command output.
"""

from __future__ import annotations

import logging
import logging.config
import os
import sys

import structlog

from depguard.exceptions import SettingsError

LOG_FORMATS = ("console", "json")


def _level_from(name: str) -> int:
    value = logging.getLevelName(name.upper())
    if not isinstance(value, int):
        raise SettingsError(f"DEPGUARD_LOG_LEVEL must be a logging level name, got {name!r}")
    return value


def _format_from(name: str) -> str:
    fmt = name.lower()
    if fmt not in LOG_FORMATS:
        raise SettingsError(
            f"DEPGUARD_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {name!r}"
        )
    return fmt


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging for a CLI run.

    ``DEPGUARD_LOG_LEVEL`` (default ``WARNING``) and ``DEPGUARD_LOG_FORMAT``
    (``console`` or ``json``) are read from the environment; an explicit
    *level* wins over the variable.  Raises :class:`SettingsError` for an
    unknown level or format.
    """
    log_level = _level_from(level or os.environ.get("DEPGUARD_LOG_LEVEL") or "WARNING")
    log_format = _format_from(os.environ.get("DEPGUARD_LOG_FORMAT") or "console")
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = {
        "()": structlog.stdlib.ProcessorFormatter,
        "foreign_pre_chain": pre_chain,
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_format),
        ],
    }
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"depguard": formatter},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "depguard",
                },
            },
            # Third-party loggers stay at WARNING even under --verbose
            "root": {"handlers": ["stderr"], "level": logging.WARNING},
            "loggers": {"depguard": {"level": log_level}},
        }
    )
