"""
ora_customers.observability.logging

Structured logging configuration for the service.

Responsibilities:
- Configure `structlog` for JSON logs on stdout.
- Allow the level to be adjusted once settings have been loaded, including
  SQL statement logging at DEBUG.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

SQL_LOGGER = "sqlalchemy.engine"


def configure_logging(*, service_name: str, level: str = "INFO") -> None:
    # Called before settings are read, so startup failures are logged too.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_to_level(level),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def set_level(level: str) -> None:
    root_level = _to_level(level)
    logging.getLogger().setLevel(root_level)
    # SQL statements are logged only at DEBUG.
    logging.getLogger(SQL_LOGGER).setLevel(
        logging.INFO if root_level <= logging.DEBUG else logging.WARNING
    )


def _to_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request-scoped metadata is bound via contextvars in `observability.middleware`.
