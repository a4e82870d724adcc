"""Structured logging setup.

Log entries are key-value events (``logger.info("employee_added", employee_id=7)``)
rendered as JSON in production and as readable console lines in development.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog


def add_service_context(service_name: str):
    """Add service context to all log entries"""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        event_dict["environment"] = os.getenv("APP_ENV", "development")
        return event_dict

    return processor


def configure_logging(service_name: str, log_level: str = "INFO", json_logs: bool = True) -> None:
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_context(service_name),
    ]
    if json_logs:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Flask/werkzeug still log through the standard library.
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
