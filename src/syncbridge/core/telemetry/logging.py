from __future__ import annotations

import logging

import structlog


def _processors(json_logs: bool) -> list:
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [*shared_processors, renderer]


def level_number(log_level: str) -> int:
    return getattr(logging, log_level.upper(), logging.INFO)


def configure_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.make_filtering_bound_logger(level_number(log_level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, log_level: str = "INFO", json_logs: bool = True):
    configure_logging(log_level=log_level, json_logs=json_logs)
    return structlog.get_logger(name)


def build_logger(name: str, log_level: str = "INFO", json_logs: bool = True):
    """Standalone logger with the same pipeline, leaving global structlog config alone."""
    return structlog.wrap_logger(
        structlog.PrintLogger(),
        processors=_processors(json_logs),
        wrapper_class=structlog.make_filtering_bound_logger(level_number(log_level)),
        logger_name=name,
    )
