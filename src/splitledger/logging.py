from __future__ import annotations

import logging

import structlog

from splitledger.config import get_settings


def configure_logging(level: str | None = None) -> None:
    level_name = (level or get_settings().log_level).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    # Events go through the stdlib logger, so they stay silent until the
    # application sets up handlers (e.g. via configure_logging).
    return structlog.wrap_logger(logging.getLogger(name))
