"""Logging setup: stdlib handlers with structlog JSON event rendering"""

import logging

import structlog


def get_logger(name: str):
    """structlog logger bound to a stdlib logger; silent until logging is configured."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog events through stdlib logging at the given level."""
    logging.basicConfig(level=level.upper())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
