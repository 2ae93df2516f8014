"""Centralized logging configuration."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that get their own handler
THIRD_PARTY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "fastapi",
)


def configure_logging(level: int = logging.INFO):
    """
    Configure one log format for the relay and the libraries it runs on.

    Args:
        level: Level applied to the root logger and the third-party loggers
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(_console_handler(formatter, level))

    for logger_name in THIRD_PARTY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)

        # Drop handlers installed by uvicorn so lines are not printed twice
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        logger.propagate = False
        logger.addHandler(_console_handler(formatter, level))


def _console_handler(formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler
