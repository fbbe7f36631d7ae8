"""
Delivery log configuration.

All package loggers are children of ``delivery_filter``; the run attaches a
single file handler to that parent once the log path is resolved.
"""
import logging
from pathlib import Path
from typing import Union

PACKAGE_LOGGER = "delivery_filter"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance under the package logger.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(log_path: Union[str, Path]) -> logging.Logger:
    """Send INFO and above to the delivery log file, replacing a previous file handler."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    shutdown_logging()

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def shutdown_logging() -> None:
    """Flush and close the delivery log handlers."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            handler.flush()
            handler.close()
            logger.removeHandler(handler)
