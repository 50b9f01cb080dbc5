"""
Logging Configuration
Console (and optionally file) output for the 'mathcanvas' logger namespace.

Library modules only call `logging.getLogger(__name__)`; handlers are attached
here, once, by the GUI entry point.
"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "mathcanvas"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _handler(handler: logging.Handler, level: Union[int, str], formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'mathcanvas' logger.

    Calling it again replaces the previous handlers instead of adding more.

    Args:
        level: Level number or name ("DEBUG", "INFO", ...).
        log_file: Optional path; the file is overwritten on every start.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level, formatter))
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file, mode="w", encoding="utf-8"), level, formatter))

    logger.info("Logging initialized.")
    return logger
