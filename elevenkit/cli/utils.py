"""
Common utilities for CLI commands
"""
import logging
from typing import Iterable

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers of the HTTP stack under the ElevenLabs SDK
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    debug: bool = False,
    logger_name: str = "elevenkit",
    transport_loggers: Iterable[str] = TRANSPORT_LOGGERS
) -> logging.Logger:
    """
    Setup logging configuration for CLI commands

    Request-level logs from the HTTP stack are only shown in debug mode.

    Args:
        debug: Whether to enable debug mode
        logger_name: Name of the logger to configure
        transport_loggers: Loggers held at WARNING unless debugging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    for name in transport_loggers:
        logging.getLogger(name).setLevel(
            logging.DEBUG if debug else logging.WARNING
        )

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.debug("Debug mode enabled for %s", logger_name)
    return logger
