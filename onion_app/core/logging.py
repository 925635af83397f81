"""Logging configuration.

Configures the root logger once at startup from AppSettings.
"""
import logging
import sys

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
SCOPED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(module)s.%(funcName)s] %(message)s"


def setup_logging(level: str = "INFO", include_scopes: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        include_scopes: Include logger name and call site in every line

    Returns:
        Configured root logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(SCOPED_FORMAT if include_scopes else SIMPLE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    return root_logger
