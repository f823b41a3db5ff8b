"""
Centralized logging configuration.
"""
import logging

from .config import LOG_LEVEL, LOG_FORMAT


def setup_logger(name: str = None) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from svg_render.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'svg_render'.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'svg_render')

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, LOG_LEVEL, logging.WARNING))

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Alias for setup_logger for convenience.

    Usage:
        from svg_render.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)
