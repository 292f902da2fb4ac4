"""
harview/utils/logger.py

Logger factory shared by all harview modules.
"""

import logging

from harview.config import Config


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger configured with the harview handler and format.

    The handler is attached once per logger name; repeated calls return the
    same configured logger.

    Args:
        name: Logger name, usually __name__ of the calling module.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=Config.LOG_FORMAT, datefmt=Config.LOG_DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(Config.LOG_LEVEL)
        logger.propagate = False
    return logger
