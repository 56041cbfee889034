"""
Log Handlers

This module contains utility functions to set up logging
consistently for the page objects and the behave runner
"""

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(module)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def init_logging(logger_name: str, level="INFO") -> logging.Logger:
    """Set up a single stream handler with a consistent format"""
    logger = logging.getLogger(logger_name)
    logger.propagate = False
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    # Make all log formats consistent
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    logger.info("Logging handler established")
    return logger
