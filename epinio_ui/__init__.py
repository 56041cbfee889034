"""
Package: epinio_ui
Page objects, configuration and logging for the Epinio console UI suite
"""

import logging

from epinio_ui import config
from epinio_ui.common import log_handlers

logger = logging.getLogger("epinio_ui")


def init_suite():
    """Configure logging for a test run and return the suite logger."""
    log_handlers.init_logging("epinio_ui", config.LOG_LEVEL)
    logger.info(70 * "*")
    logger.info("  E P I N I O   U I   S U I T E   I N I T  ".center(70, "*"))
    logger.info(70 * "*")
    return logger
