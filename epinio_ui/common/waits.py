"""
Bounded polling used by every page object.

All waits in the suite go through ``wait_until`` so a timeout always
surfaces as a TimeoutExceeded carrying the elapsed time.
"""

import logging
import time

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.support.ui import WebDriverWait

from epinio_ui import config
from epinio_ui.common.errors import TimeoutExceeded

logger = logging.getLogger("epinio_ui")

IGNORED_EXCEPTIONS = (NoSuchElementException, StaleElementReferenceException)


def wait_until(driver, condition, timeout=None, description="condition", poll_frequency=None):
    """Poll ``condition(driver)`` until it returns a truthy value and return it.

    Raises TimeoutExceeded when ``timeout`` seconds pass first. The
    condition runs at least once, even with a zero timeout.
    """
    if timeout is None:
        timeout = config.DEFAULT_TIMEOUT
    waiter = WebDriverWait(
        driver,
        timeout,
        poll_frequency=poll_frequency or config.POLL_FREQUENCY,
        ignored_exceptions=IGNORED_EXCEPTIONS,
    )
    logger.debug("Waiting up to %.1fs for %s", timeout, description)
    start = time.monotonic()
    try:
        return waiter.until(condition)
    except TimeoutException as exc:
        raise TimeoutExceeded(description, timeout, time.monotonic() - start) from exc
