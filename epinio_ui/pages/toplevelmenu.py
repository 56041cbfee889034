"""The dashboard's top-level (hamburger) menu."""

import logging

from epinio_ui import config
from epinio_ui.common.errors import ElementNotFound, MenuUnavailable
from epinio_ui.pages.locator import ElementLocator

logger = logging.getLogger("epinio_ui")


class TopLevelMenu:
    """Opens the side menu listing clusters and products"""

    def __init__(self, driver, locator=None):
        self.locator = locator or ElementLocator(driver)

    def is_open(self) -> bool:
        return self.locator.exists("top-level menu open")

    def toggle(self):
        try:
            self.locator.wait_visible("top-level menu toggle", timeout=config.MENU_TIMEOUT).click()
        except ElementNotFound as exc:
            raise MenuUnavailable(f"Top-level menu toggle is not available: {exc}") from exc

    def open_if_closed(self) -> bool:
        """Open the menu unless it already is. Returns True if it was toggled."""
        if self.is_open():
            logger.debug("Top-level menu already open")
            return False
        logger.info("Opening top-level menu")
        self.toggle()
        # wait for the open state so a second call cannot toggle it shut
        self.locator.wait_visible("top-level menu open")
        return True
