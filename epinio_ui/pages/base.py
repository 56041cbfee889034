"""Shared behaviour of the Epinio list pages."""

import logging

from epinio_ui.pages.locator import ElementLocator

logger = logging.getLogger("epinio_ui")


class ConsolePage:
    """A section of the Epinio navigation, such as Namespaces"""

    SECTION = ""

    def __init__(self, driver, locator=None):
        self.driver = driver
        self.locator = locator or ElementLocator(driver)

    def open(self):
        """Open the section from the Epinio navigation and wait for its title."""
        logger.info("Opening %s", self.SECTION)
        self.locator.contains(self.SECTION, within="feature nav").click()
        self.locator.handle("page title").should_contain(self.SECTION)

    def click_text(self, text, within=None, tag="*", timeout=None):
        self.locator.contains(text, within=within, tag=tag, timeout=timeout).click()
