"""Shared fixtures for the page object tests."""

from unittest.mock import MagicMock

import pytest

from epinio_ui import config
from epinio_ui.pages.locator import ElementLocator


@pytest.fixture(autouse=True)
def fast_polling(monkeypatch):
    """Poll quickly so zero-timeout waits fail fast."""
    monkeypatch.setattr(config, "POLL_FREQUENCY", 0.01)


@pytest.fixture(name="driver")
def _driver():
    """A WebDriver double with no elements on the page."""
    driver = MagicMock()
    driver.find_elements.return_value = []
    return driver


@pytest.fixture(name="locator")
def _locator(driver):
    return ElementLocator(driver, timeout=0)


def make_element(text="", displayed=True, enabled=True, classes=""):
    """Build a WebElement double."""
    element = MagicMock()
    element.text = text
    element.is_displayed.return_value = displayed
    element.is_enabled.return_value = enabled
    element.get_attribute.return_value = classes
    element.find_elements.return_value = []
    return element
