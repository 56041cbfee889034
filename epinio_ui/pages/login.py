"""Dashboard login form."""

import logging

from epinio_ui import config
from epinio_ui.common.waits import wait_until
from epinio_ui.pages.locator import ElementLocator

logger = logging.getLogger("epinio_ui")

LOGIN_PATH = "/auth/login"


class LoginPage:
    """Authenticates against the dashboard with local credentials"""

    def __init__(self, driver, locator=None):
        self.driver = driver
        self.locator = locator or ElementLocator(driver)

    def login(self, base_url, username, password):
        logger.info("Logging in as %s", username)
        self.driver.get(base_url + LOGIN_PATH)
        wait_until(
            self.driver,
            lambda driver: LOGIN_PATH not in driver.current_url or self.locator.exists("username"),
            config.LOGIN_TIMEOUT,
            "login form or dashboard",
        )
        if not self.locator.exists("username"):
            logger.debug("Session already authenticated")
            return
        self.locator.wait_visible("username").send_keys(username)
        self.locator.wait_visible("password").send_keys(password)
        self.locator.wait_visible("login submit").click()
        wait_until(
            self.driver,
            lambda driver: LOGIN_PATH not in driver.current_url,
            config.LOGIN_TIMEOUT,
            "login to complete",
        )

    def visit(self, base_url, path="/home"):
        self.driver.get(base_url + path)
