"""
Element lookups for the Epinio console.

SELECTORS is the contract between the suite and the rendered console:
page objects ask for elements by semantic name and only this mapping knows
the markup. A console release that renames a class means an update here,
not in the scenarios.
"""

import logging

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.common.by import By

from epinio_ui import config
from epinio_ui.common.errors import AssertionFailed, ElementNotFound, TimeoutExceeded
from epinio_ui.common.waits import wait_until

logger = logging.getLogger("epinio_ui")

SELECTORS = {
    # Dashboard chrome
    "top-level menu toggle": (By.CSS_SELECTOR, '[data-testid="top-level-menu"]'),
    "top-level menu open": (By.CSS_SELECTOR, ".side-menu.menu-open"),
    "side menu": (By.CSS_SELECTOR, ".side-menu"),
    "epinio icon": (By.CSS_SELECTOR, '.side-menu img[src*="epinio"]'),
    "feature nav": (By.CSS_SELECTOR, "nav.side-nav"),
    "page title": (By.CSS_SELECTOR, ".m-0"),
    # Login
    "username": (By.CSS_SELECTOR, "#username"),
    "password": (By.CSS_SELECTOR, "#password"),
    "login submit": (By.CSS_SELECTOR, "#submit"),
    # Forms and dialogs
    "namespace name input": (By.CSS_SELECTOR, ".labeled-input.create input"),
    "app name input": (By.CSS_SELECTOR, ".input-string > .labeled-input input"),
    "file input": (By.CSS_SELECTOR, 'input[type="file"]'),
    "primary action": (By.CSS_SELECTOR, ".card-actions .role-primary"),
    "secondary action": (By.CSS_SELECTOR, ".card-actions .role-secondary"),
    "controls row": (By.CSS_SELECTOR, ".controls-row"),
    "delete dialog": (By.CSS_SELECTOR, ".card-container"),
    "confirm input": (By.CSS_SELECTOR, "#confirm"),
    # Application details
    "pipeline step badge": (By.CSS_SELECTOR, ":nth-child({index}) > .col-badge-state-formatter > .badge-state"),
    "app header": (By.CSS_SELECTOR, ".primaryheader"),
    "readiness": (By.CSS_SELECTOR, ".numbers"),
}


def xpath_literal(text: str) -> str:
    """Quote ``text`` for use inside an XPath expression."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


def text_xpath(text: str, tag: str = "*") -> str:
    """XPath matching elements whose own text contains ``text``."""
    return f".//{tag}[not(self::script or self::style)][text()[contains(normalize-space(.), {xpath_literal(text)})]]"


class ElementHandle:
    """A named query bound to a locator, in the spirit of a lazy chainable"""

    def __init__(self, locator, name, **params):
        self.locator = locator
        self.name = name
        self.params = params

    def __repr__(self):
        return f"<ElementHandle {self.name!r}>"

    def exists(self) -> bool:
        return self.locator.exists(self.name, **self.params)

    def get(self, timeout=None):
        return self.locator.find(self.name, timeout=timeout, **self.params)

    def wait_visible(self, timeout=None):
        return self.locator.wait_visible(self.name, timeout=timeout, **self.params)

    def should_exist(self, timeout=None):
        """Assert the element is present, waiting up to ``timeout``."""
        try:
            return self.get(timeout=timeout)
        except ElementNotFound as exc:
            raise AssertionFailed(f"Expected '{self.name}' to exist: {exc}") from exc

    def should_contain(self, text, timeout=None):
        return self.locator.assert_contains(self.name, text, timeout=timeout, **self.params)


class ElementLocator:
    """Resolves semantic element names against the current page"""

    def __init__(self, driver, selectors=None, timeout=None):
        self.driver = driver
        self.selectors = SELECTORS if selectors is None else selectors
        self.timeout = config.DEFAULT_TIMEOUT if timeout is None else timeout

    def _timeout(self, timeout):
        return self.timeout if timeout is None else timeout

    def query(self, name, **params):
        """Return the (By, value) pair for a semantic name."""
        try:
            by, value = self.selectors[name]
        except KeyError as exc:
            raise ValueError(f"Unknown element name: {name}") from exc
        return by, value.format(**params) if params else value

    def handle(self, name, **params) -> ElementHandle:
        self.query(name, **params)
        return ElementHandle(self, name, **params)

    def exists(self, name, **params) -> bool:
        """Non-blocking existence check."""
        return len(self.driver.find_elements(*self.query(name, **params))) > 0

    def find(self, name, timeout=None, **params):
        """Return the first element matching ``name`` once it is present."""
        by, value = self.query(name, **params)

        def present(driver):
            elements = driver.find_elements(by, value)
            return elements[0] if elements else False

        return self._wait_for(present, value, timeout)

    def wait_visible(self, name, timeout=None, **params):
        """Return the first displayed element matching ``name``."""
        by, value = self.query(name, **params)

        def visible(driver):
            for element in driver.find_elements(by, value):
                if element.is_displayed():
                    return element
            return False

        return self._wait_for(visible, value, timeout)

    def assert_contains(self, name, text, timeout=None, **params):
        """Wait for the element to exist and its text to contain ``text``."""
        by, value = self.query(name, **params)
        seen = []

        def containing(driver):
            elements = driver.find_elements(by, value)
            if not elements:
                return False
            texts = [element.text for element in elements]
            seen[:] = texts
            for element, element_text in zip(elements, texts):
                if text in element_text:
                    return element
            return False

        try:
            return wait_until(self.driver, containing, self._timeout(timeout), f"'{value}' to contain '{text}'")
        except TimeoutExceeded as exc:
            if not seen:
                raise ElementNotFound(value, exc.timeout, exc.elapsed) from exc
            found = ", ".join(f"'{element_text}'" for element_text in seen)
            raise AssertionFailed(
                f"Expected '{value}' to contain '{text}' but found {found} "
                f"after {exc.elapsed:.1f}s (timeout {exc.timeout:.1f}s)"
            ) from exc

    def contains(self, text, within=None, tag="*", timeout=None):
        """Return the first visible element whose own text contains ``text``.

        ``within`` names a container from SELECTORS to scope the search,
        ``tag`` restricts the element type (``button`` for actions).
        """
        return self._wait_for(
            lambda _driver: self._visible_text(text, within, tag) or False,
            f"text '{text}'" + (f" within '{within}'" if within else ""),
            timeout,
        )

    def text_visible(self, text, within=None, tag="*") -> bool:
        """Non-blocking check for visible text."""
        return self._visible_text(text, within, tag) is not None

    def _visible_text(self, text, within, tag):
        xpath = text_xpath(text, tag)
        roots = self.driver.find_elements(*self.query(within)) if within else [self.driver]
        for root in roots:
            try:
                for element in root.find_elements(By.XPATH, xpath):
                    if element.is_displayed():
                        return element
            except StaleElementReferenceException:
                # re-rendered between lookup and check
                continue
        return None

    def wait_absent(self, text, within=None, timeout=None):
        """Wait until no visible element contains ``text``."""
        try:
            wait_until(
                self.driver,
                lambda _driver: not self.text_visible(text, within=within),
                self._timeout(timeout),
                f"text '{text}' to disappear",
            )
        except TimeoutExceeded as exc:
            raise AssertionFailed(
                f"Expected text '{text}' to be gone but it is still shown "
                f"after {exc.elapsed:.1f}s (timeout {exc.timeout:.1f}s)"
            ) from exc

    def _wait_for(self, condition, selector, timeout):
        try:
            return wait_until(self.driver, condition, self._timeout(timeout), f"'{selector}'")
        except TimeoutExceeded as exc:
            raise ElementNotFound(selector, exc.timeout, exc.elapsed) from exc
