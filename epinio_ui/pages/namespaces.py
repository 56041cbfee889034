"""Namespaces list, create form and delete dialog."""

import logging

from epinio_ui import config
from epinio_ui.common.errors import AssertionFailed, ElementNotFound, TimeoutExceeded
from epinio_ui.models import Namespace
from epinio_ui.pages.base import ConsolePage

logger = logging.getLogger("epinio_ui")


class NamespacesPage(ConsolePage):
    """Creates, lists and deletes namespaces"""

    SECTION = "Namespaces"

    def create(self, namespace: Namespace):
        """Submit the create form for ``namespace``."""
        logger.info("Creating namespace %s", namespace.name)
        # the Create button renders after the list has loaded
        self.click_text("Create", timeout=config.CREATE_BUTTON_TIMEOUT)
        self.locator.wait_visible("namespace name input").send_keys(namespace.name)
        self.locator.wait_visible("primary action").click()

    def is_listed(self, namespace: Namespace) -> bool:
        return self.locator.text_visible(namespace.name)

    def wait_listed(self, namespace: Namespace, timeout=config.NAMESPACE_CREATE_TIMEOUT):
        try:
            return self.locator.contains(namespace.name, timeout=timeout)
        except ElementNotFound as exc:
            raise TimeoutExceeded(f"namespace '{namespace.name}' to be listed", exc.timeout, exc.elapsed) from exc

    def wait_removed(self, namespace: Namespace, timeout=config.NAMESPACE_DELETE_TIMEOUT):
        self.locator.wait_absent(namespace.name, timeout=timeout)

    def open_delete_dialog(self, namespace: Namespace):
        logger.info("Opening delete dialog for %s", namespace.name)
        self.click_text(namespace.name)
        self.click_text("Delete", tag="button")
        self.locator.wait_visible("delete dialog")

    def type_confirmation(self, text: str):
        field = self.locator.wait_visible("confirm input")
        field.clear()
        field.send_keys(text)

    def confirm_button(self):
        return self.locator.contains("Delete", within="delete dialog", tag="button")

    def confirm_enabled(self) -> bool:
        button = self.confirm_button()
        classes = button.get_attribute("class") or ""
        return button.is_enabled() and "disabled" not in classes.split()

    def cancel(self):
        self.locator.wait_visible("secondary action").click()

    def delete(self, namespace: Namespace, confirmation=None):
        """Delete ``namespace``, typing its name (or ``confirmation``) to confirm."""
        self.open_delete_dialog(namespace)
        typed = namespace.name if confirmation is None else confirmation
        self.type_confirmation(typed)
        if not self.confirm_enabled():
            raise AssertionFailed(f"Delete stays disabled after typing '{typed}' for namespace '{namespace.name}'")
        self.confirm_button().click()

    def deletion_blocked(self, namespace: Namespace, typed: str) -> bool:
        """Type a confirmation and report whether the delete action stays disabled.

        The dialog is left open; call ``cancel`` to dismiss it.
        """
        self.open_delete_dialog(namespace)
        self.type_confirmation(typed)
        blocked = not self.confirm_enabled()
        logger.info("Confirmation '%s' for %s blocked=%s", typed, namespace.name, blocked)
        return blocked
