"""Entry point of the Epinio product inside the dashboard."""

import logging

from epinio_ui import config
from epinio_ui.common.errors import ClusterNotFound, ElementNotFound
from epinio_ui.pages.locator import ElementHandle, ElementLocator

logger = logging.getLogger("epinio_ui")

NAV_ENTRIES = ("Namespaces", "Applications", "Configurations")


class Epinio:
    """Locates the Epinio product for a cluster and checks its navigation"""

    def __init__(self, driver, locator=None):
        self.locator = locator or ElementLocator(driver)

    def epinio_icon(self) -> ElementHandle:
        return self.locator.handle("epinio icon")

    def access_epinio_menu(self, cluster_name: str):
        """Click the side menu entry of ``cluster_name``."""
        if not cluster_name:
            raise ValueError("Cluster name must not be empty")
        logger.info("Accessing Epinio on cluster '%s'", cluster_name)
        try:
            entry = self.locator.contains(cluster_name, within="side menu", timeout=config.CLUSTER_TIMEOUT)
        except ElementNotFound as exc:
            raise ClusterNotFound(f"No menu entry for cluster '{cluster_name}': {exc}") from exc
        entry.click()

    def check_epinio_nav(self, entries=NAV_ENTRIES):
        nav = self.locator.handle("feature nav")
        for entry in entries:
            nav.should_contain(entry)
