"""Page objects for the Epinio console."""

from epinio_ui.pages.locator import ElementHandle, ElementLocator, SELECTORS  # noqa: F401
from epinio_ui.pages.toplevelmenu import TopLevelMenu  # noqa: F401
from epinio_ui.pages.epinio import Epinio  # noqa: F401
from epinio_ui.pages.login import LoginPage  # noqa: F401
from epinio_ui.pages.namespaces import NamespacesPage  # noqa: F401
from epinio_ui.pages.applications import ApplicationsPage, PipelineMonitor  # noqa: F401
