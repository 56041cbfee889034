"""Behave environment hooks for the Epinio console scenarios.

The browser is started once for the whole run. The scenarios of a feature
share a ScenarioContext holding the namespace and application they work on,
created in ``before_feature`` so it survives from one scenario to the next.

Settings come from ``-D KEY=value`` userdata, then the environment:
  BASE_URL, CLUSTER, SYSTEM_DOMAIN, UI_USERNAME, UI_PASSWORD, HEADLESS
"""

from epinio_ui import init_suite
from epinio_ui.browser import start_browser
from epinio_ui.models import Application, EnvironmentConfig, Namespace
from epinio_ui.scenario import ScenarioContext

NAMESPACE_NAME = "mynamespace"
APP_NAME = "testapp"


def before_all(context):
    """Start a headless browser and load the run settings."""
    context.logger = init_suite()
    context.env = EnvironmentConfig.load(context.config.userdata)
    context.browser = start_browser(headless=context.env.headless)


def before_feature(context, feature):
    """Give the feature's ordered scenarios one shared namespace and app."""
    namespace = Namespace(context.config.userdata.get("NAMESPACE", NAMESPACE_NAME))
    context.scenario_state = ScenarioContext(context.env, namespace, Application(APP_NAME, namespace))
    context.logger.info("Feature '%s' with %r", feature.name, context.scenario_state)


def after_scenario(context, scenario):
    if scenario.status.name == "failed":
        context.logger.error("Scenario '%s' failed at %r", scenario.name, context.scenario_state)


def after_all(context):
    """Shut down the browser if it was started."""
    browser = getattr(context, "browser", None)
    if browser:
        browser.quit()
