"""Step definitions shared by every scenario: login and Epinio navigation.

All interactions are performed via the browser (Selenium) against the
dashboard. No direct API calls are made in these steps.
"""

from behave import given, then, when

from epinio_ui.pages import Epinio, LoginPage, TopLevelMenu


@given("I am logged in to the dashboard")
def step_logged_in(context):
    """Authenticate and land on the dashboard home page."""
    env = context.env
    login = LoginPage(context.browser)
    login.login(env.base_url, env.username, env.password)
    login.visit(env.base_url, "/home")


@given("the top-level menu is open")
def step_menu_open(context):
    TopLevelMenu(context.browser).open_if_closed()


@given("the Epinio icon is shown")
def step_epinio_icon(context):
    Epinio(context.browser).epinio_icon().should_exist()


@when("I access Epinio on the configured cluster")
def step_access_epinio(context):
    Epinio(context.browser).access_epinio_menu(context.env.cluster)


@then("the Epinio navigation is shown")
def step_epinio_nav(context):
    Epinio(context.browser).check_epinio_nav()
