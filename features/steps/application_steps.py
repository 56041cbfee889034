"""Step definitions for pushing an application through the create wizard."""

from behave import then, when

from epinio_ui.pages import ApplicationsPage
from epinio_ui.scenario import Stage


@when("I push the sample application into the namespace")
def step_push_application(context):
    state = context.scenario_state
    state.require(Stage.NAMESPACE_CREATED)
    context.applications = ApplicationsPage(context.browser)
    context.applications.open()
    context.applications.deploy(state.application)


@then("every pipeline step succeeds")
def step_pipeline_succeeds(context):
    context.applications.wait_for_pipeline(context.scenario_state.application)
    context.applications.finish()


@then("the application is running with all instances ready")
def step_application_running(context):
    app = context.scenario_state.application
    context.applications.check_running(app)
    context.applications.check_readiness(app, 100)


@then("the application shows its namespace and URL")
def step_application_details(context):
    state = context.scenario_state
    context.applications.check_namespace(state.application)
    context.applications.check_url(state.application, state.env.system_domain)
    state.advance(Stage.APP_DEPLOYED)
