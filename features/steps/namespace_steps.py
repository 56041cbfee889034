"""Step definitions for creating and deleting namespaces."""

from behave import then, when

from epinio_ui.pages import ApplicationsPage, NamespacesPage
from epinio_ui.scenario import Stage


@when("I create the namespace")
def step_create_namespace(context):
    state = context.scenario_state
    state.require(Stage.SETUP)
    page = NamespacesPage(context.browser)
    page.open()
    page.create(state.namespace)


@then("the namespace is listed")
def step_namespace_listed(context):
    state = context.scenario_state
    NamespacesPage(context.browser).wait_listed(state.namespace)
    if state.stage is Stage.SETUP:
        state.advance(Stage.NAMESPACE_CREATED)


@when('I ask to delete the namespace confirming with "{typed}"')
def step_mismatched_confirmation(context, typed):
    state = context.scenario_state
    state.require(Stage.NAMESPACE_CREATED, Stage.APP_DEPLOYED)
    assert typed != state.namespace.name, "the confirmation must differ from the namespace name"
    page = NamespacesPage(context.browser)
    page.open()
    context.deletion_blocked = page.deletion_blocked(state.namespace, typed)
    page.cancel()


@then("the deletion is blocked")
def step_deletion_blocked(context):
    assert context.deletion_blocked, "Delete was enabled for a mismatched confirmation"


@when("I delete the namespace")
def step_delete_namespace(context):
    state = context.scenario_state
    state.require(Stage.NAMESPACE_CREATED, Stage.APP_DEPLOYED)
    page = NamespacesPage(context.browser)
    page.open()
    page.delete(state.namespace)


@then("the namespace is no longer listed")
def step_namespace_gone(context):
    state = context.scenario_state
    NamespacesPage(context.browser).wait_removed(state.namespace)
    state.advance(Stage.CLEANED)


@then("the application is no longer listed")
def step_application_gone(context):
    """Deleting the namespace takes its applications with it."""
    state = context.scenario_state
    state.require(Stage.CLEANED)
    page = ApplicationsPage(context.browser)
    page.open()
    page.wait_removed(state.application)
