"""Applications list, the create wizard and the application detail page."""

import logging

from epinio_ui import config
from epinio_ui.common.errors import AssertionFailed, ElementNotFound
from epinio_ui.common.upload import attach_file
from epinio_ui.common.waits import wait_until
from epinio_ui.models import Application, AppState, PipelineStep
from epinio_ui.pages.base import ConsolePage

logger = logging.getLogger("epinio_ui")

# build and deploy wait on the backend
STEP_TIMEOUTS = {
    PipelineStep.CREATE: config.DEFAULT_TIMEOUT,
    PipelineStep.UPLOAD: config.DEFAULT_TIMEOUT,
    PipelineStep.BUILD: config.PIPELINE_STEP_TIMEOUT,
    PipelineStep.DEPLOY: config.PIPELINE_STEP_TIMEOUT,
}


class PipelineMonitor:
    """Records badge states and fails when a successful step regresses"""

    def __init__(self):
        self.states = {}

    def observe(self, step: PipelineStep, text: str):
        success = AppState.SUCCESS.value
        previous = self.states.get(step)
        if previous is not None and success in previous and success not in text:
            raise AssertionFailed(f"Pipeline step {step.label} regressed from '{previous}' to '{text}'")
        self.states[step] = text

    def succeeded(self, step: PipelineStep) -> bool:
        return AppState.SUCCESS.value in self.states.get(step, "")


class ApplicationsPage(ConsolePage):
    """Pushes applications and checks their state"""

    SECTION = "Applications"

    def __init__(self, driver, locator=None, monitor=None):
        super().__init__(driver, locator)
        self.monitor = monitor or PipelineMonitor()

    def start_create(self):
        self.click_text("Create")

    def next_step(self):
        self.click_text("Next", tag="button")

    def deploy(self, app: Application, archive=config.SAMPLE_APP):
        """Walk the create wizard: name, source archive, create."""
        logger.info("Pushing %s into %s", app.name, app.namespace.name)
        self.start_create()
        self.locator.wait_visible("app name input").send_keys(app.name)
        self.next_step()
        attach_file(self.driver, self.locator.find("file input"), archive)
        self.next_step()
        self.click_text("Create", within="controls row")

    def _badge(self, step: PipelineStep):
        badges = self.driver.find_elements(*self.locator.query("pipeline step badge", index=step.value))
        return badges[0] if badges else None

    def step_state(self, step: PipelineStep):
        """Current badge text of ``step`` or None before it renders."""
        badge = self._badge(step)
        if badge is None:
            return None
        text = badge.text
        self.monitor.observe(step, text)
        return text

    def wait_for_step(self, step: PipelineStep, timeout=None):
        """Wait for ``step`` to show Success, rechecking the steps before it."""
        timeout = STEP_TIMEOUTS[step] if timeout is None else timeout
        earlier = [s for s in PipelineStep if s.value < step.value]

        def step_succeeded(_driver):
            for done in earlier:
                self.step_state(done)
            badge = self._badge(step)
            if badge is None:
                return False
            state = badge.text
            self.monitor.observe(step, state)
            return AppState.SUCCESS.value in state and badge.is_displayed()

        wait_until(self.driver, step_succeeded, timeout, f"pipeline step {step.label} to succeed")
        logger.info("Pipeline step %s succeeded", step.label)

    def wait_for_pipeline(self, app: Application):
        for step in PipelineStep:
            self.wait_for_step(step)
        app.state = AppState.SUCCESS

    def finish(self):
        self.click_text("Done", within="controls row")

    def check_running(self, app: Application):
        header = self.locator.handle("app header")
        header.should_contain(app.name, timeout=config.APP_HEADER_TIMEOUT)
        header.should_contain(AppState.RUNNING.value, timeout=config.APP_HEADER_TIMEOUT)
        app.state = AppState.RUNNING

    def check_readiness(self, app: Application, percent=100):
        self.locator.handle("readiness").should_contain(f"{percent}%", timeout=config.READINESS_TIMEOUT)
        app.set_readiness(percent)

    def check_namespace(self, app: Application):
        label = f"Namespace: {app.namespace.name}"
        try:
            self.locator.contains(label)
        except ElementNotFound as exc:
            raise AssertionFailed(f"Application namespace label '{label}' is not shown: {exc}") from exc

    def check_url(self, app: Application, system_domain: str):
        url = app.url(system_domain)
        try:
            self.locator.contains(url)
        except ElementNotFound as exc:
            raise AssertionFailed(f"Application URL {url} is not shown: {exc}") from exc

    def is_listed(self, app: Application) -> bool:
        return self.locator.text_visible(app.name)

    def wait_removed(self, app: Application, timeout=None):
        self.locator.wait_absent(app.name, timeout=timeout)
