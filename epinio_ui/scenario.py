"""
Explicit state carried across the ordered scenarios of a feature.

The scenarios share one namespace and one application. Rather than relying
on whatever the console happens to show, each scenario checks and advances
the stage recorded here.
"""

import logging
from enum import Enum

from epinio_ui.common.errors import ScenarioOrderError
from epinio_ui.models import Application, EnvironmentConfig, Namespace

logger = logging.getLogger("epinio_ui")


class Stage(Enum):
    SETUP = "Setup"
    NAMESPACE_CREATED = "NamespaceCreated"
    APP_DEPLOYED = "AppDeployed"
    CLEANED = "Cleaned"


# stage -> stages it may be entered from
TRANSITIONS = {
    Stage.NAMESPACE_CREATED: (Stage.SETUP,),
    Stage.APP_DEPLOYED: (Stage.NAMESPACE_CREATED,),
    Stage.CLEANED: (Stage.NAMESPACE_CREATED, Stage.APP_DEPLOYED),
}


class ScenarioContext:
    """The namespace/application pair and how far the feature got with it"""

    def __init__(self, env: EnvironmentConfig, namespace: Namespace, application: Application):
        self.env = env
        self.namespace = namespace
        self.application = application
        self.stage = Stage.SETUP

    def __repr__(self):
        return f"<ScenarioContext {self.namespace.name}/{self.application.name} stage=[{self.stage.value}]>"

    def require(self, *stages):
        """Fail unless the feature has reached one of ``stages``."""
        if self.stage not in stages:
            expected = ", ".join(stage.value for stage in stages)
            raise ScenarioOrderError(f"Expected stage {expected} but the feature is at {self.stage.value}")

    def advance(self, stage: Stage):
        self.require(*TRANSITIONS[stage])
        logger.info("Stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage
