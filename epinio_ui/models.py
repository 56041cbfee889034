######################################################################
# Copyright 2016, 2024 John J. Rofrano. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
######################################################################

"""
Models for the Epinio console scenarios

Plain value objects describing what the scenarios create and check. They
hold no browser state; the page objects read and write the console.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from epinio_ui import config
from epinio_ui.common.errors import DataValidationError

logger = logging.getLogger("epinio_ui")

# Kubernetes DNS-1123 label, which the console enforces for namespaces
NAMESPACE_NAME_RE = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")
NAMESPACE_NAME_MAX = 63


def validate_namespace_name(name: str) -> str:
    """Return ``name`` if it is a valid namespace name, raise otherwise."""
    if not isinstance(name, str) or not name:
        raise DataValidationError("Namespace name must be a non-empty string")
    if len(name) > NAMESPACE_NAME_MAX:
        raise DataValidationError(f"Namespace name '{name}' is longer than {NAMESPACE_NAME_MAX} characters")
    if not NAMESPACE_NAME_RE.match(name):
        raise DataValidationError(
            f"Namespace name '{name}' must consist of lowercase alphanumerics or '-' "
            "and start and end with an alphanumeric"
        )
    return name


def app_url(app_name: str, system_domain: str) -> str:
    """The route the console shows for a deployed application."""
    return f"https://{app_name}.{system_domain}"


class AppState(Enum):
    """States shown by the console for an application and its pipeline steps"""

    PENDING = "Pending"
    SUCCESS = "Success"
    RUNNING = "Running"
    NOT_RUNNING = "NotRunning"


class PipelineStep(Enum):
    """The deployment steps, valued by their row in the progress table"""

    CREATE = 1
    UPLOAD = 2
    BUILD = 3
    DEPLOY = 4

    @property
    def label(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Namespace:
    """A namespace created through the console"""

    name: str

    def __post_init__(self):
        validate_namespace_name(self.name)


@dataclass
class Application:
    """An application pushed into a namespace"""

    name: str
    namespace: Namespace
    state: AppState = AppState.PENDING
    instance_readiness: int = 0

    def __post_init__(self):
        if not self.name:
            raise DataValidationError("Application name must not be empty")
        self.set_readiness(self.instance_readiness)

    def __repr__(self):
        return f"<Application {self.name} namespace=[{self.namespace.name}]>"

    def set_readiness(self, percent: int):
        if not 0 <= percent <= 100:
            raise DataValidationError(f"Instance readiness must be within 0-100, got {percent}")
        self.instance_readiness = percent

    def url(self, system_domain: str) -> str:
        return app_url(self.name, system_domain)


@dataclass(frozen=True)
class EnvironmentConfig:
    """Read-only settings for one run of the suite"""

    cluster: str
    system_domain: str
    base_url: str = config.BASE_URL
    username: str = config.UI_USERNAME
    password: str = config.UI_PASSWORD
    headless: bool = config.HEADLESS

    @classmethod
    def load(cls, userdata: Optional[Mapping[str, str]] = None) -> "EnvironmentConfig":
        """Build the settings from behave userdata, falling back to the environment."""
        userdata = userdata or {}

        def lookup(key, default):
            value = userdata.get(key, userdata.get(key.lower()))
            return default if value in (None, "") else value

        headless = lookup("HEADLESS", config.HEADLESS)
        if isinstance(headless, str):
            headless = headless.lower() == "true"
        env = cls(
            cluster=lookup("CLUSTER", config.CLUSTER),
            system_domain=lookup("SYSTEM_DOMAIN", config.SYSTEM_DOMAIN),
            base_url=lookup("BASE_URL", config.BASE_URL).rstrip("/"),
            username=lookup("UI_USERNAME", config.UI_USERNAME),
            password=lookup("UI_PASSWORD", config.UI_PASSWORD),
            headless=headless,
        )
        logger.info("Using cluster '%s' at %s", env.cluster, env.base_url)
        return env
