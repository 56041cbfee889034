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
Module: errors

Failures raised by the page objects. Everything derives from
ConsoleTestError so a runner hook can tell suite failures apart from
browser crashes.
"""

from typing import Optional


class ConsoleTestError(Exception):
    """Base class for every failure raised by the suite."""


class ElementNotFound(ConsoleTestError):
    """A selector never matched within its timeout."""

    def __init__(self, selector: str, timeout: float, elapsed: Optional[float] = None):
        self.selector = selector
        self.timeout = timeout
        self.elapsed = timeout if elapsed is None else elapsed
        super().__init__(
            f"Element '{selector}' not found after {self.elapsed:.1f}s (timeout {timeout:.1f}s)"
        )


class AssertionFailed(ConsoleTestError, AssertionError):
    """An element matched but its content or state did not."""


class TimeoutExceeded(ConsoleTestError):
    """A long running backend operation did not reach the expected state."""

    def __init__(self, description: str, timeout: float, elapsed: float):
        self.description = description
        self.timeout = timeout
        self.elapsed = elapsed
        super().__init__(
            f"Timed out waiting for {description}: {elapsed:.1f}s elapsed (timeout {timeout:.1f}s)"
        )


class MenuUnavailable(ConsoleTestError):
    """The top-level menu toggle cannot be located."""


class ClusterNotFound(ConsoleTestError):
    """No cluster-scoped menu entry matched the configured cluster."""


class DataValidationError(ConsoleTestError):
    """Used for invalid test data, such as a malformed namespace name."""


class ScenarioOrderError(ConsoleTestError):
    """A scenario step ran before the step it depends on."""
