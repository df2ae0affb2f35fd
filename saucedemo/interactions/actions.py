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
Action helpers: wait for an element, act on it, log it

Any failure is logged to the process and scenario logs, a screenshot named
after the scenario is taken and an InteractionError ends the step.
"""
import logging

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.support.ui import Select

from saucedemo.common import artifacts
from saucedemo.common.errors import InteractionError
from saucedemo.interactions.scenario import ScenarioContext


class ActionMethods:
    """Typing, clicking and visibility checks against one session"""

    def __init__(self, session, scenario: ScenarioContext = None):
        self.session = session
        self.scenario = scenario or ScenarioContext()

    def enter_text(self, locator, value: str):
        try:
            element = self.session.waits.visible(locator)
            element.clear()
            element.send_keys(value)
            self._log(f"Entered text '{value}' into {locator}")
        except Exception as error:  # pylint: disable=broad-except
            self._handle_error(f"Failed to enter text into {locator}", error)

    def click(self, locator):
        try:
            element = self.session.waits.clickable(locator)
            element.click()
            self._log(f"Clicked on element {locator}")
        except Exception as error:  # pylint: disable=broad-except
            self._handle_error(f"Click failed on {locator}", error)

    def is_displayed(self, locator) -> bool:
        """Waits for the element; a timeout means not displayed"""
        try:
            element = self.session.waits.visible(locator)
        except TimeoutException:
            self._log(f"Element NOT displayed: {locator}")
            return False
        self._log(f"Element is displayed: {locator}")
        return element.is_displayed()

    def select_by_value(self, locator, value: str):
        try:
            element = self.session.waits.visible(locator)
            Select(element).select_by_value(value)
            self._log(f"Selected value '{value}' from dropdown {locator}")
        except Exception as error:  # pylint: disable=broad-except
            self._handle_error(f"Failed to select value '{value}' from {locator}", error)

    ######################################################################
    # LOGGING HELPERS
    ######################################################################
    def _log(self, message):
        self.scenario.log(message)

    def _handle_error(self, message, error):
        full_message = f"{message} | Error: {error}"
        self.scenario.log(full_message, level=logging.ERROR)
        artifacts.capture_screenshot(self.session.current_driver, self.scenario.name)
        raise InteractionError(full_message) from error
