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
Retrieval helpers: read text from the page

These never raise for a missing element. The failure is logged and an
empty string comes back so the caller decides what that means.
"""
import logging

from saucedemo.interactions.scenario import ScenarioContext

TEXT_CONTENT_SCRIPT = "return arguments[0].textContent;"


class GetMethods:
    """Reads visible or script-level text from elements"""

    def __init__(self, session, scenario: ScenarioContext = None):
        self.session = session
        self.scenario = scenario or ScenarioContext()

    def get_text(self, locator) -> str:
        """Visible text, falling back to innerText for hidden content"""
        try:
            element = self.session.waits.visible(locator)
            text = element.text
            if not text or not text.strip():
                text = element.get_attribute("innerText") or ""
            self.scenario.log(f"Retrieved text '{text}' from {locator}")
            return text
        except Exception as error:  # pylint: disable=broad-except
            self._handle_error(f"Failed to get text from {locator}", error)
            return ""

    def get_text_by_js(self, label: str, locator) -> str:
        try:
            element = self.session.waits.present(locator)
            value = self.session.driver.execute_script(TEXT_CONTENT_SCRIPT, element)
        except Exception as error:  # pylint: disable=broad-except
            self._handle_error(f"Failed to retrieve value for '{label}' from {locator}", error)
            return ""
        if value and str(value).strip():
            value = str(value).strip()
            self.scenario.log(f"Retrieved value for '{label}': {value}")
            return value
        self.scenario.log(f"No value found for '{label}'")
        return ""

    def _handle_error(self, message, error):
        self.scenario.log(f"{message} | Error: {error}", level=logging.ERROR)
