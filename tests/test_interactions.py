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
Test cases for the action and retrieval helpers
"""
# pylint: disable=missing-function-docstring
from types import SimpleNamespace
from unittest import TestCase
from unittest.mock import MagicMock, patch

from behave.model_core import Status
from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.common.by import By

from saucedemo.common.errors import InteractionError
from saucedemo.interactions import ActionMethods, GetMethods, ScenarioContext, status_failed
from saucedemo.interactions.retrieval import TEXT_CONTENT_SCRIPT

LOCATOR = (By.ID, "user-name")


class TestScenarioContext(TestCase):
    """Scenario log and attachments"""

    def test_name_from_scenario(self):
        context = ScenarioContext(scenario=SimpleNamespace(name="Buy", status="passed"))
        self.assertEqual(context.name, "Buy")
        self.assertFalse(context.failed)

    def test_failed_status(self):
        """It should read behave's Status enum as well as plain strings"""
        status = SimpleNamespace(name="failed")
        context = ScenarioContext(scenario=SimpleNamespace(name="Buy", status=status))
        self.assertTrue(context.failed)

    def test_error_statuses_are_failures(self):
        """It should count step errors and hook errors as failures"""
        for status in (Status.failed, Status.error, Status.hook_error, "error"):
            self.assertTrue(status_failed(status), status)
        for status in (Status.passed, Status.skipped, Status.untested, "passed", None):
            self.assertFalse(status_failed(status), status)

    def test_unknown_name(self):
        self.assertEqual(ScenarioContext().name, "Unknown")

    def test_log_and_attach(self):
        """It should forward attachments to the behave context"""
        behave_context = MagicMock(name="context")
        context = ScenarioContext("Buy", context=behave_context)
        with self.assertLogs("saucedemo.interactions.scenario", level="INFO"):
            context.log("hello")
            self.assertTrue(context.attach(b"png", "image/png", "Buy"))
        self.assertEqual(context.messages, ["hello"])
        self.assertEqual(context.log_text, "hello")
        behave_context.attach.assert_called_once_with("image/png", b"png")

    def test_attach_without_context(self):
        """It should warn and report nothing attached"""
        context = ScenarioContext("Buy")
        with self.assertLogs("saucedemo.interactions.scenario", level="WARNING"):
            self.assertFalse(context.attach(b"png", "image/png", "Buy"))


######################################################################
#  A C T I O N S
######################################################################
class TestActionMethods(TestCase):
    """Wait, act, log"""

    def setUp(self):
        self.session = MagicMock(name="session")
        self.element = MagicMock(name="element")
        self.session.waits.visible.return_value = self.element
        self.session.waits.clickable.return_value = self.element
        self.session.waits.present.return_value = self.element
        self.scenario = ScenarioContext("Checkout")
        self.actions = ActionMethods(self.session, self.scenario)

    def test_enter_text(self):
        self.actions.enter_text(LOCATOR, "standard_user")
        self.element.clear.assert_called_once()
        self.element.send_keys.assert_called_once_with("standard_user")
        self.assertIn("Entered text 'standard_user'", self.scenario.messages[-1])

    def test_click(self):
        self.actions.click(LOCATOR)
        self.element.click.assert_called_once()
        self.assertIn("Clicked on element", self.scenario.messages[-1])

    @patch("saucedemo.interactions.actions.artifacts.capture_screenshot")
    def test_click_failure_is_fatal(self, mock_capture):
        """It should screenshot, log and raise InteractionError"""
        self.session.waits.clickable.side_effect = TimeoutException("too slow")
        with self.assertRaises(InteractionError) as raised:
            self.actions.click(LOCATOR)
        self.assertIsInstance(raised.exception.__cause__, TimeoutException)
        mock_capture.assert_called_once_with(self.session.current_driver, "Checkout")
        self.assertIn("Click failed on", self.scenario.messages[-1])
        self.assertIn("too slow", self.scenario.messages[-1])

    @patch("saucedemo.interactions.actions.artifacts.capture_screenshot")
    def test_enter_text_failure_is_fatal(self, mock_capture):
        self.element.send_keys.side_effect = RuntimeError("detached")
        with self.assertRaises(InteractionError):
            self.actions.enter_text(LOCATOR, "x")
        mock_capture.assert_called_once()

    @patch("saucedemo.interactions.actions.artifacts.capture_screenshot")
    def test_is_displayed_timeout_is_false(self, mock_capture):
        """It should return False instead of failing on a timeout"""
        self.session.waits.visible.side_effect = TimeoutException()
        self.assertFalse(self.actions.is_displayed(LOCATOR))
        mock_capture.assert_not_called()
        self.assertIn("NOT displayed", self.scenario.messages[-1])

    def test_is_displayed(self):
        self.element.is_displayed.return_value = True
        self.assertTrue(self.actions.is_displayed(LOCATOR))

    @patch("saucedemo.interactions.actions.Select")
    def test_select_by_value(self, mock_select):
        self.actions.select_by_value(LOCATOR, "lohi")
        mock_select.assert_called_once_with(self.element)
        mock_select.return_value.select_by_value.assert_called_once_with("lohi")

    @patch("saucedemo.interactions.actions.artifacts.capture_screenshot")
    @patch("saucedemo.interactions.actions.Select")
    def test_select_by_value_failure(self, mock_select, _mock_capture):
        mock_select.return_value.select_by_value.side_effect = NoSuchElementException()
        with self.assertRaises(InteractionError):
            self.actions.select_by_value(LOCATOR, "nope")


######################################################################
#  R E T R I E V A L
######################################################################
class TestGetMethods(TestCase):
    """Reading text degrades to an empty string"""

    def setUp(self):
        self.session = MagicMock(name="session")
        self.element = MagicMock(name="element")
        self.session.waits.visible.return_value = self.element
        self.session.waits.clickable.return_value = self.element
        self.session.waits.present.return_value = self.element
        self.scenario = ScenarioContext("Checkout")
        self.getters = GetMethods(self.session, self.scenario)

    def test_get_text(self):
        self.element.text = "Products"
        self.assertEqual(self.getters.get_text(LOCATOR), "Products")

    def test_get_text_falls_back_to_inner_text(self):
        """It should read innerText when the visible text is blank"""
        self.element.text = "  "
        self.element.get_attribute.return_value = "hidden text"
        self.assertEqual(self.getters.get_text(LOCATOR), "hidden text")
        self.element.get_attribute.assert_called_once_with("innerText")

    def test_get_text_failure_returns_empty(self):
        """It should log and return an empty string"""
        self.session.waits.visible.side_effect = TimeoutException("late")
        self.assertEqual(self.getters.get_text(LOCATOR), "")
        self.assertIn("Failed to get text", self.scenario.messages[-1])

    def test_get_text_by_js(self):
        self.session.driver.execute_script.return_value = "  $49.99 \n"
        self.assertEqual(self.getters.get_text_by_js("price", LOCATOR), "$49.99")
        self.session.driver.execute_script.assert_called_once_with(
            TEXT_CONTENT_SCRIPT, self.element
        )

    def test_get_text_by_js_empty(self):
        self.session.driver.execute_script.return_value = None
        self.assertEqual(self.getters.get_text_by_js("price", LOCATOR), "")
        self.assertIn("No value found", self.scenario.messages[-1])

    def test_get_text_by_js_failure(self):
        self.session.waits.present.side_effect = TimeoutException()
        self.assertEqual(self.getters.get_text_by_js("price", LOCATOR), "")
