"""Behave hooks for the Sauce Demo UI scenarios."""

from __future__ import annotations

from pathlib import Path

from selenium.common.exceptions import WebDriverException

from saucedemo import constants
from saucedemo.common import artifacts
from saucedemo.common.log_handlers import init_logging
from saucedemo.config import Config
from saucedemo.driver import Session
from saucedemo.interactions import ActionMethods, GetMethods, ScenarioContext, status_failed
from saucedemo.pages import LoginPage, ProductsPage
from saucedemo.runner import prepare_run, check_base_url


def before_all(context):
    """Load settings, check the browser choice and clean up earlier runs.

    An unsupported browser raises here, which aborts the run before any
    scenario starts.
    """
    context.logger = init_logging()
    context.logger.info("BEFORE ALL SCENARIO HOOK CALLED:")
    userdata = context.config.userdata
    context.config_settings = Config.load(userdata.get("config"))
    kind = Session(context.config_settings).kind
    context.logger.info("Browser selected: %s", kind.name)

    context.screenshots_dir = Path(userdata.get("screenshots_dir", constants.SCREENSHOTS_DIR))
    report_dir = Path(userdata.get("report_dir", constants.REPORT_DIR))
    prepare_run(screenshots_dir=context.screenshots_dir, report_dir=report_dir)
    check_base_url(context.config_settings.url)


def before_scenario(context, scenario):
    """Bind the scenario to fresh helpers and start the browser session."""
    context.logger.info("Starting scenario: %s", scenario.name)
    context.scenario_context = ScenarioContext(scenario=scenario, context=context)
    context.session = Session(context.config_settings)
    context.failure_captured = False

    actions = ActionMethods(context.session, context.scenario_context)
    getters = GetMethods(context.session, context.scenario_context)
    context.login_page = LoginPage(context.session, actions, getters)
    context.products_page = ProductsPage(context.session, actions, getters)
    context.selected_item = None

    context.session.initialize()


def after_step(context, step):
    """Attach a screenshot and the scenario log to the step that broke."""
    if status_failed(step.status):
        capture_failure(context)


def after_scenario(context, scenario):
    """Keep a screenshot of failures and always close the browser."""
    session = getattr(context, "session", None)
    try:
        if status_failed(scenario.status):
            context.logger.error("Scenario failed: %s", scenario.name)
            if not getattr(context, "failure_captured", False) and session is not None:
                artifacts.capture_screenshot(
                    session.current_driver, scenario.name, context.screenshots_dir
                )
        else:
            context.logger.info("Scenario passed: %s", scenario.name)
    finally:
        if session is not None:
            session.quit()


def after_all(context):
    context.logger.info("Sauce Demo UI suite completed")


def capture_failure(context):
    """Embed the failure screenshot and log in the report and save the PNG."""
    scenario_context = context.scenario_context
    driver = context.session.current_driver
    if driver is None:
        context.logger.warning("No browser session to screenshot for %s", scenario_context.name)
    else:
        try:
            scenario_context.attach(
                driver.get_screenshot_as_png(), "image/png", scenario_context.name
            )
        except WebDriverException as error:
            context.logger.error("Failed to attach screenshot: %s", error)
        artifacts.capture_screenshot(driver, scenario_context.name, context.screenshots_dir)
    if scenario_context.messages:
        scenario_context.attach(
            scenario_context.log_text.encode("utf-8"), "text/plain", scenario_context.name
        )
    context.failure_captured = True
