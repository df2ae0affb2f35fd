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
Browser session lifecycle

A Session owns one WebDriver plus the explicit waits bound to it. It is
created lazily, reused until ``quit()`` and then can be initialized again.

    UNINITIALIZED -> READY -> CLOSED (-> READY on next get())

Browser construction is chosen from a BrowserKind strategy (chrome, firefox,
edge, safari) crossed with local or remote (Selenium Grid hub) execution.
"""
from __future__ import annotations

import logging
import os
import re
import threading
from enum import Enum

from selenium import webdriver
from selenium.webdriver.support.ui import WebDriverWait

from saucedemo import constants
from saucedemo.common.errors import SessionError, UnsupportedBrowserError
from saucedemo.config import parse_bool
from saucedemo.waits import Waits

logger = logging.getLogger(__name__)

WINDOW_SIZE_PATTERN = re.compile(r"(\d+)x(\d+)")

CHROME_BINARIES = (
    "/usr/bin/chromium",
    "/usr/bin/chromium-browser",
    "/usr/bin/google-chrome",
    "/usr/bin/google-chrome-stable",
)
CHROMEDRIVER_BINARIES = ("/usr/bin/chromedriver", "/usr/lib/chromium/chromedriver")


def _first_existing(*paths: str) -> str | None:
    for path in paths:
        if path and os.path.exists(path):
            return path
    return None


######################################################################
#  B R O W S E R   K I N D S
######################################################################
class BrowserKind:
    """Knows how to build options and a local driver for one browser"""

    name = None

    def options(self, headless: bool):
        raise NotImplementedError

    def local_driver(self, options, environ):
        raise NotImplementedError

    def remote_driver(self, hub, options):
        return webdriver.Remote(command_executor=hub, options=options)


class ChromeBrowser(BrowserKind):
    """Chrome with the password manager and leak detection popups switched off"""

    name = "chrome"

    def options(self, headless: bool):
        options = webdriver.ChromeOptions()
        if headless:
            options.add_argument("--headless=new")
        # containers
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        # fresh profile, no persisted password manager state
        options.add_argument("--incognito")
        options.add_argument(
            "--disable-features=PasswordLeakDetection,AutofillServerCommunication"
        )
        options.add_argument("--disable-save-password-bubble")
        options.add_experimental_option(
            "prefs",
            {
                "credentials_enable_service": False,
                "profile.password_manager_enabled": False,
            },
        )
        return options

    def local_driver(self, options, environ):
        # pylint: disable=import-outside-toplevel
        from selenium.webdriver.chrome.service import Service
        from webdriver_manager.chrome import ChromeDriverManager

        chrome_binary = environ.get("CHROME_BINARY") or _first_existing(*CHROME_BINARIES)
        if chrome_binary:
            options.binary_location = chrome_binary
        driver_path = (
            environ.get("CHROMEDRIVER")
            or _first_existing(*CHROMEDRIVER_BINARIES)
            or ChromeDriverManager().install()
        )
        return webdriver.Chrome(service=Service(driver_path), options=options)


class FirefoxBrowser(BrowserKind):
    name = "firefox"

    def options(self, headless: bool):
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        return options

    def local_driver(self, options, environ):
        # pylint: disable=import-outside-toplevel
        from selenium.webdriver.firefox.service import Service
        from webdriver_manager.firefox import GeckoDriverManager

        driver_path = environ.get("GECKODRIVER") or GeckoDriverManager().install()
        return webdriver.Firefox(service=Service(driver_path), options=options)


class EdgeBrowser(BrowserKind):
    name = "edge"

    def options(self, headless: bool):
        options = webdriver.EdgeOptions()
        if headless:
            options.add_argument("--headless=new")
            options.add_argument("--disable-gpu")
            options.add_argument("--no-sandbox")
            options.add_argument("--disable-dev-shm-usage")
        return options

    def local_driver(self, options, environ):
        # pylint: disable=import-outside-toplevel
        from selenium.webdriver.edge.service import Service
        from webdriver_manager.microsoft import EdgeChromiumDriverManager

        driver_path = environ.get("EDGEDRIVER") or EdgeChromiumDriverManager().install()
        return webdriver.Edge(service=Service(driver_path), options=options)


class SafariBrowser(BrowserKind):
    """Safari runs on macOS only and has no headless mode"""

    name = "safari"

    def options(self, headless: bool):
        if headless:
            logger.warning("Safari does not support headless mode. Ignoring headless=true.")
        return webdriver.SafariOptions()

    def local_driver(self, options, environ):
        return webdriver.Safari(options=options)


BROWSERS = {
    kind.name: kind
    for kind in (ChromeBrowser(), FirefoxBrowser(), EdgeBrowser(), SafariBrowser())
}


def browser_kind(name: str) -> BrowserKind:
    """Returns the strategy for a browser name or raises UnsupportedBrowserError"""
    try:
        return BROWSERS[(name or "").strip().lower()]
    except KeyError as error:
        raise UnsupportedBrowserError(f"Unsupported browser: {name}") from error


def hub_url(environ=None) -> str:
    environ = os.environ if environ is None else environ
    host = environ.get("HUB_HOST", constants.DEFAULT_HUB_HOST)
    return f"http://{host}:{constants.HUB_PORT}/wd/hub"


######################################################################
#  S E S S I O N
######################################################################
class SessionState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    CLOSED = "closed"


class Session:
    """One browser and its waits, owned by the thread that created it"""

    def __init__(self, config, environ=None):
        self.config = config
        self.environ = os.environ if environ is None else environ
        self.state = SessionState.UNINITIALIZED
        self.thread_id = None
        self._driver = None
        self._waits = None

    def __repr__(self):
        return f"<Session state=[{self.state.value}] thread=[{self.thread_id}]>"

    # ------------------------------------------------------------------
    # Resolved settings (environment wins over the config file)
    # ------------------------------------------------------------------
    @property
    def browser(self) -> str:
        return self.environ.get("BROWSER", self.config.browser).strip().lower()

    @property
    def headless(self) -> bool:
        return parse_bool(self.environ.get("HEADLESS", self.config.headless))

    @property
    def use_remote(self) -> bool:
        return parse_bool(self.environ.get("USE_REMOTE_DRIVER", "false"))

    @property
    def kind(self) -> BrowserKind:
        """Strategy for the selected browser; UnsupportedBrowserError if unknown"""
        return browser_kind(self.browser)

    @property
    def is_ready(self) -> bool:
        return self.state is SessionState.READY

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self):
        """Starts the browser unless this session already has one"""
        if self.is_ready:
            logger.info("WebDriver already initialized for this session.")
            return self._driver

        browser, headless, use_remote = self.browser, self.headless, self.use_remote
        logger.info("Initializing WebDriver for browser: %s", browser)
        logger.info("Using Remote WebDriver: %s", use_remote)

        kind = self.kind
        driver = None
        try:
            options = kind.options(headless)
            if use_remote:
                hub = hub_url(self.environ)
                logger.info("Connecting to hub %s (browser=%s, headless=%s)", hub, browser, headless)
                driver = kind.remote_driver(hub, options)
            else:
                driver = kind.local_driver(options, self.environ)
            self._apply_window_size(driver)
            driver.implicitly_wait(self.config.implicit_wait)
            driver.set_page_load_timeout(self.config.page_load_timeout)
            explicit_wait = self.config.explicit_wait
        except Exception as error:  # pylint: disable=broad-except
            logger.error("Failed to initialize WebDriver: %s", error)
            if driver is not None:
                driver.quit()
            raise SessionError(f"Failed to initialize WebDriver: {error}") from error

        self._driver = driver
        self._waits = Waits(driver, explicit_wait)
        self.thread_id = threading.get_ident()
        self.state = SessionState.READY
        logger.info("WebDriver initialized successfully for thread %s.", self.thread_id)
        return driver

    def get(self):
        """Returns the live driver, starting one if needed"""
        if not self.is_ready:
            logger.info("Driver not initialized yet, initializing now...")
            return self.initialize()
        if self.thread_id != threading.get_ident():
            raise SessionError(f"Session belongs to thread {self.thread_id}")
        return self._driver

    def quit(self):
        """Closes the browser; safe to call more than once"""
        driver = self._driver
        if driver is None:
            return
        try:
            driver.quit()
        finally:
            self._driver = None
            self._waits = None
            self.thread_id = None
            self.state = SessionState.CLOSED
            logger.info("WebDriver quit successfully.")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def driver(self):
        return self.get()

    @property
    def wait(self) -> WebDriverWait:
        """The explicit WebDriverWait behind ``waits``"""
        return self.waits.wait

    @property
    def waits(self) -> Waits:
        if not self.is_ready:
            logger.info("Wait not initialized yet, initializing driver first...")
            self.initialize()
        return self._waits

    @property
    def current_driver(self):
        """The live driver or None, never starts a browser"""
        return self._driver

    def _apply_window_size(self, driver):
        window_size = self.config.window_size
        if window_size.lower() == "maximize":
            driver.maximize_window()
            return
        match = WINDOW_SIZE_PATTERN.fullmatch(window_size)
        if match:
            driver.set_window_size(int(match.group(1)), int(match.group(2)))
        else:
            logger.warning("Ignoring unrecognised windowSize '%s'", window_size)
