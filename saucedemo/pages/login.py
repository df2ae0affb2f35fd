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
Login page of the Sauce Demo store
"""
from selenium.webdriver.common.by import By

from saucedemo.pages.base import BasePage


class LoginPage(BasePage):
    """Username / password form plus the logo used as a page identity check"""

    EXPECTED_LOGIN_LOGO_TEXT = "Swag Labs"

    USERNAME = (By.ID, "user-name")
    PASSWORD = (By.ID, "password")
    LOGIN_LOGO = (By.CLASS_NAME, "login_logo")
    LOGIN_BUTTON = (By.ID, "login-button")

    def navigate_to_base_url(self, url=None):
        """Opens the store front, defaulting to the configured url"""
        self.driver.get(url or self.session.config.url)

    def login(self, username: str, password: str):
        self.actions.enter_text(self.USERNAME, username)
        self.actions.enter_text(self.PASSWORD, password)
        self.actions.click(self.LOGIN_BUTTON)

    def get_login_logo_text(self) -> str:
        return self.getters.get_text(self.LOGIN_LOGO).strip()

    def is_login_logo_displayed(self) -> bool:
        return self.actions.is_displayed(self.LOGIN_LOGO)
