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
Base class for page objects
"""
from saucedemo.interactions import ActionMethods, GetMethods


class BasePage:
    """Locators live on the subclasses, behaviour comes from the helpers"""

    def __init__(self, session, actions: ActionMethods, getters: GetMethods):
        self.session = session
        self.actions = actions
        self.getters = getters

    @property
    def driver(self):
        return self.session.get()
