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
Exceptions raised by the UI suite

Setup errors abort the whole run, interaction errors abort the current
scenario. Anything that only degrades a result is returned as a default
value instead of raised.
"""


class SuiteError(Exception):
    """Base class for all errors raised by the suite"""


class ConfigurationError(SuiteError):
    """Used when the configuration source is missing or holds bad values"""


class UnsupportedBrowserError(ConfigurationError):
    """Used when the requested browser / execution mode is not supported"""


class SessionError(SuiteError):
    """Used when a browser session cannot be created or used"""


class InteractionError(SuiteError):
    """Used when an element could not be found or acted on in time"""


class PriceFormatError(SuiteError, ValueError):
    """Used when a displayed price does not look like $12.34"""
