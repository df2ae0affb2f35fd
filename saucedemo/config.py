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
Suite configuration

Settings are read once from a properties file (``key=value`` lines) and are
read-only afterwards. Every key has a hard-coded fallback so a sparse file is
fine, but a missing file is fatal.
"""
from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from types import MappingProxyType

from saucedemo import constants
from saucedemo.common.errors import ConfigurationError

logger = logging.getLogger(__name__)

_SECTION = "properties"

DEFAULTS = {
    "browser": "chrome",
    "url": constants.URL,
    "implicitWait": "10",
    "explicitWait": "15",
    "pageLoadTimeout": "20",
    "headless": "false",
    "windowSize": "maximize",
}


def parse_bool(text) -> bool:
    """Only a case-insensitive "true" is true, everything else is false"""
    return str(text).strip().lower() == "true"


def _read_properties(path: Path) -> dict:
    parser = configparser.ConfigParser(
        delimiters=("=", ":"),
        comment_prefixes=("#", "!", ";"),
        interpolation=None,
    )
    parser.optionxform = str  # keys are case sensitive (implicitWait)
    parser.read_string(f"[{_SECTION}]\n" + path.read_text(encoding="utf-8"))
    return dict(parser.items(_SECTION))


######################################################################
#  C O N F I G
######################################################################
class Config:
    """Immutable key/value settings for one test run"""

    def __init__(self, properties: dict | None = None, source: Path | None = None):
        self._properties = MappingProxyType(dict(properties or {}))
        self.source = source

    def __repr__(self):
        return f"<Config source=[{self.source}] keys={sorted(self._properties)}>"

    @classmethod
    def load(cls, path=None) -> "Config":
        """Loads the properties file

        The path is the argument, then $CONFIG_FILE, then config/config.properties
        """
        path = Path(path or os.getenv("CONFIG_FILE") or constants.CONFIG_FILE)
        if not path.is_file():
            logger.error("No configuration file provided: %s not found", path)
            raise ConfigurationError(f"No configuration file provided: {path} not found")
        try:
            properties = _read_properties(path)
        except (OSError, configparser.Error) as error:
            logger.error("Failed to load config file %s: %s", path, error)
            raise ConfigurationError(f"Failed to load config file: {error}") from error
        logger.info("Configuration file loaded successfully from %s", path)
        return cls(properties, source=path)

    @property
    def properties(self):
        """Read-only view of the raw settings"""
        return self._properties

    def get(self, key: str, default=None):
        """Returns the raw value for key, the built-in default, or ``default``"""
        if key in self._properties:
            return self._properties[key]
        if default is not None:
            return default
        return DEFAULTS.get(key)

    def get_int(self, key: str) -> int:
        value = self.get(key)
        try:
            return int(str(value).strip())
        except (TypeError, ValueError) as error:
            raise ConfigurationError(
                f"Invalid integer for '{key}': {value!r}"
            ) from error

    def get_bool(self, key: str) -> bool:
        return parse_bool(self.get(key))

    # ------------------------------------------------------------------
    # Typed settings
    # ------------------------------------------------------------------
    @property
    def browser(self) -> str:
        return self.get("browser").strip().lower()

    @property
    def url(self) -> str:
        return self.get("url").strip()

    @property
    def implicit_wait(self) -> int:
        return self.get_int("implicitWait")

    @property
    def explicit_wait(self) -> int:
        return self.get_int("explicitWait")

    @property
    def page_load_timeout(self) -> int:
        return self.get_int("pageLoadTimeout")

    @property
    def headless(self) -> bool:
        return self.get_bool("headless")

    @property
    def window_size(self) -> str:
        return self.get("windowSize").strip()
