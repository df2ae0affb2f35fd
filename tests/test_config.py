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
Test cases for the suite configuration
"""
# pylint: disable=missing-function-docstring
import os
import tempfile
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

from saucedemo import constants
from saucedemo.common.errors import ConfigurationError
from saucedemo.config import Config, parse_bool

SAMPLE_PROPERTIES = """\
# comment line
! also a comment
browser = Firefox
url=https://shop.example.com
implicitWait=7
headless: TRUE
windowSize=1440x900
"""


######################################################################
#  C O N F I G   T E S T   C A S E S
######################################################################
class TestConfig(TestCase):
    """Test Cases for loading settings"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()  # pylint: disable=consider-using-with
        self.path = Path(self.tmp.name) / "config.properties"

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, text):
        self.path.write_text(text, encoding="utf-8")
        return self.path

    def test_load_properties(self):
        """It should read key/value pairs from a properties file"""
        config = Config.load(self._write(SAMPLE_PROPERTIES))
        self.assertEqual(config.browser, "firefox")
        self.assertEqual(config.url, "https://shop.example.com")
        self.assertEqual(config.implicit_wait, 7)
        self.assertTrue(config.headless)
        self.assertEqual(config.window_size, "1440x900")
        self.assertEqual(config.source, self.path)

    def test_defaults_for_missing_keys(self):
        """It should fall back to the built-in defaults"""
        config = Config.load(self._write("browser=edge\n"))
        self.assertEqual(config.url, constants.URL)
        self.assertEqual(config.implicit_wait, 10)
        self.assertEqual(config.explicit_wait, 15)
        self.assertEqual(config.page_load_timeout, 20)
        self.assertFalse(config.headless)
        self.assertEqual(config.window_size, "maximize")

    def test_get_with_default(self):
        """It should return the caller's default for unknown keys"""
        config = Config({"browser": "chrome"})
        self.assertEqual(config.get("browser"), "chrome")
        self.assertEqual(config.get("missing", "fallback"), "fallback")
        self.assertIsNone(config.get("missing"))

    def test_missing_file_is_fatal(self):
        """It should raise ConfigurationError when the file does not exist"""
        with self.assertRaises(ConfigurationError):
            Config.load(Path(self.tmp.name) / "nope.properties")

    def test_config_file_from_environment(self):
        """It should honour the CONFIG_FILE environment variable"""
        self._write("browser=safari\n")
        with patch.dict(os.environ, {"CONFIG_FILE": str(self.path)}):
            config = Config.load()
        self.assertEqual(config.browser, "safari")

    def test_malformed_integer(self):
        """It should raise ConfigurationError for a bad integer"""
        config = Config.load(self._write("explicitWait=fifteen\n"))
        with self.assertRaises(ConfigurationError):
            _ = config.explicit_wait

    def test_malformed_boolean_is_false(self):
        """It should treat anything but true as false"""
        config = Config.load(self._write("headless=yes\n"))
        self.assertFalse(config.headless)

    def test_properties_are_read_only(self):
        """It should not allow settings to change after loading"""
        config = Config.load(self._write(SAMPLE_PROPERTIES))
        with self.assertRaises(TypeError):
            config.properties["browser"] = "chrome"

    def test_bundled_config_file(self):
        """It should load the config shipped with the suite"""
        config = Config.load(constants.CONFIG_FILE)
        self.assertEqual(config.browser, "chrome")
        self.assertEqual(config.url, constants.URL)


class TestParseBool(TestCase):
    """Boolean parsing"""

    def test_parse_bool(self):
        self.assertTrue(parse_bool("true"))
        self.assertTrue(parse_bool(" True "))
        self.assertTrue(parse_bool(True))
        self.assertFalse(parse_bool("false"))
        self.assertFalse(parse_bool("1"))
        self.assertFalse(parse_bool(""))
        self.assertFalse(parse_bool(None))
