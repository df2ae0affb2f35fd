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
Project wide constants
"""
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SCREENSHOTS_DIR = PROJECT_ROOT / "screenshots"
REPORT_DIR = PROJECT_ROOT / "test-output"
LOG_DIR = PROJECT_ROOT / "logfiles"
FEATURES_DIR = PROJECT_ROOT / "features"
CONFIG_FILE = PROJECT_ROOT / "config" / "config.properties"

URL = "https://www.saucedemo.com"

NUMBER_OF_TEST_REPORTS_TO_KEEP = 5
TEST_REPORT_MARKER = "Test-Report"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

DEFAULT_HUB_HOST = "selenium-hub"
HUB_PORT = 4444

DEFAULT_TAGS = "@required or @optional"
