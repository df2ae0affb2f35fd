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
Suite entry point

Builds the behave command line (feature files, tag filter, report file) and
holds the run-scoped setup that ``before_all`` performs once per run.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import requests

from saucedemo import constants
from saucedemo.common import artifacts

logger = logging.getLogger(__name__)

REACHABILITY_TIMEOUT = 10


def prepare_run(
    screenshots_dir=constants.SCREENSHOTS_DIR,
    report_dir=constants.REPORT_DIR,
    keep=constants.NUMBER_OF_TEST_REPORTS_TO_KEEP,
) -> dict:
    """Clears stale failure screenshots and trims old reports"""
    deleted_screenshots = artifacts.purge_screenshots(screenshots_dir)
    deleted_reports = artifacts.prune_reports(keep=keep, directory=report_dir)
    logger.info(
        "Run prepared: %d screenshot(s) and %d report(s) removed",
        deleted_screenshots,
        len(deleted_reports),
    )
    return {"screenshots": deleted_screenshots, "reports": deleted_reports}


def check_base_url(url: str, timeout=REACHABILITY_TIMEOUT) -> bool:
    """Logs whether the store front answers before any browser starts"""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as error:
        logger.warning("Target %s is not reachable: %s", url, error)
        return False
    logger.info("Target %s is reachable (%s)", url, response.status_code)
    return True


def build_args(argv=None, report_dir=constants.REPORT_DIR) -> list:
    """Default behave arguments, followed by anything passed on the command line"""
    report_path = Path(report_dir) / artifacts.report_filename()
    args = [
        str(constants.FEATURES_DIR),
        "--tags",
        constants.DEFAULT_TAGS,
        "--format",
        "json.pretty",
        "--outfile",
        str(report_path),
        "--format",
        "pretty",
        "--define",
        f"report_dir={Path(report_dir)}",
    ]
    args.extend(argv or [])
    return args


def main(argv=None, report_dir=None) -> int:
    """Runs the feature files through behave and returns its exit code"""
    # pylint: disable=import-outside-toplevel
    from behave.__main__ import main as behave_main

    argv = sys.argv[1:] if argv is None else argv
    report_dir = Path(report_dir or constants.REPORT_DIR)
    report_dir.mkdir(parents=True, exist_ok=True)
    return behave_main(build_args(argv, report_dir))


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
