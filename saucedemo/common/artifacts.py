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
Screenshot and report files

None of these helpers raise on file-system errors: failures are logged
and the run carries on.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from saucedemo import constants

logger = logging.getLogger(__name__)


def timestamp(now: datetime | None = None) -> str:
    """Returns a 14 digit yyyymmddHHMMSS stamp"""
    return (now or datetime.now()).strftime(constants.TIMESTAMP_FORMAT)


def screenshot_filename(name: str, now: datetime | None = None) -> str:
    safe_name = str(name).replace("/", "_").replace("\\", "_")
    return f"{safe_name}_{timestamp(now)}.png"


def report_filename(now: datetime | None = None) -> str:
    return f"{constants.TEST_REPORT_MARKER}_{timestamp(now)}.json"


######################################################################
# SCREENSHOTS
######################################################################
def capture_screenshot(driver, name: str, directory=constants.SCREENSHOTS_DIR) -> Path | None:
    """Saves a PNG of the current browser window as <name>_<timestamp>.png"""
    if driver is None:
        logger.warning("No browser session, screenshot '%s' skipped", name)
        return None
    path = Path(directory) / screenshot_filename(name)
    try:
        png = driver.get_screenshot_as_png()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png)
    except Exception as error:  # pylint: disable=broad-except
        logger.error("Failed to capture screenshot: %s", error)
        return None
    logger.info("Screenshot saved at: %s", path)
    return path


def purge_screenshots(directory=constants.SCREENSHOTS_DIR) -> int:
    """Deletes every file left from previous failed runs"""
    directory = Path(directory)
    if not directory.is_dir():
        return 0
    deleted = 0
    for path in directory.rglob("*"):
        if not path.is_file():
            continue
        try:
            path.unlink()
        except OSError as error:
            logger.error("Failed to delete: %s - %s", path, error)
            continue
        deleted += 1
        logger.info("Deleted: %s", path)
    return deleted


######################################################################
# REPORTS
######################################################################
def find_reports(directory=constants.REPORT_DIR, marker=constants.TEST_REPORT_MARKER) -> list:
    """Report files in discovery order, oldest first

    Report names carry a yyyymmddHHMMSS stamp so name order is creation order.
    """
    directory = Path(directory)
    return sorted(
        path for path in directory.iterdir() if path.is_file() and marker in path.name
    )


def prune_reports(
    keep: int = constants.NUMBER_OF_TEST_REPORTS_TO_KEEP,
    directory=constants.REPORT_DIR,
    marker: str = constants.TEST_REPORT_MARKER,
) -> list:
    """Deletes the oldest reports so that at most ``keep`` remain"""
    deleted = []
    try:
        reports = find_reports(directory, marker)
        for path in reports[: max(0, len(reports) - keep)]:
            path.unlink(missing_ok=True)
            deleted.append(path)
            logger.info("%s has been deleted", path)
    except OSError as error:
        logger.info("Report cleanup skipped: %s", error)
    return deleted
