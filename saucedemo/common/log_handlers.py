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
Log Handlers

This module contains utility functions to set up logging
consistently for the console and the rotating suite log file
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from saucedemo import constants

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(module)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"
LOG_FILE_NAME = "saucedemo.log"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 5


def ensure_log_directory(log_dir=constants.LOG_DIR) -> Path:
    """Creates the log directory if it does not exist"""
    path = Path(log_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise RuntimeError(f"Could not create log directory: {path}") from error
    return path


def init_logging(logger_name="saucedemo", log_dir=constants.LOG_DIR, level=logging.INFO):
    """Set up console and rotating file logging for the suite"""
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    log_path = ensure_log_directory(log_dir) / LOG_FILE_NAME

    # don't stack handlers when called again in the same process
    for handler in list(logger.handlers):
        if getattr(handler, "_saucedemo_handler", False):
            logger.removeHandler(handler)
            handler.close()

    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        ),
    ]
    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._saucedemo_handler = True  # pylint: disable=protected-access
        logger.addHandler(handler)
    logger.propagate = False
    logger.info("Logging handler established")
    return logger
