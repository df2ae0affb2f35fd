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
Per-scenario log handed to the interaction helpers

Attachments go to behave's own report through ``context.attach``, so they
only land in a step's report entry while that step is current (after_step).
"""
import logging

logger = logging.getLogger(__name__)

UNKNOWN_SCENARIO = "Unknown"

# behave marks assertion failures "failed", other exceptions "error" and
# exceptions raised in hooks or cleanups "hook_error" and "cleanup_error"
FAILED_STATUSES = ("failed", "error", "hook_error", "cleanup_error")


def status_failed(status) -> bool:
    """True for a behave Status (or its name) that means the run went wrong"""
    return getattr(status, "name", status) in FAILED_STATUSES


class ScenarioContext:
    """Handle on the behave scenario that is currently running"""

    def __init__(self, name=None, scenario=None, context=None):
        self.scenario = scenario
        self.context = context
        self.name = name or getattr(scenario, "name", None) or UNKNOWN_SCENARIO
        self.messages = []

    def __repr__(self):
        return f"<ScenarioContext name=[{self.name}]>"

    @property
    def failed(self) -> bool:
        if self.scenario is None:
            return False
        return status_failed(self.scenario.status)

    @property
    def log_text(self) -> str:
        return "\n".join(self.messages)

    def log(self, message: str, level=logging.INFO):
        """Writes to the process log and keeps a copy with the scenario"""
        logger.log(level, message)
        self.messages.append(message)

    def attach(self, data: bytes, mime_type: str, name: str) -> bool:
        """Embeds data in the behave report of the current step"""
        if self.context is None:
            logger.warning("No behave context, %s (%s) not attached", name, mime_type)
            return False
        self.context.attach(mime_type, data)
        logger.info("Attached %s (%s, %d bytes) to '%s'", name, mime_type, len(data), self.name)
        return True
