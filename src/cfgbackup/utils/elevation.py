#!/usr/bin/env python3
"""
Elevated privilege detection for cfgbackup

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

import os
import logging
from typing import List, Optional

from .commands import CommandRunner
from ..errors import CommandError

logger = logging.getLogger(__name__)


class ElevationChecker:
    """Determines once per run whether commands can be run as root"""

    def __init__(self, runner: CommandRunner, allow_prompt: bool = True):
        self.runner = runner
        self.allow_prompt = allow_prompt
        self._available: Optional[bool] = None

    @staticmethod
    def is_root() -> bool:
        return os.geteuid() == 0

    def is_available(self) -> bool:
        """Check whether elevation can be obtained (cached after the first call)"""
        if self._available is None:
            self._available = self._check()
        return self._available

    def _check(self) -> bool:
        if self.is_root():
            logger.info("Running as root, no sudo needed for system items")
            return True

        if not self.runner.exists('sudo'):
            logger.warning("sudo command not found, privileged items will be skipped")
            return False

        try:
            self.runner.run(['sudo', '-n', 'true'])
            logger.info("Passwordless sudo detected")
            return True
        except CommandError:
            pass

        if not self.allow_prompt:
            logger.warning("Non-interactive sudo is not available and prompting is disabled")
            return False

        try:
            logger.info("Sudo password may be required for system items")
            self.runner.run(['sudo', '-v'], capture=False)
            return True
        except CommandError as e:
            logger.warning(f"Sudo access required but not available: {e}")
            return False

    def prefix(self) -> List[str]:
        """Command prefix used to elevate a command"""
        return [] if self.is_root() else ['sudo']

    def wrap(self, cmd: List[str]) -> List[str]:
        return self.prefix() + cmd
