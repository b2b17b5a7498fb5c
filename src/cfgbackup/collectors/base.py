#!/usr/bin/env python3
"""
Base collector abstract class and interfaces

A collector captures one category of user or system state that is not a plain
file copy (cron tables, package lists, settings dumps, firewall rules).

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
from abc import ABC, abstractmethod
from typing import Optional

from ..errors import CommandError
from ..items.base import CollectorResult, Outcome
from ..transfer.executor import ensure_directory
from ..transfer.privileged import touch_marker
from ..utils.commands import CommandRunner
from ..utils.elevation import ElevationChecker

logger = logging.getLogger(__name__)


class Collector(ABC):
    """Base class for best-effort auxiliary collectors"""

    # Directory inside the backup where this collector writes
    subdir: str = ""
    description: str = ""
    # Tool that must be on PATH, or None if always available
    required_command: Optional[str] = None
    requires_elevation: bool = False
    # Marker written when elevation is required but unavailable
    skipped_marker: Optional[str] = None

    def __init__(self, runner: CommandRunner, elevation: ElevationChecker, home_dir: str):
        self.runner = runner
        self.elevation = elevation
        self.home_dir = home_dir

    @property
    def name(self) -> str:
        return self.subdir

    def is_available(self) -> bool:
        """Check whether the tool this collector relies on is installed"""
        if self.required_command is None:
            return True
        return self.runner.exists(self.required_command)

    def run(self, backup_dir: str) -> CollectorResult:
        """Run the collector, containing any failure

        Raises:
            InfrastructureError: If the collector's directory cannot be created
        """
        if not self.is_available():
            logger.info(f"{self.required_command} not found, skipping {self.description}.")
            return CollectorResult(self.name, Outcome.UNAVAILABLE,
                                   f"{self.required_command} not installed")

        logger.info(f"Backing up {self.description}...")
        target = ensure_directory(os.path.join(backup_dir, self.subdir))

        if self.requires_elevation and not self.elevation.is_available():
            logger.warning(f"Sudo access required but not available. Cannot backup {self.description}.")
            if self.skipped_marker:
                touch_marker(target, self.skipped_marker)
            return CollectorResult(self.name, Outcome.SKIPPED_NO_ELEVATION, "elevation unavailable")

        try:
            return self.collect(target)
        except (CommandError, OSError) as e:
            logger.warning(f"Failed to backup {self.description}: {e}")
            return CollectorResult(self.name, Outcome.FAILED, str(e))

    @abstractmethod
    def collect(self, target: str) -> CollectorResult:
        """Capture state into the target directory"""
        pass
