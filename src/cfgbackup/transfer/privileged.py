#!/usr/bin/env python3
"""
Privileged transfer gate for system configuration items

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
from typing import List, Sequence

from .executor import TransferExecutor, ensure_directory
from ..items.base import BackupItem, ItemResult, Outcome
from ..utils.elevation import ElevationChecker
from ..utils.progress import OperationType

logger = logging.getLogger(__name__)

SKIPPED_MARKER = "system-configs.bak.skipped"
EMPTY_MARKER = "system-configs.bak.empty"


def touch_marker(directory: str, name: str) -> str:
    """Create an empty marker file recording why a directory has no content"""
    path = os.path.join(directory, name)
    with open(path, 'a'):
        pass
    return path


class PrivilegedTransferGate:
    """Copies system paths under elevation, or skips the whole tier"""

    def __init__(self, executor: TransferExecutor, elevation: ElevationChecker):
        self.executor = executor
        self.elevation = elevation
        self.results: List[ItemResult] = []
        self.tier_outcome = None

    def run(self, items: Sequence[BackupItem], dest_dir: str) -> Outcome:
        """Back up all privileged items into dest_dir

        Returns:
            SUCCESS if at least one item was copied, EMPTY if none was, or
            SKIPPED_NO_ELEVATION if elevation is unavailable
        """
        ensure_directory(dest_dir)
        self.results = []

        if not self.elevation.is_available():
            logger.warning("Sudo access required but not available. Cannot backup system configuration files.")
            touch_marker(dest_dir, SKIPPED_MARKER)
            self.results = [ItemResult(item.name, Outcome.SKIPPED_NO_ELEVATION) for item in items]
            self.tier_outcome = Outcome.SKIPPED_NO_ELEVATION
            return self.tier_outcome

        logger.info("Sudo access confirmed for system configuration backup.")
        self.results = self.executor.transfer_items(
            items, dest_dir, OperationType.SYSTEM_ITEMS, desc="System configuration"
        )

        if any(result.succeeded for result in self.results):
            self.tier_outcome = Outcome.SUCCESS
        else:
            logger.info("No system config items were successfully backed up "
                        "(might be missing or due to permissions).")
            touch_marker(dest_dir, EMPTY_MARKER)
            self.tier_outcome = Outcome.EMPTY
        return self.tier_outcome
