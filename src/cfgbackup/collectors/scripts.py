#!/usr/bin/env python3
"""
Custom script directories collector (~/bin and ~/.local/bin)

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

from .base import Collector
from ..items.base import CollectorResult, Outcome
from ..transfer.executor import TransferExecutor

logger = logging.getLogger(__name__)

# Source directory relative to home -> destination inside custom-scripts
SCRIPT_DIRS = [
    ('bin', 'bin'),
    ('.local/bin', 'local_bin'),
]


class CustomScriptsCollector(Collector):
    """User script directories, mirrored without exclude patterns"""

    subdir = 'custom-scripts'
    description = 'custom scripts from ~/bin and ~/.local/bin'

    def __init__(self, runner, elevation, home_dir: str, executor: TransferExecutor):
        super().__init__(runner, elevation, home_dir)
        self.executor = executor

    def collect(self, target: str) -> CollectorResult:
        copied = 0
        failed = 0
        for source_rel, dest_name in SCRIPT_DIRS:
            source = os.path.join(self.home_dir, source_rel)
            if not os.path.isdir(source):
                logger.info(f"{source} not found, skipping ~/{source_rel} backup.")
                continue
            result = self.executor.filtered_transfer(
                source + os.sep, os.path.join(target, dest_name),
                use_excludes=False, label=f"~/{source_rel}"
            )
            if result.succeeded:
                copied += 1
            else:
                failed += 1

        if copied:
            return CollectorResult(self.name, Outcome.SUCCESS, f"{copied} director(ies)")
        if failed:
            return CollectorResult(self.name, Outcome.FAILED)
        return CollectorResult(self.name, Outcome.EMPTY)
