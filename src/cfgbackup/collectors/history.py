#!/usr/bin/env python3
"""
Shell history collector

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
import shutil
import logging

from .base import Collector
from ..items.base import CollectorResult, Outcome
from ..transfer.privileged import touch_marker

logger = logging.getLogger(__name__)

# Default history locations, relative to the home directory
HISTORY_FILES = {
    'bash': '.bash_history',
    'zsh': '.zsh_history',
    'fish': '.local/share/fish/fish_history',
    'ksh': '.ksh_history',
    # tcsh and csh share one file
    'tcsh_csh': '.history',
}


class ShellHistoryCollector(Collector):
    """History files of common shells"""

    subdir = 'shell-history'
    description = 'shell history'

    def collect(self, target: str) -> CollectorResult:
        copied = 0
        failed = 0
        for shell, relative in HISTORY_FILES.items():
            hist_path = os.path.join(self.home_dir, relative)
            if not os.path.isfile(hist_path):
                continue
            try:
                shutil.copy(hist_path, os.path.join(target, f"{shell}_history.bak"))
            except OSError as e:
                logger.warning(f"Failed to backup {shell} history ({hist_path}): {e}")
                failed += 1
                continue
            logger.info(f"Backed up {shell} history.")
            copied += 1

        if copied:
            return CollectorResult(self.name, Outcome.SUCCESS, f"{copied} history file(s)")
        if failed:
            return CollectorResult(self.name, Outcome.FAILED, f"{failed} history file(s) could not be copied")

        logger.info("No common shell history files found.")
        touch_marker(target, 'history.bak.empty')
        return CollectorResult(self.name, Outcome.EMPTY)
