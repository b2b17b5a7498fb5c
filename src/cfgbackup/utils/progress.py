#!/usr/bin/env python3
"""
Progress tracking utilities for cfgbackup

This handles terminal progress bars for the per-item transfer loops.

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

import logging
from enum import Enum
from typing import Optional, Union

from tqdm import tqdm

logger = logging.getLogger(__name__)


class OperationType(Enum):
    """Stages of a backup run that report progress"""
    RSYNC_ITEMS = "rsync_items"
    COPY_ITEMS = "copy_items"
    SYSTEM_ITEMS = "system_items"
    COLLECTORS = "collectors"
    GENERAL = "general"


class ProgressTracker:
    """Progress bar for a loop over backup items"""

    # Shown only when stderr is a terminal
    enabled: Optional[bool] = None

    def __init__(self,
                 operation_type: Union[str, OperationType],
                 total: int = 0,
                 desc: str = "",
                 unit: str = "items"):
        """Initialize a progress tracker

        Args:
            operation_type: Stage being tracked
            total: Total number of items to process
            desc: Description of the operation
            unit: Unit of items being processed
        """
        self.operation_type = operation_type.value if isinstance(operation_type, OperationType) else operation_type
        self.total = total
        self.desc = desc or f"Processing {self.operation_type}"
        self.unit = unit
        self.current = 0
        self.pbar: Optional[tqdm] = None

    def start(self) -> 'ProgressTracker':
        """Start the progress bar"""
        self.pbar = tqdm(
            total=self.total,
            desc=self.desc,
            unit=self.unit,
            leave=False,
            disable=False if self.enabled else None,
            bar_format='{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]'
        )
        return self

    def update(self, n: int = 1, status: str = "") -> None:
        """Advance the progress bar

        Args:
            n: Number of items to increment by
            status: Name of the item just processed
        """
        self.current += n
        if self.pbar:
            if status:
                self.pbar.set_postfix_str(status, refresh=False)
            self.pbar.update(n)

    def close(self) -> None:
        if self.pbar:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> 'ProgressTracker':
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
