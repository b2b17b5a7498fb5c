#!/usr/bin/env python3
"""
Post-run notifier: opens the backup location in a file browser

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
from typing import Mapping, Optional

from .commands import CommandRunner

logger = logging.getLogger(__name__)


class PostRunNotifier:
    """Shows the result of a run in the desktop file browser when possible"""

    def __init__(self, runner: CommandRunner, environ: Optional[Mapping[str, str]] = None,
                 enabled: bool = True):
        self.runner = runner
        self.environ = os.environ if environ is None else environ
        self.enabled = enabled

    def has_display(self) -> bool:
        return bool(self.environ.get('DISPLAY') or self.environ.get('WAYLAND_DISPLAY'))

    def notify(self, path: str) -> bool:
        """Open path with xdg-open; never raises

        Returns:
            True if a file browser was launched
        """
        if not self.enabled:
            return False
        if not self.has_display():
            logger.debug("No graphical session, not opening a file browser")
            return False
        if not self.runner.exists('xdg-open'):
            logger.info("xdg-open not found, not opening a file browser")
            return False

        try:
            self.runner.spawn(['xdg-open', path])
        except OSError as e:
            logger.info(f"Could not open file browser: {e}")
            return False
        logger.info(f"Opened {path} in the file browser")
        return True
