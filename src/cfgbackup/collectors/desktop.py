#!/usr/bin/env python3
"""
Desktop settings collector (GNOME dconf database)

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

logger = logging.getLogger(__name__)


class DconfCollector(Collector):
    """Full dump of the dconf settings tree"""

    subdir = 'gnome-settings'
    description = 'GNOME settings using dconf'
    required_command = 'dconf'

    def collect(self, target: str) -> CollectorResult:
        self.runner.run_to_file(['dconf', 'dump', '/'], os.path.join(target, 'dconf-settings.ini'))
        logger.info("GNOME settings backed up.")
        return CollectorResult(self.name, Outcome.SUCCESS)
