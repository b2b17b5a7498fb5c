#!/usr/bin/env python3
"""
UFW firewall rule collector

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
from ..errors import CommandError
from ..items.base import CollectorResult, Outcome

logger = logging.getLogger(__name__)

# Output file name -> ufw arguments
UFW_VIEWS = [
    ('ufw-status-verbose.txt', ['status', 'verbose']),
    ('ufw-status-numbered.txt', ['status', 'numbered']),
    ('ufw.rules', ['export']),
]


class UfwCollector(Collector):
    """Status views and portable rule export of UFW

    The three outputs are written together or not at all.
    """

    subdir = 'ufw'
    description = 'UFW firewall rules'
    required_command = 'ufw'
    requires_elevation = True
    skipped_marker = 'ufw.bak.skipped'

    def collect(self, target: str) -> CollectorResult:
        outputs = []
        try:
            for filename, args in UFW_VIEWS:
                result = self.runner.run(self.elevation.wrap(['ufw'] + args))
                outputs.append((filename, result.stdout))
        except CommandError as e:
            logger.warning(f"Failed to backup UFW rules. Check sudo permissions or UFW status. ({e})")
            return CollectorResult(self.name, Outcome.FAILED, str(e))

        for filename, text in outputs:
            with open(os.path.join(target, filename), 'w') as f:
                f.write(text)
        logger.info("UFW rules and status backed up.")
        return CollectorResult(self.name, Outcome.SUCCESS)
