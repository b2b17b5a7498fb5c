#!/usr/bin/env python3
"""
Cron table collectors

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
import glob
import logging

from .base import Collector
from ..errors import CommandError
from ..items.base import CollectorResult, Outcome
from ..transfer.privileged import touch_marker

logger = logging.getLogger(__name__)


class UserCrontabCollector(Collector):
    """The invoking user's crontab"""

    subdir = 'cronjobs'
    description = 'user cron jobs'
    required_command = 'crontab'

    def collect(self, target: str) -> CollectorResult:
        output_path = os.path.join(target, 'crontab.bak')
        try:
            result = self.runner.run(['crontab', '-l'])
        except CommandError as e:
            logger.debug(f"crontab -l failed: {e}")
            result = None

        if result is None or not result.stdout.strip():
            logger.info("No user cron jobs found or error accessing them.")
            touch_marker(target, 'crontab.bak.empty')
            return CollectorResult(self.name, Outcome.EMPTY)

        with open(output_path, 'w') as f:
            f.write(result.stdout)
        logger.info("User cron jobs backed up.")
        return CollectorResult(self.name, Outcome.SUCCESS)


class SystemCronCollector(Collector):
    """System-wide cron configuration under /etc/cron*"""

    subdir = 'system-cron'
    description = 'system-wide cron jobs'
    requires_elevation = True
    skipped_marker = 'system-cron.bak.skipped'

    cron_glob = '/etc/cron*'

    def collect(self, target: str) -> CollectorResult:
        sources = sorted(glob.glob(self.cron_glob))
        if not sources:
            logger.info("No system cron configuration found.")
            touch_marker(target, 'system-cron.bak.empty')
            return CollectorResult(self.name, Outcome.EMPTY)

        cmd = self.elevation.wrap(['rsync', '-a', '-h'] + sources + [target.rstrip(os.sep) + os.sep])
        try:
            self.runner.run(cmd)
        except CommandError as e:
            logger.warning(f"sudo rsync failed for system cron jobs. Check permissions or sudo setup. ({e})")
            return CollectorResult(self.name, Outcome.FAILED, str(e))

        logger.info("System-wide cron jobs backed up.")
        return CollectorResult(self.name, Outcome.SUCCESS)
