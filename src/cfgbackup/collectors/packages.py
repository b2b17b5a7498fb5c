#!/usr/bin/env python3
"""
Installed package list collector

Writes one text list per detected package manager into package-lists/.
Exactly one primary manager is captured (the first found in priority order),
snap and flatpak are always probed, and rpm is used as a last resort.

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
from typing import List

from .base import Collector
from ..errors import CommandError
from ..items.base import CollectorResult, Outcome
from ..package_sources import PackageSource, PackageSourceFactory
from ..transfer.privileged import touch_marker

logger = logging.getLogger(__name__)

SKIPPED_MARKER = 'package-lists.bak.skipped'


class PackageListCollector(Collector):
    """Lists of installed packages for reinstalling on a new system"""

    subdir = 'package-lists'
    description = 'package lists'

    def __init__(self, runner, elevation, home_dir: str, factory: PackageSourceFactory = None):
        super().__init__(runner, elevation, home_dir)
        self.factory = factory or PackageSourceFactory(runner)
        self.written: List[str] = []
        self.failed: List[str] = []

    def _capture(self, source: PackageSource, target: str) -> bool:
        try:
            text = source.collect()
        except CommandError as e:
            logger.warning(f"Failed to list packages with {source.name}: {e}")
            self.failed.append(source.filename)
            return False

        with open(os.path.join(target, source.filename), 'w') as f:
            f.write(text)
        logger.info(f"Saved {source.description or source.name} list to {source.filename}.")
        self.written.append(source.filename)
        return True

    def collect(self, target: str) -> CollectorResult:
        self.written = []
        self.failed = []

        primary = self.factory.detect_primary()
        if primary is None:
            logger.warning("Could not determine primary package manager. Skipping native package list backup.")
            touch_marker(target, SKIPPED_MARKER)
        else:
            self._capture(primary, target)
            for companion in primary.companions():
                if companion.detect():
                    self._capture(companion, target)

        for source in self.factory.supplementary_sources():
            if source.detect():
                self._capture(source, target)

        if primary is None:
            fallback = self.factory.fallback_source()
            have_primary_list = any(
                os.path.exists(os.path.join(target, filename))
                for filename in self.factory.primary_filenames()
            )
            if not have_primary_list and fallback.detect():
                logger.info("Using rpm as a fallback package list.")
                self._capture(fallback, target)

        if self.written:
            return CollectorResult(self.name, Outcome.SUCCESS, ", ".join(self.written))
        if self.failed:
            return CollectorResult(self.name, Outcome.FAILED, "all package queries failed")
        return CollectorResult(self.name, Outcome.EMPTY)
