#!/usr/bin/env python3
"""
Package source factory implementation

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
from typing import List, Optional

from .base import PackageSource
from .apt import DpkgPackageSource
from .pacman import PacmanPackageSource
from .dnf import DnfPackageSource, YumPackageSource
from .zypper import ZypperPackageSource
from .rpm import RpmPackageSource
from .snap import SnapPackageSource
from .flatpak import FlatpakPackageSource
from ..utils.commands import CommandRunner

logger = logging.getLogger(__name__)

# Priority order; the first detected manager is the primary one
PRIMARY_SOURCE_CLASSES = [
    DpkgPackageSource,
    PacmanPackageSource,
    DnfPackageSource,
    YumPackageSource,
    ZypperPackageSource,
]

SUPPLEMENTARY_SOURCE_CLASSES = [
    SnapPackageSource,
    FlatpakPackageSource,
]

FALLBACK_SOURCE_CLASS = RpmPackageSource


class PackageSourceFactory:
    """Factory for creating the package sources probed during a backup"""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def primary_sources(self) -> List[PackageSource]:
        return [cls(self.runner) for cls in PRIMARY_SOURCE_CLASSES]

    def supplementary_sources(self) -> List[PackageSource]:
        return [cls(self.runner) for cls in SUPPLEMENTARY_SOURCE_CLASSES]

    def fallback_source(self) -> PackageSource:
        return FALLBACK_SOURCE_CLASS(self.runner)

    def detect_primary(self) -> Optional[PackageSource]:
        """Return the first available primary package manager, if any"""
        for source in self.primary_sources():
            try:
                if source.detect():
                    logger.info(f"Primary package manager: {source.name}")
                    return source
            except Exception as e:
                logger.error(f"Error probing package manager {source.name}: {e}")
        return None

    @staticmethod
    def primary_filenames() -> List[str]:
        """List file names written by primary sources"""
        return [cls.filename for cls in PRIMARY_SOURCE_CLASSES]
