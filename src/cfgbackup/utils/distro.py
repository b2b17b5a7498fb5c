#!/usr/bin/env python3
"""
Distribution detection utilities for cfgbackup

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
from typing import Dict, Any, List

import distro

logger = logging.getLogger(__name__)


class DistroInfo:
    """Information about the current Linux distribution"""

    def __init__(self):
        self.name = ""
        self.version = ""
        self.id = ""
        self.id_like: List[str] = []

    def detect(self) -> 'DistroInfo':
        """Detect the current Linux distribution"""
        self.id = distro.id()
        self.name = distro.name(pretty=True) or self.id
        self.version = distro.version()
        self.id_like = distro.like().split()
        logger.debug(f"Detected distribution: {self.name} ({self.id})")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "id": self.id,
            "id_like": self.id_like,
        }

    def __str__(self) -> str:
        return self.name or "unknown"


def get_distro_info() -> DistroInfo:
    """Get information about the current distribution"""
    return DistroInfo().detect()
