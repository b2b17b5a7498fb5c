#!/usr/bin/env python3
"""
Base package source abstract class and interfaces

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
from abc import ABC, abstractmethod
from typing import List

from ..utils.commands import CommandRunner

logger = logging.getLogger(__name__)


class PackageSource(ABC):
    """A package manager probe that can list installed packages as text"""

    # Command whose presence on PATH means this source is installed
    command: str = ""
    # File name of the list written into the package-lists directory
    filename: str = ""
    description: str = ""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    @property
    def name(self) -> str:
        return self.command

    def detect(self) -> bool:
        """Check if this package manager is available on the system"""
        available = self.runner.exists(self.command)
        logger.debug(f"Package source {self.name} available: {available}")
        return available

    @abstractmethod
    def list_command(self) -> List[str]:
        """Command that prints the installed package list"""
        pass

    def collect(self) -> str:
        """Return the installed package list as text

        Raises:
            CommandError: If the query fails
        """
        return self.runner.run(self.list_command()).stdout

    def companions(self) -> List['PackageSource']:
        """Additional lists captured when this source is the primary manager"""
        return []

    def __str__(self) -> str:
        return f"{self.description or self.name} ({self.filename})"
