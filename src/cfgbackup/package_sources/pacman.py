#!/usr/bin/env python3
"""
Pacman package source for Arch-based systems

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

from typing import List

from .base import PackageSource


class PacmanPackageSource(PackageSource):
    """Explicitly installed native packages (Arch Linux, Manjaro, etc.)"""

    command = 'pacman'
    filename = 'pacman-explicit-native.list'
    description = 'Pacman explicit native package list'

    def list_command(self) -> List[str]:
        # -Qqen: explicitly installed, native (not AUR), names only
        return ['pacman', '-Qqen']

    def companions(self) -> List[PackageSource]:
        return [PacmanDependencySource(self.runner)]


class PacmanDependencySource(PackageSource):
    """Packages installed as dependencies"""

    command = 'pacman'
    filename = 'pacman-dependencies.list'
    description = 'Pacman dependency package list'

    def list_command(self) -> List[str]:
        return ['pacman', '-Qqd']
