#!/usr/bin/env python3
"""
APT/dpkg package source for Debian-based systems

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


class DpkgPackageSource(PackageSource):
    """Package selections from dpkg (Debian, Ubuntu, etc.)"""

    command = 'dpkg'
    filename = 'dpkg-selections.list'
    description = 'APT package list'

    def list_command(self) -> List[str]:
        return ['dpkg', '--get-selections']

    def companions(self) -> List[PackageSource]:
        return [PpaListSource(self.runner)]


class PpaListSource(PackageSource):
    """Configured APT repositories and PPAs"""

    command = 'apt-add-repository'
    filename = 'ppa-list.list'
    description = 'PPA list'

    def list_command(self) -> List[str]:
        return ['apt-add-repository', '--list']
