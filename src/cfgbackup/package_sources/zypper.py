#!/usr/bin/env python3
"""
Zypper package source for openSUSE

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


class ZypperPackageSource(PackageSource):
    """Installed packages from Zypper"""

    command = 'zypper'
    filename = 'zypper-installed.list'
    description = 'Zypper installed package list'

    def list_command(self) -> List[str]:
        return ['zypper', 'se', '--installed-only']
