#!/usr/bin/env python3
"""
DNF and YUM package sources for RPM-based systems

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


class DnfPackageSource(PackageSource):
    """Installed packages from DNF (Fedora, RHEL 8+, etc.)"""

    command = 'dnf'
    filename = 'dnf-installed.list'
    description = 'DNF installed package list'

    def list_command(self) -> List[str]:
        return ['dnf', 'list', 'installed', '--quiet']


class YumPackageSource(PackageSource):
    """Installed packages from YUM (older RHEL/CentOS)"""

    command = 'yum'
    filename = 'yum-installed.list'
    description = 'YUM installed package list'

    def list_command(self) -> List[str]:
        return ['yum', 'list', 'installed', '--quiet']
