#!/usr/bin/env python3
"""
Plain RPM database query, used when no primary package manager was found

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


class RpmPackageSource(PackageSource):
    """All packages in the RPM database"""

    command = 'rpm'
    filename = 'rpm-qa.list'
    description = 'RPM package list'

    def list_command(self) -> List[str]:
        return ['rpm', '-qa']
