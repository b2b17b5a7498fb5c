"""
Auxiliary state collectors

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

from .base import Collector
from .scheduler import UserCrontabCollector, SystemCronCollector
from .history import ShellHistoryCollector, HISTORY_FILES
from .packages import PackageListCollector
from .scripts import CustomScriptsCollector
from .desktop import DconfCollector
from .firewall import UfwCollector

__all__ = [
    'Collector',
    'UserCrontabCollector',
    'SystemCronCollector',
    'ShellHistoryCollector',
    'HISTORY_FILES',
    'PackageListCollector',
    'CustomScriptsCollector',
    'DconfCollector',
    'UfwCollector',
]
