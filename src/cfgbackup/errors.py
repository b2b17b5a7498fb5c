#!/usr/bin/env python3
"""
Exception hierarchy for cfgbackup

Fatal errors (ConfigError, InfrastructureError, PackagingError) stop a run
after the staging root has been cleaned up. CommandError is raised by the
command runner and is always contained at the item or collector that issued
the command.

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

from typing import List, Optional


class BackupError(Exception):
    """Base class for all cfgbackup errors"""

    exit_code = 1


class ConfigError(BackupError):
    """Invalid configuration value"""

    exit_code = 2


class InfrastructureError(BackupError):
    """A required directory or tool is not usable"""


class PackagingError(BackupError):
    """Creating the final archive failed"""


class CommandError(BackupError):
    """An external command failed, timed out or could not be started"""

    def __init__(self, cmd: List[str], message: str, returncode: Optional[int] = None,
                 stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{' '.join(cmd)}: {message}")
