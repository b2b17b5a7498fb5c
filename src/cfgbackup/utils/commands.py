#!/usr/bin/env python3
"""
External command execution for cfgbackup

Every shell-out made during a backup goes through CommandRunner so that a
single timeout applies to all of them and failures surface as CommandError.

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

import os
import shutil
import logging
import subprocess
from typing import List, Optional

from ..errors import CommandError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs external commands with an optional deadline"""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def exists(self, name: str) -> bool:
        """Check whether a command is available on PATH"""
        return shutil.which(name) is not None

    def _execute(self, cmd: List[str], capture: bool, binary: bool,
                 input: Optional[str] = None) -> subprocess.CompletedProcess:
        logger.debug(f"Running: {' '.join(cmd)}")
        if binary:
            decoding = {}
        else:
            # Filenames in rsync errors and dumps are not always valid UTF-8
            decoding = {'encoding': 'utf-8', 'errors': 'replace'}
        try:
            return subprocess.run(
                cmd,
                input=input,
                stdout=subprocess.PIPE if capture else None,
                stderr=subprocess.PIPE if capture else None,
                timeout=self.timeout,
                check=False,
                **decoding
            )
        except FileNotFoundError:
            raise CommandError(cmd, "command not found")
        except subprocess.TimeoutExpired:
            raise CommandError(cmd, f"timed out after {self.timeout} seconds")
        except OSError as e:
            raise CommandError(cmd, str(e))

    def _check(self, cmd: List[str], result: subprocess.CompletedProcess) -> None:
        if result.returncode == 0:
            return
        stderr = result.stderr or ""
        if isinstance(stderr, bytes):
            stderr = stderr.decode('utf-8', errors='replace')
        stderr = stderr.strip()
        raise CommandError(cmd, f"exited with status {result.returncode}"
                           + (f": {stderr}" if stderr else ""),
                           returncode=result.returncode, stderr=stderr)

    def run(self, cmd: List[str], check: bool = True,
            capture: bool = True, input: Optional[str] = None) -> subprocess.CompletedProcess:
        """Run a command and return the completed process

        Output is decoded as UTF-8, with undecodable bytes replaced.

        Args:
            cmd: Command and arguments
            check: Raise CommandError on a non-zero exit status
            capture: Capture stdout/stderr as text instead of inheriting them
            input: Text written to the command's stdin

        Raises:
            CommandError: If the command cannot be started, times out, or
                exits non-zero while check is True
        """
        result = self._execute(cmd, capture, binary=False, input=input)
        if check:
            self._check(cmd, result)
        return result

    def run_to_file(self, cmd: List[str], path: str) -> int:
        """Run a command and write its stdout to a file unchanged

        The file is only written once the command has succeeded.

        Returns:
            Number of bytes written
        """
        result = self._execute(cmd, capture=True, binary=True)
        self._check(cmd, result)
        with open(path, 'wb') as f:
            f.write(result.stdout)
        return len(result.stdout)

    def spawn(self, cmd: List[str]) -> subprocess.Popen:
        """Start a detached process without waiting for it"""
        logger.debug(f"Spawning: {' '.join(cmd)}")
        return subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            cwd=os.path.expanduser("~")
        )
