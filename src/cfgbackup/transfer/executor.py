#!/usr/bin/env python3
"""
Transfer executor: copies backup items into the staging directory

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
from typing import List, Optional, Sequence

from .exclusion import ExclusionMatcher
from ..errors import CommandError, InfrastructureError
from ..items.base import BackupItem, ItemKind, ItemResult, Outcome
from ..utils.commands import CommandRunner
from ..utils.elevation import ElevationChecker
from ..utils.progress import ProgressTracker, OperationType

logger = logging.getLogger(__name__)


def ensure_directory(path: str) -> str:
    """Create a directory required by the run

    Raises:
        InfrastructureError: If the directory cannot be created
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise InfrastructureError(f"Failed to create directory {path}: {e}")
    return path


class TransferExecutor:
    """Performs filtered (rsync) and plain (copy) transfers, one item at a time"""

    def __init__(self, runner: CommandRunner, matcher: ExclusionMatcher, home_dir: str,
                 elevation: Optional[ElevationChecker] = None):
        self.runner = runner
        self.matcher = matcher
        self.home_dir = os.path.realpath(home_dir)
        self.elevation = elevation

    def is_under_home(self, path: str) -> bool:
        real = os.path.realpath(os.path.abspath(path))
        return real == self.home_dir or real.startswith(self.home_dir + os.sep)

    def _elevate(self, cmd: List[str]) -> List[str]:
        if self.elevation is None:
            return ['sudo'] + cmd
        return self.elevation.wrap(cmd)

    def build_rsync_command(self, source: str, dest_dir: str, elevated: bool = False,
                            use_excludes: bool = True) -> List[str]:
        """Build the rsync command line for a filtered tree transfer

        Ownership and permissions are not preserved for sources in the
        invoking user's home directory unless the transfer is elevated.
        """
        cmd = ['rsync', '-a', '-h']
        if use_excludes:
            cmd.extend(self.matcher.rsync_args())
        if self.is_under_home(source) and not elevated:
            cmd.extend(['--no-perms', '--no-owner', '--no-group'])
        cmd.extend([source, dest_dir.rstrip(os.sep) + os.sep])
        if elevated:
            cmd = self._elevate(cmd)
        return cmd

    def filtered_transfer(self, source: str, dest_dir: str, elevated: bool = False,
                          use_excludes: bool = True, label: str = "") -> ItemResult:
        """Mirror a file or directory into dest_dir, honouring exclude patterns"""
        item_name = label or os.path.basename(source.rstrip(os.sep))
        logger.info(f"Backing up '{item_name}' using rsync...")
        ensure_directory(dest_dir)

        cmd = self.build_rsync_command(source, dest_dir, elevated, use_excludes)
        try:
            result = self.runner.run(cmd)
        except CommandError as e:
            logger.warning(f"rsync failed for '{item_name}'. Continuing with other backups. ({e})")
            return ItemResult(item_name, Outcome.FAILED, str(e))

        if result.stdout:
            logger.debug(result.stdout.strip())
        logger.info(f"Backed up '{item_name}'.")
        return ItemResult(item_name, Outcome.SUCCESS)

    def plain_transfer(self, source: str, dest_path: str, elevated: bool = False) -> ItemResult:
        """Copy a file or directory to dest_path

        Elevated copies preserve all attributes; user copies do not, so that
        root-owned files readable by the user do not cause ownership errors.
        """
        item_name = os.path.basename(source.rstrip(os.sep))
        logger.info(f"Backing up '{item_name}' using cp...")
        ensure_directory(os.path.dirname(dest_path))

        try:
            if elevated:
                self.runner.run(self._elevate(['cp', '-a', source, dest_path]))
            elif os.path.isdir(source):
                shutil.copytree(source, dest_path, symlinks=True,
                                copy_function=shutil.copy, dirs_exist_ok=True)
            else:
                shutil.copy(source, dest_path)
        except (CommandError, OSError, shutil.Error) as e:
            if elevated:
                logger.warning(f"Failed to backup system config: '{item_name}' ({e}).")
            else:
                logger.warning(f"cp failed for '{item_name}'. Continuing with other backups. ({e})")
            return ItemResult(item_name, Outcome.FAILED, str(e))

        if elevated:
            logger.info(f"Backed up system config: '{item_name}'.")
        else:
            logger.info(f"Backed up '{item_name}'.")
        return ItemResult(item_name, Outcome.SUCCESS)

    def transfer_item(self, item: BackupItem, dest_dir: str) -> ItemResult:
        """Transfer one item according to its kind"""
        if not item.exists_now():
            logger.info(f"{item.source_path} not found, skipping.")
            return ItemResult(item.name, Outcome.SKIPPED_MISSING)

        if item.kind == ItemKind.RSYNC_STYLE:
            return self.filtered_transfer(item.source_path, dest_dir)

        elevated = item.kind == ItemKind.PRIVILEGED
        return self.plain_transfer(item.source_path, os.path.join(dest_dir, item.name), elevated=elevated)

    def transfer_items(self, items: Sequence[BackupItem], dest_dir: str,
                       operation: OperationType = OperationType.GENERAL,
                       desc: str = "") -> List[ItemResult]:
        """Transfer every item, continuing past individual failures"""
        ensure_directory(dest_dir)
        results = []
        with ProgressTracker(operation, total=len(items), desc=desc) as progress:
            for item in items:
                result = self.transfer_item(item, dest_dir)
                results.append(result)
                progress.update(status=item.name)
        return results
