#!/usr/bin/env python3
"""
Archive finalizer: temporary staging root and tar packaging

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
import tarfile
import logging
import tempfile
from enum import Enum
from typing import Callable, Optional

from .errors import CommandError, InfrastructureError, PackagingError
from .utils.config import BackupConfig

logger = logging.getLogger(__name__)


class ArchiveState(Enum):
    IDLE = "idle"
    STAGING = "staging"
    PACKAGING = "packaging"
    DONE = "done"
    FAILED = "failed"


class StagingRoot:
    """Temporary directory holding the backup until it is packaged

    Removed exactly once, whichever way the with-block is left.
    """

    def __init__(self, prefix: str, remove_fallback: Optional[Callable[[str], None]] = None):
        """Create a staging root

        Args:
            prefix: Prefix of the temporary directory name
            remove_fallback: Called with the path when the directory cannot be
                             removed as the current user (e.g. root-owned
                             files copied under sudo)
        """
        self.prefix = prefix
        self.remove_fallback = remove_fallback
        self.path: Optional[str] = None
        self.cleaned = False

    def create(self) -> str:
        try:
            self.path = tempfile.mkdtemp(prefix=self.prefix)
        except OSError as e:
            raise InfrastructureError(f"Failed to create temporary directory: {e}")
        logger.info(f"Created temporary directory: {self.path}")
        return self.path

    def cleanup(self) -> None:
        if self.cleaned or self.path is None:
            return
        self.cleaned = True

        if not os.path.exists(self.path):
            return
        logger.info(f"Cleaning up temporary directory: {self.path}")
        try:
            shutil.rmtree(self.path)
            return
        except OSError as e:
            if self.remove_fallback is None:
                logger.warning(f"Failed to remove temporary directory {self.path}: {e}")
                return
            logger.debug(f"rmtree failed ({e}), retrying with elevation")

        try:
            self.remove_fallback(self.path)
        except (CommandError, OSError) as e:
            logger.warning(f"Failed to remove temporary directory {self.path}: {e}")

    def __enter__(self) -> str:
        return self.create()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()


class ArchiveFinalizer:
    """Wraps the staged backup directory into a single compressed tarball"""

    def __init__(self, destination: str, backup_name: str, config: BackupConfig,
                 remove_fallback: Optional[Callable[[str], None]] = None):
        self.destination = destination
        self.backup_name = backup_name
        self.config = config
        self.remove_fallback = remove_fallback
        self.state = ArchiveState.IDLE

    @property
    def archive_path(self) -> str:
        return os.path.join(self.destination,
                            f"{self.backup_name}.tar.{self.config.archive_extension}")

    def staging(self) -> StagingRoot:
        """Create the staging root context for this run"""
        self.state = ArchiveState.STAGING
        return StagingRoot(f"{self.config.archive_base_name}-", self.remove_fallback)

    def _readable_filter(self, staging_root: str) -> Callable:
        def _filter(member: tarfile.TarInfo) -> Optional[tarfile.TarInfo]:
            path = os.path.join(staging_root, member.name)
            if member.isdir():
                readable = os.access(path, os.R_OK | os.X_OK)
            elif member.isfile():
                readable = os.access(path, os.R_OK)
            else:
                readable = True
            if not readable:
                logger.warning(f"Skipping unreadable file in archive: {member.name}")
                return None
            return member
        return _filter

    def package(self, backup_dir: str) -> str:
        """Write backup_dir into the archive under its own name

        Returns:
            Path of the created archive

        Raises:
            PackagingError: If the archive cannot be written; a partially
                            written archive is removed first
        """
        self.state = ArchiveState.PACKAGING
        archive_path = self.archive_path
        staging_root = os.path.dirname(os.path.abspath(backup_dir))
        logger.info(f"Creating archive: {archive_path}")

        try:
            with tarfile.open(archive_path, self.config.tar_mode) as tar:
                tar.add(backup_dir, arcname=self.backup_name,
                        filter=self._readable_filter(staging_root))
        except (tarfile.TarError, OSError) as e:
            self.state = ArchiveState.FAILED
            if os.path.exists(archive_path):
                try:
                    os.remove(archive_path)
                except OSError as remove_error:
                    logger.warning(f"Could not remove partial archive {archive_path}: {remove_error}")
            raise PackagingError(f"Failed to create archive {archive_path}: {e}")

        self.state = ArchiveState.DONE
        logger.info(f"Archive created: {archive_path}")
        return archive_path
