#!/usr/bin/env python3
"""
Main application module for cfgbackup - a configuration backup utility

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
import json
import socket
import getpass
import logging
import datetime
from typing import Any, Callable, Dict, List, Optional

from tqdm.contrib.logging import logging_redirect_tqdm

from . import __version__
from .archive import ArchiveFinalizer
from .errors import InfrastructureError
from .items import ItemEnumerator, ItemResult, Outcome
from .transfer import ExclusionMatcher, TransferExecutor, PrivilegedTransferGate, ensure_directory
from .collectors import (
    Collector,
    UserCrontabCollector,
    SystemCronCollector,
    ShellHistoryCollector,
    PackageListCollector,
    CustomScriptsCollector,
    DconfCollector,
    UfwCollector,
)
from .utils.commands import CommandRunner
from .utils.config import BackupConfig
from .utils.distro import get_distro_info
from .utils.elevation import ElevationChecker
from .utils.notifier import PostRunNotifier
from .utils.progress import OperationType, ProgressTracker

LOG_DIR = os.path.expanduser("~/.local/share/cfgbackup")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
MANIFEST_NAME = "backup-info.json"

# Tools without which no useful backup can be made
REQUIRED_COMMANDS = ('rsync',)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Log to the console and to a file under ~/.local/share/cfgbackup"""
    if log_file is None:
        log_file = os.path.join(LOG_DIR, "cfgbackup.log")
    log_file = os.path.expanduser(log_file)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    except OSError as e:
        print(f"Warning: cannot write log file {log_file}: {e}")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


class BackupRun:
    """State and results of a single backup run"""

    def __init__(self, timestamp: str, backup_name: str, destination: str):
        self.timestamp = timestamp
        self.backup_name = backup_name
        self.destination = destination
        self.staging_root: Optional[str] = None
        self.backup_dir: Optional[str] = None
        self.item_results: List[ItemResult] = []
        self.collector_results: List[ItemResult] = []
        self.tier_outcomes: Dict[str, Outcome] = {}
        self.output_path: Optional[str] = None

    @property
    def items_total(self) -> int:
        return len(self.item_results)

    @property
    def items_succeeded(self) -> int:
        return sum(1 for result in self.item_results if result.succeeded)

    @property
    def failures(self) -> List[ItemResult]:
        return [r for r in self.item_results + self.collector_results
                if r.outcome == Outcome.FAILED]

    def summary(self) -> str:
        return (f"{self.items_succeeded} of {self.items_total} items backed up, "
                f"output: {self.output_path}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "backup_name": self.backup_name,
            "destination": self.destination,
            "items": [r.to_dict() for r in self.item_results],
            "collectors": [r.to_dict() for r in self.collector_results],
            "tiers": {name: outcome.value for name, outcome in self.tier_outcomes.items()},
            "output_path": self.output_path,
        }


class BackupOrchestrator:
    """Runs one complete backup for a validated configuration"""

    def __init__(self, config: BackupConfig,
                 runner: Optional[CommandRunner] = None,
                 elevation: Optional[ElevationChecker] = None,
                 home_dir: Optional[str] = None,
                 clock: Optional[Callable[[], datetime.datetime]] = None,
                 notifier: Optional[PostRunNotifier] = None):
        self.config = config
        self.runner = runner or CommandRunner(timeout=config.command_timeout)
        self.elevation = elevation or ElevationChecker(self.runner, allow_prompt=config.allow_sudo_prompt)
        self.home_dir = home_dir or os.path.expanduser("~")
        self.clock = clock or datetime.datetime.now
        self.notifier = notifier or PostRunNotifier(self.runner, enabled=config.open_file_browser)

        self.matcher = ExclusionMatcher(config.exclude_patterns)
        self.executor = TransferExecutor(self.runner, self.matcher, self.home_dir, self.elevation)
        self.enumerator = ItemEnumerator(
            self.home_dir,
            config.rsync_style_items,
            config.direct_copy_items,
            config.privileged_items,
        )
        self.current_run: Optional[BackupRun] = None

    def check_prerequisites(self) -> None:
        """Raise InfrastructureError if a required tool is missing"""
        for command in REQUIRED_COMMANDS:
            if not self.runner.exists(command):
                raise InfrastructureError(
                    f"Required command '{command}' not found. Please install it first."
                )

    def _allocate_name(self) -> BackupRun:
        """Pick a timestamped name whose output does not exist yet"""
        moment = self.clock()
        destination = self.config.destination_directory
        while True:
            timestamp = moment.strftime(TIMESTAMP_FORMAT)
            backup_name = f"{self.config.archive_base_name}-{timestamp}"
            outputs = [os.path.join(destination, backup_name)]
            if self.config.create_archive:
                outputs.append(os.path.join(
                    destination, f"{backup_name}.tar.{self.config.archive_extension}"))
            if not any(os.path.lexists(path) for path in outputs):
                return BackupRun(timestamp, backup_name, destination)
            moment += datetime.timedelta(seconds=1)

    def _remove_elevated(self, path: str) -> None:
        """Remove a staging root containing files copied as root"""
        if not self.elevation.is_available():
            raise OSError(f"cannot remove {path} without elevation")
        self.runner.run(self.elevation.wrap(['rm', '-rf', path]))

    def build_collectors(self) -> List[Collector]:
        """Auxiliary collectors in the order they run"""
        args = (self.runner, self.elevation, self.home_dir)
        return [
            UserCrontabCollector(*args),
            SystemCronCollector(*args),
            ShellHistoryCollector(*args),
            PackageListCollector(*args),
            CustomScriptsCollector(*args, executor=self.executor),
            DconfCollector(*args),
            UfwCollector(*args),
        ]

    def run(self) -> BackupRun:
        """Run the backup

        Returns:
            The completed BackupRun

        Raises:
            InfrastructureError: If a required directory or tool is unusable
            PackagingError: If the archive cannot be written
        """
        with logging_redirect_tqdm():
            return self._run()

    def _run(self) -> BackupRun:
        self.check_prerequisites()
        ensure_directory(self.config.destination_directory)
        logger.info(f"Using backup directory: {self.config.destination_directory}")

        backup_run = self._allocate_name()
        self.current_run = backup_run

        if self.config.create_archive:
            finalizer = ArchiveFinalizer(backup_run.destination, backup_run.backup_name,
                                         self.config, remove_fallback=self._remove_elevated)
            with finalizer.staging() as staging_root:
                backup_run.staging_root = staging_root
                backup_dir = os.path.join(staging_root, backup_run.backup_name)
                self.stage(backup_run, backup_dir)
                backup_run.output_path = finalizer.package(backup_dir)
            notify_path = backup_run.destination
        else:
            backup_dir = os.path.join(backup_run.destination, backup_run.backup_name)
            self.stage(backup_run, backup_dir)
            backup_run.output_path = backup_dir
            notify_path = backup_dir

        for failure in backup_run.failures:
            logger.warning(f"Not backed up: {failure.name} ({failure.message})")
        logger.info(f"Backup complete: {backup_run.summary()}")

        self.notifier.notify(notify_path)
        return backup_run

    def stage(self, backup_run: BackupRun, backup_dir: str) -> None:
        """Copy every item and run every collector into backup_dir"""
        backup_run.backup_dir = ensure_directory(backup_dir)
        logger.info(f"Staging backup in {backup_dir}")

        rsync_items = self.enumerator.rsync_style(include_missing=True)
        backup_run.item_results.extend(self.executor.transfer_items(
            rsync_items, os.path.join(backup_dir, "home-config-rsync"),
            OperationType.RSYNC_ITEMS, desc="Home configuration (rsync)"
        ))

        copy_items = self.enumerator.direct_copy(include_missing=True)
        backup_run.item_results.extend(self.executor.transfer_items(
            copy_items, os.path.join(backup_dir, "home-config-copy"),
            OperationType.COPY_ITEMS, desc="Home configuration (copy)"
        ))

        collectors = self.build_collectors()
        user_cron, system_cron, rest = collectors[0], collectors[1], collectors[2:]
        backup_run.collector_results.append(user_cron.run(backup_dir))
        backup_run.collector_results.append(system_cron.run(backup_dir))

        gate = PrivilegedTransferGate(self.executor, self.elevation)
        backup_run.tier_outcomes["system-config"] = gate.run(
            self.enumerator.privileged(include_missing=True),
            os.path.join(backup_dir, "system-config")
        )
        backup_run.item_results.extend(gate.results)

        with ProgressTracker(OperationType.COLLECTORS, total=len(rest), desc="Auxiliary data") as progress:
            for collector in rest:
                backup_run.collector_results.append(collector.run(backup_dir))
                progress.update(status=collector.name)

        self.write_manifest(backup_run, backup_dir)

    def write_manifest(self, backup_run: BackupRun, backup_dir: str) -> Optional[str]:
        """Record what was backed up and where it came from"""
        path = os.path.join(backup_dir, MANIFEST_NAME)
        try:
            manifest = {
                "version": __version__,
                "timestamp": backup_run.timestamp,
                "hostname": socket.gethostname(),
                "user": getpass.getuser(),
                "distribution": get_distro_info().to_dict(),
                "config": self.config.summary(),
                "results": backup_run.to_dict(),
            }
            with open(path, 'w') as f:
                json.dump(manifest, f, indent=2)
        except (OSError, KeyError, ValueError) as e:
            logger.warning(f"Could not write backup manifest: {e}")
            return None
        logger.info(f"Wrote backup manifest {MANIFEST_NAME}")
        return path
