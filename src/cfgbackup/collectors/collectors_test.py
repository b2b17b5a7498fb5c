#!/usr/bin/env python3
"""
Tests for auxiliary collectors
"""

import os
import subprocess
import unittest
import tempfile
from unittest import mock

from cfgbackup.collectors import (
    CustomScriptsCollector,
    DconfCollector,
    PackageListCollector,
    ShellHistoryCollector,
    SystemCronCollector,
    UfwCollector,
    UserCrontabCollector,
)
from cfgbackup.errors import CommandError
from cfgbackup.items import ItemResult, Outcome
from cfgbackup.utils.commands import CommandRunner


def completed(cmd, stdout=""):
    return subprocess.CompletedProcess(cmd, 0, stdout, "")


class CollectorTestCase(unittest.TestCase):
    """Common fixtures: temporary home and backup directories, mocked commands"""

    available = ()

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.home = os.path.join(self.tmp.name, "home")
        self.backup_dir = os.path.join(self.tmp.name, "backup")
        os.makedirs(self.home)
        os.makedirs(self.backup_dir)

        self.runner = mock.Mock(spec=CommandRunner)
        self.runner.exists.side_effect = lambda name: name in self.available
        self.elevation = mock.Mock()
        self.elevation.is_available.return_value = True
        self.elevation.wrap.side_effect = lambda cmd: ["sudo"] + cmd

    def tearDown(self):
        self.tmp.cleanup()

    def write_home_file(self, relative, content=""):
        path = os.path.join(self.home, relative)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            f.write(content)
        return path

    def backup_path(self, *parts):
        return os.path.join(self.backup_dir, *parts)


class TestUserCrontabCollector(CollectorTestCase):
    available = ("crontab",)

    def test_crontab_saved(self):
        self.runner.run.return_value = completed(["crontab", "-l"], "0 3 * * * backup.sh\n")
        collector = UserCrontabCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        with open(self.backup_path("cronjobs", "crontab.bak")) as f:
            self.assertEqual(f.read(), "0 3 * * * backup.sh\n")

    def test_no_crontab_writes_empty_marker(self):
        """Test that 'no crontab for user' is recorded as empty"""
        self.runner.run.side_effect = CommandError(["crontab", "-l"], "exited with status 1", returncode=1)
        collector = UserCrontabCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.EMPTY)
        self.assertTrue(os.path.exists(self.backup_path("cronjobs", "crontab.bak.empty")))
        self.assertFalse(os.path.exists(self.backup_path("cronjobs", "crontab.bak")))

    def test_unavailable_without_crontab(self):
        self.runner.exists.side_effect = lambda name: False
        collector = UserCrontabCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.UNAVAILABLE)
        self.assertFalse(os.path.exists(self.backup_path("cronjobs")))


class TestSystemCronCollector(CollectorTestCase):

    def test_skipped_without_elevation(self):
        """Test that a skip marker is written when sudo is unavailable"""
        self.elevation.is_available.return_value = False
        collector = SystemCronCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SKIPPED_NO_ELEVATION)
        self.assertTrue(os.path.exists(self.backup_path("system-cron", "system-cron.bak.skipped")))
        self.runner.run.assert_not_called()

    def test_elevated_rsync_of_cron_paths(self):
        etc = os.path.join(self.tmp.name, "etc")
        os.makedirs(os.path.join(etc, "cron.d"))
        with open(os.path.join(etc, "crontab"), "w") as f:
            f.write("# system crontab\n")
        self.runner.run.side_effect = lambda cmd, **kwargs: completed(cmd)
        collector = SystemCronCollector(self.runner, self.elevation, self.home)

        with mock.patch.object(SystemCronCollector, "cron_glob", os.path.join(etc, "cron*")):
            result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        self.runner.run.assert_called_once_with([
            "sudo", "rsync", "-a", "-h",
            os.path.join(etc, "cron.d"), os.path.join(etc, "crontab"),
            self.backup_path("system-cron") + os.sep,
        ])

    def test_rsync_failure_is_contained(self):
        etc = os.path.join(self.tmp.name, "etc")
        os.makedirs(os.path.join(etc, "cron.daily"))
        self.runner.run.side_effect = CommandError(["rsync"], "exited with status 23", returncode=23)
        collector = SystemCronCollector(self.runner, self.elevation, self.home)

        with mock.patch.object(SystemCronCollector, "cron_glob", os.path.join(etc, "cron*")):
            result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.FAILED)


class TestShellHistoryCollector(CollectorTestCase):

    def test_histories_copied_per_shell(self):
        self.write_home_file(".bash_history", "ls\n")
        self.write_home_file(".local/share/fish/fish_history", "- cmd: ls\n")
        collector = ShellHistoryCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        self.assertEqual(sorted(os.listdir(self.backup_path("shell-history"))),
                         ["bash_history.bak", "fish_history.bak"])

    def test_shared_csh_history_copied_once(self):
        self.write_home_file(".history", "echo $shell\n")
        collector = ShellHistoryCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        self.assertEqual(os.listdir(self.backup_path("shell-history")), ["tcsh_csh_history.bak"])

    def test_no_history_writes_empty_marker(self):
        collector = ShellHistoryCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.EMPTY)
        self.assertEqual(os.listdir(self.backup_path("shell-history")), ["history.bak.empty"])


class TestPackageListCollector(CollectorTestCase):

    OUTPUT = {
        "dpkg": "vim\tinstall\n",
        "apt-add-repository": "deb http://archive.ubuntu.com/ubuntu jammy main\n",
        "flatpak": "org.gimp.GIMP\n",
        "rpm": "bash-5.2-1.x86_64\n",
    }

    def setUp(self):
        super().setUp()
        self.runner.run.side_effect = lambda cmd, **kwargs: completed(cmd, self.OUTPUT[cmd[0]])

    def collect(self):
        collector = PackageListCollector(self.runner, self.elevation, self.home)
        return collector.run(self.backup_dir)

    def listing(self):
        return sorted(os.listdir(self.backup_path("package-lists")))

    def test_primary_companions_and_supplementary(self):
        """Test a Debian-like system with flatpak installed"""
        self.available = ("dpkg", "apt-add-repository", "flatpak", "rpm")

        result = self.collect()

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        self.assertEqual(self.listing(),
                         ["dpkg-selections.list", "flatpak-packages.list", "ppa-list.list"])
        with open(self.backup_path("package-lists", "dpkg-selections.list")) as f:
            self.assertEqual(f.read(), "vim\tinstall\n")

    def test_rpm_fallback_without_primary(self):
        """Test that rpm is used only when no primary manager is found"""
        self.available = ("rpm",)

        result = self.collect()

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        self.assertEqual(self.listing(), ["package-lists.bak.skipped", "rpm-qa.list"])

    def test_nothing_detected(self):
        self.available = ()

        result = self.collect()

        self.assertEqual(result.outcome, Outcome.EMPTY)
        self.assertEqual(self.listing(), ["package-lists.bak.skipped"])

    def test_all_queries_failed(self):
        self.available = ("dpkg",)
        self.runner.run.side_effect = CommandError(["dpkg"], "exited with status 2", returncode=2)

        result = self.collect()

        self.assertEqual(result.outcome, Outcome.FAILED)
        self.assertEqual(self.listing(), [])


class TestCustomScriptsCollector(CollectorTestCase):

    def test_script_directories_mirrored_without_excludes(self):
        self.write_home_file("bin/deploy.sh", "#!/bin/sh\n")
        executor = mock.Mock()
        executor.filtered_transfer.return_value = ItemResult("~/bin", Outcome.SUCCESS)
        collector = CustomScriptsCollector(self.runner, self.elevation, self.home, executor=executor)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        executor.filtered_transfer.assert_called_once_with(
            os.path.join(self.home, "bin") + os.sep,
            self.backup_path("custom-scripts", "bin"),
            use_excludes=False, label="~/bin",
        )

    def test_no_script_directories(self):
        executor = mock.Mock()
        collector = CustomScriptsCollector(self.runner, self.elevation, self.home, executor=executor)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.EMPTY)
        executor.filtered_transfer.assert_not_called()


class TestDconfCollector(CollectorTestCase):
    available = ("dconf",)

    def test_dump_written_to_ini(self):
        collector = DconfCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        self.runner.run_to_file.assert_called_once_with(
            ["dconf", "dump", "/"], self.backup_path("gnome-settings", "dconf-settings.ini"))

    def test_dump_failure_is_contained(self):
        self.runner.run_to_file.side_effect = CommandError(["dconf"], "exited with status 1", returncode=1)
        collector = DconfCollector(self.runner, self.elevation, self.home)

        with self.assertLogs("cfgbackup.collectors.base", level="WARNING"):
            result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.FAILED)


class TestUfwCollector(CollectorTestCase):
    available = ("ufw",)

    def test_all_views_written(self):
        self.runner.run.side_effect = lambda cmd, **kwargs: completed(cmd, " ".join(cmd[2:]))
        collector = UfwCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SUCCESS)
        self.assertEqual(sorted(os.listdir(self.backup_path("ufw"))),
                         ["ufw-status-numbered.txt", "ufw-status-verbose.txt", "ufw.rules"])
        with open(self.backup_path("ufw", "ufw.rules")) as f:
            self.assertEqual(f.read(), "export")

    def test_partial_failure_writes_nothing(self):
        """Test that the three outputs are written together or not at all"""
        def run(cmd, **kwargs):
            if cmd[-1] == "numbered":
                raise CommandError(cmd, "exited with status 1", returncode=1)
            return completed(cmd, "Status: active\n")

        self.runner.run.side_effect = run
        collector = UfwCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.FAILED)
        self.assertEqual(os.listdir(self.backup_path("ufw")), [])

    def test_skipped_without_elevation(self):
        self.elevation.is_available.return_value = False
        collector = UfwCollector(self.runner, self.elevation, self.home)

        result = collector.run(self.backup_dir)

        self.assertEqual(result.outcome, Outcome.SKIPPED_NO_ELEVATION)
        self.assertEqual(os.listdir(self.backup_path("ufw")), ["ufw.bak.skipped"])


if __name__ == "__main__":
    unittest.main()
