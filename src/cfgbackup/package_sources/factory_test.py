#!/usr/bin/env python3
"""
Tests for package source detection
"""

import unittest
from unittest import mock

from cfgbackup.package_sources import (
    DpkgPackageSource,
    DnfPackageSource,
    FlatpakPackageSource,
    PacmanPackageSource,
    PackageSourceFactory,
    PpaListSource,
    RpmPackageSource,
    SnapPackageSource,
)
from cfgbackup.utils.commands import CommandRunner


def runner_with(*commands):
    runner = mock.Mock(spec=CommandRunner)
    runner.exists.side_effect = lambda name: name in commands
    return runner


class TestPackageSourceFactory(unittest.TestCase):
    """Test PackageSourceFactory class"""

    def test_first_detected_primary_wins(self):
        """Test that detection follows priority order"""
        factory = PackageSourceFactory(runner_with("dnf", "pacman", "rpm"))
        primary = factory.detect_primary()
        self.assertIsInstance(primary, PacmanPackageSource)

    def test_rpm_is_not_a_primary_manager(self):
        factory = PackageSourceFactory(runner_with("rpm"))
        self.assertIsNone(factory.detect_primary())
        self.assertIsInstance(factory.fallback_source(), RpmPackageSource)

    def test_detection_errors_are_logged_and_skipped(self):
        def exists(name):
            if name == "dpkg":
                raise OSError("boom")
            return name == "dnf"

        runner = mock.Mock(spec=CommandRunner)
        runner.exists.side_effect = exists
        factory = PackageSourceFactory(runner)

        with self.assertLogs("cfgbackup.package_sources.factory", level="ERROR"):
            primary = factory.detect_primary()

        self.assertIsInstance(primary, DnfPackageSource)

    def test_supplementary_sources(self):
        factory = PackageSourceFactory(runner_with())
        kinds = [type(source) for source in factory.supplementary_sources()]
        self.assertEqual(kinds, [SnapPackageSource, FlatpakPackageSource])

    def test_primary_filenames(self):
        names = PackageSourceFactory.primary_filenames()
        self.assertIn("dpkg-selections.list", names)
        self.assertIn("pacman-explicit-native.list", names)
        self.assertNotIn("rpm-qa.list", names)


class TestPackageSources(unittest.TestCase):
    """Test individual package sources"""

    def test_dpkg_companion_is_ppa_list(self):
        source = DpkgPackageSource(runner_with("dpkg"))
        companions = source.companions()
        self.assertEqual(len(companions), 1)
        self.assertIsInstance(companions[0], PpaListSource)

    def test_collect_returns_command_output(self):
        runner = runner_with("pacman")
        runner.run.return_value = mock.Mock(stdout="vim\ngit\n")

        text = PacmanPackageSource(runner).collect()

        self.assertEqual(text, "vim\ngit\n")
        runner.run.assert_called_once_with(["pacman", "-Qqen"])


if __name__ == "__main__":
    unittest.main()
