#!/usr/bin/env python3
"""
Tests for the post-run notifier
"""

import unittest
from unittest import mock

from cfgbackup.utils.commands import CommandRunner
from cfgbackup.utils.notifier import PostRunNotifier


class TestPostRunNotifier(unittest.TestCase):
    """Test PostRunNotifier class"""

    def setUp(self):
        self.runner = mock.Mock(spec=CommandRunner)
        self.runner.exists.return_value = True

    def test_opens_path_in_graphical_session(self):
        notifier = PostRunNotifier(self.runner, environ={"DISPLAY": ":0"})

        self.assertTrue(notifier.notify("/home/user"))
        self.runner.spawn.assert_called_once_with(["xdg-open", "/home/user"])

    def test_wayland_session(self):
        notifier = PostRunNotifier(self.runner, environ={"WAYLAND_DISPLAY": "wayland-0"})
        self.assertTrue(notifier.notify("/home/user"))

    def test_no_display(self):
        notifier = PostRunNotifier(self.runner, environ={})

        self.assertFalse(notifier.notify("/home/user"))
        self.runner.spawn.assert_not_called()

    def test_xdg_open_missing(self):
        self.runner.exists.return_value = False
        notifier = PostRunNotifier(self.runner, environ={"DISPLAY": ":0"})

        self.assertFalse(notifier.notify("/home/user"))

    def test_disabled(self):
        notifier = PostRunNotifier(self.runner, environ={"DISPLAY": ":0"}, enabled=False)

        self.assertFalse(notifier.notify("/home/user"))
        self.runner.spawn.assert_not_called()

    def test_spawn_failure_is_not_fatal(self):
        """Test that launch errors are logged at INFO"""
        self.runner.spawn.side_effect = OSError("exec format error")
        notifier = PostRunNotifier(self.runner, environ={"DISPLAY": ":0"})

        with self.assertLogs("cfgbackup.utils.notifier", level="INFO") as logs:
            self.assertFalse(notifier.notify("/home/user"))
        self.assertTrue(any("INFO" in line and "Could not open" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
