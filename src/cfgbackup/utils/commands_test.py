#!/usr/bin/env python3
"""
Tests for the command runner
"""

import os
import unittest
import tempfile
from unittest import mock

from cfgbackup.errors import CommandError
from cfgbackup.utils.commands import CommandRunner

# rsync reporting a Latin-1 file name it could not read
RSYNC_LATIN1_FAILURE = r"""#!/bin/sh
printf 'rsync: send_files failed to open "caf\351.txt": Permission denied (13)\n' >&2
exit 23
"""

DCONF_LATIN1_DUMP = r"""#!/bin/sh
printf "[org/example]\nname='caf\351'\n"
"""


def write_stub(directory, name, body):
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        f.write(body)
    os.chmod(path, 0o755)
    return path


class StubPathTestCase(unittest.TestCase):
    """Puts a directory of stub commands first on PATH"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.bin_dir = os.path.join(self.tmp.name, "bin")
        os.makedirs(self.bin_dir)
        path = self.bin_dir + os.pathsep + os.environ.get("PATH", "")
        patcher = mock.patch.dict(os.environ, {"PATH": path})
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        self.tmp.cleanup()


class TestCommandRunner(StubPathTestCase):
    """Test CommandRunner class"""

    def test_undecodable_stderr_becomes_command_error(self):
        write_stub(self.bin_dir, "rsync", RSYNC_LATIN1_FAILURE)

        with self.assertRaises(CommandError) as ctx:
            CommandRunner().run(["rsync", "-a", "src/", "dst/"])

        self.assertEqual(ctx.exception.returncode, 23)
        self.assertIn("caf�.txt", ctx.exception.stderr)

    def test_undecodable_stdout_is_replaced(self):
        write_stub(self.bin_dir, "dconf", DCONF_LATIN1_DUMP)
        result = CommandRunner().run(["dconf", "dump", "/"])
        self.assertIn("name='caf�'", result.stdout)

    def test_run_to_file_keeps_raw_bytes(self):
        write_stub(self.bin_dir, "dconf", DCONF_LATIN1_DUMP)
        target = os.path.join(self.tmp.name, "dconf-settings.ini")

        written = CommandRunner().run_to_file(["dconf", "dump", "/"], target)

        with open(target, "rb") as f:
            content = f.read()
        self.assertEqual(content, b"[org/example]\nname='caf\xe9'\n")
        self.assertEqual(written, len(content))

    def test_run_to_file_writes_nothing_on_failure(self):
        write_stub(self.bin_dir, "dconf", RSYNC_LATIN1_FAILURE)
        target = os.path.join(self.tmp.name, "dconf-settings.ini")

        with self.assertRaises(CommandError) as ctx:
            CommandRunner().run_to_file(["dconf", "dump", "/"], target)

        self.assertIn("caf�.txt", ctx.exception.stderr)
        self.assertFalse(os.path.exists(target))

    def test_input_is_written_to_stdin(self):
        write_stub(self.bin_dir, "echo-stdin", "#!/bin/sh\ncat\n")
        result = CommandRunner().run(["echo-stdin"], input="ssh-ed25519 AAAA tester\n")
        self.assertEqual(result.stdout, "ssh-ed25519 AAAA tester\n")

    def test_unchecked_failure_returns_result(self):
        write_stub(self.bin_dir, "rsync", RSYNC_LATIN1_FAILURE)
        result = CommandRunner().run(["rsync"], check=False)
        self.assertEqual(result.returncode, 23)

    def test_missing_command(self):
        with self.assertRaises(CommandError) as ctx:
            CommandRunner().run(["cfgbackup-no-such-command"])
        self.assertIn("command not found", str(ctx.exception))

    def test_timeout(self):
        write_stub(self.bin_dir, "slow", "#!/bin/sh\nsleep 5\n")
        with self.assertRaises(CommandError) as ctx:
            CommandRunner(timeout=0.2).run(["slow"])
        self.assertIn("timed out", str(ctx.exception))

    def test_exists(self):
        write_stub(self.bin_dir, "rsync", RSYNC_LATIN1_FAILURE)
        runner = CommandRunner()
        self.assertTrue(runner.exists("rsync"))
        self.assertFalse(runner.exists("cfgbackup-no-such-command"))


if __name__ == "__main__":
    unittest.main()
