#!/usr/bin/env python3
"""
Tests for the SSH key setup wizard
"""

import os
import stat
import subprocess
import unittest
import tempfile
from unittest import mock

from cfgbackup.errors import CommandError
from cfgbackup.utils.commands import CommandRunner
from cfgbackup.utils.ssh_setup import SetupAborted, SshKeySetupWizard


class TestSshKeySetupWizard(unittest.TestCase):
    """Test SshKeySetupWizard class"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.ssh_dir = os.path.join(self.tmp.name, ".ssh")
        self.runner = mock.Mock(spec=CommandRunner)
        self.available = {"ssh-keygen", "ssh-agent", "ssh-add"}
        self.runner.exists.side_effect = lambda name: name in self.available
        self.runner.run.side_effect = self.fake_run
        self.commands = []

        for target in ("cfgbackup.utils.ssh_setup.getpass.getuser",
                       "cfgbackup.utils.ssh_setup.socket.gethostname"):
            patcher = mock.patch(target, return_value="tester")
            patcher.start()
            self.addCleanup(patcher.stop)
        stdout = mock.patch("builtins.print")
        stdout.start()
        self.addCleanup(stdout.stop)

    def tearDown(self):
        self.tmp.cleanup()

    def fake_run(self, cmd, **kwargs):
        self.commands.append(cmd)
        if cmd[0] == "ssh-keygen":
            key_path = cmd[cmd.index("-f") + 1]
            with open(key_path, "w") as f:
                f.write("PRIVATE KEY\n")
            with open(key_path + ".pub", "w") as f:
                f.write("ssh-ed25519 AAAA tester@tester\n")
        if cmd[:2] == ["ssh-agent", "-s"]:
            return subprocess.CompletedProcess(cmd, 0, (
                "SSH_AUTH_SOCK=/tmp/ssh-XYZ/agent.1; export SSH_AUTH_SOCK;\n"
                "SSH_AGENT_PID=4242; export SSH_AGENT_PID;\n"
                "echo Agent pid 4242;\n"), "")
        return subprocess.CompletedProcess(cmd, 0, "", "")

    def run_wizard(self, answers, passphrases=("",)):
        wizard = SshKeySetupWizard(self.runner, ssh_dir=self.ssh_dir)
        with mock.patch("builtins.input", side_effect=list(answers)), \
                mock.patch("cfgbackup.utils.ssh_setup.getpass.getpass", side_effect=list(passphrases)):
            return wizard.run_wizard()

    def mode(self, path):
        return stat.S_IMODE(os.stat(path).st_mode)

    def test_default_ed25519_key(self):
        """Test accepting every default"""
        key_path = self.run_wizard(["", "", "", "no", "no"])

        self.assertEqual(key_path, os.path.join(self.ssh_dir, "id_ed25519"))
        self.assertEqual(self.commands[0], [
            "ssh-keygen", "-t", "ed25519", "-C", "tester@tester", "-f", key_path, "-N", ""])
        self.assertEqual(self.mode(self.ssh_dir), 0o700)
        self.assertEqual(self.mode(key_path), 0o600)
        self.assertEqual(self.mode(key_path + ".pub"), 0o644)
        self.assertFalse(os.path.exists(os.path.join(self.ssh_dir, "config")))

    def test_rsa_key_with_config_entry(self):
        answers = ["2", "me@example.com", "work_key",
                   "yes", "github", "github.com", "git", "",
                   "no"]
        key_path = self.run_wizard(answers, passphrases=("s3cret", "s3cret"))

        keygen = self.commands[0]
        self.assertEqual(keygen[:5], ["ssh-keygen", "-t", "rsa", "-b", "4096"])
        self.assertEqual(keygen[-2:], ["-N", "s3cret"])
        config_file = os.path.join(self.ssh_dir, "config")
        with open(config_file) as f:
            content = f.read()
        self.assertIn("Host github\n", content)
        self.assertIn("    HostName github.com\n", content)
        self.assertIn("    Port 22\n", content)
        self.assertIn(f"    IdentityFile {key_path}\n", content)
        self.assertEqual(self.mode(config_file), 0o600)

    def test_declined_overwrite_aborts(self):
        os.makedirs(self.ssh_dir)
        with open(os.path.join(self.ssh_dir, "id_ed25519"), "w") as f:
            f.write("existing\n")

        with self.assertRaises(SetupAborted):
            self.run_wizard(["", "", "", "no"])

        with open(os.path.join(self.ssh_dir, "id_ed25519")) as f:
            self.assertEqual(f.read(), "existing\n")
        self.assertEqual(self.commands, [])

    def test_mismatched_passphrases_abort(self):
        with self.assertRaises(SetupAborted):
            self.run_wizard(["", "", ""], passphrases=("one", "two"))
        self.assertEqual(self.commands, [])

    def test_missing_prerequisites(self):
        self.runner.exists.side_effect = lambda name: name != "ssh-agent"
        with self.assertRaises(SetupAborted):
            self.run_wizard([])

    def test_agent_started_when_not_running(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            key_path = self.run_wizard(["", "", "", "no", "yes"])
            self.assertEqual(os.environ.get("SSH_AUTH_SOCK"), "/tmp/ssh-XYZ/agent.1")

        self.assertIn(["ssh-agent", "-s"], self.commands)
        self.runner.run.assert_called_with(["ssh-add", key_path], capture=False)

    def test_public_key_copied_with_first_clipboard_tool(self):
        self.available |= {"xsel", "pbcopy"}
        key_path = self.run_wizard(["", "", "", "no", "no", "yes"])

        self.runner.run.assert_called_with(
            ["xsel", "--clipboard"], input="ssh-ed25519 AAAA tester@tester\n", capture=False)
        self.assertEqual(key_path, os.path.join(self.ssh_dir, "id_ed25519"))

    def test_clipboard_copy_declined(self):
        self.available.add("xclip")
        self.run_wizard(["", "", "", "no", "no", ""])
        self.assertNotIn(["xclip", "-selection", "clipboard"], self.commands)

    def test_clipboard_failure_does_not_abort(self):
        self.available.add("pbcopy")

        def fake_run(cmd, **kwargs):
            if cmd == ["pbcopy"]:
                raise CommandError(cmd, "exited with status 1", returncode=1)
            return self.fake_run(cmd, **kwargs)

        self.runner.run.side_effect = fake_run
        key_path = self.run_wizard(["", "", "", "no", "no", "yes"])
        self.assertTrue(os.path.exists(key_path + ".pub"))

    def test_no_clipboard_tool_skips_prompt(self):
        wizard = SshKeySetupWizard(self.runner, ssh_dir=self.ssh_dir)
        self.assertIsNone(wizard.clipboard_command())
        with mock.patch("builtins.input") as prompt:
            self.assertFalse(wizard.copy_to_clipboard())
        prompt.assert_not_called()


if __name__ == "__main__":
    unittest.main()
