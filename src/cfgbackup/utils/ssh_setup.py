#!/usr/bin/env python3
"""
Interactive SSH key setup wizard

Generates a key pair with ssh-keygen, secures the files, and optionally adds a
host entry to ~/.ssh/config and loads the key into ssh-agent.

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
import re
import socket
import getpass
import logging
from typing import Dict, List, Optional

from .commands import CommandRunner
from ..errors import BackupError, CommandError

logger = logging.getLogger(__name__)

REQUIRED_COMMANDS = ('ssh-keygen', 'ssh-agent', 'ssh-add')
DEFAULT_KEY_TYPE = 'ed25519'
RSA_KEY_BITS = 4096

# Tried in order; the first one on PATH is used
CLIPBOARD_COMMANDS = (
    ['xclip', '-selection', 'clipboard'],
    ['xsel', '--clipboard'],
    ['pbcopy'],
)

# Matches "SSH_AUTH_SOCK=/tmp/...; export SSH_AUTH_SOCK;" from ssh-agent -s
AGENT_VAR_RE = re.compile(r'^(SSH_AUTH_SOCK|SSH_AGENT_PID)=([^;]+);', re.MULTILINE)


class SetupAborted(BackupError):
    """The user declined to continue or gave inconsistent answers"""


class SshKeySetupWizard:
    """Interactive CLI wizard for creating an SSH key pair"""

    def __init__(self, runner: Optional[CommandRunner] = None, ssh_dir: Optional[str] = None):
        self.runner = runner or CommandRunner()
        self.ssh_dir = ssh_dir or os.path.expanduser("~/.ssh")
        self.key_type = DEFAULT_KEY_TYPE
        self.key_path = ""
        self.comment = ""
        self.passphrase = ""

    def _get_input(self, prompt: str, default: Optional[str] = None) -> str:
        """Get user input with prompt and optional default value"""
        if default is not None:
            full_prompt = f"{prompt} [{default}]: "
        else:
            full_prompt = f"{prompt}: "

        user_input = input(full_prompt).strip()

        if not user_input and default is not None:
            return default
        return user_input

    def _get_yes_no(self, prompt: str, default: bool = False) -> bool:
        """Get yes/no input with prompt"""
        default_str = "yes" if default else "no"

        while True:
            user_input = input(f"{prompt} (yes/no) [{default_str}]: ").strip().lower()

            if not user_input:
                return default

            if user_input in ["y", "yes"]:
                return True
            elif user_input in ["n", "no"]:
                return False
            else:
                print("Error: Please enter 'yes' or 'no'.")

    def _print_header(self, title: str) -> None:
        print("\n" + "=" * 40)
        print(f"  {title}")
        print("=" * 40 + "\n")

    def check_prerequisites(self) -> None:
        missing = [cmd for cmd in REQUIRED_COMMANDS if not self.runner.exists(cmd)]
        if missing:
            raise SetupAborted(f"{', '.join(missing)} not installed. Please install OpenSSH first.")
        logger.info("All prerequisites met")

    def setup_ssh_directory(self) -> None:
        """Create ~/.ssh and restrict it to the owner"""
        os.makedirs(self.ssh_dir, exist_ok=True)
        os.chmod(self.ssh_dir, 0o700)
        logger.info(f"Secured SSH directory permissions (700): {self.ssh_dir}")

    def ask_key_options(self) -> None:
        """Ask for key type, comment, file name and passphrase

        Raises:
            SetupAborted: If an existing key should not be overwritten or the
                          passphrases do not match
        """
        self._print_header("SSH Key Generation Setup")
        print("Select key type:")
        print("1) ED25519 (recommended)")
        print(f"2) RSA {RSA_KEY_BITS} (compatible with older systems)")
        choice = self._get_input("Choice", default="1")
        self.key_type = 'rsa' if choice == "2" else DEFAULT_KEY_TYPE

        default_comment = f"{getpass.getuser()}@{socket.gethostname()}"
        self.comment = self._get_input("Enter your email (for key comment)", default=default_comment)

        filename = self._get_input("Enter key filename", default=f"id_{self.key_type}")
        self.key_path = os.path.join(self.ssh_dir, filename)

        if os.path.exists(self.key_path):
            print(f"Warning: Key file {self.key_path} already exists!")
            if not self._get_yes_no("Overwrite?", default=False):
                raise SetupAborted("Aborted by user")

        print("\nA passphrase adds an extra layer of security to your private key.")
        self.passphrase = getpass.getpass("Enter passphrase (empty for no passphrase): ")
        if self.passphrase:
            confirm = getpass.getpass("Confirm passphrase: ")
            if confirm != self.passphrase:
                raise SetupAborted("Passphrases do not match!")

    def keygen_command(self) -> list:
        cmd = ['ssh-keygen', '-t', self.key_type]
        if self.key_type == 'rsa':
            cmd.extend(['-b', str(RSA_KEY_BITS)])
        cmd.extend(['-C', self.comment, '-f', self.key_path, '-N', self.passphrase])
        return cmd

    def generate_key(self) -> None:
        """Run ssh-keygen and fix key file permissions"""
        if os.path.exists(self.key_path):
            # ssh-keygen asks again before overwriting; the user already agreed
            os.remove(self.key_path)
            if os.path.exists(self.key_path + ".pub"):
                os.remove(self.key_path + ".pub")

        self.runner.run(self.keygen_command())
        os.chmod(self.key_path, 0o600)
        os.chmod(self.key_path + ".pub", 0o644)
        print("SSH key pair generated successfully")
        print(f"Private key: {self.key_path}")
        print(f"Public key: {self.key_path}.pub")

    def host_entry(self, alias: str, hostname: str, user: str, port: str) -> str:
        return (
            f"\nHost {alias}\n"
            f"    HostName {hostname}\n"
            f"    User {user}\n"
            f"    Port {port}\n"
            f"    IdentityFile {self.key_path}\n"
            f"    IdentitiesOnly yes\n"
        )

    def configure_ssh_config(self) -> bool:
        """Optionally append a Host block for the new key to ~/.ssh/config"""
        if not self._get_yes_no("\nWould you like to add this key to an SSH config entry?", default=False):
            return False

        alias = self._get_input("Enter host alias (e.g., github, myserver)")
        hostname = self._get_input("Enter hostname/IP")
        user = self._get_input("Enter username")
        port = self._get_input("Enter port", default="22")

        config_file = os.path.join(self.ssh_dir, "config")
        with open(config_file, 'a') as f:
            f.write(self.host_entry(alias, hostname, user, port))
        os.chmod(config_file, 0o600)
        print(f"Added configuration for host: {alias}")
        return True

    def _agent_environment(self) -> Dict[str, str]:
        if os.environ.get('SSH_AUTH_SOCK'):
            return {}
        logger.info("Starting ssh-agent...")
        result = self.runner.run(['ssh-agent', '-s'])
        return dict(AGENT_VAR_RE.findall(result.stdout))

    def setup_ssh_agent(self) -> bool:
        """Optionally load the key into ssh-agent, starting one if needed"""
        if not self._get_yes_no("\nWould you like to add the key to ssh-agent?", default=True):
            return False

        try:
            agent_env = self._agent_environment()
            os.environ.update(agent_env)
            if self.passphrase:
                print("Please enter your passphrase when prompted:")
            self.runner.run(['ssh-add', self.key_path], capture=False)
        except CommandError as e:
            logger.warning(f"Could not add key to ssh-agent: {e}")
            return False

        print("Key added to ssh-agent")
        if agent_env:
            print("To use this agent in your shell, run:")
            for name, value in agent_env.items():
                print(f"    export {name}={value}")
        return True

    def show_public_key(self) -> None:
        with open(self.key_path + ".pub") as f:
            public_key = f.read().strip()
        print("\n=== Your Public Key ===\n")
        print(public_key)
        print("\nCopy this public key to add to remote servers or services\n")

    def clipboard_command(self) -> Optional[List[str]]:
        for cmd in CLIPBOARD_COMMANDS:
            if self.runner.exists(cmd[0]):
                return cmd
        return None

    def copy_to_clipboard(self) -> bool:
        """Optionally copy the public key with the first clipboard tool found"""
        cmd = self.clipboard_command()
        if cmd is None:
            return False
        if not self._get_yes_no("Copy public key to clipboard?", default=False):
            return False

        with open(self.key_path + ".pub") as f:
            public_key = f.read()
        try:
            # xclip keeps a child alive to own the selection, so output is not captured
            self.runner.run(cmd, input=public_key, capture=False)
        except CommandError as e:
            logger.warning(f"Could not copy public key to clipboard: {e}")
            return False
        print("Public key copied to clipboard")
        return True

    def show_next_steps(self) -> None:
        print("=== Next Steps ===\n")
        print("1. Copy your public key to remote servers:")
        print(f"   ssh-copy-id -i {self.key_path}.pub user@hostname\n")
        print("2. Or manually append to remote ~/.ssh/authorized_keys:")
        print(f"   cat {self.key_path}.pub | ssh user@hostname 'cat >> ~/.ssh/authorized_keys'\n")
        print("3. For GitHub/GitLab, add the public key to your account settings\n")
        print("4. Test your connection:")
        print(f"   ssh -i {self.key_path} user@hostname\n")
        print("SSH key setup complete!")

    def run_wizard(self) -> str:
        """Run the interactive setup wizard

        Returns:
            Path of the generated private key

        Raises:
            SetupAborted: If the user aborts or prerequisites are missing
            CommandError: If ssh-keygen fails
        """
        self._print_header("SSH Key Setup")
        self.check_prerequisites()
        self.setup_ssh_directory()
        self.ask_key_options()
        self.generate_key()
        self.configure_ssh_config()
        self.setup_ssh_agent()
        self.show_public_key()
        self.copy_to_clipboard()
        self.show_next_steps()
        return self.key_path
