#!/usr/bin/env python3
"""
Command-line interface for cfgbackup

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

import sys
import json
import argparse
import textwrap
import logging
from typing import Any, Dict, List, Optional

from cfgbackup import __version__
from cfgbackup.errors import BackupError
from cfgbackup.items.defaults import PROFILES
from cfgbackup.main import BackupOrchestrator, configure_logging
from cfgbackup.utils.config import ARCHIVE_FORMATS, KEY_ALIASES, ConfigStore, parse_value
from cfgbackup.utils.ssh_setup import SshKeySetupWizard
from cfgbackup.utils.tokens import generate_token, u32le

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def setup_argparse() -> argparse.ArgumentParser:
    """Set up command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="cfgbackup",
        description="cfgbackup - Back up Linux configuration files and system settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Examples:
              cfgbackup                           # Back up with the saved configuration
              cfgbackup backup --destination /mnt/usb --format gzip
              cfgbackup backup --profile ubuntu --no-archive
              cfgbackup config set archive_format '"gzip"'
              cfgbackup config show               # Display the effective configuration
              cfgbackup token                     # Print a random 64-character token
              cfgbackup u32le 258 | xxd           # Little-endian bytes of an integer
              cfgbackup ssh-setup                 # Create an SSH key pair interactively
        """)
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Write the log to this file')
    parser.add_argument('--config', dest='config_path',
                        help='Configuration file (defaults to ~/.config/cfgbackup/config.json)')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Backup command
    backup_parser = subparsers.add_parser('backup', help='Run a backup (default command)')
    backup_parser.add_argument('--destination', '-d', help='Directory receiving the backup')
    backup_parser.add_argument('--no-archive', action='store_true',
                               help='Leave a plain directory instead of a compressed archive')
    backup_parser.add_argument('--format', choices=sorted(ARCHIVE_FORMATS), dest='archive_format',
                               help='Archive compression format')
    backup_parser.add_argument('--name', dest='archive_base_name',
                               help='Base name of the backup directory and archive')
    backup_parser.add_argument('--profile', choices=sorted(PROFILES),
                               help='Default item lists to use')
    backup_parser.add_argument('--timeout', type=float,
                               help='Abandon any external command after this many seconds')
    backup_parser.add_argument('--no-open', action='store_true',
                               help='Do not open the result in a file browser')
    backup_parser.add_argument('--no-sudo-prompt', action='store_true',
                               help='Only use sudo if it works without a password')

    # Config command
    config_parser = subparsers.add_parser('config', help='Show or change the saved configuration')
    config_subparsers = config_parser.add_subparsers(dest='config_command', help='Configuration command')
    config_subparsers.add_parser('show', help='Display the effective configuration')
    config_subparsers.add_parser('path', help='Display the configuration file location')
    get_parser = config_subparsers.add_parser('get', help='Display one configuration value')
    get_parser.add_argument('key', help='Configuration key')
    set_parser = config_subparsers.add_parser('set', help='Change one configuration value')
    set_parser.add_argument('key', help='Configuration key')
    set_parser.add_argument('value', help='New value (JSON, or a plain string)')
    unset_parser = config_subparsers.add_parser('unset', help='Restore the default of one value')
    unset_parser.add_argument('key', help='Configuration key')

    # Companion utilities
    token_parser = subparsers.add_parser('token', help='Print a random base64 token')
    token_parser.add_argument('--length', type=int, default=64, help='Token length (default 64)')

    u32_parser = subparsers.add_parser('u32le', help='Write an unsigned 32-bit integer as little-endian bytes')
    u32_parser.add_argument('number', type=int, help='Integer between 0 and 4294967295')

    subparsers.add_parser('ssh-setup', help='Generate an SSH key pair interactively')

    return parser


def backup_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate backup flags into configuration overrides"""
    overrides: Dict[str, Any] = {
        "destination_directory": getattr(args, 'destination', None),
        "archive_format": getattr(args, 'archive_format', None),
        "archive_base_name": getattr(args, 'archive_base_name', None),
        "profile": getattr(args, 'profile', None),
        "command_timeout": getattr(args, 'timeout', None),
    }
    if getattr(args, 'no_archive', False):
        overrides["create_archive"] = False
    if getattr(args, 'no_open', False):
        overrides["open_file_browser"] = False
    if getattr(args, 'no_sudo_prompt', False):
        overrides["allow_sudo_prompt"] = False
    return overrides


def handle_backup(args: argparse.Namespace) -> int:
    """Handle backup command"""
    store = ConfigStore(args.config_path)
    config = store.build(backup_overrides(args))
    logger.info(f"Starting backup with profile '{config.profile}' into {config.destination_directory}")

    backup_run = BackupOrchestrator(config).run()

    print(f"Backup completed: {backup_run.output_path}")
    print(f"{backup_run.items_succeeded} of {backup_run.items_total} items backed up")
    return EXIT_OK


def handle_config(args: argparse.Namespace) -> int:
    """Handle config command"""
    store = ConfigStore(args.config_path)

    if args.config_command == 'path':
        print(store.path)
        return EXIT_OK

    if args.config_command == 'get':
        data = store.build().to_dict()
        key = KEY_ALIASES.get(args.key, args.key)
        if key not in data:
            print(f"Error: Unknown configuration key '{args.key}'")
            return 2
        print(json.dumps(data[key], indent=2))
        return EXIT_OK

    if args.config_command == 'set':
        store.set(args.key, parse_value(args.value))
        print(f"Set {args.key} in {store.path}")
        return EXIT_OK

    if args.config_command == 'unset':
        if store.unset(args.key):
            print(f"Removed {args.key} from {store.path}")
        else:
            print(f"{args.key} is not set in {store.path}")
        return EXIT_OK

    # 'show' and no subcommand
    print(json.dumps(store.build().to_dict(), indent=2))
    return EXIT_OK


def handle_token(args: argparse.Namespace) -> int:
    try:
        token = generate_token(args.length)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(token)
    return EXIT_OK


def handle_u32le(args: argparse.Namespace) -> int:
    try:
        data = u32le(args.number)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    sys.stdout.buffer.write(data)
    sys.stdout.flush()
    return EXIT_OK


def handle_ssh_setup(args: argparse.Namespace) -> int:
    SshKeySetupWizard().run_wizard()
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application"""
    parser = setup_argparse()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_file=args.log_file)

    handlers = {
        'config': handle_config,
        'token': handle_token,
        'u32le': handle_u32le,
        'ssh-setup': handle_ssh_setup,
    }
    handler = handlers.get(args.command, handle_backup)

    try:
        return handler(args)
    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return EXIT_INTERRUPTED
    except BackupError as e:
        logger.error(str(e))
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
