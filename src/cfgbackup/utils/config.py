#!/usr/bin/env python3
"""
Configuration module for cfgbackup

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
import logging
from typing import Dict, Any, Optional, List, NamedTuple, Tuple

from ..errors import ConfigError
from ..items.defaults import PROFILES, DEFAULT_PROFILE

# Configure logging
logger = logging.getLogger(__name__)

# Configuration file location
CONFIG_DIR = os.path.expanduser("~/.config/cfgbackup")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")

# Supported archive formats mapped to (file extension, tarfile write mode)
ARCHIVE_FORMATS = {
    "gzip": ("gz", "w:gz"),
    "gz": ("gz", "w:gz"),
    "xz": ("xz", "w:xz"),
}

LIST_KEYS = ("rsync_style_items", "direct_copy_items", "exclude_patterns", "privileged_items")
BOOL_KEYS = ("create_archive", "allow_sudo_prompt", "open_file_browser")

# camelCase spellings accepted in configuration files
KEY_ALIASES = {
    "destinationDirectory": "destination_directory",
    "createArchive": "create_archive",
    "archiveFormat": "archive_format",
    "archiveBaseName": "archive_base_name",
    "rsyncStyleItems": "rsync_style_items",
    "directCopyItems": "direct_copy_items",
    "excludePatterns": "exclude_patterns",
    "privilegedItems": "privileged_items",
    "commandTimeout": "command_timeout",
    "allowSudoPrompt": "allow_sudo_prompt",
    "openFileBrowser": "open_file_browser",
}


def _dedupe(values: List[str]) -> Tuple[str, ...]:
    """Remove duplicate entries, keeping the first occurrence"""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return tuple(result)


def normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Translate camelCase keys to their snake_case names"""
    return {KEY_ALIASES.get(key, key): value for key, value in data.items()}


class BackupConfig(NamedTuple):
    """Immutable settings for a single backup run"""

    destination_directory: str
    create_archive: bool
    archive_format: str
    archive_base_name: str
    rsync_style_items: Tuple[str, ...]
    direct_copy_items: Tuple[str, ...]
    exclude_patterns: Tuple[str, ...]
    privileged_items: Tuple[str, ...]
    profile: str = DEFAULT_PROFILE
    command_timeout: Optional[float] = None
    allow_sudo_prompt: bool = True
    open_file_browser: bool = True

    @property
    def archive_extension(self) -> str:
        return ARCHIVE_FORMATS[self.archive_format][0]

    @property
    def tar_mode(self) -> str:
        return ARCHIVE_FORMATS[self.archive_format][1]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BackupConfig':
        """Build a validated configuration from profile defaults plus overrides

        Args:
            data: Configuration values; missing keys fall back to the
                  defaults of the selected profile

        Raises:
            ConfigError: If any value is invalid
        """
        data = normalize_keys(data)

        unknown = set(data) - set(cls._fields)
        if unknown:
            raise ConfigError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")

        profile = data.get("profile") or DEFAULT_PROFILE
        if profile not in PROFILES:
            raise ConfigError(f"Unknown profile '{profile}'. Use one of: {', '.join(sorted(PROFILES))}")

        merged: Dict[str, Any] = {
            "destination_directory": "~",
            "create_archive": True,
            "archive_format": "xz",
        }
        merged.update(PROFILES[profile])
        merged.update({k: v for k, v in data.items() if v is not None})
        merged["profile"] = profile

        for key in BOOL_KEYS:
            if key in merged and not isinstance(merged[key], bool):
                raise ConfigError(f"'{key}' must be true or false, got {merged[key]!r}")

        for key in LIST_KEYS:
            values = merged[key]
            if isinstance(values, str) or not isinstance(values, (list, tuple)):
                raise ConfigError(f"'{key}' must be a list of strings")
            for value in values:
                if not isinstance(value, str) or not value.strip():
                    raise ConfigError(f"'{key}' contains an empty or non-string entry: {value!r}")
            merged[key] = _dedupe(list(values))

        archive_format = str(merged["archive_format"]).lower()
        if merged["create_archive"] and archive_format not in ARCHIVE_FORMATS:
            raise ConfigError(
                f"Invalid archive format '{merged['archive_format']}'. "
                f"Use one of: {', '.join(sorted(ARCHIVE_FORMATS))}"
            )
        merged["archive_format"] = archive_format

        name = merged["archive_base_name"]
        if not isinstance(name, str) or not name.strip() or os.sep in name:
            raise ConfigError(f"Invalid archive base name: {name!r}")

        destination = merged["destination_directory"]
        if not isinstance(destination, str) or not destination.strip():
            raise ConfigError("'destination_directory' must be a non-empty path")
        merged["destination_directory"] = os.path.abspath(os.path.expanduser(destination))

        timeout = merged.get("command_timeout")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError(f"'command_timeout' must be a positive number of seconds, got {timeout!r}")

        return cls(**merged)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        data = self._asdict()
        for key in LIST_KEYS:
            data[key] = list(data[key])
        return data

    def summary(self) -> Dict[str, Any]:
        """Short description of the configuration for the run manifest"""
        return {
            "profile": self.profile,
            "destination_directory": self.destination_directory,
            "create_archive": self.create_archive,
            "archive_format": self.archive_format,
            "archive_base_name": self.archive_base_name,
            "rsync_style_items": len(self.rsync_style_items),
            "direct_copy_items": len(self.direct_copy_items),
            "exclude_patterns": len(self.exclude_patterns),
            "privileged_items": len(self.privileged_items),
        }


class ConfigStore:
    """Persistent configuration overrides stored as JSON"""

    def __init__(self, path: Optional[str] = None):
        """Initialize the configuration store

        Args:
            path: Location of the JSON file, defaults to CONFIG_FILE
        """
        self.path = os.path.expanduser(path) if path else CONFIG_FILE
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration overrides from file"""
        if not os.path.exists(self.path):
            logger.debug(f"No configuration file at {self.path}, using profile defaults")
            return {}

        try:
            with open(self.path, 'r') as f:
                config = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise ConfigError(f"Error loading configuration from {self.path}: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration in {self.path} must be a JSON object")

        logger.info(f"Loaded configuration from {self.path}")
        return normalize_keys(config)

    def _save_config(self) -> None:
        """Save configuration to file"""
        try:
            os.makedirs(os.path.dirname(self.path), exist_ok=True)
            with open(self.path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except (IOError, OSError) as e:
            raise ConfigError(f"Error saving configuration to {self.path}: {e}")
        logger.info(f"Saved configuration to {self.path}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(KEY_ALIASES.get(key, key), default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value after validating the resulting configuration"""
        key = KEY_ALIASES.get(key, key)
        candidate = dict(self.config)
        candidate[key] = value
        BackupConfig.from_dict(candidate)
        self.config = candidate
        self._save_config()

    def unset(self, key: str) -> bool:
        """Remove an override so the profile default applies again"""
        key = KEY_ALIASES.get(key, key)
        if key not in self.config:
            return False
        del self.config[key]
        self._save_config()
        return True

    def build(self, overrides: Optional[Dict[str, Any]] = None) -> BackupConfig:
        """Resolve the effective configuration

        Args:
            overrides: Values taking precedence over the stored configuration,
                       typically from command-line flags
        """
        data = dict(self.config)
        if overrides:
            data.update(normalize_keys({k: v for k, v in overrides.items() if v is not None}))
        return BackupConfig.from_dict(data)


def parse_value(raw: str) -> Any:
    """Parse a command-line value as JSON, falling back to a plain string"""
    try:
        return json.loads(raw)
    except ValueError:
        return raw
