#!/usr/bin/env python3
"""
Tests for configuration handling
"""

import os
import json
import unittest
import tempfile

from cfgbackup.errors import ConfigError
from cfgbackup.items.defaults import PROFILES
from cfgbackup.utils.config import BackupConfig, ConfigStore, parse_value


class TestBackupConfig(unittest.TestCase):
    """Test BackupConfig class"""

    def test_profile_defaults(self):
        config = BackupConfig.from_dict({})

        self.assertEqual(config.profile, "linux")
        self.assertTrue(config.create_archive)
        self.assertEqual(config.archive_format, "xz")
        self.assertEqual(config.archive_base_name, PROFILES["linux"]["archive_base_name"])
        self.assertEqual(config.destination_directory, os.path.expanduser("~"))
        self.assertTrue(config.rsync_style_items)

    def test_ubuntu_profile(self):
        config = BackupConfig.from_dict({"profile": "ubuntu"})
        self.assertEqual(config.archive_base_name, "ubuntu-config-backup")

    def test_default_lists_have_no_duplicates(self):
        for name, profile in PROFILES.items():
            for key in ("rsync_style_items", "direct_copy_items", "exclude_patterns", "privileged_items"):
                values = profile[key]
                self.assertEqual(len(values), len(set(values)), f"{name}.{key}")

    def test_camel_case_keys(self):
        config = BackupConfig.from_dict({"archiveFormat": "gz", "createArchive": True,
                                         "destinationDirectory": "/tmp/backups"})
        self.assertEqual(config.archive_format, "gz")
        self.assertEqual(config.archive_extension, "gz")
        self.assertEqual(config.tar_mode, "w:gz")
        self.assertEqual(config.destination_directory, "/tmp/backups")

    def test_gzip_alias(self):
        config = BackupConfig.from_dict({"archive_format": "gzip"})
        self.assertEqual(config.archive_extension, "gz")

    def test_unknown_format_rejected(self):
        """Test that an unrecognized archive format is fatal when archiving"""
        with self.assertRaises(ConfigError):
            BackupConfig.from_dict({"archive_format": "zip", "create_archive": True})

    def test_unknown_format_ignored_without_archive(self):
        config = BackupConfig.from_dict({"archive_format": "zip", "create_archive": False})
        self.assertFalse(config.create_archive)

    def test_lists_deduplicated(self):
        config = BackupConfig.from_dict({
            "exclude_patterns": ["*.log", ".cache", "*.log"],
            "rsync_style_items": [".config/a", ".config/a"],
        })
        self.assertEqual(config.exclude_patterns, ("*.log", ".cache"))
        self.assertEqual(config.rsync_style_items, (".config/a",))

    def test_invalid_values(self):
        invalid = [
            {"unknown_option": 1},
            {"profile": "gentoo"},
            {"create_archive": "yes"},
            {"exclude_patterns": "*.log"},
            {"direct_copy_items": [".bashrc", ""]},
            {"archive_base_name": "a/b"},
            {"archive_base_name": ""},
            {"command_timeout": 0},
            {"command_timeout": True},
        ]
        for data in invalid:
            with self.assertRaises(ConfigError, msg=str(data)):
                BackupConfig.from_dict(data)

    def test_destination_expanded(self):
        config = BackupConfig.from_dict({"destination_directory": "~/backups"})
        self.assertEqual(config.destination_directory, os.path.join(os.path.expanduser("~"), "backups"))

    def test_to_dict_round_trip(self):
        config = BackupConfig.from_dict({"archive_format": "gz", "command_timeout": 30})
        self.assertEqual(BackupConfig.from_dict(config.to_dict()), config)


class TestConfigStore(unittest.TestCase):
    """Test ConfigStore class"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "cfgbackup", "config.json")

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, data):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, "w") as f:
            f.write(data if isinstance(data, str) else json.dumps(data))

    def test_missing_file_uses_defaults(self):
        store = ConfigStore(self.path)
        self.assertEqual(store.config, {})
        self.assertEqual(store.build().profile, "linux")

    def test_overrides_take_precedence(self):
        self.write({"archiveFormat": "gz", "destination_directory": "/srv/backups"})
        store = ConfigStore(self.path)

        config = store.build({"destination_directory": "/mnt/usb", "profile": None})

        self.assertEqual(config.archive_format, "gz")
        self.assertEqual(config.destination_directory, "/mnt/usb")

    def test_invalid_json(self):
        self.write("{not json")
        with self.assertRaises(ConfigError):
            ConfigStore(self.path)

    def test_non_object_json(self):
        self.write([1, 2, 3])
        with self.assertRaises(ConfigError):
            ConfigStore(self.path)

    def test_set_persists_valid_values(self):
        store = ConfigStore(self.path)
        store.set("createArchive", False)

        self.assertFalse(ConfigStore(self.path).build().create_archive)
        with open(self.path) as f:
            self.assertEqual(json.load(f), {"create_archive": False})

    def test_set_rejects_invalid_values(self):
        store = ConfigStore(self.path)
        with self.assertRaises(ConfigError):
            store.set("archive_format", "zip")
        self.assertFalse(os.path.exists(self.path))

    def test_unset(self):
        self.write({"archive_format": "gz"})
        store = ConfigStore(self.path)

        self.assertTrue(store.unset("archive_format"))
        self.assertFalse(store.unset("archive_format"))
        self.assertEqual(ConfigStore(self.path).config, {})


class TestParseValue(unittest.TestCase):

    def test_json_and_plain_strings(self):
        self.assertEqual(parse_value("false"), False)
        self.assertEqual(parse_value("30"), 30)
        self.assertEqual(parse_value('["a", "b"]'), ["a", "b"])
        self.assertEqual(parse_value("gzip"), "gzip")


if __name__ == "__main__":
    unittest.main()
