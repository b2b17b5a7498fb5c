#!/usr/bin/env python3
"""
Tests for exclude pattern handling
"""

import unittest

from cfgbackup.errors import ConfigError
from cfgbackup.transfer.exclusion import ExclusionMatcher


class TestExclusionMatcher(unittest.TestCase):
    """Test ExclusionMatcher class"""

    def test_rsync_args(self):
        matcher = ExclusionMatcher(["*.log", "Cache/"])
        self.assertEqual(matcher.rsync_args(),
                         ["--delete-excluded", "--exclude=*.log", "--exclude=Cache/"])

    def test_no_patterns_no_args(self):
        self.assertEqual(ExclusionMatcher([]).rsync_args(), [])

    def test_duplicates_removed_keeping_first(self):
        """Test de-duplication of repeated patterns"""
        matcher = ExclusionMatcher(["*.tmp", ".cache", "*.tmp", ".local/share/Trash/*", ".cache"])
        self.assertEqual(matcher.patterns, ("*.tmp", ".cache", ".local/share/Trash/*"))
        self.assertEqual(len(matcher), 3)

    def test_empty_pattern_rejected(self):
        with self.assertRaises(ConfigError):
            ExclusionMatcher(["*.log", "  "])

    def test_basename_pattern_matches_at_any_depth(self):
        matcher = ExclusionMatcher(["*.log"])
        self.assertTrue(matcher.is_excluded("app/debug.log"))
        self.assertTrue(matcher.is_excluded("app/deep/nested/x.log"))
        self.assertFalse(matcher.is_excluded("app/log.txt"))

    def test_star_does_not_cross_directories(self):
        matcher = ExclusionMatcher([".local/share/Trash/*"])
        self.assertTrue(matcher.is_excluded(".local/share/Trash/files"))
        self.assertTrue(matcher.is_excluded(".local/share/Trash/files/doc.txt"))
        self.assertFalse(matcher.is_excluded(".local/share/Other/files"))

    def test_double_star_crosses_directories(self):
        matcher = ExclusionMatcher(["app/**/cache.db"])
        self.assertTrue(matcher.is_excluded("app/a/b/cache.db"))

    def test_directory_only_pattern(self):
        """Test that a trailing slash only excludes directories"""
        matcher = ExclusionMatcher(["Cache/"])
        self.assertTrue(matcher.is_excluded("browser/Cache", is_dir=True))
        self.assertFalse(matcher.is_excluded("browser/Cache", is_dir=False))
        self.assertTrue(matcher.is_excluded("browser/Cache/data_0"))

    def test_anchored_pattern(self):
        matcher = ExclusionMatcher(["/build"])
        self.assertTrue(matcher.is_excluded("build/out.o"))
        self.assertFalse(matcher.is_excluded("src/build"))

    def test_character_class(self):
        matcher = ExclusionMatcher(["core.[0-9]*", "tmp[!a]"])
        self.assertTrue(matcher.is_excluded("core.1234"))
        self.assertFalse(matcher.is_excluded("core.dump"))
        self.assertTrue(matcher.is_excluded("tmpb"))
        self.assertFalse(matcher.is_excluded("tmpa"))


if __name__ == "__main__":
    unittest.main()
