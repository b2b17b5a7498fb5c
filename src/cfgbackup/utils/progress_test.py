#!/usr/bin/env python3
"""
Tests for progress tracking
"""

import unittest
from unittest import mock

from cfgbackup.utils.progress import OperationType, ProgressTracker


class TestProgressTracker(unittest.TestCase):
    """Test ProgressTracker class"""

    def test_context_manager_drives_tqdm(self):
        with mock.patch("cfgbackup.utils.progress.tqdm") as tqdm:
            with ProgressTracker(OperationType.RSYNC_ITEMS, total=2, desc="Home") as progress:
                progress.update(status=".bashrc")
                progress.update(status=".vimrc")

        bar = tqdm.return_value
        self.assertEqual(tqdm.call_args.kwargs["total"], 2)
        self.assertEqual(tqdm.call_args.kwargs["desc"], "Home")
        self.assertEqual(bar.update.call_count, 2)
        bar.set_postfix_str.assert_called_with(".vimrc", refresh=False)
        bar.close.assert_called_once_with()
        self.assertEqual(progress.current, 2)
        self.assertIsNone(progress.pbar)

    def test_default_description(self):
        progress = ProgressTracker(OperationType.COLLECTORS)
        self.assertEqual(progress.operation_type, "collectors")
        self.assertEqual(progress.desc, "Processing collectors")

    def test_update_before_start(self):
        progress = ProgressTracker("general", total=1)
        progress.update()
        self.assertEqual(progress.current, 1)


if __name__ == "__main__":
    unittest.main()
