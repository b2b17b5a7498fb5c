#!/usr/bin/env python3
"""
Item enumeration: resolves configured paths into BackupItems

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
import glob
import logging
from typing import List, Iterable

from .base import BackupItem, ItemKind

logger = logging.getLogger(__name__)

GLOB_CHARS = ('*', '?', '[')


class ItemEnumerator:
    """Turns the three configured path lists into existing BackupItems"""

    def __init__(self, home_dir: str, rsync_items: Iterable[str], copy_items: Iterable[str],
                 privileged_items: Iterable[str]):
        self.home_dir = home_dir
        self.rsync_items = list(rsync_items)
        self.copy_items = list(copy_items)
        self.privileged_items = list(privileged_items)

    def _resolve(self, path: str, relative_to_home: bool) -> str:
        path = os.path.expanduser(path)
        if relative_to_home and not os.path.isabs(path):
            path = os.path.join(self.home_dir, path)
        return path

    def _expand(self, path: str) -> List[str]:
        """Expand glob entries; plain paths are returned unchanged"""
        if any(ch in path for ch in GLOB_CHARS):
            matches = sorted(glob.glob(path))
            return matches or [path]
        return [path]

    def resolve(self, paths: Iterable[str], kind: ItemKind) -> List[BackupItem]:
        """Resolve one list into items, in list order, recording existence"""
        relative_to_home = kind != ItemKind.PRIVILEGED
        items = []
        for entry in paths:
            for path in self._expand(self._resolve(entry, relative_to_home)):
                items.append(BackupItem(path, kind, os.path.lexists(path)))
        return items

    def enumerate(self, paths: Iterable[str], kind: ItemKind) -> List[BackupItem]:
        """Return only the items that currently exist

        Missing items are logged and left out.
        """
        present = []
        for item in self.resolve(paths, kind):
            if item.exists:
                present.append(item)
            else:
                logger.info(f"{item.source_path} not found, skipping.")
        return present

    def rsync_style(self, include_missing: bool = False) -> List[BackupItem]:
        if include_missing:
            return self.resolve(self.rsync_items, ItemKind.RSYNC_STYLE)
        return self.enumerate(self.rsync_items, ItemKind.RSYNC_STYLE)

    def direct_copy(self, include_missing: bool = False) -> List[BackupItem]:
        if include_missing:
            return self.resolve(self.copy_items, ItemKind.DIRECT_COPY)
        return self.enumerate(self.copy_items, ItemKind.DIRECT_COPY)

    def privileged(self, include_missing: bool = False) -> List[BackupItem]:
        if include_missing:
            return self.resolve(self.privileged_items, ItemKind.PRIVILEGED)
        return self.enumerate(self.privileged_items, ItemKind.PRIVILEGED)
