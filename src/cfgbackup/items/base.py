#!/usr/bin/env python3
"""
Backup item and result types

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
from enum import Enum
from typing import Dict, Any


class ItemKind(Enum):
    """How an item is transferred"""
    RSYNC_STYLE = "rsync"
    DIRECT_COPY = "copy"
    PRIVILEGED = "privileged"


class Outcome(Enum):
    """Result of backing up one item or running one collector"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED_MISSING = "skipped-missing"
    SKIPPED_NO_ELEVATION = "skipped"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


class BackupItem:
    """Represents a single path selected for backup"""

    __slots__ = ('source_path', 'kind', 'exists')

    def __init__(self, source_path: str, kind: ItemKind, exists: bool):
        object.__setattr__(self, 'source_path', source_path)
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'exists', exists)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        """Base name used in logs and as the copy target name"""
        return os.path.basename(self.source_path.rstrip(os.sep)) or self.source_path

    def exists_now(self) -> bool:
        """Re-check existence at transfer time"""
        return os.path.lexists(self.source_path)

    def __str__(self) -> str:
        return f"{self.source_path} [{self.kind.value}]"

    def __repr__(self) -> str:
        return f"BackupItem({self.source_path!r}, {self.kind}, exists={self.exists})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BackupItem):
            return False
        return self.source_path == other.source_path and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((self.source_path, self.kind))


class ItemResult:
    """Outcome of a single transfer or collector step"""

    def __init__(self, name: str, outcome: Outcome, message: str = ""):
        self.name = name
        self.outcome = outcome
        self.message = message

    @property
    def succeeded(self) -> bool:
        return self.outcome == Outcome.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'outcome': self.outcome.value,
            'message': self.message,
        }

    def __repr__(self) -> str:
        return f"ItemResult({self.name!r}, {self.outcome})"


# Collectors report through the same structure
CollectorResult = ItemResult
