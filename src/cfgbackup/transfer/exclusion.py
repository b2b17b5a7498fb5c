#!/usr/bin/env python3
"""
Exclude pattern handling for filtered tree transfers

Patterns follow rsync's rules: a pattern without a slash matches the last
component of a path, a pattern with a slash is matched against the end of the
full relative path, '*' and '?' stop at '/', '**' crosses it, and a trailing
slash only matches directories. An excluded directory excludes everything
below it.

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

import re
import logging
from typing import Iterable, List, Pattern, Tuple

from ..errors import ConfigError

logger = logging.getLogger(__name__)


def _translate(pattern: str) -> str:
    """Translate an rsync glob into a regular expression body"""
    result = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == '*':
            if i + 1 < n and pattern[i + 1] == '*':
                result.append('.*')
                i += 2
                continue
            result.append('[^/]*')
        elif ch == '?':
            result.append('[^/]')
        elif ch == '[':
            end = pattern.find(']', i + 1)
            if end == -1:
                result.append(re.escape(ch))
            else:
                body = pattern[i + 1:end]
                if body.startswith('!'):
                    body = '^' + body[1:]
                result.append('[' + body.replace('\\', '\\\\') + ']')
                i = end
        else:
            result.append(re.escape(ch))
        i += 1
    return ''.join(result)


class ExclusionMatcher:
    """Global set of exclude patterns applied to filtered transfers"""

    def __init__(self, patterns: Iterable[str]):
        self.patterns: Tuple[str, ...] = ()
        self._compiled: List[Tuple[Pattern, bool]] = []

        seen = set()
        ordered = []
        for pattern in patterns:
            if not isinstance(pattern, str) or not pattern.strip():
                raise ConfigError(f"Invalid exclude pattern: {pattern!r}")
            if pattern in seen:
                logger.debug(f"Ignoring duplicate exclude pattern: {pattern}")
                continue
            seen.add(pattern)
            ordered.append(pattern)
            self._compiled.append(self._compile(pattern))
        self.patterns = tuple(ordered)

    @staticmethod
    def _compile(pattern: str) -> Tuple[Pattern, bool]:
        dir_only = pattern.endswith('/')
        body = pattern.rstrip('/')
        anchored = body.startswith('/')
        body = body.lstrip('/')

        # Unanchored patterns may match at any directory boundary
        regex = ('^' if anchored else '(?:^|/)') + _translate(body) + '$'
        return re.compile(regex), dir_only

    def rsync_args(self) -> List[str]:
        """Arguments instructing rsync to skip and prune excluded entries

        --delete-excluded also removes matching entries left in the
        destination by an earlier run.
        """
        if not self.patterns:
            return []
        args = ['--delete-excluded']
        args.extend(f'--exclude={pattern}' for pattern in self.patterns)
        return args

    def _matches_entry(self, path: str, is_dir: bool) -> bool:
        for regex, dir_only in self._compiled:
            if dir_only and not is_dir:
                continue
            if regex.search(path):
                return True
        return False

    def is_excluded(self, relative_path: str, is_dir: bool = False) -> bool:
        """Check whether a path relative to the transfer root would be skipped

        Args:
            relative_path: Path relative to the transfer root, '/'-separated
            is_dir: Whether the final component is a directory
        """
        parts = [p for p in relative_path.strip('/').split('/') if p]
        for i in range(1, len(parts) + 1):
            prefix = '/'.join(parts[:i])
            entry_is_dir = is_dir if i == len(parts) else True
            if self._matches_entry(prefix, entry_is_dir):
                return True
        return False

    def __len__(self) -> int:
        return len(self.patterns)
