"""
Transfer module for cfgbackup.

This module provides the exclusion matcher, the transfer executor and the
privileged transfer gate.
"""

from .exclusion import ExclusionMatcher
from .executor import TransferExecutor, ensure_directory
from .privileged import PrivilegedTransferGate, touch_marker

__all__ = [
    'ExclusionMatcher',
    'TransferExecutor',
    'ensure_directory',
    'PrivilegedTransferGate',
    'touch_marker',
]
