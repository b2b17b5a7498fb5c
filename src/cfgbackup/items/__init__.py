"""
Backup items module for cfgbackup.

This module provides the item types, the enumerator and the built-in
profile lists.
"""

from .base import BackupItem, ItemKind, ItemResult, CollectorResult, Outcome
from .enumerator import ItemEnumerator

__all__ = [
    'BackupItem',
    'ItemKind',
    'ItemResult',
    'CollectorResult',
    'Outcome',
    'ItemEnumerator',
]
