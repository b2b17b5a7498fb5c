"""
Package sources module for cfgbackup.

This module provides probes for the package managers whose installed package
lists are captured during a backup.
"""

from .base import PackageSource
from .factory import PackageSourceFactory
from .apt import DpkgPackageSource, PpaListSource
from .pacman import PacmanPackageSource, PacmanDependencySource
from .dnf import DnfPackageSource, YumPackageSource
from .zypper import ZypperPackageSource
from .rpm import RpmPackageSource
from .snap import SnapPackageSource
from .flatpak import FlatpakPackageSource

__all__ = [
    'PackageSource',
    'PackageSourceFactory',
    'DpkgPackageSource',
    'PpaListSource',
    'PacmanPackageSource',
    'PacmanDependencySource',
    'DnfPackageSource',
    'YumPackageSource',
    'ZypperPackageSource',
    'RpmPackageSource',
    'SnapPackageSource',
    'FlatpakPackageSource',
]
