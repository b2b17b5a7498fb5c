#!/usr/bin/env python3
"""
Setup script for cfgbackup utility

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

from setuptools import setup, find_namespace_packages

setup(
    name="cfgbackup",
    version="0.1.0",
    description="Best-effort backup of Linux configuration files and system settings",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cfgbackup", "cfgbackup.*"]),
    entry_points={
        "console_scripts": [
            "cfgbackup=cfgbackup.__main__:main",
        ],
    },
    install_requires=[
        "distro>=1.5.0",  # For distribution detection in the run manifest
        "tqdm>=4.60.0",   # For progress bars
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Archiving :: Backup",
        "Topic :: System :: Systems Administration",
    ],
)
