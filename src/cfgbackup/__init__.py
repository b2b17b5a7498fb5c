"""
cfgbackup - best-effort backup of Linux configuration files, dotfiles and
system settings.
"""

__version__ = "0.1.0"
