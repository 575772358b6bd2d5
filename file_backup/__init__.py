"""
File Backup - periodic filtered copies of a directory tree.

This package walks a source directory, copies the files selected by an
optional name or suffix filter into a flat backup directory, and repeats
on a fixed interval.
"""

__version__ = "1.0.0"

from .core.runner import BackupRunner
from .core.scheduler import BackupScheduler
from .core.models import BackupConfig

__all__ = ["BackupRunner", "BackupScheduler", "BackupConfig"]
