"""Core backup functionality."""

from .runner import BackupRunner
from .scheduler import BackupScheduler, SchedulerState
from .walker import DirectoryWalker
from .copier import copy_file
from .models import BackupConfig, FileFilter, CopiedFile, RunResult

__all__ = [
    "BackupRunner",
    "BackupScheduler",
    "SchedulerState",
    "DirectoryWalker",
    "copy_file",
    "BackupConfig",
    "FileFilter",
    "CopiedFile",
    "RunResult",
]
