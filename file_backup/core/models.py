"""Data models for file backup runs."""

from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_DIR_MODE = 0o755


@dataclass(frozen=True)
class FileFilter:
    """Selects files by exact base name or by literal suffix."""
    name: Optional[str] = None
    suffix: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.name or self.suffix)

    def matches(self, file_name: str) -> bool:
        """Check a base name against the active filter."""
        if self.name and file_name != self.name:
            return False
        if self.suffix and not file_name.endswith(self.suffix):
            return False
        return True

    def describe(self) -> str:
        return self.name or self.suffix or ""


@dataclass(frozen=True)
class BackupConfig:
    """Run configuration, fixed at start-up."""
    source_dir: str
    backup_dir: str
    file_filter: Optional[str] = None
    type_filter: Optional[str] = None
    interval_seconds: int = 0
    dir_mode: int = DEFAULT_DIR_MODE

    @property
    def filter(self) -> FileFilter:
        return FileFilter(name=self.file_filter, suffix=self.type_filter)


@dataclass
class CopiedFile:
    """A file copied during a run."""
    source: str
    destination: str
    size: int


@dataclass
class RunResult:
    """Outcome of a successful backup run."""
    copied: List[CopiedFile] = field(default_factory=list)

    @property
    def files_backed_up(self) -> int:
        return len(self.copied)

    @property
    def bytes_copied(self) -> int:
        return sum(item.size for item in self.copied)
