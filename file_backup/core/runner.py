"""Backup run orchestration."""

import os
import logging
from typing import Callable, Optional

from .copier import copy_file
from .errors import CopyError, NoMatchingFileError
from .models import BackupConfig, CopiedFile, RunResult
from .walker import DirectoryWalker, ensure_backup_directory, ensure_source_directory
from ..utils.formatters import format_file_count, format_file_size


class BackupRunner:
    """Runs one validate, walk, copy and report pass over a source tree."""

    def __init__(self, config: BackupConfig,
                 copier: Callable[[str, str], int] = copy_file,
                 walker: Optional[DirectoryWalker] = None):
        """Initialize backup runner.

        Args:
            config: Run configuration.
            copier: Function copying one file, returning bytes written.
            walker: Directory walker, a default one is created if omitted.
        """
        self.config = config
        self.copier = copier
        self.walker = walker or DirectoryWalker()
        self.logger = logging.getLogger(__name__)

    def run(self) -> RunResult:
        """Back up every selected file into the backup directory.

        Returns:
            RunResult describing the copied files.

        Raises:
            BackupError: If validation, the walk or a copy fails, or if a
                filter is active and nothing matched it.
        """
        config = self.config
        file_filter = config.filter

        ensure_source_directory(config.source_dir)
        ensure_backup_directory(config.backup_dir, config.dir_mode)

        result = RunResult()
        for path in self.walker.select(config.source_dir, file_filter):
            name = os.path.basename(path)
            destination = os.path.join(config.backup_dir, name)

            try:
                size = self.copier(path, destination)
            except CopyError as e:
                self.logger.error(f"Error backing up {name}: {e}")
                raise

            self.logger.info(f"Copied: {path} to {destination}")
            result.copied.append(CopiedFile(source=path, destination=destination, size=size))

        self.logger.info(format_file_count(result.files_backed_up))
        self.logger.debug(f"Wrote {format_file_size(result.bytes_copied)} to {config.backup_dir}")

        if result.files_backed_up == 0 and file_filter.is_active:
            raise NoMatchingFileError(file_filter.describe(), config.source_dir)

        return result
