"""Directory validation and tree walking for backup runs."""

import os
import logging
from typing import Iterator, Optional

from .errors import DirectoryCreateError, InvalidDirectoryError, PathAccessError
from .models import DEFAULT_DIR_MODE, FileFilter


def ensure_source_directory(path: str) -> None:
    """Require ``path`` to be an existing directory.

    A missing path and a path that is a file are reported the same way.

    Raises:
        InvalidDirectoryError: If the path is not a directory.
    """
    if not os.path.isdir(path):
        raise InvalidDirectoryError(path)


def ensure_backup_directory(path: str, mode: int = DEFAULT_DIR_MODE) -> None:
    """Create the backup directory and any missing parents.

    Raises:
        DirectoryCreateError: If the directory cannot be created.
    """
    try:
        os.makedirs(path, mode=mode, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(path, e) from e


class DirectoryWalker:
    """Walks a source tree and yields the regular files a filter selects."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def iter_files(self, source_dir: str) -> Iterator[str]:
        """Yield every regular file under ``source_dir``, recursively.

        Names are visited in sorted order so a given tree is always walked
        the same way. Directories are never yielded.

        Raises:
            PathAccessError: If a directory in the tree cannot be read. The
                walk stops at that point.
        """
        def _on_error(error: OSError):
            raise PathAccessError(error.filename or source_dir, error) from error

        for root, dirs, files in os.walk(source_dir, onerror=_on_error):
            dirs.sort()
            for name in sorted(files):
                path = os.path.join(root, name)
                if not os.path.isfile(path):
                    self.logger.debug(f"Skipping non-regular entry {path}")
                    continue
                yield path

    def select(self, source_dir: str, file_filter: Optional[FileFilter] = None) -> Iterator[str]:
        """Yield the files under ``source_dir`` whose base name matches ``file_filter``."""
        file_filter = file_filter or FileFilter()
        for path in self.iter_files(source_dir):
            if file_filter.matches(os.path.basename(path)):
                yield path
