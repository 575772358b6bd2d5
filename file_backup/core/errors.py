"""Exception hierarchy for file backup."""

from typing import Optional


class FileBackupError(Exception):
    """Base class for all file backup errors."""


class ConfigurationError(FileBackupError, ValueError):
    """Invalid or missing configuration, raised before any backup work starts."""


class BackupError(FileBackupError):
    """An error that aborts a single backup run."""


class InvalidDirectoryError(BackupError):
    """Source path does not exist or is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} is not a directory")


class DirectoryCreateError(BackupError):
    """Backup directory could not be created."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to create backup directory {path}: {cause}")


class PathAccessError(BackupError):
    """A path could not be inspected while walking or copying."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"error accessing path {path}: {cause}")


class NoMatchingFileError(BackupError):
    """The walk finished but the active filter selected nothing."""

    def __init__(self, file_filter: str, source_dir: str, files_backed_up: int = 0):
        self.file_filter = file_filter
        self.source_dir = source_dir
        self.files_backed_up = files_backed_up
        super().__init__(f"no file matching the filter {file_filter} found in {source_dir}")


class CopyError(BackupError):
    """Base class for failures while copying a single file."""

    def __init__(self, message: str, source: str, destination: str,
                 cause: Optional[OSError] = None):
        self.source = source
        self.destination = destination
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class FilePermissionError(CopyError):
    """Source file lacks the owner-read permission bit."""

    def __init__(self, source: str, destination: str):
        super().__init__(f"source file {source} does not have read permissions",
                         source, destination)


class FileOpenError(CopyError):
    """Source file could not be opened for reading."""

    def __init__(self, source: str, destination: str, cause: OSError):
        super().__init__(f"failed to open source file {source}", source, destination, cause)


class FileCreateError(CopyError):
    """Destination file could not be created."""

    def __init__(self, source: str, destination: str, cause: OSError):
        super().__init__(f"failed to create destination file {destination}",
                         source, destination, cause)


class FileCopyError(CopyError):
    """Streaming bytes from source to destination failed."""

    def __init__(self, source: str, destination: str, cause: OSError):
        super().__init__(f"error while copying file {source} to {destination}",
                         source, destination, cause)
