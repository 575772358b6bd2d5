"""Single-file copy primitive."""

import errno
import os
import shutil
import stat

from .errors import (
    FileCopyError,
    FileCreateError,
    FileOpenError,
    FilePermissionError,
    PathAccessError,
)


def has_read_permission(mode: int) -> bool:
    """Check the owner-read bit of a file mode."""
    return bool(mode & stat.S_IRUSR)


def _is_same_file(source: str, destination: str) -> bool:
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False


def copy_file(source: str, destination: str) -> int:
    """Copy the bytes of ``source`` into ``destination``.

    The destination is created or truncated. Nothing is renamed into place,
    so a failure part way through can leave a partial destination file.

    Args:
        source: Path of a regular file to read.
        destination: Path to write.

    Returns:
        Number of bytes written.

    Raises:
        PathAccessError: If the source cannot be stat'ed.
        FilePermissionError: If the source lacks the owner-read bit.
        FileOpenError: If the source cannot be opened.
        FileCreateError: If the destination cannot be created.
        FileCopyError: If source and destination are the same file, or if
            streaming the contents fails.
    """
    try:
        info = os.stat(source)
    except OSError as e:
        raise PathAccessError(source, e) from e

    if not has_read_permission(info.st_mode):
        raise FilePermissionError(source, destination)

    if _is_same_file(source, destination):
        raise FileCopyError(source, destination,
                            OSError(errno.EINVAL, "source and destination are the same file"))

    try:
        in_file = open(source, 'rb')
    except OSError as e:
        raise FileOpenError(source, destination, e) from e

    with in_file:
        try:
            out_file = open(destination, 'wb')
        except OSError as e:
            raise FileCreateError(source, destination, e) from e

        # close() flushes and can fail too
        try:
            with out_file:
                shutil.copyfileobj(in_file, out_file)
                size = out_file.tell()
        except OSError as e:
            raise FileCopyError(source, destination, e) from e

    return size
