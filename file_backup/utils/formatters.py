"""Formatting utilities for backup log lines."""

from datetime import datetime


RFC1123_FORMAT = '%a, %d %b %Y %H:%M:%S'


def format_file_size(size_bytes: int) -> str:
    """Format file size in human readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Human readable size string.
    """
    if size_bytes < 1024:
        return f"{size_bytes}B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes // 1024}KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes // (1024 * 1024)}MB"
    else:
        return f"{size_bytes // (1024 * 1024 * 1024)}GB"


def format_date(dt: datetime) -> str:
    """Format datetime RFC 1123 style, e.g. ``Mon, 02 Jan 2006 15:04:05 UTC``.

    Naive datetimes are rendered without a zone name.
    """
    text = dt.strftime(RFC1123_FORMAT)
    zone = dt.strftime('%Z')
    return f"{text} {zone}" if zone else text


def format_file_count(count: int) -> str:
    """Summary line for the number of files backed up in a run."""
    return f"{count} file(s) backed up."
