"""Utility modules for file backup."""

from .formatters import format_file_size, format_date, format_file_count

__all__ = ["format_file_size", "format_date", "format_file_count"]
