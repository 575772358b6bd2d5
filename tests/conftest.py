"""Shared fixtures for file backup tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by the CLI's logging setup."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def source_dir(tmp_path):
    """An empty source directory."""
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def backup_dir(tmp_path):
    """A backup directory path that does not exist yet."""
    return tmp_path / "backup"
