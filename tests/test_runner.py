"""Tests for the BackupRunner class."""

import logging
import os

import pytest

from file_backup.core.errors import (
    DirectoryCreateError,
    FileCopyError,
    FilePermissionError,
    InvalidDirectoryError,
    NoMatchingFileError,
)
from file_backup.core.models import BackupConfig
from file_backup.core.runner import BackupRunner


def make_runner(source_dir, backup_dir, **kwargs):
    config = BackupConfig(source_dir=str(source_dir), backup_dir=str(backup_dir), **kwargs)
    return BackupRunner(config)


class TestBackupRunner:
    """Tests for BackupRunner."""

    def test_copies_all_files_flat(self, source_dir, backup_dir):
        """Test every file lands in the backup directory by base name."""
        (source_dir / "a.txt").write_text("hello")
        (source_dir / "sub" / "deeper").mkdir(parents=True)
        (source_dir / "sub" / "b.pdf").write_bytes(b"%PDF")
        (source_dir / "sub" / "deeper" / "c.csv").write_text("1,2")

        result = make_runner(source_dir, backup_dir).run()

        assert result.files_backed_up == 3
        assert sorted(os.listdir(backup_dir)) == ["a.txt", "b.pdf", "c.csv"]
        assert (backup_dir / "a.txt").read_text() == "hello"
        assert (backup_dir / "b.pdf").read_bytes() == b"%PDF"
        assert (backup_dir / "c.csv").read_text() == "1,2"
        assert result.bytes_copied == 5 + 4 + 3

    def test_type_filter_scenario(self, source_dir, backup_dir):
        """Test --type .txt copies only the text file."""
        (source_dir / "a.txt").write_text("hello")
        (source_dir / "b.pdf").write_bytes(b"%PDF")

        result = make_runner(source_dir, backup_dir, type_filter=".txt").run()

        assert result.files_backed_up == 1
        assert os.listdir(backup_dir) == ["a.txt"]
        assert (backup_dir / "a.txt").read_text() == "hello"

    def test_file_filter(self, source_dir, backup_dir):
        (source_dir / "a.txt").write_text("hello")
        (source_dir / "b.txt").write_text("other")

        result = make_runner(source_dir, backup_dir, file_filter="b.txt").run()

        assert result.files_backed_up == 1
        assert os.listdir(backup_dir) == ["b.txt"]

    def test_empty_source_without_filter_succeeds(self, source_dir, backup_dir, caplog):
        """Test an empty tree is a zero-count success."""
        caplog.set_level(logging.INFO)

        result = make_runner(source_dir, backup_dir).run()

        assert result.files_backed_up == 0
        assert backup_dir.is_dir()
        assert "0 file(s) backed up." in caplog.text

    def test_name_filter_without_match(self, source_dir, backup_dir, caplog):
        """Test an unmatched name filter fails the run after reporting zero."""
        caplog.set_level(logging.INFO)
        (source_dir / "a.txt").write_text("hello")

        with pytest.raises(NoMatchingFileError) as exc_info:
            make_runner(source_dir, backup_dir, file_filter="missing.txt").run()

        assert exc_info.value.files_backed_up == 0
        assert str(exc_info.value) == f"no file matching the filter missing.txt found in {source_dir}"
        assert os.listdir(backup_dir) == []
        assert "0 file(s) backed up." in caplog.text

    def test_type_filter_without_match(self, source_dir, backup_dir):
        (source_dir / "a.txt").write_text("hello")

        with pytest.raises(NoMatchingFileError) as exc_info:
            make_runner(source_dir, backup_dir, type_filter=".pdf").run()

        assert exc_info.value.file_filter == ".pdf"

    def test_missing_source(self, tmp_path, backup_dir):
        """Test the backup directory is not created when the source is invalid."""
        with pytest.raises(InvalidDirectoryError):
            make_runner(tmp_path / "nope", backup_dir).run()

        assert not backup_dir.exists()

    def test_backup_directory_cannot_be_created(self, source_dir, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(DirectoryCreateError):
            make_runner(source_dir, blocker / "backup").run()

    def test_unreadable_file_is_not_copied(self, source_dir, backup_dir):
        """Test a file without owner-read raises a permission error."""
        secret = source_dir / "secret.txt"
        secret.write_text("hidden")
        os.chmod(secret, 0o200)

        try:
            with pytest.raises(FilePermissionError):
                make_runner(source_dir, backup_dir).run()
        finally:
            os.chmod(secret, 0o600)

        assert not (backup_dir / "secret.txt").exists()

    def test_first_copy_failure_aborts_walk(self, source_dir, backup_dir, caplog):
        """Test files after a failed copy are not attempted."""
        caplog.set_level(logging.INFO)
        for name in ["a.txt", "b.txt", "c.txt"]:
            (source_dir / name).write_text(name)

        attempted = []

        def failing_copier(src, dst):
            attempted.append(os.path.basename(src))
            if src.endswith("b.txt"):
                raise FileCopyError(src, dst, OSError(28, "No space left on device"))
            return 1

        config = BackupConfig(source_dir=str(source_dir), backup_dir=str(backup_dir))
        with pytest.raises(FileCopyError):
            BackupRunner(config, copier=failing_copier).run()

        assert attempted == ["a.txt", "b.txt"]
        assert "Error backing up b.txt" in caplog.text

    def test_rerun_is_idempotent_and_overwrites(self, source_dir, backup_dir):
        """Test changed content replaces the previous backup copy."""
        src = source_dir / "a.txt"
        src.write_text("v1")
        runner = make_runner(source_dir, backup_dir)

        runner.run()
        first = sorted(os.listdir(backup_dir))
        runner.run()
        assert sorted(os.listdir(backup_dir)) == first
        assert (backup_dir / "a.txt").read_text() == "v1"

        src.write_text("v2")
        runner.run()
        assert (backup_dir / "a.txt").read_text() == "v2"

    def test_same_name_collision_last_wins(self, source_dir, backup_dir):
        """Test colliding base names leave exactly one copy, the last visited."""
        (source_dir / "dir1").mkdir()
        (source_dir / "dir2").mkdir()
        (source_dir / "dir1" / "note.txt").write_text("from dir1")
        (source_dir / "dir2" / "note.txt").write_text("from dir2")

        result = make_runner(source_dir, backup_dir).run()

        assert result.files_backed_up == 2
        assert os.listdir(backup_dir) == ["note.txt"]
        assert (backup_dir / "note.txt").read_text() == "from dir2"

    def test_logs_copied_lines(self, source_dir, backup_dir, caplog):
        caplog.set_level(logging.INFO)
        (source_dir / "a.txt").write_text("hello")

        make_runner(source_dir, backup_dir).run()

        expected = f"Copied: {source_dir / 'a.txt'} to {backup_dir / 'a.txt'}"
        assert expected in caplog.text
        assert "1 file(s) backed up." in caplog.text
