"""Unit tests for configuration file I/O."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from injectctl.core.errors import InjectorError, StorageError
from injectctl.core.storage import read_config, write_config


class TestReadConfig:
    """Tests for read_config function."""

    def test_reads_content(self, tmp_path: Path) -> None:
        """read_config returns the file content."""
        path = tmp_path / "config.php"
        path.write_text("<?php\nreturn [];\n")

        assert read_config(path) == "<?php\nreturn [];\n"

    def test_preserves_line_endings(self, tmp_path: Path) -> None:
        """read_config does not translate CRLF line endings."""
        path = tmp_path / "config.php"
        path.write_bytes(b"return [\r\n];\r\n")

        assert read_config(path) == "return [\r\n];\r\n"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """read_config raises StorageError for a missing file."""
        with pytest.raises(StorageError, match="not found"):
            read_config(tmp_path / "missing.php")

    def test_storage_error_is_injector_error(self, tmp_path: Path) -> None:
        """StorageError is part of the InjectorError hierarchy."""
        with pytest.raises(InjectorError):
            read_config(tmp_path / "missing.php")


class TestWriteConfig:
    """Tests for write_config function."""

    def test_writes_content(self, tmp_path: Path) -> None:
        """write_config replaces the file content."""
        path = tmp_path / "config.php"
        path.write_text("old")

        result = write_config(path, "new")

        assert result == path
        assert path.read_text() == "new"

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """write_config removes its temporary file."""
        path = tmp_path / "config.php"

        write_config(path, "content")

        assert [p.name for p in tmp_path.iterdir()] == ["config.php"]

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """write_config raises StorageError when the directory is missing."""
        with pytest.raises(StorageError):
            write_config(tmp_path / "missing" / "config.php", "content")

    def test_failed_replace_cleans_up(self, tmp_path: Path) -> None:
        """A failed rename keeps the original file and removes the temp file."""
        path = tmp_path / "config.php"
        path.write_text("old")

        with (
            patch("injectctl.core.storage.os.replace", side_effect=OSError("disk full")),
            pytest.raises(StorageError, match="disk full"),
        ):
            write_config(path, "new")

        assert path.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["config.php"]
        assert os.path.exists(path)
