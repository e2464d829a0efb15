"""Configuration file I/O.

Reads and writes the raw text of configuration files. Writes are atomic:
content goes to a temporary file in the same directory which then
replaces the target with os.replace().
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from injectctl.core.errors import StorageError

logger = logging.getLogger(__name__)


def read_config(path: Path) -> str:
    """Read the full text of a configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        File content as a string.

    Raises:
        StorageError: If the file is missing or cannot be read.
    """
    if not path.exists():
        raise StorageError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Failed to read {path}: {e}") from e


def write_config(path: Path, content: str) -> Path:
    """Write configuration text atomically.

    Args:
        path: Path to the configuration file.
        content: Full text to write.

    Returns:
        Path where the content was written.

    Raises:
        StorageError: If the file cannot be written.
    """
    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(content)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise StorageError(f"Failed to write {path}: {e}") from e

    logger.debug("Wrote %d characters to %s", len(content), path)
    return path
