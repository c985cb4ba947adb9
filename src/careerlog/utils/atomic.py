"""Atomic file writes for the JSON files the site reads."""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_file_atomic(file_path: Path, content: str) -> None:
    """Write file atomically with guaranteed durability.

    Content goes to a temporary file in the target directory, is flushed and
    fsynced, then renamed over the target. Readers see either the old file or
    the new one, never a truncated store.

    Args:
        file_path: Target file path
        content: File content

    Raises:
        OSError: If write or sync fails
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent, prefix=".tmp_", suffix=file_path.suffix
    )

    try:
        with open(temp_fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        Path(temp_path).replace(file_path)

        # Persist the rename; not every filesystem supports directory fsync
        try:
            dir_fd = os.open(file_path.parent, os.O_RDONLY)
            try:
                os.fsync(dir_fd)
            finally:
                os.close(dir_fd)
        except (OSError, AttributeError) as e:
            logger.debug(f"Directory fsync not supported: {e}")

    except Exception:
        Path(temp_path).unlink(missing_ok=True)
        raise
