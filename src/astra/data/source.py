"""Reading TLE catalogs from disk.

Acquisition failures (missing or unreadable files) are reported as
:class:`CatalogSourceError`, separately from decode errors, and always
before any decoding starts.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class CatalogSourceError(OSError):
    """A catalog file could not be opened or read."""


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a TLE file into a list of lines without their terminators.

    Args:
        path: Path to a text file.

    Returns:
        The file's lines, in order.

    Raises:
        ValueError: If ``path`` is empty.
        CatalogSourceError: If the file does not exist or cannot be read.
    """
    if not str(path):
        raise ValueError("Empty file name")

    file_path = Path(path).expanduser()
    if not file_path.is_file():
        logger.error("TLE file not found: %s", file_path)
        raise CatalogSourceError("File does not exist")
    if not os.access(file_path, os.R_OK):
        logger.error("TLE file not readable: %s", file_path)
        raise CatalogSourceError("Permission denied")

    try:
        text = file_path.read_text(encoding="ascii", errors="replace")
    except OSError as e:
        logger.error("Failed to read TLE file %s: %s", file_path, e)
        raise CatalogSourceError(f"Cannot read {file_path}: {e}") from e

    lines = text.splitlines()
    logger.debug("Read %d lines from %s", len(lines), file_path)
    return lines
