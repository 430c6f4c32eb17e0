"""LAS file reader: loads a file into a LASFile.

The file is decoded with the given encoding; no detection is attempted.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import LASReadError
from .las import LASFile

logger = logging.getLogger(__name__)


def read_las_file(
    file_path: str | Path,
    encoding: str = "utf-8",
    max_file_size: int | None = None,
) -> LASFile:
    """Read a LAS file from disk.

    Args:
        file_path: Path to LAS file.
        encoding: Text encoding of the file (default: utf-8).
        max_file_size: Optional maximum file size in bytes. If the file
            exceeds this limit, a ValueError is raised.

    Returns:
        LASFile over the file content. Sections are parsed on access.

    Raises:
        LASReadError: If file cannot be read or decoded.
        ValueError: If file exceeds max_file_size.

    Example:
        >>> las = read_las_file("sample.las")
        >>> print(las.well_info()["WELL"].value)
        >>> print(las.column("DEPT"))
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise LASReadError(f"File not found: {file_path}")

    if not file_path.is_file():
        raise LASReadError(f"Not a file: {file_path}")

    if max_file_size is not None:
        file_size = file_path.stat().st_size
        if file_size > max_file_size:
            raise ValueError(
                f"File size ({file_size} bytes) exceeds maximum allowed "
                f"({max_file_size} bytes): {file_path}"
            )

    try:
        content = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise LASReadError(f"Cannot decode {file_path} as {encoding}: {e}") from e
    except OSError as e:
        raise LASReadError(f"Cannot read {file_path}: {e}") from e

    logger.debug("Read %d characters from %s", len(content), file_path)
    return LASFile(content, source_file=str(file_path))
