"""CSV export of parsed LAS curves.

The first line holds the curve names; every following line is one depth
step. Whole numbers are written without a fractional part (``1670``), other
values with the shortest repr that reads back to the same float.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import LASWriteError

if TYPE_CHECKING:
    from .las import LASFile


def format_value(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_csv_text(las_file: LASFile) -> str:
    """Render headers and data rows as comma-separated text."""
    lines = [",".join(las_file.headers())]
    for row in las_file.data():
        lines.append(",".join(format_value(value) for value in row))
    return "\n".join(lines) + "\n"


def write_csv(
    file_path: str | Path,
    las_file: LASFile,
    encoding: str = "utf-8",
) -> None:
    """Write the curves of a LAS file to a CSV file.

    Args:
        file_path: Output file path.
        las_file: Parsed LAS document.
        encoding: Output file encoding (default: utf-8).

    Raises:
        LASWriteError: If file cannot be written.
    """
    file_path = Path(file_path)
    content = to_csv_text(las_file)

    try:
        file_path.write_text(content, encoding=encoding)
    except OSError as e:
        raise LASWriteError(f"Cannot write to {file_path}: {e}") from e
