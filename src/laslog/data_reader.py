"""ASCII data section reader for LAS files.

Every value of the ~A section is read into one flat stream and cut into rows
of ``curve_count`` values. Since row boundaries come from the curve count
and not from line breaks, wrapped files (one depth step spread over several
lines) come out the same as unwrapped ones.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable

from .patterns import get_patterns

DEFAULT_NULL_VALUE = -999.25


def parse_token(token: str) -> float:
    """Parse a data value; anything that is not a number reads as 0.0."""
    try:
        return float(token.strip())
    except ValueError:
        return 0.0


def read_tokens(lines: Iterable[str]) -> list[float]:
    """Flatten the values of all data lines into one list."""
    split = get_patterns().data_split.split
    values: list[float] = []
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        values.extend(parse_token(token) for token in split(stripped))
    return values


def build_matrix(
    lines: Iterable[str],
    curve_count: int,
    null_value: float = DEFAULT_NULL_VALUE,
) -> list[list[float]]:
    """Build the data matrix, one row per depth step.

    Args:
        lines: Raw ~A lines, header line already removed.
        curve_count: Number of curves declared in the ~C section.
        null_value: Fill value for an incomplete last row.

    Returns:
        List of rows, each with ``curve_count`` values. Empty when there
        are no curves.

    Warns:
        UserWarning: If the value count is not a multiple of the curve
            count; the last row is then padded with ``null_value``.
    """
    if curve_count <= 0:
        return []

    values = read_tokens(lines)
    rows = [values[i : i + curve_count] for i in range(0, len(values), curve_count)]

    if rows and len(rows[-1]) < curve_count:
        missing = curve_count - len(rows[-1])
        warnings.warn(
            f"Data section has {len(values)} values, not a multiple of {curve_count} curves. "
            f"Padding last row with {missing} null value(s) ({null_value}).",
            stacklevel=2,
        )
        rows[-1].extend([null_value] * missing)

    return rows
