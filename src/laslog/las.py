"""LASFile: read-only views over the text of a LAS document.

Each accessor parses what it needs from the buffer on every call. Nothing
is cached, so accessors can be called in any order, repeatedly and from
several threads. Callers that need a view many times should keep the result.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from .data_reader import DEFAULT_NULL_VALUE, build_matrix
from .exceptions import FieldNotFoundError
from .metadata import decode_metadata, require_version
from .models import Metadata, WellProp
from .properties import extract_headers, extract_properties
from .sections import Section, data_lines, section_lines
from .writer import write_csv


class LASFile:
    """Parsed access to a LAS 1.2 / 2.0 document held in memory.

    Example:
        >>> las = LASFile(text)
        >>> las.headers()
        ['DEPT', 'DT', 'RHOB']
        >>> las.column("DEPT")
        [1670.0, 1669.875, 1669.75]
    """

    def __init__(self, content: str, source_file: str = "") -> None:
        self._content = content
        self.source_file = source_file

    def __repr__(self) -> str:
        source = self.source_file or f"<{len(self._content)} chars>"
        return f"LASFile({source})"

    @property
    def content(self) -> str:
        return self._content

    # ~V

    def metadata(self) -> Metadata:
        return decode_metadata(self._content)

    def version(self) -> float:
        """LAS version number.

        Raises:
            LASVersionError: If the ~V section is missing or its version
                value is not a number.
        """
        return require_version(self.metadata())

    def wrap(self) -> bool:
        return self.metadata().wrap

    # ~W, ~C, ~P

    def well_info(self) -> dict[str, WellProp]:
        return extract_properties(self._content, Section.WELL)

    def curve_params(self) -> dict[str, WellProp]:
        return extract_properties(self._content, Section.CURVE)

    def log_params(self) -> dict[str, WellProp]:
        return extract_properties(self._content, Section.PARAMETER)

    def headers(self) -> list[str]:
        return extract_headers(self._content)

    def headers_and_desc(self) -> list[tuple[str, str]]:
        return [(title, prop.description) for title, prop in self.curve_params().items()]

    def null_value(self) -> float:
        """NULL value declared in ~W, or -999.25 when missing or not numeric."""
        prop = self.well_info().get("NULL")
        if prop is None:
            return DEFAULT_NULL_VALUE
        try:
            return float(prop.value)
        except ValueError:
            return DEFAULT_NULL_VALUE

    # ~O

    def other(self) -> str:
        return "\n".join(section_lines(self._content, Section.OTHER))

    # ~A

    def data(self) -> list[list[float]]:
        return build_matrix(
            data_lines(self._content),
            len(self.headers()),
            null_value=self.null_value(),
        )

    def column(self, name: str) -> list[float]:
        """Values of one curve, in depth order.

        Raises:
            FieldNotFoundError: If no curve is named exactly ``name``.
        """
        headers = self.headers()
        if name not in headers:
            raise FieldNotFoundError(f"field not found: {name}")
        index = headers.index(name)
        return [row[index] for row in self.data()]

    def column_count(self) -> int:
        return len(self.headers())

    def row_count(self) -> int:
        return len(self.data())

    def to_array(self) -> NDArray[np.float64]:
        """Data matrix as a 2-D array of shape (row_count, column_count)."""
        rows = self.data()
        if not rows:
            return np.empty((0, self.column_count()), dtype=np.float64)
        return np.array(rows, dtype=np.float64)

    def logs(self) -> dict[str, NDArray[np.float64]]:
        """One array per curve, keyed by curve name.

        A repeated curve name keeps the last column with that name.
        """
        array = self.to_array()
        return {name: array[:, i].copy() for i, name in enumerate(self.headers())}

    def to_csv(self, file_path: str | Path, encoding: str = "utf-8") -> None:
        """Write headers and data as CSV. See :func:`laslog.writer.write_csv`."""
        write_csv(file_path, self, encoding=encoding)
