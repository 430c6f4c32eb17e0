"""Section slicing and comment filtering for LAS documents.

A section starts at a line whose first non-blank character is ``~`` followed
by the section letter, and runs up to the next such line or the end of the
document. Only the first occurrence of each marker is used.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from .patterns import get_patterns

logger = logging.getLogger(__name__)


class Section(Enum):
    """LAS sections and their marker letters."""

    VERSION = "V"
    WELL = "W"
    CURVE = "C"
    PARAMETER = "P"
    OTHER = "O"
    ASCII = "A"


class FilteredLines:
    """Trimmed lines of a section body without comments and blank lines.

    Iterating twice walks the body twice; nothing is materialized.
    """

    def __init__(self, body: str) -> None:
        self.body = body

    def __iter__(self) -> Iterator[str]:
        for line in self.body.splitlines():
            stripped = line.strip()
            if stripped and not stripped.startswith("#"):
                yield stripped


def section_body(content: str, section: Section) -> str | None:
    """Return the text of a section, marker line included, or None if absent."""
    patterns = get_patterns()
    marker = patterns.section_markers[section.value].search(content)
    if marker is None:
        logger.debug("Section ~%s not found", section.value)
        return None

    # Search past the marker itself so it is not mistaken for the next one
    following = patterns.next_section.search(content, marker.end())
    end = following.start() if following else len(content)
    return content[marker.start() : end]


def section_lines(content: str, section: Section) -> list[str]:
    """Return the filtered lines of a section with its title line dropped."""
    body = section_body(content, section)
    if body is None:
        return []
    return list(FilteredLines(body))[1:]


def data_lines(content: str) -> list[str]:
    """Return the raw lines of the ~A section after its header line.

    Data lines are not comment filtered.
    """
    body = section_body(content, Section.ASCII)
    if body is None:
        return []
    return body.splitlines()[1:]
