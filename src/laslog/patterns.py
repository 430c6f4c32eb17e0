"""Regular expressions shared by the LAS parsing stages.

Patterns are compiled once, on first use, into a frozen record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

SECTION_LETTERS = "VWCPOA"


@dataclass(frozen=True)
class LASPatterns:
    """Compiled patterns used by the section, property and data stages."""

    # Section markers: "~V", "~W", ... at the start of a line, keyed by letter
    section_markers: Mapping[str, re.Pattern[str]]
    # Any section marker, used to find where a section ends
    next_section: re.Pattern[str]
    # VERS.   2.0 : ...  -> ["VERS.", "2.0", " ..."]
    metadata_split: re.Pattern[str]
    # Lone dot with no unit: "NULL  .   -999.25"
    lone_dot: re.Pattern[str]
    title_split: re.Pattern[str]
    # Mnemonic followed by a dot (or whitespace after normalization), then unit
    unit_prefix: re.Pattern[str]
    # Two or more whitespace characters between two non-blank characters
    value_split: re.Pattern[str]
    # Leading digit groups bleeding into the description: ":  1  DEPTH"
    description_noise: re.Pattern[str]
    header_split: re.Pattern[str]
    data_split: re.Pattern[str]


@lru_cache(maxsize=None)
def get_patterns() -> LASPatterns:
    """Return the process-wide pattern record, compiling it on first call."""
    markers = {
        letter: re.compile(rf"^[ \t]*~{letter}", re.MULTILINE | re.IGNORECASE)
        for letter in SECTION_LETTERS
    }
    return LASPatterns(
        section_markers=MappingProxyType(markers),
        next_section=re.compile(r"^[ \t]*~", re.MULTILINE),
        metadata_split=re.compile(r"\s+|\s*:"),
        lone_dot=re.compile(r"\s+\.\s+"),
        title_split=re.compile(r"[.\s]+"),
        unit_prefix=re.compile(r"^[^\s.]+(?:\s*\.|\s+)(?P<unit>[^\s:]*)"),
        value_split=re.compile(r"(?<=\S)\s{2,}(?=\S)"),
        description_noise=re.compile(r"^(?:\d+\s+)+"),
        header_split=re.compile(r"\s*\."),
        data_split=re.compile(r"\s+"),
    )
