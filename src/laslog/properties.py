"""Key/value line parsing for the ~W, ~C and ~P sections.

Header lines have the loose shape::

    MNEMONIC.UNIT    VALUE    : DESCRIPTION

with no column alignment guaranteed. Each field is pulled out by its own
rule so the heuristics can be exercised one at a time:

    normalize_line -> split_title -> split_unit -> split_description -> split_value
"""

from __future__ import annotations

import logging

from .models import UNKNOWN_TITLE, WellProp
from .patterns import get_patterns
from .sections import Section, section_lines

logger = logging.getLogger(__name__)

# Stands in for an empty unit after normalize_line
NO_UNIT_PLACEHOLDER = "none"


def normalize_line(line: str) -> str:
    """Replace a lone dot (mnemonic with no unit) by the no-unit placeholder.

    ``NULL  .   -999.25 :`` becomes ``NULL none -999.25 :``.
    """
    return get_patterns().lone_dot.sub(f" {NO_UNIT_PLACEHOLDER} ", line, count=1)


def split_title(line: str) -> str:
    """Return the mnemonic: text before the first dot or whitespace run."""
    title = get_patterns().title_split.split(line, maxsplit=1)[0].strip()
    return title or UNKNOWN_TITLE


def split_unit(line: str) -> str:
    """Return the unit token following the mnemonic and its dot."""
    match = get_patterns().unit_prefix.match(line)
    if match is None:
        return ""
    unit = match.group("unit")
    if unit.strip() == NO_UNIT_PLACEHOLDER:
        return ""
    return unit


def split_description(line: str) -> str:
    """Return the text after the first colon, minus leading digit groups."""
    if ":" not in line:
        return ""
    description = line.split(":", 1)[1].strip()
    return get_patterns().description_noise.sub("", description)


def split_value(line: str) -> str:
    """Return the value field between the unit and the colon.

    The ``MNEMONIC.UNIT`` prefix counts as one field and the rest is cut on
    runs of two or more blanks. With more than two fields the value is the
    second-to-last one, otherwise the last one.
    """
    patterns = get_patterns()
    before_colon = line.split(":", 1)[0]

    prefix = patterns.unit_prefix.match(before_colon)
    remainder = before_colon[prefix.end() :] if prefix else before_colon
    remainder = remainder.strip()
    if not remainder:
        return ""

    fields = patterns.value_split.split(remainder)
    if prefix is not None:
        fields.insert(0, prefix.group(0))

    if len(fields) > 2:
        return fields[-2].strip()
    return fields[-1].strip()


def parse_property(line: str) -> WellProp:
    """Parse one filtered header line into a WellProp."""
    normalized = normalize_line(line)
    title = split_title(normalized)
    if title == UNKNOWN_TITLE:
        logger.debug("No mnemonic found in line %r", line)

    return WellProp(
        title=title,
        unit=split_unit(normalized),
        description=split_description(line),
        value=split_value(normalized),
    )


def extract_properties(content: str, section: Section) -> dict[str, WellProp]:
    """Parse every entry of a key/value section, keyed by mnemonic.

    A repeated mnemonic replaces the earlier entry. An absent section gives
    an empty mapping.
    """
    props: dict[str, WellProp] = {}
    for line in section_lines(content, section):
        prop = parse_property(line)
        props[prop.title] = prop
    return props


def split_header(line: str) -> str:
    """Return the curve name of a ~C line: text before the first dot."""
    return get_patterns().header_split.split(line, maxsplit=1)[0].strip()


def extract_headers(content: str) -> list[str]:
    """Return the curve names of the ~C section in document order."""
    return [split_header(line) for line in section_lines(content, Section.CURVE)]
