"""Version and wrap-mode decoding from the ~V section.

The two values are read by position, not by mnemonic: the first line after
the section title is the version line and the second one is the wrap line.
"""

from __future__ import annotations

import logging

from .exceptions import LASVersionError
from .models import Metadata
from .patterns import get_patterns
from .sections import Section, section_lines

logger = logging.getLogger(__name__)


def field_value(line: str) -> str:
    """Return the raw value token of a ``MNEM.   VALUE : DESC`` line."""
    tokens = get_patterns().metadata_split.split(line, maxsplit=2)
    return tokens[1] if len(tokens) > 1 else ""


def parse_version(token: str) -> float | None:
    try:
        return float(token)
    except ValueError:
        return None


def parse_wrap(token: str) -> bool:
    return token.strip().lower() == "yes"


def decode_metadata(content: str) -> Metadata:
    """Decode the version number and wrap flag of a LAS document.

    A missing ~V section or version line gives ``version=None``; a missing
    or unrecognized wrap value gives ``wrap=False``.
    """
    lines = section_lines(content, Section.VERSION)[:2]
    if len(lines) < 2:
        logger.debug("Version section has %d of 2 expected lines", len(lines))

    tokens = [field_value(line) for line in lines]
    tokens += [""] * (2 - len(tokens))

    return Metadata(version=parse_version(tokens[0]), wrap=parse_wrap(tokens[1]))


def require_version(metadata: Metadata) -> float:
    """Return the version number, failing when it could not be parsed.

    Raises:
        LASVersionError: If the version is missing or not a number.
    """
    if metadata.version is None:
        raise LASVersionError("invalid version")
    return metadata.version
