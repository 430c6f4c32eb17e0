"""Data models for parsed LAS structures."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_TITLE = "UNKNOWN"


@dataclass(frozen=True)
class WellProp:
    """Single MNEMONIC.UNIT VALUE : DESCRIPTION entry from a ~W, ~C or ~P section.

    Only the title is guaranteed to be non-empty; the other fields are empty
    strings when the line does not carry them.
    """

    title: str = UNKNOWN_TITLE
    unit: str = ""
    description: str = ""
    value: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "unit": self.unit,
            "description": self.description,
            "value": self.value,
        }


@dataclass(frozen=True)
class Metadata:
    """Version number and wrap flag decoded from the ~V section.

    ``version`` is None when the version line has no numeric value.
    """

    version: float | None = None
    wrap: bool = False
