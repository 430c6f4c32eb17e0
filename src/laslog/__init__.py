"""laslog: parser for LAS (Log ASCII Standard) well log files.

Public API:
    read_las_file()    : Read a LAS file from disk, returns LASFile
    LASFile            : Version, headers, properties and data of a LAS text
    write_csv()        : Write curves and data of a LASFile as CSV
    WellProp           : Parsed MNEMONIC.UNIT VALUE : DESCRIPTION entry
    Metadata           : Version number and wrap flag
"""

from .exceptions import (
    FieldNotFoundError,
    LaslogError,
    LASReadError,
    LASVersionError,
    LASWriteError,
)
from .las import LASFile
from .models import Metadata, WellProp
from .reader import read_las_file
from .sections import Section
from .writer import to_csv_text, write_csv

__all__ = [
    # Core functions
    "read_las_file",
    "write_csv",
    "to_csv_text",
    # Document API
    "LASFile",
    "Section",
    # Data models
    "WellProp",
    "Metadata",
    # Exceptions
    "LaslogError",
    "LASReadError",
    "LASWriteError",
    "LASVersionError",
    "FieldNotFoundError",
]
