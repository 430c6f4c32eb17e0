"""Custom exceptions for laslog."""

from __future__ import annotations


class LaslogError(Exception):
    """Base exception for all laslog errors."""


class LASReadError(LaslogError):
    """Raised when a LAS file cannot be read (file not found, permissions)."""


class LASWriteError(LaslogError):
    """Raised when parsed LAS data cannot be written out."""


class LASVersionError(LaslogError):
    """Raised when the version section is missing or its value is not a number."""


class FieldNotFoundError(LaslogError):
    """Raised when a curve name is not present in the curve section."""
