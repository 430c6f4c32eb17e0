"""Pytest fixtures for laslog tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from laslog import LASFile, read_las_file

# Test data at repository root
TEST_DATA_DIR = Path(__file__).parent.parent / "test_data"


@pytest.fixture
def test_data_dir() -> Path:
    """Path to test data directory."""
    return TEST_DATA_DIR


@pytest.fixture
def all_las_files() -> list[Path]:
    """All LAS test files in test_data/."""
    return sorted(TEST_DATA_DIR.glob("*.las"))


@pytest.fixture
def example1() -> LASFile:
    """CWLS LAS 2.0 example: 8 curves, 4 depth steps, ~Other notes."""
    return read_las_file(TEST_DATA_DIR / "example1.las")


@pytest.fixture
def a10() -> LASFile:
    """Petrel export: comment banner, empty units, no ~Other section."""
    return read_las_file(TEST_DATA_DIR / "A10.las")


@pytest.fixture
def wrapped() -> LASFile:
    """LAS 2.0 file in wrap mode: each depth step spans three lines."""
    return read_las_file(TEST_DATA_DIR / "wrapped.las")


@pytest.fixture
def minimal_content() -> str:
    """Small in-memory LAS text with two curves and three depth steps."""
    return """~VERSION INFORMATION
 VERS.   2.0  : CWLS LOG ASCII STANDARD
 WRAP.   NO   : ONE LINE PER DEPTH STEP
~WELL INFORMATION
 STRT.M   100.0 : START DEPTH
 NULL.    -999.25 : NULL VALUE
~CURVE INFORMATION
 DEPT.M   :  Depth
 DT.US/M  :  Sonic
~A
100.0  50.0
100.1  51.0
100.2  52.0
"""
