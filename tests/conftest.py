# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared sample documents and fixtures for accessing
test artifacts. All IES and CSV files in the artifacts directory are
automatically discovered.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Path Constants
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"


# =============================================================================
# Sample Documents
# =============================================================================

#: Smallest useful file: one vertical angle, one horizontal angle
MINIMAL_IES = "\n".join(
    [
        "IESNA:LM-63-2002",
        "[TEST] abc",
        "TILT=NONE",
        "1 10000 1 1 1 1 1 0 0 0 0 1 1000",
        "0",
        "0",
        "500",
    ]
)

#: Keywords with MORE continuations, fields and arrays packed across lines,
#: candela rows spanning physical lines
PACKED_IES = "\n".join(
    [
        "IESNA:LM-63-2002",
        "[TEST] 12345",
        "[TESTLAB] Acme Labs",
        "[MANUFAC] Lumen Co",
        "[MORE] Lighting Division",
        "[MORE] Building 7",
        "[LUMCAT] LC-100",
        "[_SERIAL] 0042",
        "TILT=NONE",
        "1 -1 1 5 3 1 1 0.5 1.2 0.1",
        "1 0 42.5",
        "0 22.5 45",
        "67.5 90",
        "0 90 180",
        "1000 950 800",
        "600 300 900 850 700 550 250",
        "800 750 600",
        "450",
        "200",
    ]
)

PACKED_CANDELA = [
    [1000.0, 950.0, 800.0, 600.0, 300.0],
    [900.0, 850.0, 700.0, 550.0, 250.0],
    [800.0, 750.0, 600.0, 450.0, 200.0],
]

#: Inline tilt table
TILT_INCLUDE_IES = "\n".join(
    [
        "IESNA:LM-63-2002",
        "[TEST] tilt",
        "TILT=INCLUDE",
        "1",
        "2",
        "0 90",
        "1 0.5",
        "1 1000 1 2 1 1 1 0 0 0 1 1 50",
        "0 90",
        "0",
        "100 50",
    ]
)

#: External tilt file reference (unsupported)
TILT_FILE_IES = "\n".join(
    [
        "IESNA:LM-63-2002",
        "[TEST] external",
        "TILT=somefile.tlt",
        "1 10000 1 1 1 1 1 0 0 0 0 1 1000",
        "0",
        "0",
        "500",
    ]
)

MINIMAL_CSV = "\n".join(
    [
        "IES file version,IESNA:LM-63-2002",
        "[TEST],abc",
        "TILT=NONE",
        "numOfLamps,1",
        "lumensPerLamp,10000",
        "multiplier,1",
        "numberOfVerticalAngles,1",
        "numberOfHorizontalAngles,1",
        "photometricType,1",
        "unitsType,1",
        "width,0",
        "length,0",
        "height,0",
        "ballastFactor,0",
        "futureUse,1",
        "inputWatts,1000",
        "verticalAnglesArray,0",
        "horizontalAnglesArray,0",
        "candelaValuesTable,0",
        "0,500",
    ]
)

ALL_SAMPLE_IES = [
    pytest.param(MINIMAL_IES, id="minimal"),
    pytest.param(PACKED_IES, id="packed"),
    pytest.param(TILT_INCLUDE_IES, id="tilt_include"),
]


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def artifacts_dir() -> Path:
    """Return path to test artifacts directory."""
    return ARTIFACTS_DIR


# =============================================================================
# File Discovery Functions (used for parametrization)
# =============================================================================


def discover_ies_files() -> list[pytest.param]:
    """Discover all IES files in the artifacts directory.

    Returns:
        List of pytest.param objects for use with @pytest.mark.parametrize
    """
    if not ARTIFACTS_DIR.exists():
        return []
    ies_files = sorted(
        p for p in ARTIFACTS_DIR.iterdir() if p.suffix.lower() == ".ies"
    )
    return [pytest.param(ies_file, id=ies_file.stem) for ies_file in ies_files]


def discover_csv_files() -> list[pytest.param]:
    """Discover all CSV files in the artifacts directory."""
    if not ARTIFACTS_DIR.exists():
        return []
    csv_files = sorted(ARTIFACTS_DIR.glob("*.csv"))
    return [pytest.param(csv_file, id=csv_file.stem) for csv_file in csv_files]


ALL_IES_FILES = discover_ies_files()
ALL_CSV_FILES = discover_csv_files()
