# -*- coding: utf-8 -*-
"""Constants used throughout the ies_lib library.

This module centralizes the grammar constants shared by both the IES and
the CSV parsers and formatters.
"""

# -----------------------------------------------------------------------------
# File Encodings / Line Endings
# -----------------------------------------------------------------------------

#: LM-63 files are Windows text files
IES_ENCODING = "cp1252"

#: Encoding used for CSV files
CSV_ENCODING = "utf-8"

#: Spreadsheet exports often start with a byte order mark, dropped on read
CSV_READ_ENCODING = "utf-8-sig"

BYTE_ORDER_MARK = "\ufeff"

#: Encoding used for JSON files
JSON_ENCODING = "utf-8"

#: LM-63 mandates CR-LF line endings
IES_LINE_ENDING = "\r\n"

CSV_LINE_ENDING = "\n"

# -----------------------------------------------------------------------------
# Versions
# -----------------------------------------------------------------------------

#: IES file versions this library understands
SUPPORTED_VERSIONS: tuple[str, ...] = ("IESNA:LM-63-2002",)

DEFAULT_VERSION: str = SUPPORTED_VERSIONS[0]

# -----------------------------------------------------------------------------
# Keywords
# -----------------------------------------------------------------------------

#: Keywords defined by LM-63-2002
STANDARD_KEYWORDS: tuple[str, ...] = (
    "TEST",
    "TESTLAB",
    "TESTDATE",
    "NEARFIELD",
    "MANUFAC",
    "LUMCAT",
    "LUMINAIRE",
    "LAMPCAT",
    "LAMP",
    "BALLAST",
    "BALLASTCAT",
    "MAINTCAT",
    "DISTRIBUTION",
    "FLASHAREA",
    "COLORCONSTANT",
    "LAMPPOSITION",
    "ISSUEDATE",
    "OTHER",
    "SEARCH",
    "MORE",
)

#: Continuation keyword
MORE_KEYWORD = "MORE"

#: Suffix of the keyword entry holding the continuation lines of a keyword
MORE_SUFFIX = "_MORE"

#: User defined keywords must start with this prefix
CUSTOM_KEYWORD_PREFIX = "_"

TILT_PREFIX = "TILT="

# -----------------------------------------------------------------------------
# Fixed ("unmarked") numeric fields
# -----------------------------------------------------------------------------

#: Field names, in file order. These are also the CSV row labels.
UNMARKED_FIELD_NAMES: tuple[str, ...] = (
    "numOfLamps",
    "lumensPerLamp",
    "multiplier",
    "numberOfVerticalAngles",
    "numberOfHorizontalAngles",
    "photometricType",
    "unitsType",
    "width",
    "length",
    "height",
    "ballastFactor",
    "futureUse",
    "inputWatts",
)

#: The IES formatter writes the first N fields on one line, the rest on the next
UNMARKED_FIELDS_FIRST_LINE: int = 10

#: Last fixed field, ends the section in the CSV grammar
LAST_UNMARKED_FIELD: str = UNMARKED_FIELD_NAMES[-1]

TILT_FIELD_NAMES: tuple[str, ...] = (
    "lampToLuminaireGeometry",
    "numberOfTiltAngles",
    "tiltAngles",
    "multiplyingFactors",
)

# -----------------------------------------------------------------------------
# Formatting Constants
# -----------------------------------------------------------------------------

#: Maximum length of a wrapped IES data line
MAX_LINE_LENGTH: int = 120

IES_SEPARATOR = " "

CSV_SEPARATOR = ","

# -----------------------------------------------------------------------------
# CSV Row Labels
# -----------------------------------------------------------------------------

CSV_VERSION_LABEL = "IES file version"
CSV_VERTICAL_ANGLES_LABEL = "verticalAnglesArray"
CSV_HORIZONTAL_ANGLES_LABEL = "horizontalAnglesArray"
CSV_CANDELA_LABEL = "candelaValuesTable"

#: Labels accepted when reading angle rows
CSV_VERTICAL_ANGLES_ALIASES: tuple[str, ...] = (
    CSV_VERTICAL_ANGLES_LABEL,
    "verticalAngles",
)
CSV_HORIZONTAL_ANGLES_ALIASES: tuple[str, ...] = (
    CSV_HORIZONTAL_ANGLES_LABEL,
    "horizontalAngles",
)

# -----------------------------------------------------------------------------
# Number rendering
# -----------------------------------------------------------------------------

NAN_STRING = "NaN"
POSITIVE_INFINITY_STRING = "Infinity"
NEGATIVE_INFINITY_STRING = "-Infinity"
