# -*- coding: utf-8 -*-
"""Enumerations for IES / CSV photometric files."""

from enum import Enum


class FileFormat(str, Enum):
    """File format types for conversion operations.

    Attributes:
        IES: IESNA LM-63 text format
        CSV: Comma separated equivalent of the IES grammar
        JSON: JSON dump of the photometric document
    """

    IES = "ies"
    CSV = "csv"
    JSON = "json"


class FileExtension(str, Enum):
    """File extensions for the supported formats (with dot)."""

    IES = ".ies"
    CSV = ".csv"
    JSON = ".json"


class ConversionDirection(str, Enum):
    """Direction of a conversion run.

    Attributes:
        IES_TO_CSV: Parse IES text, write CSV
        CSV_TO_IES: Parse CSV, write IES text
    """

    IES_TO_CSV = "ies_to_csv"
    CSV_TO_IES = "csv_to_ies"

    @property
    def source_format(self) -> FileFormat:
        return FileFormat.IES if self is ConversionDirection.IES_TO_CSV else FileFormat.CSV

    @property
    def target_format(self) -> FileFormat:
        return FileFormat.CSV if self is ConversionDirection.IES_TO_CSV else FileFormat.IES

    @classmethod
    def from_extension(cls, ext: str) -> "ConversionDirection":
        """Pick the direction from a file extension.

        Args:
            ext: File extension (with or without dot, case-insensitive)

        Returns:
            IES_TO_CSV for ``.ies`` files, CSV_TO_IES for anything else
        """
        if ext.lower().lstrip(".") == FileExtension.IES.value.lstrip("."):
            return cls.IES_TO_CSV
        return cls.CSV_TO_IES


class TiltMode(str, Enum):
    """Value following ``TILT=`` in a photometric file.

    Attributes:
        NONE: No tilt correction
        INCLUDE: Tilt table follows inline
        FILE: Tilt table lives in an external file (unsupported)
    """

    NONE = "NONE"
    INCLUDE = "INCLUDE"
    FILE = "FILE"

    @classmethod
    def from_text(cls, text: str) -> "TiltMode":
        """Decode the text after ``TILT=``. Anything else is a file name."""
        value = text.strip()
        if value == cls.NONE.value:
            return cls.NONE
        if value == cls.INCLUDE.value:
            return cls.INCLUDE
        return cls.FILE


class ParserState(str, Enum):
    """States of the photometric parser, in file order."""

    VERSION = "version"
    KEYWORDS = "keywords"
    LAMP_TO_LUMINAIRE_GEOMETRY = "lampToLuminaireGeometry"
    NUMBER_OF_TILT_ANGLES = "numberOfTiltAngles"
    TILT_ANGLES = "tiltAngles"
    MULTIPLYING_FACTORS = "multiplyingFactors"
    UNMARKED_FIELDS = "unmarkedFields"
    VERTICAL_ANGLES = "verticalAnglesArray"
    HORIZONTAL_ANGLES = "horizontalAnglesArray"
    CANDELA_VALUES = "candelaValuesTable"
    EXTRA_LINES = "extraLines"


class Severity(str, Enum):
    """Severity level for parse errors.

    Attributes:
        ERROR: Parsing error, the document may be inconsistent
        WARNING: Non-fatal warning
        INFO: Informational notice, no data impact
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
