# -*- coding: utf-8 -*-
"""IES Photometric File Library.

A Python library for converting IESNA LM-63-2002 photometric files to an
equivalent CSV representation and back.

Usage:
    # Parse an IES file and write it as CSV
    from ies_lib import read_ies_file, write_csv_file
    document = read_ies_file(Path("luminaire.ies"))
    write_csv_file(Path("luminaire.csv"), document)

    # Or drive the parsers line by line
    from ies_lib import IesParser, iter_csv_lines
    parser = IesParser()
    document = parser.parse_lines(lines)
    for error in parser.errors:
        print(error)
    for line in iter_csv_lines(document):
        print(line)
"""

__version__ = "0.1.0"

# Constants
from ies_lib.constants import MAX_LINE_LENGTH
from ies_lib.constants import STANDARD_KEYWORDS
from ies_lib.constants import SUPPORTED_VERSIONS
from ies_lib.constants import UNMARKED_FIELD_NAMES

# Grammars
from ies_lib.csv.format import format_csv_file
from ies_lib.csv.format import iter_csv_lines
from ies_lib.csv.parser import CsvParser

# Enums
from ies_lib.enums import ConversionDirection
from ies_lib.enums import FileFormat
from ies_lib.enums import ParserState
from ies_lib.enums import Severity
from ies_lib.enums import TiltMode

# Errors
from ies_lib.errors import IesParseError
from ies_lib.errors import IesParseException
from ies_lib.errors import IncompleteDocumentError
from ies_lib.errors import SourceLocation
from ies_lib.errors import UndefinedParserStateError
from ies_lib.errors import UnsupportedTiltReferenceError
from ies_lib.ies.format import format_ies_file
from ies_lib.ies.format import iter_ies_lines
from ies_lib.ies.parser import IesParser

# I/O
from ies_lib.interface import IesInterface
from ies_lib.io import load_document_json
from ies_lib.io import read_csv_file
from ies_lib.io import read_ies_file
from ies_lib.io import save_document_json
from ies_lib.io import write_csv_file
from ies_lib.io import write_ies_file

# Models
from ies_lib.models import PhotometricDocument
from ies_lib.models import TiltExternalFile
from ies_lib.models import TiltInclude
from ies_lib.models import TiltNone
from ies_lib.models import UnmarkedFields
from ies_lib.parser import ParserContext
from ies_lib.parser import PhotometricParser

__all__ = [
    "MAX_LINE_LENGTH",
    "STANDARD_KEYWORDS",
    "SUPPORTED_VERSIONS",
    "UNMARKED_FIELD_NAMES",
    "ConversionDirection",
    "CsvParser",
    "FileFormat",
    "IesInterface",
    "IesParseError",
    "IesParseException",
    "IesParser",
    "IncompleteDocumentError",
    "ParserContext",
    "ParserState",
    "PhotometricDocument",
    "PhotometricParser",
    "Severity",
    "SourceLocation",
    "TiltExternalFile",
    "TiltInclude",
    "TiltMode",
    "TiltNone",
    "UndefinedParserStateError",
    "UnmarkedFields",
    "UnsupportedTiltReferenceError",
    "format_csv_file",
    "format_ies_file",
    "iter_csv_lines",
    "iter_ies_lines",
    "load_document_json",
    "read_csv_file",
    "read_ies_file",
    "save_document_json",
    "write_csv_file",
    "write_ies_file",
]
