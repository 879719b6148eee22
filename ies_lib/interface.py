# -*- coding: utf-8 -*-
"""Unified interface for photometric file I/O.

This module provides the primary entry point for reading and writing
photometric files:

1. Parsers consume lines lazily and produce dictionaries
2. Dictionaries feed directly to Pydantic models via `model_validate()`
3. Formatters turn the model back into lines, streamed to the output

Parse errors are returned next to the document so callers can report them.
"""

import logging
from pathlib import Path

from ies_lib.constants import CSV_ENCODING
from ies_lib.constants import CSV_READ_ENCODING
from ies_lib.constants import IES_ENCODING
from ies_lib.constants import JSON_ENCODING
from ies_lib.csv.format import format_csv_file
from ies_lib.csv.parser import CsvParser
from ies_lib.enums import ConversionDirection
from ies_lib.enums import FileFormat
from ies_lib.errors import IesParseError
from ies_lib.ies.format import format_ies_file
from ies_lib.ies.parser import IesParser
from ies_lib.models import PhotometricDocument
from ies_lib.parser import PhotometricParser

logger = logging.getLogger(__name__)


class IesInterface:
    """Unified interface for photometric file I/O.

    This class provides all file I/O operations, following the pattern:
    - Reading: File -> lines -> Parser -> Dictionary -> model_validate() -> Model
    - Writing: Model -> Formatter -> lines -> File

    Example:
        document, errors = IesInterface.load(Path("luminaire.ies"))
        IesInterface.save_csv(document, Path("luminaire.csv"))
    """

    #: Line parser of each grammar, keyed by the format it reads
    _PARSERS: dict[FileFormat, type[PhotometricParser]] = {
        parser.file_format: parser for parser in (IesParser, CsvParser)
    }

    # -------------------------------------------------------------------------
    # Loading Methods (File -> Model)
    # -------------------------------------------------------------------------

    @classmethod
    def parser_for(
        cls,
        file_format: FileFormat,
        *,
        strict: bool = False,
    ) -> PhotometricParser:
        """Create a fresh parser for a grammar.

        Raises:
            ValueError: If the format has no line grammar (JSON)
        """
        parser_class = cls._PARSERS.get(file_format)
        if parser_class is None:
            raise ValueError(f"No line parser for format: `{file_format.value}`")
        return parser_class(strict=strict)

    @classmethod
    def load(
        cls,
        path: Path,
        *,
        encoding: str | None = None,
        strict: bool = False,
    ) -> tuple[PhotometricDocument, list[IesParseError]]:
        """Load a file, choosing the grammar from its extension.

        Args:
            path: ``.ies`` files are read as IES, anything else as CSV
            encoding: Character encoding (default: the grammar's encoding)
            strict: Raise on documents whose arrays do not match their counts

        Returns:
            Tuple of (document, recorded parse errors)
        """
        direction = ConversionDirection.from_extension(path.suffix)
        parser = cls.parser_for(direction.source_format, strict=strict)
        logger.debug("Reading %s as %s", path, direction.source_format.value)
        document = parser.parse_file(path, encoding=encoding)
        return document, parser.errors

    @classmethod
    def load_ies(
        cls,
        path: Path,
        *,
        encoding: str = IES_ENCODING,
        strict: bool = False,
    ) -> PhotometricDocument:
        """Load an IES file."""
        return IesParser(strict=strict).parse_file(path, encoding=encoding)

    @classmethod
    def load_csv(
        cls,
        path: Path,
        *,
        encoding: str = CSV_READ_ENCODING,
        strict: bool = False,
    ) -> PhotometricDocument:
        """Load a CSV file."""
        return CsvParser(strict=strict).parse_file(path, encoding=encoding)

    @classmethod
    def load_json(cls, path: Path) -> PhotometricDocument:
        """Load a document saved with :meth:`save_json`."""
        return PhotometricDocument.model_validate_json(
            path.read_text(encoding=JSON_ENCODING)
        )

    # -------------------------------------------------------------------------
    # Saving Methods (Model -> File)
    # -------------------------------------------------------------------------

    @classmethod
    def save_ies(
        cls,
        document: PhotometricDocument,
        path: Path,
        *,
        encoding: str = IES_ENCODING,
    ) -> None:
        """Save a document as an IES file (CR-LF line endings)."""
        with path.open(mode="w", encoding=encoding, errors="replace", newline="") as f:
            format_ies_file(document, write=f.write)

    @classmethod
    def save_csv(
        cls,
        document: PhotometricDocument,
        path: Path,
        *,
        encoding: str = CSV_ENCODING,
    ) -> None:
        """Save a document as a CSV file."""
        with path.open(mode="w", encoding=encoding, newline="") as f:
            format_csv_file(document, write=f.write)

    @classmethod
    def save_json(cls, document: PhotometricDocument, path: Path) -> None:
        """Save a document as JSON (camelCase keys)."""
        path.write_text(
            document.model_dump_json(indent=2, by_alias=True),
            encoding=JSON_ENCODING,
        )
