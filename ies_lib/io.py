# -*- coding: utf-8 -*-
"""File I/O functions for photometric files.

Thin function wrappers around IesInterface:

    from ies_lib.io import read_ies_file, write_csv_file

    document = read_ies_file(Path("luminaire.ies"))
    write_csv_file(Path("luminaire.csv"), document)
"""

from pathlib import Path

from ies_lib.constants import CSV_ENCODING
from ies_lib.constants import CSV_READ_ENCODING
from ies_lib.constants import IES_ENCODING
from ies_lib.interface import IesInterface
from ies_lib.models import PhotometricDocument

__all__ = [
    "load_document_json",
    "read_csv_file",
    "read_ies_file",
    "save_document_json",
    "write_csv_file",
    "write_ies_file",
]


# --- Reading Functions ---


def read_ies_file(
    path: Path,
    *,
    encoding: str = IES_ENCODING,
    strict: bool = False,
) -> PhotometricDocument:
    """Read an IES photometric file.

    Args:
        path: Path to the .ies file
        encoding: Character encoding (default: Windows-1252)
        strict: Raise IncompleteDocumentError on inconsistent arrays

    Returns:
        Parsed document
    """
    return IesInterface.load_ies(path, encoding=encoding, strict=strict)


def read_csv_file(
    path: Path,
    *,
    encoding: str = CSV_READ_ENCODING,
    strict: bool = False,
) -> PhotometricDocument:
    """Read a CSV photometric file.

    Args:
        path: Path to the .csv file
        encoding: Character encoding (default: UTF-8, a leading byte
            order mark is dropped)
        strict: Raise IncompleteDocumentError on inconsistent arrays

    Returns:
        Parsed document
    """
    return IesInterface.load_csv(path, encoding=encoding, strict=strict)


# --- Writing Functions ---


def write_ies_file(
    path: Path,
    document: PhotometricDocument,
    *,
    encoding: str = IES_ENCODING,
) -> None:
    """Write an IES photometric file."""
    IesInterface.save_ies(document, path, encoding=encoding)


def write_csv_file(
    path: Path,
    document: PhotometricDocument,
    *,
    encoding: str = CSV_ENCODING,
) -> None:
    """Write a CSV photometric file."""
    IesInterface.save_csv(document, path, encoding=encoding)


# --- JSON I/O Functions ---


def save_document_json(path: Path, document: PhotometricDocument) -> None:
    """Save a document as JSON."""
    IesInterface.save_json(document, path)


def load_document_json(path: Path) -> PhotometricDocument:
    """Load a document from JSON."""
    return IesInterface.load_json(path)
