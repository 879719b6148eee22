# -*- coding: utf-8 -*-
"""Formatting (serialization) for IESNA LM-63 photometric files.

The fixed fields are written as two lines (the first 10 fields, then the
last 3). Angle arrays and candela rows are wrapped so no line exceeds
MAX_LINE_LENGTH characters; every candela row starts on a new line.
"""

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator

from ies_lib.constants import IES_LINE_ENDING
from ies_lib.constants import IES_SEPARATOR
from ies_lib.constants import MAX_LINE_LENGTH
from ies_lib.constants import TILT_PREFIX
from ies_lib.constants import UNMARKED_FIELDS_FIRST_LINE
from ies_lib.errors import UnsupportedTiltReferenceError
from ies_lib.models import PhotometricDocument
from ies_lib.models import TiltExternalFile
from ies_lib.models import TiltInclude
from ies_lib.validation import format_number


def _join(values: Iterable[float]) -> str:
    return IES_SEPARATOR.join(format_number(value) for value in values)


def wrap_values(
    values: Iterable[float],
    max_length: int = MAX_LINE_LENGTH,
) -> Iterator[str]:
    """Pack values into lines of at most ``max_length`` characters.

    A single value longer than ``max_length`` gets a line of its own.

    Args:
        values: Numbers to write
        max_length: Maximum line length

    Yields:
        Space separated lines
    """
    line = ""
    for value in values:
        token = format_number(value)
        if line and len(line) + len(IES_SEPARATOR) + len(token) > max_length:
            yield line
            line = token
        elif line:
            line += IES_SEPARATOR + token
        else:
            line = token
    if line:
        yield line


def format_keyword(name: str, value: str) -> str:
    """Format a ``[NAME] value`` line."""
    if value:
        return f"[{name}] {value}"
    return f"[{name}]"


def iter_ies_lines(document: PhotometricDocument) -> Iterator[str]:
    """Render a document as IES lines (without line terminators).

    Args:
        document: Document to write

    Yields:
        Lines in file order

    Raises:
        UnsupportedTiltReferenceError: If the document references an
            external tilt file
    """
    tilt = document.tilt
    if isinstance(tilt, TiltExternalFile):
        raise UnsupportedTiltReferenceError(
            f"cannot write external TILT file reference: {tilt.filename}"
        )

    yield document.version

    for name, value in document.keyword_lines():
        yield format_keyword(name, value)

    yield f"{TILT_PREFIX}{document.tilt_mode.value}"
    if isinstance(tilt, TiltInclude):
        yield format_number(tilt.lamp_to_luminaire_geometry)
        yield format_number(tilt.number_of_tilt_angles)
        yield _join(tilt.tilt_angles)
        yield _join(tilt.multiplying_factors)

    values = document.unmarked_fields.values()
    yield _join(values[:UNMARKED_FIELDS_FIRST_LINE])
    yield _join(values[UNMARKED_FIELDS_FIRST_LINE:])

    yield from wrap_values(document.vertical_angles)
    yield from wrap_values(document.horizontal_angles)
    for row in document.candela:
        yield from wrap_values(row)


def format_ies_file(
    document: PhotometricDocument,
    *,
    write: Callable[[str], None] | None = None,
) -> str | None:
    """Format a complete IES file.

    Args:
        document: Document to write
        write: Optional callback for streaming output. If provided,
               lines are written via this callback and None is returned.

    Returns:
        Formatted file content as string (if write is None),
        or None (if write callback is provided)
    """
    if write is not None:
        # Streaming mode
        for line in iter_ies_lines(document):
            write(line + IES_LINE_ENDING)
        return None

    # Return mode
    chunks: list[str] = []
    format_ies_file(document, write=chunks.append)
    return "".join(chunks)
