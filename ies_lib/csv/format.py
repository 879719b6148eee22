# -*- coding: utf-8 -*-
"""Formatting (serialization) for CSV photometric files.

One logical record per line, no wrapping. The rows mirror the IES grammar
so a CSV file parses back into the same document.
"""

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator

from ies_lib.constants import CSV_CANDELA_LABEL
from ies_lib.constants import CSV_HORIZONTAL_ANGLES_LABEL
from ies_lib.constants import CSV_LINE_ENDING
from ies_lib.constants import CSV_SEPARATOR
from ies_lib.constants import CSV_VERSION_LABEL
from ies_lib.constants import CSV_VERTICAL_ANGLES_LABEL
from ies_lib.constants import TILT_FIELD_NAMES
from ies_lib.constants import TILT_PREFIX
from ies_lib.constants import UNMARKED_FIELD_NAMES
from ies_lib.errors import UnsupportedTiltReferenceError
from ies_lib.models import PhotometricDocument
from ies_lib.models import TiltExternalFile
from ies_lib.models import TiltInclude
from ies_lib.validation import format_number


def format_row(label: str, values: Iterable[float]) -> str:
    """Format a ``label,v0,v1,...`` row."""
    return CSV_SEPARATOR.join([label, *(format_number(v) for v in values)])


def iter_csv_lines(document: PhotometricDocument) -> Iterator[str]:
    """Render a document as CSV lines (without line terminators).

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

    yield f"{CSV_VERSION_LABEL}{CSV_SEPARATOR}{document.version}"

    for name, value in document.keyword_lines():
        yield f"[{name}]{CSV_SEPARATOR}{value}"

    yield f"{TILT_PREFIX}{document.tilt_mode.value}"
    if isinstance(tilt, TiltInclude):
        geometry, count, angles, factors = TILT_FIELD_NAMES
        yield format_row(geometry, [tilt.lamp_to_luminaire_geometry])
        yield format_row(count, [tilt.number_of_tilt_angles])
        yield format_row(angles, tilt.tilt_angles)
        yield format_row(factors, tilt.multiplying_factors)

    for name, value in zip(
        UNMARKED_FIELD_NAMES, document.unmarked_fields.values(), strict=True
    ):
        yield format_row(name, [value])

    yield format_row(CSV_VERTICAL_ANGLES_LABEL, document.vertical_angles)
    yield format_row(CSV_HORIZONTAL_ANGLES_LABEL, document.horizontal_angles)

    yield format_row(CSV_CANDELA_LABEL, document.vertical_angles)
    for angle, row in zip(document.horizontal_angles, document.candela):
        yield format_row(format_number(angle), row)


def format_csv_file(
    document: PhotometricDocument,
    *,
    write: Callable[[str], None] | None = None,
) -> str | None:
    """Format a complete CSV file.

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
        for line in iter_csv_lines(document):
            write(line + CSV_LINE_ENDING)
        return None

    # Return mode
    chunks: list[str] = []
    format_csv_file(document, write=chunks.append)
    return "".join(chunks)
