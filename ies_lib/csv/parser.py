# -*- coding: utf-8 -*-
"""Parser for the CSV rendition of photometric files.

The CSV grammar carries the same content as the IES grammar with one
logical record per line:

    IES file version,<version>
    [NAME],value
    TILT=<NONE|INCLUDE>
    lampToLuminaireGeometry,<g>          (INCLUDE only)
    numberOfTiltAngles,<n>               (INCLUDE only)
    tiltAngles,<a0>,<a1>,...             (INCLUDE only)
    multiplyingFactors,<m0>,<m1>,...     (INCLUDE only)
    <fieldName>,<value>                  (one row per fixed field)
    verticalAnglesArray,<v0>,<v1>,...
    horizontalAnglesArray,<h0>,<h1>,...
    candelaValuesTable,<v0>,<v1>,...
    <h0>,<c0>,<c1>,...                   (one row per horizontal angle)

Runs of trailing commas are ignored on every line.
"""

import math

from ies_lib.constants import BYTE_ORDER_MARK
from ies_lib.constants import CSV_CANDELA_LABEL
from ies_lib.constants import CSV_HORIZONTAL_ANGLES_ALIASES
from ies_lib.constants import CSV_READ_ENCODING
from ies_lib.constants import CSV_SEPARATOR
from ies_lib.constants import CSV_VERSION_LABEL
from ies_lib.constants import CSV_VERTICAL_ANGLES_ALIASES
from ies_lib.constants import LAST_UNMARKED_FIELD
from ies_lib.enums import FileFormat
from ies_lib.enums import ParserState
from ies_lib.models import UNMARKED_FIELD_KEY_BY_NAME
from ies_lib.parser import PhotometricParser
from ies_lib.validation import split_csv_cells
from ies_lib.validation import trim_csv_line


class CsvParser(PhotometricParser):
    """Parser for CSV photometric files.

    Unlike the IES grammar nothing is packed: every array is a single row
    and every candela row is a single line.
    """

    file_format = FileFormat.CSV
    default_encoding = CSV_READ_ENCODING

    def _read_version(self, line: str) -> str:
        line = line.lstrip(BYTE_ORDER_MARK)
        label, sep, value = trim_csv_line(line).partition(CSV_SEPARATOR)
        if sep and label.strip() == CSV_VERSION_LABEL:
            return value.strip()
        self._add_warning(f"expected `{CSV_VERSION_LABEL},<version>` row", line)
        return trim_csv_line(line)

    def _split_keyword(self, line: str) -> tuple[str, str] | None:
        trimmed = trim_csv_line(line)
        if not trimmed.startswith("["):
            return None
        name, sep, rest = trimmed[1:].partition("]")
        if not sep:
            self._add_warning("keyword is missing its closing `]`", line)
        _, _, value = rest.partition(CSV_SEPARATOR)
        return name.strip(), value.strip()

    def _split_tilt(self, line: str) -> str | None:
        return super()._split_tilt(trim_csv_line(line))

    def _scalar_token(self, line: str) -> str:
        cells = split_csv_cells(line)
        if not cells:
            return ""
        return cells[1] if len(cells) > 1 else cells[0]

    def _sequence_tokens(self, line: str) -> list[str]:
        return split_csv_cells(line)[1:]

    def _on_unmarked_fields(self, line: str) -> ParserState:
        cells = split_csv_cells(line)
        if len(cells) < 2:
            self._add_warning("expected a `name,value` row", line)
            return ParserState.UNMARKED_FIELDS

        name, value = cells[0], cells[1]
        if (key := UNMARKED_FIELD_KEY_BY_NAME.get(name)) is None:
            self._add_warning(f"unknown field: {name}", line)
            return ParserState.UNMARKED_FIELDS

        self.data["unmarked_fields"][key] = self._number(value)
        if name == LAST_UNMARKED_FIELD:
            return ParserState.VERTICAL_ANGLES
        return ParserState.UNMARKED_FIELDS

    def _on_vertical_angles(self, line: str) -> ParserState:
        self.data["vertical_angles"] = self._labelled_row(
            line, CSV_VERTICAL_ANGLES_ALIASES
        )
        return ParserState.HORIZONTAL_ANGLES

    def _on_horizontal_angles(self, line: str) -> ParserState:
        self.data["horizontal_angles"] = self._labelled_row(
            line, CSV_HORIZONTAL_ANGLES_ALIASES
        )
        self.context.row_index = 0
        self.context.table_header_pending = True
        return ParserState.CANDELA_VALUES

    def _on_candela_values(self, line: str) -> ParserState:
        n_horizontal = self._horizontal_count

        # The header row repeats the vertical angles.
        if self.context.table_header_pending:
            self.context.table_header_pending = False
            self._labelled_row(line, (CSV_CANDELA_LABEL,))
            if n_horizontal == 0:
                return ParserState.EXTRA_LINES
            return ParserState.CANDELA_VALUES

        cells = split_csv_cells(line)
        if not cells:
            # a row of bare separators
            return ParserState.CANDELA_VALUES

        row_index = self.context.row_index
        angle = self._number(cells[0])
        horizontal_angles = self.data["horizontal_angles"]
        if row_index < len(horizontal_angles) and not _same_value(
            angle, horizontal_angles[row_index]
        ):
            self._add_warning(
                f"candela row {row_index} is labelled `{cells[0]}`, "
                f"expected horizontal angle {horizontal_angles[row_index]}",
                line,
            )

        row = [self._number(cell) for cell in cells[1:]]
        if len(row) != self._vertical_count:
            self._add_warning(
                f"candela row {row_index} has {len(row)} values, "
                f"expected {self._vertical_count}",
                line,
            )
        self.data["candela"].append(row)
        self.context.row_index += 1

        if self.context.row_index < n_horizontal:
            return ParserState.CANDELA_VALUES

        self.context.row_index = 0
        return ParserState.EXTRA_LINES

    def _labelled_row(self, line: str, labels: tuple[str, ...]) -> list[float]:
        """Values of a ``label,v0,v1,...`` row, warning on an unexpected label."""
        cells = split_csv_cells(line)
        if not cells or cells[0] not in labels:
            self._add_warning(f"expected a `{labels[0]}` row", line)
        return [self._number(cell) for cell in cells[1:]]


def _same_value(a: float, b: float) -> bool:
    return a == b or (math.isnan(a) and math.isnan(b))
