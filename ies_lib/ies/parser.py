# -*- coding: utf-8 -*-
"""Parser for IESNA LM-63 photometric files.

Numeric sections are whitespace separated and may be packed freely: the
13 fixed fields, the angle arrays and the candela table can each span any
number of physical lines, and a line may end in the middle of a candela
row. Running cursors in the parser context track the position across
lines.

The tilt table is the exception: geometry and angle count are one value
per line, and the tilt angles and multiplying factors are one line each.
"""

from ies_lib.constants import IES_ENCODING
from ies_lib.enums import FileFormat
from ies_lib.enums import ParserState
from ies_lib.models import UNMARKED_FIELD_KEYS
from ies_lib.parser import PhotometricParser
from ies_lib.validation import split_ies_tokens


class IesParser(PhotometricParser):
    """Parser for IES text files.

    Example:
        parser = IesParser()
        document = parser.parse_file(Path("luminaire.ies"))
        for error in parser.errors:
            print(error)
    """

    file_format = FileFormat.IES
    default_encoding = IES_ENCODING

    def _read_version(self, line: str) -> str:
        return line

    def _split_keyword(self, line: str) -> tuple[str, str] | None:
        if not line.startswith("["):
            return None
        name, sep, value = line[1:].partition("]")
        if not sep:
            self._add_warning("keyword is missing its closing `]`", line)
        return name.strip(), value.strip()

    def _scalar_token(self, line: str) -> str:
        return line

    def _sequence_tokens(self, line: str) -> list[str]:
        return split_ies_tokens(line)

    def _on_unmarked_fields(self, line: str) -> ParserState:
        fields = self.data["unmarked_fields"]

        for token in split_ies_tokens(line):
            if self.context.field_index >= len(UNMARKED_FIELD_KEYS):
                self._add_warning(f"ignoring extra value `{token}` after inputWatts", line)
                break
            key = UNMARKED_FIELD_KEYS[self.context.field_index]
            fields[key] = self._number(token)
            self.context.field_index += 1

        if self.context.field_index < len(UNMARKED_FIELD_KEYS):
            return ParserState.UNMARKED_FIELDS

        self.context.field_index = 0
        return self._enter_vertical_angles()

    def _on_vertical_angles(self, line: str) -> ParserState:
        if self._pack(line, self.data["vertical_angles"], self._vertical_count):
            return self._enter_horizontal_angles()
        return ParserState.VERTICAL_ANGLES

    def _on_horizontal_angles(self, line: str) -> ParserState:
        if self._pack(line, self.data["horizontal_angles"], self._horizontal_count):
            return self._enter_candela_values()
        return ParserState.HORIZONTAL_ANGLES

    def _on_candela_values(self, line: str) -> ParserState:
        n_vertical = self._vertical_count
        n_horizontal = self._horizontal_count
        table: list[list[float]] = self.data["candela"]

        for token in split_ies_tokens(line):
            if self.context.row_index >= n_horizontal:
                self._add_warning(f"ignoring extra candela value `{token}`", line)
                break
            if self.context.column_index == 0:
                table.append([])
            table[self.context.row_index].append(self._number(token))
            self.context.column_index += 1
            if self.context.column_index >= n_vertical:
                self.context.column_index = 0
                self.context.row_index += 1

        if self.context.row_index < n_horizontal:
            return ParserState.CANDELA_VALUES

        self.context.row_index = 0
        return ParserState.EXTRA_LINES

    # -------------------------------------------------------------------------
    # Section transitions
    # -------------------------------------------------------------------------

    def _pack(self, line: str, target: list[float], count: int) -> bool:
        """Append the line's values to ``target``.

        Returns:
            True once ``count`` values have been read
        """
        for token in split_ies_tokens(line):
            if self.context.column_index >= count:
                self._add_warning(f"ignoring extra value `{token}`", line)
                break
            target.append(self._number(token))
            self.context.column_index += 1
        return self.context.column_index >= count

    # Empty sections have no line in the file and are skipped.

    def _enter_vertical_angles(self) -> ParserState:
        self.context.column_index = 0
        if self._vertical_count == 0:
            return self._enter_horizontal_angles()
        return ParserState.VERTICAL_ANGLES

    def _enter_horizontal_angles(self) -> ParserState:
        self.context.column_index = 0
        if self._horizontal_count == 0:
            return self._enter_candela_values()
        return ParserState.HORIZONTAL_ANGLES

    def _enter_candela_values(self) -> ParserState:
        self.context.column_index = 0
        self.context.row_index = 0
        if self._horizontal_count == 0:
            return ParserState.EXTRA_LINES
        if self._vertical_count == 0:
            self.data["candela"] = [[] for _ in range(self._horizontal_count)]
            return ParserState.EXTRA_LINES
        return ParserState.CANDELA_VALUES
