# -*- coding: utf-8 -*-
"""Line-driven state machine shared by the IES and CSV parsers.

Both grammars walk the same states in the same order:

    VERSION -> KEYWORDS -> [tilt table] -> UNMARKED_FIELDS
        -> VERTICAL_ANGLES -> HORIZONTAL_ANGLES -> CANDELA_VALUES
        -> EXTRA_LINES

The tilt table (LAMP_TO_LUMINAIRE_GEOMETRY, NUMBER_OF_TILT_ANGLES,
TILT_ANGLES, MULTIPLYING_FACTORS) is only visited for ``TILT=INCLUDE``.

Architecture: the parser fills a dictionary seeded with the document
defaults, one line at a time, and validates it into a
:class:`~ies_lib.models.PhotometricDocument` with a single
``model_validate()`` call once the input is exhausted.

Recoverable problems are collected in ``errors`` and logged. Only two
conditions abort a run: a ``TILT=<filename>`` reference and a state
without a handler.
"""

import logging
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ies_lib.constants import MORE_KEYWORD
from ies_lib.constants import MORE_SUFFIX
from ies_lib.constants import TILT_PREFIX
from ies_lib.enums import FileFormat
from ies_lib.enums import ParserState
from ies_lib.enums import Severity
from ies_lib.enums import TiltMode
from ies_lib.errors import IesParseError
from ies_lib.errors import IncompleteDocumentError
from ies_lib.errors import SourceLocation
from ies_lib.errors import UndefinedParserStateError
from ies_lib.errors import UnsupportedTiltReferenceError
from ies_lib.models import PhotometricDocument
from ies_lib.models import TiltInclude
from ies_lib.models import TiltNone
from ies_lib.validation import as_count
from ies_lib.validation import is_number
from ies_lib.validation import is_supported_version
from ies_lib.validation import is_valid_keyword
from ies_lib.validation import parse_number

logger = logging.getLogger(__name__)

_LOG_LEVELS: dict[Severity, int] = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}

# Blank lines carry no tokens in these states
_BLANK_TOLERANT_STATES = frozenset(
    {
        ParserState.LAMP_TO_LUMINAIRE_GEOMETRY,
        ParserState.NUMBER_OF_TILT_ANGLES,
        ParserState.UNMARKED_FIELDS,
        ParserState.VERTICAL_ANGLES,
        ParserState.HORIZONTAL_ANGLES,
        ParserState.CANDELA_VALUES,
    }
)


@dataclass
class ParserContext:
    """Positional cursors of one parser run.

    Attributes:
        line_number: Number of lines fed so far (1-based number of the
            current line)
        field_index: Next fixed field to fill
        column_index: Position inside the current array or candela row
        row_index: Current candela row
        last_key: Last non-MORE keyword, target of ``[MORE]`` lines
        table_header_pending: The next candela line is a header row
    """

    line_number: int = 0
    field_index: int = 0
    column_index: int = 0
    row_index: int = 0
    last_key: str = ""
    table_header_pending: bool = False


class PhotometricParser(ABC):
    """Base class of the IES and CSV parsers.

    Subclasses provide the grammar: how a line splits into a keyword, a
    scalar, a sequence of values, and how the packed numeric sections are
    consumed. Everything else (version check, keyword bookkeeping, TILT
    decoding, extra lines, end of input checks) lives here so both
    grammars behave the same.

    Attributes:
        errors: List of parsing errors, warnings and notices encountered
        state: Current parser state
        context: Positional cursors for the current run
    """

    file_format: FileFormat
    default_encoding: str

    def __init__(self, *, strict: bool = False) -> None:
        """Initialize a new parser.

        Args:
            strict: Raise IncompleteDocumentError at end of input when the
                arrays do not match the declared counts
        """
        self.strict = strict
        self._handlers: dict[ParserState, Callable[[str], ParserState]] = {
            ParserState.VERSION: self._on_version,
            ParserState.KEYWORDS: self._on_keywords,
            ParserState.LAMP_TO_LUMINAIRE_GEOMETRY: self._on_lamp_geometry,
            ParserState.NUMBER_OF_TILT_ANGLES: self._on_number_of_tilt_angles,
            ParserState.TILT_ANGLES: self._on_tilt_angles,
            ParserState.MULTIPLYING_FACTORS: self._on_multiplying_factors,
            ParserState.UNMARKED_FIELDS: self._on_unmarked_fields,
            ParserState.VERTICAL_ANGLES: self._on_vertical_angles,
            ParserState.HORIZONTAL_ANGLES: self._on_horizontal_angles,
            ParserState.CANDELA_VALUES: self._on_candela_values,
            ParserState.EXTRA_LINES: self._on_extra_lines,
        }
        self.reset()

    def reset(self, source: str = "<string>") -> None:
        """Start a new run: empty document, cursors at zero."""
        self._source = source
        self.errors: list[IesParseError] = []
        self.state = ParserState.VERSION
        self.context = ParserContext()
        self.data: dict[str, Any] = PhotometricDocument().model_dump()

    # -------------------------------------------------------------------------
    # Error reporting
    # -------------------------------------------------------------------------

    def _location(self, text: str = "", column: int = 0) -> SourceLocation:
        return SourceLocation(
            source=self._source,
            line=max(self.context.line_number - 1, 0),
            column=column,
            text=text,
        )

    def _record(self, severity: Severity, message: str, text: str = "") -> None:
        """Add a record to the error list and log it."""
        error = IesParseError(
            severity=severity,
            message=message,
            location=self._location(text),
        )
        self.errors.append(error)
        logger.log(_LOG_LEVELS[severity], "%s", error)

    def _add_error(self, message: str, text: str = "") -> None:
        """Add an error to the error list."""
        self._record(Severity.ERROR, message, text)

    def _add_warning(self, message: str, text: str = "") -> None:
        """Add a warning to the error list."""
        self._record(Severity.WARNING, message, text)

    def _add_info(self, message: str, text: str = "") -> None:
        """Add an informational notice to the error list."""
        self._record(Severity.INFO, message, text)

    @property
    def warnings(self) -> list[IesParseError]:
        return [e for e in self.errors if e.severity == Severity.WARNING]

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def feed(self, line: str) -> ParserState:
        """Consume one line of input.

        Args:
            line: Raw line (surrounding whitespace and line terminators are
                ignored)

        Returns:
            The state the parser is in after the line

        Raises:
            UnsupportedTiltReferenceError: On ``TILT=<filename>``
            UndefinedParserStateError: If the current state has no handler
        """
        self.context.line_number += 1
        text = line.strip()
        logger.debug("line %d: %s", self.context.line_number, text)

        handler = self._handlers.get(self.state)
        if handler is None:
            raise UndefinedParserStateError(
                f"Illegal parser state: {self.state!r}",
                self._location(text),
            )

        if not text and self.state in _BLANK_TOLERANT_STATES:
            return self.state

        self.state = handler(text)
        return self.state

    def finish(self) -> PhotometricDocument:
        """Validate the accumulated data into a document.

        Returns:
            The parsed document

        Raises:
            IncompleteDocumentError: In strict mode, if the input ended early
                or the arrays do not match the declared counts
        """
        document = PhotometricDocument.model_validate(self.data)

        problems: list[str] = []
        if self.state != ParserState.EXTRA_LINES:
            problems.append(f"unexpected end of input while reading {self.state.value}")
        problems.extend(document.dimension_problems())

        for problem in problems:
            if self.strict:
                raise IncompleteDocumentError(problem, self._location())
            self._add_error(problem)

        logger.debug("Finished parsing %s", self._source)
        return document

    def parse_lines_to_dict(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Feed every line and return the raw document dictionary.

        The dictionary can be fed to ``PhotometricDocument.model_validate()``.

        Args:
            lines: Lazy sequence of text lines, in file order
            source: Source identifier for error messages

        Returns:
            Dictionary keyed by PhotometricDocument field names
        """
        self.reset(source)
        for line in lines:
            self.feed(line)
        return self.data

    def parse_lines(
        self,
        lines: Iterable[str],
        source: str = "<string>",
    ) -> PhotometricDocument:
        """Parse a sequence of lines.

        Args:
            lines: Lazy sequence of text lines, in file order
            source: Source identifier for error messages

        Returns:
            Parsed document
        """
        self.parse_lines_to_dict(lines, source)
        return self.finish()

    def parse_string(
        self,
        data: str,
        source: str = "<string>",
    ) -> PhotometricDocument:
        """Parse a document held in a string."""
        return self.parse_lines(data.splitlines(), source)

    def parse_file(
        self,
        path: Path,
        *,
        encoding: str | None = None,
    ) -> PhotometricDocument:
        """Parse a file, reading it one line at a time.

        Args:
            path: Path to the file
            encoding: Character encoding (default: the grammar's encoding)

        Returns:
            Parsed document
        """
        with path.open(
            mode="r", encoding=encoding or self.default_encoding, errors="replace"
        ) as f:
            return self.parse_lines(f, str(path))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _number(self, token: str) -> float:
        """Convert a token, reporting values that are not numbers."""
        if not is_number(token):
            self._add_warning(f"non-numeric value `{token}` read as NaN", token)
        return parse_number(token)

    @property
    def _vertical_count(self) -> int:
        return as_count(self.data["unmarked_fields"]["number_of_vertical_angles"])

    @property
    def _horizontal_count(self) -> int:
        return as_count(self.data["unmarked_fields"]["number_of_horizontal_angles"])

    def _store_keyword(self, name: str, value: str, text: str) -> None:
        keywords: dict[str, Any] = self.data["keywords"]

        if name == MORE_KEYWORD:
            if not self.context.last_key:
                self._add_warning("[MORE] line without a preceding keyword", text)
            key = self.context.last_key + MORE_SUFFIX
            continuation = keywords.get(key)
            if not isinstance(continuation, list):
                continuation = []
                keywords[key] = continuation
            continuation.append(value)
            return

        if not is_valid_keyword(name):
            self._add_warning(f"unknown keyword: {name}", text)
        keywords[name] = value
        self.context.last_key = name

    def _enter_tilt(self, mode_text: str, text: str) -> ParserState:
        match TiltMode.from_text(mode_text):
            case TiltMode.NONE:
                self.data["tilt"] = TiltNone().model_dump()
                self.context.field_index = 0
                return ParserState.UNMARKED_FIELDS

            case TiltMode.INCLUDE:
                self.data["tilt"] = TiltInclude().model_dump()
                return ParserState.LAMP_TO_LUMINAIRE_GEOMETRY

            case _:
                raise UnsupportedTiltReferenceError(
                    f"external TILT file not supported: {mode_text.strip()}",
                    self._location(text),
                )

    # -------------------------------------------------------------------------
    # Shared state handlers
    # -------------------------------------------------------------------------

    def _on_version(self, line: str) -> ParserState:
        version = self._read_version(line)
        self.data["version"] = version
        if not is_supported_version(version):
            self._add_warning(f"version `{version}` not supported, continuing", line)
        return ParserState.KEYWORDS

    def _on_keywords(self, line: str) -> ParserState:
        if (keyword := self._split_keyword(line)) is not None:
            name, value = keyword
            self._store_keyword(name, value, line)
            return ParserState.KEYWORDS

        if (mode_text := self._split_tilt(line)) is not None:
            return self._enter_tilt(mode_text, line)

        self._add_warning("expected `TILT=` after keywords", line)
        return ParserState.KEYWORDS

    def _on_lamp_geometry(self, line: str) -> ParserState:
        self.data["tilt"]["lamp_to_luminaire_geometry"] = self._number(
            self._scalar_token(line)
        )
        return ParserState.NUMBER_OF_TILT_ANGLES

    def _on_number_of_tilt_angles(self, line: str) -> ParserState:
        self.data["tilt"]["number_of_tilt_angles"] = self._number(
            self._scalar_token(line)
        )
        return ParserState.TILT_ANGLES

    def _on_tilt_angles(self, line: str) -> ParserState:
        self.data["tilt"]["tilt_angles"] = [
            self._number(token) for token in self._sequence_tokens(line)
        ]
        return ParserState.MULTIPLYING_FACTORS

    def _on_multiplying_factors(self, line: str) -> ParserState:
        self.data["tilt"]["multiplying_factors"] = [
            self._number(token) for token in self._sequence_tokens(line)
        ]
        self.context.field_index = 0
        return ParserState.UNMARKED_FIELDS

    def _on_extra_lines(self, line: str) -> ParserState:
        self._add_info(f"extra line found at line {self.context.line_number}", line)
        return ParserState.EXTRA_LINES

    def _split_tilt(self, line: str) -> str | None:
        """Return the text after ``TILT=``, or None for any other line."""
        if line.startswith(TILT_PREFIX):
            return line[len(TILT_PREFIX) :]
        return None

    # -------------------------------------------------------------------------
    # Grammar hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def _read_version(self, line: str) -> str:
        """Extract the version string from the first line."""

    @abstractmethod
    def _split_keyword(self, line: str) -> tuple[str, str] | None:
        """Split a keyword line into (NAME, value), None if not a keyword."""

    @abstractmethod
    def _scalar_token(self, line: str) -> str:
        """Token holding the value of a one-value line."""

    @abstractmethod
    def _sequence_tokens(self, line: str) -> list[str]:
        """Tokens of a line holding a whole sequence."""

    @abstractmethod
    def _on_unmarked_fields(self, line: str) -> ParserState:
        """Consume a line of the 13 fixed fields."""

    @abstractmethod
    def _on_vertical_angles(self, line: str) -> ParserState:
        """Consume a line of vertical angles."""

    @abstractmethod
    def _on_horizontal_angles(self, line: str) -> ParserState:
        """Consume a line of horizontal angles."""

    @abstractmethod
    def _on_candela_values(self, line: str) -> ParserState:
        """Consume a line of the candela table."""
