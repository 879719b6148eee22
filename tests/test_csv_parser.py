# -*- coding: utf-8 -*-
"""Tests for the CSV parser."""

import pytest

from ies_lib.csv.parser import CsvParser
from ies_lib.enums import ParserState
from ies_lib.enums import Severity
from ies_lib.enums import TiltMode
from ies_lib.errors import UnsupportedTiltReferenceError
from ies_lib.ies.parser import IesParser
from ies_lib.models import TiltInclude
from tests.conftest import ALL_CSV_FILES
from tests.conftest import MINIMAL_CSV
from tests.conftest import MINIMAL_IES


class TestMinimalDocument:
    """Tests for the smallest CSV document."""

    def test_parse(self):
        """Test that every section of the minimal CSV is read."""
        parser = CsvParser()
        document = parser.parse_string(MINIMAL_CSV)
        assert document.version == "IESNA:LM-63-2002"
        assert document.keywords == {"TEST": "abc"}
        assert document.tilt_mode == TiltMode.NONE
        assert document.unmarked_fields.lumens_per_lamp == 10000
        assert document.unmarked_fields.input_watts == 1000
        assert document.vertical_angles == [0.0]
        assert document.horizontal_angles == [0.0]
        assert document.candela == [[500.0]]
        assert parser.errors == []

    def test_same_document_as_ies(self):
        """Test that both grammars describe the same document."""
        from_csv = CsvParser().parse_string(MINIMAL_CSV)
        from_ies = IesParser().parse_string(MINIMAL_IES)
        assert from_csv == from_ies

    def test_state_after_each_line(self):
        """Test the state machine walks the sections in file order."""
        parser = CsvParser()
        states = [parser.feed(line) for line in MINIMAL_CSV.split("\n")]
        assert states[0] == ParserState.KEYWORDS
        assert states[2] == ParserState.UNMARKED_FIELDS
        assert states[15] == ParserState.VERTICAL_ANGLES
        assert states[16] == ParserState.HORIZONTAL_ANGLES
        assert states[17] == ParserState.CANDELA_VALUES
        assert states[18] == ParserState.CANDELA_VALUES
        assert states[19] == ParserState.EXTRA_LINES

    def test_byte_order_mark(self):
        """Test that a leading byte order mark is not part of the version row."""
        parser = CsvParser()
        document = parser.parse_string("\ufeff" + MINIMAL_CSV)
        assert document.version == "IESNA:LM-63-2002"
        assert parser.errors == []

    def test_missing_version_label(self):
        """Test that a bare version line is kept with a warning."""
        text = MINIMAL_CSV.replace("IES file version,", "")
        parser = CsvParser()
        document = parser.parse_string(text)
        assert document.version == "IESNA:LM-63-2002"
        assert len(parser.warnings) == 1


class TestSpreadsheetExport:
    """Tests against the downlight sample with trailing commas."""

    @pytest.fixture
    def document(self, artifacts_dir):
        parser = CsvParser()
        doc = parser.parse_file(artifacts_dir / "downlight.csv")
        assert parser.errors == []
        return doc

    def test_keywords(self, document):
        """Test keyword values, including one with a comma inside."""
        assert document.keywords == {
            "TEST": "DL-0099",
            "MANUFAC": "Downlights, Inc.",
            "LUMCAT": "DL6-2000",
            "_WARRANTY": "5 years",
        }

    def test_tilt_table(self, document):
        """Test the inline tilt table."""
        assert isinstance(document.tilt, TiltInclude)
        assert document.tilt.lamp_to_luminaire_geometry == 1
        assert document.tilt.number_of_tilt_angles == 3
        assert document.tilt.tilt_angles == [0.0, 45.0, 90.0]
        assert document.tilt.multiplying_factors == [1.0, 0.95, 0.8]

    def test_fields_and_table(self, document):
        """Test the fixed fields, angles and candela rows."""
        assert document.unmarked_fields.lumens_per_lamp == 2000
        assert document.unmarked_fields.input_watts == 24.5
        assert document.vertical_angles == [0.0, 30.0, 60.0, 90.0]
        assert document.horizontal_angles == [0.0, 180.0]
        assert document.candela == [
            [1200.0, 900.0, 300.0, 0.0],
            [1180.0, 880.0, 290.0, 0.0],
        ]

    @pytest.mark.parametrize("csv_path", ALL_CSV_FILES)
    def test_every_artifact_is_consistent(self, csv_path):
        """Test that every sample CSV file parses cleanly."""
        parser = CsvParser()
        document = parser.parse_file(csv_path)
        assert document.is_consistent
        assert parser.warnings == []


class TestRowLabels:
    """Tests for labelled rows and their checks."""

    def test_short_angle_labels_accepted(self):
        """Test the `verticalAngles` / `horizontalAngles` spellings."""
        text = MINIMAL_CSV.replace("verticalAnglesArray", "verticalAngles").replace(
            "horizontalAnglesArray", "horizontalAngles"
        )
        parser = CsvParser()
        document = parser.parse_string(text)
        assert document.vertical_angles == [0.0]
        assert parser.warnings == []

    def test_wrong_angle_label_warns(self):
        """Test that an unexpected row label is reported but still read."""
        text = MINIMAL_CSV.replace("verticalAnglesArray,0", "angles,0")
        parser = CsvParser()
        document = parser.parse_string(text)
        assert document.vertical_angles == [0.0]
        assert len(parser.warnings) == 1

    def test_unknown_field_warns(self):
        """Test that an unknown fixed field name is skipped with a warning."""
        text = MINIMAL_CSV.replace("width,0", "width,0\ncolour,3")
        parser = CsvParser()
        document = parser.parse_string(text)
        assert document.unmarked_fields.width == 0
        assert any("unknown field: colour" in w.message for w in parser.warnings)
        assert document.candela == [[500.0]]

    def test_candela_row_label_mismatch(self):
        """Test that a candela row labelled with the wrong angle is reported."""
        text = MINIMAL_CSV.replace("\n0,500", "\n45,500")
        parser = CsvParser()
        document = parser.parse_string(text)
        assert document.candela == [[500.0]]
        assert len(parser.warnings) == 1
        assert "labelled `45`" in parser.warnings[0].message

    def test_candela_row_length_mismatch(self):
        """Test that a candela row of the wrong width is kept and reported."""
        text = MINIMAL_CSV.replace("\n0,500", "\n0,500,400")
        parser = CsvParser()
        document = parser.parse_string(text)
        assert document.candela == [[500.0, 400.0]]
        assert any("has 2 values" in w.message for w in parser.warnings)
        errors = [e for e in parser.errors if e.severity == Severity.ERROR]
        assert len(errors) == 1

    def test_separator_only_rows_skipped(self):
        """Test that rows holding nothing but commas are ignored."""
        text = MINIMAL_CSV.replace("\n0,500", "\n,,,\n0,500")
        parser = CsvParser()
        document = parser.parse_string(text)
        assert document.candela == [[500.0]]
        assert parser.errors == []


class TestCsvTilt:
    """Tests for TILT rows in CSV."""

    def test_tilt_file_is_fatal(self):
        """Test that an external tilt reference aborts the parse."""
        text = MINIMAL_CSV.replace("TILT=NONE", "TILT=lamp.tlt,,")
        with pytest.raises(UnsupportedTiltReferenceError, match="lamp.tlt"):
            CsvParser().parse_string(text)

    def test_unlabelled_tilt_rows(self):
        """Test tilt sequences written as comma-prefixed rows without a label."""
        text = "\n".join(
            [
                "IES file version,IESNA:LM-63-2002",
                "TILT=INCLUDE",
                "lampToLuminaireGeometry,1",
                "numberOfTiltAngles,2",
                ",0,90",
                ",1,0.5",
                *MINIMAL_CSV.split("\n")[3:],
            ]
        )
        parser = CsvParser()
        document = parser.parse_string(text)
        assert isinstance(document.tilt, TiltInclude)
        assert document.tilt.tilt_angles == [0.0, 90.0]
        assert document.tilt.multiplying_factors == [1.0, 0.5]
        assert document.candela == [[500.0]]
        assert parser.errors == []

    def test_extra_lines(self):
        """Test that trailing rows are reported as notices."""
        parser = CsvParser()
        parser.parse_string(MINIMAL_CSV + "\nnotes,here")
        assert [e.severity for e in parser.errors] == [Severity.INFO]
