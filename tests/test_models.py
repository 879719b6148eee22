# -*- coding: utf-8 -*-
"""Tests for the photometric document models."""

import pytest
from pydantic import ValidationError

from ies_lib.enums import TiltMode
from ies_lib.models import UNMARKED_FIELD_KEY_BY_NAME
from ies_lib.models import UNMARKED_FIELD_KEYS
from ies_lib.models import PhotometricDocument
from ies_lib.models import TiltExternalFile
from ies_lib.models import TiltInclude
from ies_lib.models import UnmarkedFields


class TestUnmarkedFields:
    """Tests for UnmarkedFields model."""

    def test_defaults(self):
        """Test the default values of the 13 fields."""
        fields = UnmarkedFields()
        assert fields.values() == [1, 10000, 1, 0, 0, 1, 1, 0, 0, 0, 0, 1, 1000]

    def test_aliases(self):
        """Test fields can be set by their camelCase names."""
        fields = UnmarkedFields.model_validate(
            {"numberOfVerticalAngles": 5, "inputWatts": 42.5}
        )
        assert fields.vertical_count == 5
        assert fields.input_watts == 42.5

    def test_key_tables(self):
        """Test the file order and name lookup tables."""
        assert len(UNMARKED_FIELD_KEYS) == 13
        assert UNMARKED_FIELD_KEYS[0] == "num_of_lamps"
        assert UNMARKED_FIELD_KEY_BY_NAME["numberOfHorizontalAngles"] == (
            "number_of_horizontal_angles"
        )

    def test_fractional_count(self):
        """Test counts are truncated to integers."""
        fields = UnmarkedFields(number_of_horizontal_angles=2.7)
        assert fields.horizontal_count == 2


class TestTilt:
    """Tests for the TILT variants."""

    def test_default_is_none(self):
        assert PhotometricDocument().tilt_mode == TiltMode.NONE

    def test_discriminated_union(self):
        """Test the variant is chosen from `mode`."""
        document = PhotometricDocument.model_validate(
            {
                "tilt": {
                    "mode": "INCLUDE",
                    "numberOfTiltAngles": 2,
                    "tiltAngles": [0, 90],
                    "multiplyingFactors": [1, 0.5],
                }
            }
        )
        assert isinstance(document.tilt, TiltInclude)
        assert document.tilt.tilt_angles == [0.0, 90.0]
        assert document.tilt_mode == TiltMode.INCLUDE

    def test_external_file(self):
        document = PhotometricDocument(tilt={"mode": "FILE", "filename": "a.tlt"})
        assert isinstance(document.tilt, TiltExternalFile)
        assert document.tilt_mode == TiltMode.FILE

    def test_unknown_mode(self):
        with pytest.raises(ValidationError):
            PhotometricDocument.model_validate({"tilt": {"mode": "SOMETIMES"}})


class TestKeywordLines:
    """Tests for PhotometricDocument.keyword_lines."""

    def test_more_expansion(self):
        """Test continuation entries expand to MORE lines in place."""
        document = PhotometricDocument(
            keywords={
                "TEST": "1",
                "TEST_MORE": ["a", "b"],
                "LAMP": "LED",
            }
        )
        assert document.keyword_lines() == [
            ("TEST", "1"),
            ("MORE", "a"),
            ("MORE", "b"),
            ("LAMP", "LED"),
        ]

    def test_orphan_more(self):
        """Test an orphan continuation entry is written back as MORE."""
        document = PhotometricDocument(keywords={"_MORE": ["orphan"], "TEST": "x"})
        assert document.keyword_lines()[0] == ("MORE", "orphan")

    def test_is_more_key(self):
        assert PhotometricDocument.is_more_key("MANUFAC_MORE")
        assert not PhotometricDocument.is_more_key("MORE")


class TestDimensionProblems:
    """Tests for the consistency checks."""

    def test_consistent(self):
        document = PhotometricDocument(
            unmarked_fields=UnmarkedFields(
                number_of_vertical_angles=2, number_of_horizontal_angles=1
            ),
            vertical_angles=[0, 90],
            horizontal_angles=[0],
            candela=[[10, 5]],
        )
        assert document.is_consistent

    def test_empty_document(self):
        """Test that the default document has zero counts and no data."""
        assert PhotometricDocument().dimension_problems() == []

    def test_mismatches(self):
        """Test every mismatch is reported."""
        document = PhotometricDocument(
            unmarked_fields=UnmarkedFields(
                number_of_vertical_angles=3, number_of_horizontal_angles=2
            ),
            vertical_angles=[0, 90],
            horizontal_angles=[0, 180],
            candela=[[1, 2, 3]],
        )
        problems = document.dimension_problems()
        assert problems == [
            "expected 3 vertical angles, found 2",
            "expected 2 candela rows, found 1",
        ]

    def test_tilt_table_mismatch(self):
        document = PhotometricDocument(
            tilt=TiltInclude(tilt_angles=[0, 90], multiplying_factors=[1])
        )
        assert document.dimension_problems() == [
            "2 tilt angles but 1 multiplying factors"
        ]
