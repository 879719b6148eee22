# -*- coding: utf-8 -*-
"""Photometric document model.

This module contains the Pydantic models shared by both grammars:
- TiltNone / TiltInclude / TiltExternalFile: the three TILT variants
- UnmarkedFields: the 13 fixed numeric fields
- PhotometricDocument: a complete IES / CSV file

Python attribute names are snake_case. The camelCase aliases are the names
the CSV grammar uses for its rows.
"""

from __future__ import annotations

from typing import Annotated
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from ies_lib.constants import DEFAULT_VERSION
from ies_lib.constants import MORE_SUFFIX
from ies_lib.enums import TiltMode
from ies_lib.validation import as_count


class TiltNone(BaseModel):
    """``TILT=NONE``: no tilt correction."""

    mode: Literal["NONE"] = "NONE"


class TiltInclude(BaseModel):
    """``TILT=INCLUDE``: the tilt table follows inline."""

    model_config = ConfigDict(populate_by_name=True, ser_json_inf_nan="constants")

    mode: Literal["INCLUDE"] = "INCLUDE"
    lamp_to_luminaire_geometry: float = Field(
        default=0.0, alias="lampToLuminaireGeometry"
    )
    number_of_tilt_angles: float = Field(default=0.0, alias="numberOfTiltAngles")
    tilt_angles: list[float] = Field(default_factory=list, alias="tiltAngles")
    multiplying_factors: list[float] = Field(
        default_factory=list, alias="multiplyingFactors"
    )


class TiltExternalFile(BaseModel):
    """``TILT=<filename>``.

    Never produced by the parsers, formatters refuse to write it.
    """

    mode: Literal["FILE"] = "FILE"
    filename: str


Tilt = Annotated[
    TiltNone | TiltInclude | TiltExternalFile,
    Field(discriminator="mode"),
]


class UnmarkedFields(BaseModel):
    """The 13 positional numeric fields following the TILT section.

    Every field is stored as a float since the file grammar does not
    distinguish integers. Use :attr:`vertical_count` and
    :attr:`horizontal_count` where a count is needed.
    """

    model_config = ConfigDict(populate_by_name=True, ser_json_inf_nan="constants")

    num_of_lamps: float = Field(default=1, alias="numOfLamps")
    lumens_per_lamp: float = Field(default=10000, alias="lumensPerLamp")
    multiplier: float = Field(default=1, alias="multiplier")
    number_of_vertical_angles: float = Field(
        default=0, alias="numberOfVerticalAngles"
    )
    number_of_horizontal_angles: float = Field(
        default=0, alias="numberOfHorizontalAngles"
    )
    photometric_type: float = Field(default=1, alias="photometricType")
    units_type: float = Field(default=1, alias="unitsType")
    width: float = Field(default=0, alias="width")
    length: float = Field(default=0, alias="length")
    height: float = Field(default=0, alias="height")
    ballast_factor: float = Field(default=0, alias="ballastFactor")
    future_use: float = Field(default=1, alias="futureUse")
    input_watts: float = Field(default=1000, alias="inputWatts")

    @property
    def vertical_count(self) -> int:
        return as_count(self.number_of_vertical_angles)

    @property
    def horizontal_count(self) -> int:
        return as_count(self.number_of_horizontal_angles)

    def values(self) -> list[float]:
        """All 13 values in file order."""
        return [getattr(self, name) for name in type(self).model_fields]


#: Python attribute name of each fixed field, in file order
UNMARKED_FIELD_KEYS: tuple[str, ...] = tuple(UnmarkedFields.model_fields)

#: camelCase file name -> Python attribute name
UNMARKED_FIELD_KEY_BY_NAME: dict[str, str] = {
    field.alias: key for key, field in UnmarkedFields.model_fields.items()
}


class PhotometricDocument(BaseModel):
    """A complete photometric file, independent of its grammar.

    ``keywords`` keeps first-seen order. Entries whose key ends in
    ``_MORE`` hold the list of ``[MORE]`` continuation values recorded
    after the keyword named by the prefix.
    """

    model_config = ConfigDict(populate_by_name=True, ser_json_inf_nan="constants")

    version: str = DEFAULT_VERSION
    keywords: dict[str, str | list[str]] = Field(default_factory=dict)
    tilt: Tilt = Field(default_factory=TiltNone)
    unmarked_fields: UnmarkedFields = Field(
        default_factory=UnmarkedFields, alias="unmarkedFields"
    )
    vertical_angles: list[float] = Field(
        default_factory=list, alias="verticalAnglesArray"
    )
    horizontal_angles: list[float] = Field(
        default_factory=list, alias="horizontalAnglesArray"
    )
    candela: list[list[float]] = Field(
        default_factory=list, alias="candelaValuesTable"
    )

    @property
    def tilt_mode(self) -> TiltMode:
        return TiltMode(self.tilt.mode)

    @staticmethod
    def is_more_key(key: str) -> bool:
        """Check if a keyword entry holds ``[MORE]`` continuations."""
        return key.endswith(MORE_SUFFIX)

    def keyword_lines(self) -> list[tuple[str, str]]:
        """Flatten ``keywords`` into (NAME, value) pairs in stored order.

        Continuation entries expand in place into repeated ``MORE`` pairs.
        """
        pairs: list[tuple[str, str]] = []
        for key, value in self.keywords.items():
            if self.is_more_key(key) and isinstance(value, list):
                pairs.extend(("MORE", item) for item in value)
            elif isinstance(value, list):
                pairs.extend((key, item) for item in value)
            else:
                pairs.append((key, value))
        return pairs

    def dimension_problems(self) -> list[str]:
        """Describe every mismatch between the declared counts and the data.

        Returns:
            List of messages, empty when the document is consistent
        """
        problems: list[str] = []
        n_vertical = self.unmarked_fields.vertical_count
        n_horizontal = self.unmarked_fields.horizontal_count

        if len(self.vertical_angles) != n_vertical:
            problems.append(
                f"expected {n_vertical} vertical angles, "
                f"found {len(self.vertical_angles)}"
            )
        if len(self.horizontal_angles) != n_horizontal:
            problems.append(
                f"expected {n_horizontal} horizontal angles, "
                f"found {len(self.horizontal_angles)}"
            )
        if len(self.candela) != n_horizontal:
            problems.append(
                f"expected {n_horizontal} candela rows, found {len(self.candela)}"
            )
        for idx, row in enumerate(self.candela):
            if len(row) != n_vertical:
                problems.append(
                    f"candela row {idx}: expected {n_vertical} values, "
                    f"found {len(row)}"
                )

        if isinstance(self.tilt, TiltInclude) and len(self.tilt.tilt_angles) != len(
            self.tilt.multiplying_factors
        ):
            problems.append(
                f"{len(self.tilt.tilt_angles)} tilt angles but "
                f"{len(self.tilt.multiplying_factors)} multiplying factors"
            )

        return problems

    @property
    def is_consistent(self) -> bool:
        return not self.dimension_problems()
