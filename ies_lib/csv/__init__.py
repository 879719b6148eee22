# -*- coding: utf-8 -*-
"""CSV module for parsing and formatting the comma separated rendition."""

from ies_lib.csv.format import format_csv_file
from ies_lib.csv.format import format_row
from ies_lib.csv.format import iter_csv_lines
from ies_lib.csv.parser import CsvParser

__all__ = [
    "CsvParser",
    "format_csv_file",
    "format_row",
    "iter_csv_lines",
]
