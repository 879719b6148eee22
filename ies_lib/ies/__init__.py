# -*- coding: utf-8 -*-
"""IES module for parsing and formatting IESNA LM-63 files."""

from ies_lib.ies.format import format_ies_file
from ies_lib.ies.format import iter_ies_lines
from ies_lib.ies.format import wrap_values
from ies_lib.ies.parser import IesParser

__all__ = [
    "IesParser",
    "format_ies_file",
    "iter_ies_lines",
    "wrap_values",
]
