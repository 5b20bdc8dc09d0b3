"""
Cell value normalization helpers.

Parsed spreadsheets hand us a mix of str, int, float, None and (via pandas) NaN.
These helpers turn those raw cells into the text the merge works with, without
ever raising on odd input.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import pandas as pd


def is_blank(value: Any) -> bool:
    """True for None, NaN/NA and the empty string."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def number_to_text(value: int | float) -> str:
    """
    Render a number as a plain decimal string.

    Spreadsheets turn long digit strings (barcodes, SKUs) into floats that display
    as 1.68071E+12. We want "1680710000000", never the scientific form.
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, np.integer)):
        return str(int(value))

    f = float(value)
    if math.isinf(f):
        return "Infinity" if f > 0 else "-Infinity"
    if f.is_integer():
        return str(int(f))
    return np.format_float_positional(f, trim="-")


def to_text(value: Any) -> str:
    """Convert a raw cell into text; blanks become ''."""
    if is_blank(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, np.integer, np.floating)):
        return number_to_text(value)
    return str(value)
