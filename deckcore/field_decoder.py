"""
Display decoding for single spreadsheet cells.

Pure helpers: they never raise, and fall back to the raw value (dates)
or an empty list (nested lists) when the cell cannot be interpreted.
"""
import json
from datetime import datetime
from typing import Any, List, Optional

from dateutil import parser as date_parser

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Two defaults that disagree on year, month and day: a cell only counts as
# a date when it parses to the same calendar day under both
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def decode_date(raw: Optional[str]) -> str:
    """
    Render a date cell as ``"Jan 5, 2024"``.

    Args:
        raw: Raw cell text

    Returns:
        Formatted date, ``""`` for an empty cell, or ``raw`` unchanged
        when it is not a complete calendar date
    """
    if not raw:
        return ""
    text = str(raw)
    try:
        first = date_parser.parse(text, default=_DEFAULT_A)
        second = date_parser.parse(text, default=_DEFAULT_B)
    except (ValueError, OverflowError):
        return raw
    if first.date() != second.date():
        return raw
    return f"{MONTH_ABBREVIATIONS[first.month - 1]} {first.day}, {first.year:04d}"


def decode_list(raw: Optional[str]) -> List[Any]:
    """
    Decode a JSON list literal stored in a cell.

    Anything that is not a list (objects, scalars, garbage) decodes to ``[]``.
    """
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (ValueError, TypeError):
        return []
    if not isinstance(value, list):
        return []
    return value
