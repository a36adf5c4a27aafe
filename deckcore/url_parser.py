"""Spreadsheet identification from a pasted Google Sheets URL."""
import re
from typing import Optional

SPREADSHEET_URL_PATTERN = re.compile(r"/spreadsheets/d/([a-zA-Z0-9-_]+)")


def extract_spreadsheet_id(url: Optional[str]) -> Optional[str]:
    """Return the spreadsheet id embedded in ``url``, or None if there is none."""
    if not url:
        return None
    match = SPREADSHEET_URL_PATTERN.search(url.strip())
    return match.group(1) if match else None
