"""Date parsing for trip table cells."""

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateutil_parser

_ISO_ANYWHERE = re.compile(r'(\d{4})-(\d{2})-(\d{2})')

# "Aug 7-9, 2022", "Sept 28 - Oct 2, 2025", "Aug 7–9 2022"
_MONTH_RANGE = re.compile(
    r'^([A-Za-z]{3,9})\.?\s+(\d{1,2})\s*[-–—]\s*(?:[A-Za-z]{3,9}\.?\s+)?\d{1,2},?\s*(\d{4})$'
)


def parse_date(raw: str) -> Optional[date]:
    """Parse a table date cell, returning a date or None.

    Handles:
      - YYYY-MM-DD (also when embedded, e.g. "2022-08-07 to 2022-08-10")
      - Mon D-D, YYYY ranges (the start date is returned)
      - MM/DD/YYYY
      - anything dateutil understands ("August 7, 2022", "7 Aug 2022")
      - "TBD", "n/a", empty -> None
    """
    if not raw or raw.strip().lower() in ("tbd", "n/a", "none", "unknown", "-", ""):
        return None

    raw = raw.strip()

    # 1. ISO date, first one wins for ranges
    m = _ISO_ANYWHERE.search(raw)
    if m:
        try:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError:
            pass

    # 2. Month day range
    m = _MONTH_RANGE.match(raw)
    if m:
        month, day, year = m.groups()
        try:
            # "Sept" / "August" -> "Sep" / "Aug"
            return datetime.strptime(f"{month[:3]} {day} {year}", "%b %d %Y").date()
        except ValueError:
            pass

    # 3. MM/DD/YYYY
    m = re.match(r'^(\d{1,2})/(\d{1,2})/(\d{4})', raw)
    if m:
        try:
            return date(int(m.group(3)), int(m.group(1)), int(m.group(2)))
        except ValueError:
            pass

    # 4. dateutil as general fallback, needs at least a 4-digit year
    if re.search(r'\d{4}', raw):
        try:
            return dateutil_parser.parse(raw, fuzzy=True).date()
        except (ValueError, OverflowError):
            pass

    return None


def to_iso(raw: str) -> Optional[str]:
    parsed = parse_date(raw)
    return parsed.isoformat() if parsed else None
