"""Date helpers for episode publication dates."""
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional

# RFC 2822 dates cannot carry a year before this
MIN_RFC2822_YEAR = 1900

def _parse_segment(segment: str) -> Optional[int]:
    """Parse an unsigned integer segment; a single leading '+' is allowed."""
    digits = segment[1:] if segment.startswith("+") else segment
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)

def parse_track_date(date: str) -> Optional[datetime]:
    """
    Parse an upstream YYYY-MM-DD date into a UTC midnight datetime.

    Only the length and the three numeric segments are checked; the
    characters at positions 4 and 7 may be any separator. Anything that
    does not form a valid calendar date returns None.
    """
    if len(date) != 10:
        return None

    year = _parse_segment(date[0:4])
    month = _parse_segment(date[5:7])
    day = _parse_segment(date[8:10])
    if year is None or month is None or day is None:
        return None

    try:
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return None

def format_rfc2822(value: datetime) -> Optional[str]:
    """
    Format a timezone-aware datetime as an RFC 2822 date, e.g. 'Tue, 05 Jan 2021 00:00:00 +0000'.

    Returns None for years before 1900, which RFC 2822 cannot express.
    """
    if value.year < MIN_RFC2822_YEAR:
        return None
    return format_datetime(value)
