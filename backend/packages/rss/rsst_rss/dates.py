"""
Feed date normalization.

RSS 2.0 dates are RFC 822 (``Sun, 9 May 2002 15:21:36 GMT``), Atom dates
are ISO 8601 (``2003-12-13T18:30:02Z``). Both are reduced to the calendar
date ``YYYY-MM-DD`` as written; no timezone conversion is applied.
"""

import re

from .errors import ErrorKind, FeedQueryError

MONTHS = {
    "Jan": "01",
    "Feb": "02",
    "Mar": "03",
    "Apr": "04",
    "May": "05",
    "Jun": "06",
    "Jul": "07",
    "Aug": "08",
    "Sep": "09",
    "Oct": "10",
    "Nov": "11",
    "Dec": "12",
}
# Placeholder month for abbreviations outside MONTHS
UNKNOWN_MONTH = "00"

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _malformed(date: str) -> FeedQueryError:
    return FeedQueryError(ErrorKind.MALFORMED_DATE, f"unrecognized date: {date!r}")


def _normalize_rfc822(date: str) -> str:
    # "Sun, 9 May 2002" vs "Sun, 19 May 2002": a one-digit day shifts
    # every later field one character left.
    if len(date) < 7:
        raise _malformed(date)
    if date[6] == " ":
        day, month, year = f"0{date[5]}", date[7:10], date[11:15]
        minimum = 15
    else:
        day, month, year = date[5:7], date[8:11], date[12:16]
        minimum = 16
    if len(date) < minimum or not day.isdigit() or not year.isdigit():
        raise _malformed(date)
    return f"{year}-{MONTHS.get(month, UNKNOWN_MONTH)}-{day}"


def normalize_date(date: str) -> str:
    """
    Convert an RFC 822 or ISO 8601 timestamp to ``YYYY-MM-DD``.

    A comma marks RFC 822; anything else is read as ISO 8601. Unknown
    month abbreviations become ``00`` rather than failing.

    Args:
        date: Raw text of a date element.

    Returns:
        Canonical date string.

    Raises:
        FeedQueryError: MALFORMED_DATE if the text is too short or its
            day/year fields are not numeric.
    """
    text = date.strip()
    if "," in text:
        return _normalize_rfc822(text)
    head = text[:10]
    if not _ISO_DATE.fullmatch(head):
        raise _malformed(date)
    return head
