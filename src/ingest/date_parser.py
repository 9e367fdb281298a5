"""Parse sheet dates like '25/12/2023' or '2023-12-25 10:30' into dates."""

import re
from datetime import date, datetime, timedelta

import dateparser

# Plain ASCII integer, optionally signed
_INT_RE = re.compile(r"^[+-]?[0-9]+$")

# Absolute English dates only, month-first for numeric forms like 12-25-2023.
# Relative phrases ("yesterday", "2 days ago") are not dates in the sheet.
_DATEPARSER_SETTINGS = {
    "PARSERS": ["absolute-time"],
    "DATE_ORDER": "MDY",
    "PREFER_DAY_OF_MONTH": "first",
}


def _from_day_month_year(day: int, month: int, year: int) -> date | None:
    """Build a date, letting out-of-range day/month roll into adjacent months.

    31/02/2024 → 2024-03-02, 0/03/2024 → 2024-02-29, 1/13/2023 → 2024-01-01.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def _to_int(s: str) -> int | None:
    s = s.strip()
    if not _INT_RE.match(s):
        return None
    return int(s)


def _parse_slashed(s: str) -> date | None:
    parts = s.split("/")
    if len(parts) < 3:
        return None
    # "25/12/2023 10:30" carries a time after the year
    year_part = parts[2].split()
    day = _to_int(parts[0])
    month = _to_int(parts[1])
    year = _to_int(year_part[0]) if year_part else None
    if day is None or month is None or year is None:
        return None
    return _from_day_month_year(day, month, year)


def _parse_generic(s: str) -> date | None:
    try:
        # Fast path for ISO 8601
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass
    dt = dateparser.parse(s, languages=["en"], settings=_DATEPARSER_SETTINGS)
    if dt is None:
        return None
    return dt.date()


def parse_date(s: str) -> date | None:
    """Parse a date string in dd/mm/yyyy or ISO-like form.

    Day-first is assumed whenever the text contains a slash; the year is used
    as written (no two-digit expansion). Anything else goes through ISO 8601
    and then a lenient written-date parse ("Dec 25, 2023 10:30 AM",
    "Mon Dec 25 2023", "12-25-2023"). Time of day is dropped.

    Returns None if the string cannot be parsed.
    """
    if s is None:
        return None
    s = str(s).strip()
    if not s:
        return None
    if "/" in s:
        return _parse_slashed(s)
    return _parse_generic(s)
