"""
Publication Date Normalization

Google Books reports `publishedDate` in several shapes:
- "1999"        a bare year
- "2001-07-04"  a full date
- "1999-07"     year and month, or anything else

Bare years become January 1st of that year, full dates are parsed as-is,
and every other shape maps to SENTINEL_DATE. A string that has the
length of a year or a full date but does not parse raises
DateParseError; the importer skips such records.
"""

from datetime import date, datetime

from books_service.errors import DateParseError

# date cannot represent year 0, so the earliest representable day stands in
SENTINEL_DATE = date.min

YEAR_LENGTH = 4
FULL_DATE_LENGTH = 10
FULL_DATE_FORMAT = "%Y-%m-%d"


def normalize_published_date(value: str | None) -> date:
    """
    Convert an upstream date string into a date.

    Examples:
        >>> normalize_published_date("1999")
        datetime.date(1999, 1, 1)
        >>> normalize_published_date("2001-07-04")
        datetime.date(2001, 7, 4)
        >>> normalize_published_date("??")
        datetime.date(1, 1, 1)

    Raises:
        DateParseError: If a 4- or 10-character string does not parse
    """
    if value is None:
        return SENTINEL_DATE

    if len(value) == YEAR_LENGTH:
        if not value.isdigit():
            raise DateParseError(f"Invalid publication year: {value!r}")
        try:
            return date(int(value), 1, 1)
        except ValueError as exc:
            raise DateParseError(f"Invalid publication year: {value!r}") from exc

    if len(value) == FULL_DATE_LENGTH:
        try:
            return datetime.strptime(value, FULL_DATE_FORMAT).date()
        except ValueError as exc:
            raise DateParseError(f"Invalid publication date: {value!r}") from exc

    return SENTINEL_DATE
