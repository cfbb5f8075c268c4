"""Calendar helpers used by the projection calculators.

All calculators work on calendar dates.  Callers may pass ``date`` or
``datetime`` objects or ISO ``YYYY-MM-DD`` strings (the persisted format);
datetimes are truncated to their date.

Example
-------

>>> days_between("2024-01-01", "2025-01-01")
366
>>> add_years(date(2024, 2, 29), 1)
datetime.date(2025, 2, 28)
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..errors import InvalidInput

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """Return ``value`` as a :class:`datetime.date`."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            raise InvalidInput(f"Invalid date {value!r}; expected YYYY-MM-DD") from None
    raise InvalidInput(f"Invalid date {value!r}; expected a date or YYYY-MM-DD string")


def format_date(value: DateLike) -> str:
    """ISO 8601 calendar date, the format stored in persisted records."""
    return parse_date(value).isoformat()


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole days from ``start`` to ``end`` (negative when ``end`` is earlier)."""
    if isinstance(start, datetime) and isinstance(end, datetime):
        seconds = (end - start).total_seconds()
        return int(round(seconds / 86400.0))
    return (parse_date(end) - parse_date(start)).days


def add_years(value: DateLike, years: int) -> date:
    """Shift a date by whole calendar years; Feb 29 falls back to Feb 28."""
    d = parse_date(value)
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return d.replace(year=d.year + years, day=28)


__all__ = ["DateLike", "parse_date", "format_date", "days_between", "add_years"]
