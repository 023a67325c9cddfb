"""
Calendar date helpers.

Lookups take ``datetime.date`` values. These helpers build and coerce
dates from the other shapes callers commonly hold, rejecting anything that
is not a valid Gregorian calendar date.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Tuple, Union

from .exceptions import InvalidDateError

# Inputs accepted wherever a calendar date is expected
DateLike = Union[date, str, Tuple[int, int, int]]


def calendar_date(year: int, month: int, day: int) -> date:
    """
    Build a date from year, month and day.

    Args:
        year: Year (1-9999)
        month: Month (1-12)
        day: Day of month, valid for the month and year (leap years included)

    Returns:
        The corresponding date

    Raises:
        InvalidDateError: If the triple is not a valid calendar date
    """
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(
            message=f"Invalid calendar date {year!r}-{month!r}-{day!r}: {e}",
            details={"year": year, "month": month, "day": day},
        ) from e


def coerce_date(value: Any) -> date:
    """
    Coerce a value to a date.

    Datetimes are reduced to their own calendar fields; no timezone
    conversion takes place.

    Args:
        value: A date, datetime, ISO ``YYYY-MM-DD`` string or
            ``(year, month, day)`` tuple

    Returns:
        The date

    Raises:
        InvalidDateError: If the value cannot be read as a calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateError(
                message=f"Invalid ISO date string: {value!r}",
                details={"value": value},
            ) from e
    if isinstance(value, tuple) and len(value) == 3:
        return calendar_date(*value)
    raise InvalidDateError(
        message=f"Cannot interpret {type(value).__name__} as a calendar date",
        details={"value": repr(value)},
    )
